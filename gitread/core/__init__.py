"""gitread core — locating, reading and decoding loose objects.

Modules
-------
compression
    ``ZlibReader`` exposes a compressed byte source as a decompressed stream.
decoder
    Header framing and per-kind parsing into ``Blob`` / ``Tree`` / ``Commit``.
object_store
    ``LooseObjectStore`` maps identifiers to ``objects/aa/bbbb...`` files.
locator
    ``find_root`` walks up from a directory to the marker directory.
repository
    ``Repository`` composes the above and walks commit history.
errors
    The failure taxonomy shared by all of the above.
"""
