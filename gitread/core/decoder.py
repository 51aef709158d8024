"""Loose object decoder — header framing, kind dispatch, per-kind parsing.

Wire layout of a decompressed object::

    <kind> <decimal-size>\\0<body>

Body layouts:

- blob   : opaque bytes
- tree   : repeated ``<mode> <filename>\\0`` + 20 raw hash bytes
- commit : ``tree <id>\\n``, zero or more ``parent <id>\\n``,
           ``author <line>\\n``, ``committer <line>\\n``, then the message
           verbatim (extension headers and leading blank line included)

The declared size is always parsed.  It is only compared against the body
length when ``verify_size=True``; by default it is advisory.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable
from typing import BinaryIO, NamedTuple

from gitread.core.errors import DecodeError
from gitread.models.objects import (
    HASH_BYTES,
    Blob,
    Commit,
    GitObject,
    ObjectKind,
    Tree,
    TreeEntry,
    is_identifier,
)

logger = logging.getLogger(__name__)

# "commit 18446744073709551615\0" fits comfortably.
_MAX_HEADER_BYTES = 64

# Commit headers that may open the message.  The first line with any other
# tag ends the block.
EXTENSION_HEADERS: frozenset[str] = frozenset(
    {"encoding", "gpgsig", "gpgsig-sha256", "mergetag"}
)


class ObjectHeader(NamedTuple):
    kind: ObjectKind
    size: int


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read_until(stream: BinaryIO, delimiter: bytes, limit: int) -> bytes:
    """Read up to and including *delimiter*, at most *limit* bytes."""
    out = bytearray()
    while len(out) < limit:
        byte = stream.read(1)
        if not byte:
            break
        out += byte
        if byte == delimiter:
            break
    return bytes(out)


def _utf8(raw: bytes, what: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Invalid UTF-8 in {what}: {exc}") from exc


class _Lines:
    """Cursor over newline-separated text that can hand back the remainder."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def peek(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        end = self._text.find("\n", self._pos)
        return self._text[self._pos:] if end == -1 else self._text[self._pos:end]

    def next(self, what: str) -> str:
        line = self.peek()
        if line is None:
            raise DecodeError(f"Truncated commit: missing {what} line")
        self._pos += len(line) + 1
        return line

    def rest(self) -> str:
        return self._text[self._pos:]


def _split_header(line: str) -> tuple[str, str]:
    tag, _, value = line.partition(" ")
    return tag, value


def _expect(lines: _Lines, tag: str) -> str:
    found, value = _split_header(lines.next(tag))
    if found != tag:
        raise DecodeError(f"Expected {tag!r} commit header, found {found!r}")
    return value


def _expect_identifier(value: str, what: str) -> str:
    if not is_identifier(value):
        raise DecodeError(f"Malformed {what} identifier: {value!r}")
    return value


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------


def read_header(stream: BinaryIO) -> ObjectHeader:
    """Consume and parse the ``<kind> <size>\\0`` header of *stream*."""
    raw = _read_until(stream, b"\0", _MAX_HEADER_BYTES)
    if not raw:
        raise DecodeError("Empty object stream")
    if not raw.endswith(b"\0"):
        raise DecodeError("Object header is not zero-terminated")

    try:
        header = raw[:-1].decode("ascii")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Non-ASCII object header: {raw[:-1]!r}") from exc

    tag, sep, size_text = header.partition(" ")
    if not sep:
        raise DecodeError(f"Malformed object header: {header!r}")
    try:
        kind = ObjectKind(tag)
    except ValueError:
        raise DecodeError(f"Unknown object type: {tag!r}") from None
    if not (size_text.isascii() and size_text.isdigit()):
        raise DecodeError(f"Malformed object size: {size_text!r}")

    return ObjectHeader(kind=kind, size=int(size_text))


# ---------------------------------------------------------------------------
# Per-kind parsers (operate on the body, after the header)
# ---------------------------------------------------------------------------


def parse_blob(identifier: str, stream: BinaryIO) -> Blob:
    return Blob(id=identifier, data=stream.read())


def parse_tree(identifier: str, stream: BinaryIO) -> Tree:
    """Parse a tree body into entries, keeping their stored order."""
    body = stream.read()
    entries: list[TreeEntry] = []
    pos = 0

    while pos < len(body):
        nul = body.find(b"\0", pos)
        if nul == -1:
            raise DecodeError(f"Truncated tree entry at offset {pos}")

        line = _utf8(body[pos:nul], "tree entry")
        mode, sep, filename = line.partition(" ")
        if not sep or not filename or not (mode.isascii() and mode.isdigit()):
            raise DecodeError(f"Malformed tree entry: {line!r}")

        start = nul + 1
        end = start + HASH_BYTES
        if end > len(body):
            raise DecodeError(
                f"Short read of tree entry hash for {filename!r}: "
                f"{len(body) - start} of {HASH_BYTES} bytes"
            )

        entries.append(
            TreeEntry(mode=mode, filename=filename, id=body[start:end].hex())
        )
        pos = end

    return Tree(id=identifier, entries=tuple(entries))


def _extension_headers(message: str) -> tuple[tuple[str, str], ...]:
    """Read the extension headers at the top of *message* without consuming them."""
    lines = _Lines(message)
    headers: list[tuple[str, str]] = []
    while (line := lines.peek()) is not None:
        key, value = _split_header(line)
        if key not in EXTENSION_HEADERS:
            break
        lines.next(key)
        parts = [value]
        while (continuation := lines.peek()) is not None and continuation.startswith(" "):
            lines.next(key)
            parts.append(continuation[1:])
        headers.append((key, "\n".join(parts)))
    return tuple(headers)


def parse_commit(identifier: str, stream: BinaryIO) -> Commit:
    """Parse a commit body.

    The parent lines are the only optional part of the fixed header block:
    every ``parent`` line between ``tree`` and ``author`` is collected in
    order.  The message is everything after the committer line, verbatim,
    extension headers and leading blank line included; ``extra_headers`` is
    a view over its first lines.
    """
    lines = _Lines(_utf8(stream.read(), "commit"))

    tree = _expect_identifier(_expect(lines, "tree"), "tree")

    parents: list[str] = []
    tag, value = _split_header(lines.next("author"))
    while tag == "parent":
        parents.append(_expect_identifier(value, "parent"))
        tag, value = _split_header(lines.next("author"))
    # Stricter than reading the first non-parent line as the author whatever
    # its tag: a misplaced header is reported instead of stored as the author.
    if tag != "author":
        raise DecodeError(f"Expected 'author' commit header, found {tag!r}")
    author = value

    committer = _expect(lines, "committer")
    message = lines.rest()

    return Commit(
        id=identifier,
        tree=tree,
        parents=tuple(parents),
        author=author,
        committer=committer,
        message=message,
        extra_headers=_extension_headers(message),
    )


_PARSERS: dict[ObjectKind, Callable[[str, BinaryIO], GitObject]] = {
    ObjectKind.BLOB: parse_blob,
    ObjectKind.TREE: parse_tree,
    ObjectKind.COMMIT: parse_commit,
}


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def decode(identifier: str, stream: BinaryIO, *, verify_size: bool = False) -> GitObject:
    """Decode a decompressed object stream into a typed object.

    Parameters
    ----------
    identifier:
        The object's id.  Stored on the result, not verified against content.
    stream:
        Binary stream positioned at the start of the header.
    verify_size:
        When True, the body length must equal the size declared in the
        header; a mismatch raises ``DecodeError``.

    Raises
    ------
    DecodeError
        On an empty stream, a malformed header, an unknown kind or a
        malformed body.
    """
    header = read_header(stream)

    if verify_size:
        body = stream.read()
        if len(body) != header.size:
            raise DecodeError(
                f"Size mismatch for {identifier}: header declares {header.size} "
                f"bytes, body has {len(body)}"
            )
        stream = io.BytesIO(body)

    obj = _PARSERS[header.kind](identifier, stream)
    logger.debug("Decoded %s %s (%d bytes declared)", header.kind.value, identifier, header.size)
    return obj


def decode_bytes(identifier: str, data: bytes, *, verify_size: bool = False) -> GitObject:
    """Decode an in-memory decompressed object."""
    return decode(identifier, io.BytesIO(data), verify_size=verify_size)
