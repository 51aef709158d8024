"""Streaming zlib decompression adapter.

``ZlibReader`` wraps a binary source holding a zlib stream and exposes the
decompressed bytes as a readable raw stream.  Decompression happens on
demand, so callers that stop early never inflate the whole object.
"""

from __future__ import annotations

import io
import zlib
from typing import BinaryIO

from gitread.core.errors import DecodeError

_CHUNK_SIZE = 16 * 1024


class ZlibReader(io.RawIOBase):
    """Read-only raw stream over the decompressed content of *source*.

    Corrupt or truncated compressed data raises ``DecodeError``.
    """

    def __init__(self, source: BinaryIO, chunk_size: int = _CHUNK_SIZE) -> None:
        super().__init__()
        self._source = source
        self._chunk_size = chunk_size
        self._inflater = zlib.decompressobj()
        self._pending = b""
        self._eof = False

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        while not self._pending and not self._eof:
            self._fill()
        n = min(len(buffer), len(self._pending))
        buffer[:n] = self._pending[:n]
        self._pending = self._pending[n:]
        return n

    def _fill(self) -> None:
        if self._inflater.eof:
            self._eof = True
            return

        # Leftover input from a previous call is bounded by max_length.
        data = self._inflater.unconsumed_tail or self._source.read(self._chunk_size)
        if not data:
            # Source exhausted before the zlib stream ended.
            self._eof = True
            try:
                self._pending = self._inflater.flush()
            except zlib.error as exc:
                raise DecodeError(f"Corrupt compressed data: {exc}") from exc
            if not self._inflater.eof:
                raise DecodeError("Truncated compressed data")
            return

        try:
            self._pending = self._inflater.decompress(data, self._chunk_size)
        except zlib.error as exc:
            raise DecodeError(f"Corrupt compressed data: {exc}") from exc


def open_decompressed(source: BinaryIO) -> io.BufferedReader:
    """Return a buffered decompressed stream over *source*."""
    return io.BufferedReader(ZlibReader(source))
