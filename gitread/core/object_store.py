"""Read-only loose object store.

Storage layout: {root}/objects/{id[0:2]}/{id[2:]}
Each file holds one zlib-compressed object.  Nothing is ever written.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gitread.core.compression import open_decompressed
from gitread.core.decoder import decode
from gitread.core.errors import InvalidIdentifierError, ObjectNotFoundError
from gitread.models.objects import GitObject, is_identifier

logger = logging.getLogger(__name__)

OBJECTS_DIR = "objects"


def normalize_identifier(identifier: str) -> str:
    """Lowercase *identifier* and check it is 40 hex characters."""
    normalized = identifier.strip().lower()
    if not is_identifier(normalized):
        raise InvalidIdentifierError(f"Not a valid object id: {identifier!r}")
    return normalized


class LooseObjectStore:
    """Resolves identifiers to decoded objects under a repository root.

    There is no caching here: every ``find_object`` call opens, inflates and
    decodes the file again.

    Parameters
    ----------
    root:
        The repository marker directory (the one holding ``objects/``).
    verify_size:
        Forwarded to the decoder; enforce the header's declared size.
    """

    def __init__(self, root: Path, *, verify_size: bool = False) -> None:
        self._root = Path(root)
        self._verify_size = verify_size

    @property
    def root(self) -> Path:
        return self._root

    def object_path(self, identifier: str) -> Path:
        """Compute the storage path for an identifier."""
        oid = normalize_identifier(identifier)
        return self._root / OBJECTS_DIR / oid[:2] / oid[2:]

    def exists(self, identifier: str) -> bool:
        """Check if a loose object file exists for *identifier*."""
        return self.object_path(identifier).is_file()

    def find_object(self, identifier: str) -> GitObject:
        """Open, decompress and decode the object named *identifier*.

        Raises
        ------
        ObjectNotFoundError
            If the object file is absent or cannot be opened.
        DecodeError
            If the compressed data or the object itself is malformed.
        """
        oid = normalize_identifier(identifier)
        path = self.object_path(oid)
        logger.debug("Reading object %s from %s", oid, path)

        try:
            source = path.open("rb")
        except OSError as exc:
            raise ObjectNotFoundError(oid, path) from exc

        with source, open_decompressed(source) as stream:
            return decode(oid, stream, verify_size=self._verify_size)


def find_object(repository_root: Path, identifier: str, *, verify_size: bool = False) -> GitObject:
    """Resolve *identifier* under *repository_root* without building a Repository."""
    return LooseObjectStore(repository_root, verify_size=verify_size).find_object(identifier)
