"""gitread data models — all Pydantic v2, all frozen (immutable)."""

from gitread.models.objects import (
    HASH_BYTES,
    IDENTIFIER_LENGTH,
    Blob,
    Commit,
    GitObject,
    Identifier,
    ObjectKind,
    Tree,
    TreeEntry,
    is_identifier,
)
from gitread.models.signature import Signature

__all__ = [
    # identifiers
    "Identifier",
    "IDENTIFIER_LENGTH",
    "HASH_BYTES",
    "is_identifier",
    # objects
    "ObjectKind",
    "Blob",
    "Tree",
    "TreeEntry",
    "Commit",
    "GitObject",
    # signatures
    "Signature",
]
