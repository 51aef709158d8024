"""gitread: a reader for git's loose object store.

Locates a repository by walking up from a directory, decodes zlib-compressed
loose objects into typed records (blob, tree, commit) and walks first-parent
commit history.
"""

__version__ = "0.1.0"
__description__ = "Read-only decoder for git loose objects and commit history"

from gitread.core.errors import (
    DecodeError,
    GitReadError,
    HistoryCycleError,
    InvalidIdentifierError,
    ObjectNotFoundError,
    ObjectTypeError,
    RepositoryNotFoundError,
)
from gitread.core.decoder import decode
from gitread.core.locator import find_root
from gitread.core.repository import Repository
from gitread.models.objects import Blob, Commit, ObjectKind, Tree, TreeEntry

__all__ = [
    "Repository",
    "find_root",
    "decode",
    "ObjectKind",
    "Blob",
    "Tree",
    "TreeEntry",
    "Commit",
    "GitReadError",
    "RepositoryNotFoundError",
    "ObjectNotFoundError",
    "InvalidIdentifierError",
    "DecodeError",
    "ObjectTypeError",
    "HistoryCycleError",
    "__version__",
]
