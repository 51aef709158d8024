"""Repository — identifier resolution and commit history over a loose store.

Composes the locator (to find the marker directory) with the loose object
store (to resolve identifiers).  History is a first-parent walk: from the
start commit, follow ``parents[0]`` until a root commit is reached.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

from gitread.config import ReaderConfig
from gitread.config import config as default_config
from gitread.core.errors import HistoryCycleError, ObjectTypeError, RepositoryNotFoundError
from gitread.core.locator import find_root
from gitread.core.object_store import LooseObjectStore, normalize_identifier
from gitread.models.objects import Blob, Commit, GitObject, ObjectKind, Tree

logger = logging.getLogger(__name__)

_T = TypeVar("_T", Blob, Tree, Commit)


class Repository:
    """Read-only view of a repository's loose objects.

    Parameters
    ----------
    root:
        The marker directory (e.g. ``/work/.git``).
    cache:
        Keep decoded objects keyed by identifier.  Objects are immutable, so
        cached instances are handed out shared.
    verify_size:
        Enforce the declared object size on decode.
    """

    def __init__(self, root: Path, *, cache: bool = False, verify_size: bool = False) -> None:
        self._root = Path(root)
        self._store = LooseObjectStore(self._root, verify_size=verify_size)
        self._cache: dict[str, GitObject] | None = {} if cache else None

    @classmethod
    def open(
        cls,
        start: Path | str | None = None,
        *,
        config: ReaderConfig | None = None,
    ) -> Repository:
        """Locate the repository enclosing *start* (default: the cwd).

        Raises
        ------
        RepositoryNotFoundError
            If no marker directory exists at *start* or any ancestor.
        """
        config = config or default_config
        start_dir = Path.cwd() if start is None else Path(start)
        root = find_root(start_dir, marker=config.marker_dir)
        if root is None:
            raise RepositoryNotFoundError(
                f"No {config.marker_dir} directory found in {start_dir} or any parent"
            )
        return cls(root, cache=config.cache_objects, verify_size=config.verify_size)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def store(self) -> LooseObjectStore:
        return self._store

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_object(self, identifier: str) -> GitObject:
        oid = normalize_identifier(identifier)
        if self._cache is not None and oid in self._cache:
            logger.debug("Cache hit for %s", oid)
            return self._cache[oid]

        obj = self._store.find_object(oid)
        if self._cache is not None:
            self._cache[oid] = obj
        return obj

    def _find_typed(self, identifier: str, cls: type[_T], kind: ObjectKind) -> _T:
        obj = self.find_object(identifier)
        if not isinstance(obj, cls):
            raise ObjectTypeError(obj.id, expected=kind.value, actual=obj.kind.value)
        return obj

    def find_commit(self, identifier: str) -> Commit:
        return self._find_typed(identifier, Commit, ObjectKind.COMMIT)

    def find_tree(self, identifier: str) -> Tree:
        return self._find_typed(identifier, Tree, ObjectKind.TREE)

    def find_blob(self, identifier: str) -> Blob:
        return self._find_typed(identifier, Blob, ObjectKind.BLOB)

    def contains(self, identifier: str) -> bool:
        return self._store.exists(identifier)

    def clear_cache(self) -> None:
        if self._cache is not None:
            self._cache.clear()

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def log(self, start_id: str, *, max_count: int | None = None) -> list[Commit]:
        """Return the first-parent chain from *start_id*, newest first.

        The list ends at the root commit (or after *max_count* commits).
        Any failure along the chain is raised as-is; no partial history is
        returned.

        Raises
        ------
        ObjectTypeError
            If an identifier in the chain is not a commit.
        HistoryCycleError
            If the chain revisits a commit.
        """
        history: list[Commit] = []
        seen: set[str] = set()
        next_id: str | None = start_id

        while next_id is not None:
            if max_count is not None and len(history) >= max_count:
                break
            commit = self.find_commit(next_id)
            if commit.id in seen:
                raise HistoryCycleError(f"Commit {commit.id} appears twice in history")
            seen.add(commit.id)
            history.append(commit)
            logger.debug("log: %s -> %s", commit.id, commit.parent)
            next_id = commit.parent

        return history

    def __repr__(self) -> str:
        return f"Repository({str(self._root)!r})"
