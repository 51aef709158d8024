"""Shared test fixtures for gitread.

The fixtures build real loose object stores on disk: every object is framed
as ``<kind> <size>\\0<body>``, hashed with SHA-1 and zlib-compressed into
``.git/objects/aa/bbbb...``.
"""

from __future__ import annotations

import hashlib
import zlib
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from gitread.core.repository import Repository

AUTHOR = "A U Thor <author@example.com> 1700000000 +0100"
COMMITTER = "C O Mitter <committer@example.com> 1700000100 +0100"


def frame(kind: str, body: bytes) -> bytes:
    """Prefix *body* with its ``<kind> <size>\\0`` header."""
    return f"{kind} {len(body)}".encode() + b"\0" + body


def tree_body(entries: Sequence[tuple[str, str, str]]) -> bytes:
    """Encode ``(mode, filename, hex_id)`` triples as a tree body."""
    return b"".join(
        f"{mode} {name}".encode() + b"\0" + bytes.fromhex(oid)
        for mode, name, oid in entries
    )


def commit_body(
    tree: str,
    parents: Sequence[str] = (),
    message: str = "Initial commit\n",
    author: str = AUTHOR,
    committer: str = COMMITTER,
) -> bytes:
    lines = [f"tree {tree}"]
    lines.extend(f"parent {p}" for p in parents)
    lines.append(f"author {author}")
    lines.append(f"committer {committer}")
    return ("\n".join(lines) + "\n\n" + message).encode()


@pytest.fixture
def frame_object() -> Callable[[str, bytes], bytes]:
    return frame


@pytest.fixture
def make_tree_body() -> Callable[[Sequence[tuple[str, str, str]]], bytes]:
    return tree_body


@pytest.fixture
def make_commit_body() -> Callable[..., bytes]:
    return commit_body


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """A working directory with an empty ``.git/objects`` store."""
    work = tmp_path / "work"
    (work / ".git" / "objects").mkdir(parents=True)
    return work


@pytest.fixture
def git_dir(work_dir: Path) -> Path:
    return work_dir / ".git"


@pytest.fixture
def write_raw(git_dir: Path) -> Callable[[str, bytes], Path]:
    """Factory fixture: write already-compressed (or garbage) bytes for an id."""

    def _factory(oid: str, raw: bytes) -> Path:
        path = git_dir / "objects" / oid[:2] / oid[2:]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(raw)
        return path

    return _factory


@pytest.fixture
def write_object(write_raw: Callable[[str, bytes], Path]) -> Callable[[str, bytes], str]:
    """Factory fixture: store a framed, compressed object and return its id."""

    def _factory(kind: str, body: bytes) -> str:
        data = frame(kind, body)
        oid = hashlib.sha1(data).hexdigest()
        write_raw(oid, zlib.compress(data))
        return oid

    return _factory


@pytest.fixture
def write_commit(write_object: Callable[[str, bytes], str]) -> Callable[..., str]:
    """Factory fixture: store a commit over an empty tree and return its id."""

    def _factory(parents: Sequence[str] = (), message: str = "Initial commit\n", **kwargs) -> str:
        tree = write_object("tree", b"")
        return write_object("commit", commit_body(tree, parents, message, **kwargs))

    return _factory


@pytest.fixture
def repo(git_dir: Path) -> Repository:
    """A Repository over the temp store, without caching."""
    return Repository(git_dir)
