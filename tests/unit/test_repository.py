"""Tests for Repository — open, typed lookups, caching and log."""

from __future__ import annotations

import zlib
from pathlib import Path

import pytest

from gitread.config import ReaderConfig
from gitread.core.errors import (
    HistoryCycleError,
    ObjectNotFoundError,
    ObjectTypeError,
    RepositoryNotFoundError,
)
from gitread.core.repository import Repository
from gitread.models.objects import Blob, Commit, Tree


class TestOpen:
    def test_open_from_work_dir(self, work_dir: Path, git_dir: Path):
        repo = Repository.open(work_dir)
        assert repo.root == git_dir

    def test_open_from_nested_dir(self, work_dir: Path, git_dir: Path):
        nested = work_dir / "src" / "pkg"
        nested.mkdir(parents=True)
        assert Repository.open(nested).root == git_dir

    def test_open_defaults_to_cwd(self, work_dir: Path, git_dir: Path, monkeypatch):
        monkeypatch.chdir(work_dir)
        assert Repository.open().root == git_dir

    def test_open_not_found(self, tmp_path: Path):
        config = ReaderConfig(marker_dir=".gitread-absent-marker")
        with pytest.raises(RepositoryNotFoundError):
            Repository.open(tmp_path, config=config)

    def test_open_applies_config(self, work_dir: Path, write_object):
        oid = write_object("blob", b"x")
        repo = Repository.open(work_dir, config=ReaderConfig(cache_objects=True))
        assert repo.find_object(oid) is repo.find_object(oid)


class TestTypedLookup:
    def test_find_commit(self, repo: Repository, write_commit):
        oid = write_commit(message="first\n")
        commit = repo.find_commit(oid)
        assert isinstance(commit, Commit)
        assert commit.id == oid

    def test_find_tree(self, repo: Repository, write_object):
        oid = write_object("tree", b"")
        assert isinstance(repo.find_tree(oid), Tree)

    def test_find_blob(self, repo: Repository, write_object):
        oid = write_object("blob", b"data")
        assert isinstance(repo.find_blob(oid), Blob)

    def test_find_commit_on_blob(self, repo: Repository, write_object):
        oid = write_object("blob", b"not a commit")
        with pytest.raises(ObjectTypeError) as excinfo:
            repo.find_commit(oid)
        assert excinfo.value.expected == "commit"
        assert excinfo.value.actual == "blob"
        assert excinfo.value.identifier == oid

    def test_find_tree_on_commit(self, repo: Repository, write_commit):
        with pytest.raises(ObjectTypeError):
            repo.find_tree(write_commit())

    def test_contains(self, repo: Repository, write_object):
        assert repo.contains(write_object("blob", b"y")) is True
        assert repo.contains("f" * 40) is False


class TestCache:
    def test_disabled_by_default(self, repo: Repository, write_object):
        oid = write_object("blob", b"z")
        assert repo.find_object(oid) is not repo.find_object(oid)

    def test_enabled_shares_instances(self, git_dir: Path, write_object):
        repo = Repository(git_dir, cache=True)
        oid = write_object("blob", b"z")
        first = repo.find_object(oid)
        assert repo.find_object(oid) is first
        assert repo.find_object(oid.upper()) is first

    def test_cached_object_survives_file_removal(self, git_dir: Path, write_object):
        repo = Repository(git_dir, cache=True)
        oid = write_object("blob", b"kept")
        repo.find_object(oid)
        (git_dir / "objects" / oid[:2] / oid[2:]).unlink()
        assert repo.find_object(oid).data == b"kept"
        repo.clear_cache()
        with pytest.raises(ObjectNotFoundError):
            repo.find_object(oid)


class TestLog:
    def test_linear_chain(self, repo: Repository, write_commit):
        root = write_commit(message="root\n")
        p1 = write_commit(parents=[root], message="p1\n")
        start = write_commit(parents=[p1], message="start\n")
        history = repo.log(start)
        assert [c.id for c in history] == [start, p1, root]
        assert history[-1].parent is None

    def test_single_root_commit(self, repo: Repository, write_commit):
        root = write_commit()
        assert [c.id for c in repo.log(root)] == [root]

    def test_merge_follows_first_parent(self, repo: Repository, write_commit):
        base = write_commit(message="base\n")
        side = write_commit(parents=[base], message="side\n")
        main = write_commit(parents=[base], message="main\n")
        merge = write_commit(parents=[main, side], message="merge\n")
        assert [c.id for c in repo.log(merge)] == [merge, main, base]

    def test_max_count(self, repo: Repository, write_commit):
        root = write_commit(message="root\n")
        child = write_commit(parents=[root], message="child\n")
        assert [c.id for c in repo.log(child, max_count=1)] == [child]

    def test_start_is_not_a_commit(self, repo: Repository, write_object):
        blob = write_object("blob", b"not a commit")
        with pytest.raises(ObjectTypeError):
            repo.log(blob)

    def test_parent_is_not_a_commit(self, repo: Repository, write_object, write_commit):
        tree = write_object("tree", b"")
        start = write_commit(parents=[tree])
        with pytest.raises(ObjectTypeError):
            repo.log(start)

    def test_missing_parent(self, repo: Repository, write_commit):
        start = write_commit(parents=["9" * 40])
        with pytest.raises(ObjectNotFoundError):
            repo.log(start)

    def test_cycle_is_reported(self, repo: Repository, write_raw, frame_object, make_commit_body):
        # Hand-placed objects whose ids do not match their content.
        a, b = "a1" * 20, "b2" * 20
        tree = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"
        write_raw(a, zlib.compress(frame_object("commit", make_commit_body(tree, [b]))))
        write_raw(b, zlib.compress(frame_object("commit", make_commit_body(tree, [a]))))
        with pytest.raises(HistoryCycleError):
            repo.log(a)
