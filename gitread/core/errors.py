"""Failure taxonomy for repository lookups, decoding and history walks.

Every error is raised to the immediate caller.  Nothing in the library
retries or swallows them; the CLI is the only place they are caught.
"""

from __future__ import annotations


class GitReadError(Exception):
    """Base class for every gitread failure."""


class RepositoryNotFoundError(GitReadError):
    """Raised when no marker directory exists at any ancestor."""


class ObjectNotFoundError(GitReadError, LookupError):
    """Raised when an object file is absent or cannot be opened."""

    def __init__(self, identifier: str, path: object = None) -> None:
        self.identifier = identifier
        self.path = path
        super().__init__(f"Object not found: {identifier}")


class InvalidIdentifierError(GitReadError, ValueError):
    """Raised for identifiers that are not 40 hexadecimal characters."""


class DecodeError(GitReadError, ValueError):
    """Raised when a decompressed object stream is malformed."""


class ObjectTypeError(GitReadError, TypeError):
    """Raised when an object resolves to a different kind than requested."""

    def __init__(self, identifier: str, expected: str, actual: str) -> None:
        self.identifier = identifier
        self.expected = expected
        self.actual = actual
        super().__init__(f"Object {identifier} is a {actual}, expected {expected}")


class HistoryCycleError(GitReadError):
    """Raised when a parent chain revisits a commit it has already yielded."""
