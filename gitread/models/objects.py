"""Decoded object records — blob, tree and commit.

The three kinds form a closed set, modelled as a discriminated union on the
``kind`` field.  Every record is a frozen Pydantic model and every sequence
field is a tuple, so a decoded object can be shared without copying.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from gitread.models.signature import Signature

IDENTIFIER_LENGTH = 40
HASH_BYTES = IDENTIFIER_LENGTH // 2
TREE_MODE = "40000"

_IDENTIFIER_RE = re.compile(r"^[0-9a-f]{40}$")

Identifier = Annotated[str, StringConstraints(pattern=r"^[0-9a-f]{40}$")]


def is_identifier(value: str) -> bool:
    """Whether *value* is a 40-character lowercase hex identifier."""
    return bool(_IDENTIFIER_RE.match(value))


class ObjectKind(str, Enum):
    """The three loose object types."""

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"


class Blob(BaseModel):
    """Opaque file content.  The payload is never interpreted."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ObjectKind.BLOB] = ObjectKind.BLOB
    id: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class TreeEntry(BaseModel):
    """One named reference inside a tree."""

    model_config = ConfigDict(frozen=True)

    mode: str  # digits as stored, e.g. "100644" or "40000"
    filename: str
    id: Identifier

    @property
    def is_tree(self) -> bool:
        return self.mode == TREE_MODE


class Tree(BaseModel):
    """A directory snapshot.

    ``entries`` keeps the order in which entries appear in the object, which
    is already the store's canonical sort order.  It is never re-sorted.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[ObjectKind.TREE] = ObjectKind.TREE
    id: str
    entries: tuple[TreeEntry, ...] = ()

    def entry(self, filename: str) -> TreeEntry | None:
        """Return the entry named *filename*, or None."""
        for entry in self.entries:
            if entry.filename == filename:
                return entry
        return None


class Commit(BaseModel):
    """A snapshot of a tree plus authorship metadata and a message.

    ``author`` and ``committer`` hold the raw header values (the text after
    the tag).  ``message`` is every byte after the committer line, including
    any extension headers and the separating blank line.  ``extra_headers``
    lists those extension headers; they are not removed from ``message``.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[ObjectKind.COMMIT] = ObjectKind.COMMIT
    id: str
    tree: Identifier
    parents: tuple[Identifier, ...] = ()
    author: str
    committer: str
    message: str = ""
    extra_headers: tuple[tuple[str, str], ...] = ()

    @property
    def parent(self) -> str | None:
        """First parent, or None for a root commit."""
        return self.parents[0] if self.parents else None

    @property
    def is_root(self) -> bool:
        return not self.parents

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1

    @property
    def summary(self) -> str:
        """First non-blank line of the message after its extension headers."""
        skip = sum(value.count("\n") + 1 for _, value in self.extra_headers)
        for line in self.message.split("\n")[skip:]:
            if line.strip():
                return line.strip()
        return ""

    @property
    def author_signature(self) -> Signature:
        return Signature.parse(self.author)

    @property
    def committer_signature(self) -> Signature:
        return Signature.parse(self.committer)


GitObject = Annotated[Union[Blob, Tree, Commit], Field(discriminator="kind")]
