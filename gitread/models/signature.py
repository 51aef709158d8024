"""Author / committer line parsing.

A signature line has the form ``Name <email> <unix-seconds> <+hhmm>``.
Commits keep the raw line; this model is a parsed view over it.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict

from gitread.core.errors import DecodeError

_SIGNATURE_RE = re.compile(
    r"^(?P<name>.*?) ?<(?P<email>[^>]*)> (?P<timestamp>-?\d+) (?P<offset>[+-]\d{4})$"
)


class Signature(BaseModel):
    """Identity and timestamp of an author or committer."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    timestamp: int  # seconds since the epoch, UTC
    offset: str = "+0000"  # "+hhmm" / "-hhmm" as written

    @classmethod
    def parse(cls, line: str) -> Signature:
        """Parse a raw signature value.

        Raises
        ------
        DecodeError
            If the line does not have the name/email/time/offset shape.
        """
        match = _SIGNATURE_RE.match(line.strip())
        if match is None:
            raise DecodeError(f"Malformed signature line: {line!r}")
        return cls(
            name=match.group("name"),
            email=match.group("email"),
            timestamp=int(match.group("timestamp")),
            offset=match.group("offset"),
        )

    @property
    def tzinfo(self) -> timezone:
        sign = -1 if self.offset.startswith("-") else 1
        hours, minutes = int(self.offset[1:3]), int(self.offset[3:5])
        return timezone(sign * timedelta(hours=hours, minutes=minutes))

    @property
    def when(self) -> datetime:
        """Timezone-aware datetime in the signer's own offset."""
        return datetime.fromtimestamp(self.timestamp, tz=self.tzinfo)

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
