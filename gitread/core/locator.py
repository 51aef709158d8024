"""Repository discovery by upward directory search."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MARKER = ".git"


def find_root(starting_directory: Path | str, marker: str = DEFAULT_MARKER) -> Path | None:
    """Walk up from *starting_directory* looking for a *marker* directory.

    Returns the path of the marker directory itself (e.g. ``/work/.git``), or
    None once the filesystem root has been checked without a match.

    The start is made absolute lexically; symlinks are not resolved, so the
    ascent follows the path as given and cannot cycle.
    """
    candidate = Path(os.path.abspath(starting_directory))

    while True:
        marker_dir = candidate / marker
        if marker_dir.is_dir():
            logger.debug("Found repository at %s", marker_dir)
            return marker_dir
        if candidate.parent == candidate:
            logger.debug("No %s directory above %s", marker, starting_directory)
            return None
        candidate = candidate.parent
