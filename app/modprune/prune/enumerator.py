"""Recursive single-pass enumeration of a prune root.

Lists every filesystem object beneath a root directory, top-down, so
that a directory is always produced before any of its descendants.
Symbolic links are listed but never followed.
"""

import logging
import os
from pathlib import Path

from modprune.prune.errors import PathValidationError
from modprune.prune.models import Entry

logger = logging.getLogger(__name__)


def resolve_root(path: str | Path) -> str:
    """Validate a prune root and return it as an absolute path.

    Args:
        path: Relative or absolute path to the root directory.

    Returns:
        Absolute, normalized path string.

    Raises:
        PathValidationError: If the path is missing, not a directory,
            or cannot be listed.
    """
    if not str(path):
        msg = "Path cannot be empty"
        raise PathValidationError(msg)

    absolute = os.path.abspath(os.fspath(path))

    if not os.path.exists(absolute):
        msg = f"No such file or directory: '{absolute}'"
        raise PathValidationError(msg)
    if not os.path.isdir(absolute):
        msg = f"Not a directory: '{absolute}'"
        raise PathValidationError(msg)
    if not os.access(absolute, os.R_OK | os.X_OK):
        msg = f"Permission denied: '{absolute}'"
        raise PathValidationError(msg)

    return absolute


def enumerate_entries(root: str) -> list[Entry]:
    """List all entries beneath root in top-down order.

    Entries within one directory are sorted by name. Subdirectories
    that cannot be read are logged and skipped; an unreadable root
    raises.

    Args:
        root: Absolute path of an existing directory.

    Returns:
        Flat list of entries; the root itself is not included.

    Raises:
        PathValidationError: If the root itself cannot be listed.
    """
    entries: list[Entry] = []

    def _on_error(error: OSError) -> None:
        if os.path.normpath(error.filename or "") == os.path.normpath(root):
            msg = f"Cannot list {root}: {error.strerror or error}"
            raise PathValidationError(msg) from error
        logger.warning("Cannot list directory: %s (%s)", error.filename, error.strerror)

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_on_error):
        dirnames.sort()
        for name in sorted([*dirnames, *filenames]):
            entries.append(Entry(name=name, parent_path=dirpath))

    logger.debug("Enumerated %d entries under %s", len(entries), root)
    return entries
