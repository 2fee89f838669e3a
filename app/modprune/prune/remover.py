"""Forced recursive removal of junk paths.

Removal is idempotent: a path that no longer exists is treated as
already removed. Any other OSError is surfaced as a RemovalError.
"""

import asyncio
import logging
import shutil

import aiofiles.os

from modprune.prune.errors import RemovalError

logger = logging.getLogger(__name__)


def _rmtree(path: str) -> None:
    """Remove a directory tree, tolerating concurrent disappearance."""

    def _on_exc(func: object, failed: str, exc: BaseException) -> None:
        if isinstance(exc, FileNotFoundError):
            return
        raise exc

    shutil.rmtree(path, onexc=_on_exc)


class Remover:
    """Deletes paths from disk.

    Directories (but not symlinks to directories) are removed
    recursively in a worker thread; files and symlinks are unlinked.

    Args:
        dry_run: If True, report removals without touching the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether removals are simulated."""
        return self._dry_run

    async def remove(self, path: str) -> None:
        """Remove a file, symlink, or directory tree.

        Args:
            path: Full path to remove.

        Raises:
            RemovalError: On any OSError other than the path being absent.
        """
        if self._dry_run:
            logger.debug("Dry-run: would remove %s", path)
            return

        try:
            if await aiofiles.os.path.isdir(path) and not await aiofiles.os.path.islink(path):
                await asyncio.to_thread(_rmtree, path)
            else:
                await aiofiles.os.remove(path)
        except FileNotFoundError:
            logger.debug("Already gone: %s", path)
        except OSError as e:
            raise RemovalError(path, e) from e
        else:
            logger.debug("Removed %s", path)
