"""Junk classification for enumerated entries.

Decides, for one entry, whether it matches a junk rule and should be
removed. Rules are evaluated in a fixed order (directory name, file
name, extension) and the first match wins. An entry that lives beneath
a path already claimed for removal never matches, since the earlier
removal is recursive.
"""

import logging
import os
from typing import Protocol

from modprune.prune.models import Entry, RuleKind
from modprune.prune.rules import DEFAULT_RULES, JunkRules

logger = logging.getLogger(__name__)


class ClaimedPaths(Protocol):
    """Read-only view of the paths claimed so far in a run."""

    def __contains__(self, path: object) -> bool: ...


class Classifier:
    """Matches entries against a fixed JunkRules table.

    Args:
        rules: Classification table. Captured at construction and never
            modified afterwards.
        root: Absolute root of the run. Ancestor lookups stop here.
    """

    def __init__(self, rules: JunkRules = DEFAULT_RULES, *, root: str | None = None) -> None:
        self._rules = rules
        self._root = os.path.normpath(root) if root else None

    @property
    def rules(self) -> JunkRules:
        """The classification table in use."""
        return self._rules

    def classify(self, entry: Entry, claimed: ClaimedPaths) -> RuleKind | None:
        """Classify a single entry.

        Args:
            entry: Entry to classify.
            claimed: Paths already claimed for removal in this run.

        Returns:
            The matching rule, or None if the entry should be kept.
        """
        name = entry.name
        rules = self._rules

        if name in rules.keep:
            return None

        if name in rules.dir_names:
            rule = RuleKind.DIRECTORY
        elif name in rules.file_names:
            rule = RuleKind.FILE
        elif os.path.splitext(name)[1] in rules.extensions:
            rule = RuleKind.EXTENSION
        else:
            return None

        if self._under_claimed(entry.parent_path, claimed):
            logger.debug("Skipping %s: ancestor already removed", entry.full_path)
            return None

        if entry.full_path in claimed:
            return None

        return rule

    def _under_claimed(self, parent_path: str, claimed: ClaimedPaths) -> bool:
        """Check whether parent_path or any of its ancestors is claimed.

        The walk stops at the run root (which is never claimed) or at
        the filesystem root when no run root is set.
        """
        current = parent_path
        while True:
            if current in claimed:
                return True
            if current == self._root:
                return False
            parent = os.path.dirname(current)
            if parent == current:
                return False
            current = parent
