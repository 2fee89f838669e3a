"""Prune domain models.

This module defines the data structures passed between the enumerator,
classifier, and pruner: enumerated entries, the rule that matched an
entry, and the summary of a prune run.
"""

import os
from dataclasses import dataclass
from enum import Enum


class RuleKind(str, Enum):
    """Which junk rule matched an entry.

    Attributes:
        DIRECTORY: Name is a known junk directory name.
        FILE: Name is a known junk file name.
        EXTENSION: Name carries a known junk extension.
    """

    DIRECTORY = "directory"
    FILE = "file"
    EXTENSION = "extension"


@dataclass(frozen=True, slots=True)
class Entry:
    """One filesystem object discovered during enumeration.

    Attributes:
        name: Base name of the entry.
        parent_path: Directory containing the entry.
    """

    name: str
    parent_path: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)

    @property
    def full_path(self) -> str:
        """Join parent path and name."""
        return os.path.join(self.parent_path, self.name)


@dataclass(frozen=True, slots=True)
class PrunedPath:
    """A path claimed for removal during a run.

    Attributes:
        path: Full path of the removed entry.
        rule: Rule that matched the entry.
    """

    path: str
    rule: RuleKind


@dataclass(frozen=True, slots=True)
class PruneResult:
    """Summary of a prune run.

    Attributes:
        root: Absolute root directory that was pruned.
        removed: Claimed paths in claim order.
        scanned: Number of entries enumerated under the root.
        elapsed: Wall-clock duration of the run in seconds.
        dry_run: Whether removals were skipped.
    """

    root: str
    removed: tuple[PrunedPath, ...]
    scanned: int
    elapsed: float
    dry_run: bool = False

    @property
    def count(self) -> int:
        """Number of removed paths."""
        return len(self.removed)

    @property
    def paths(self) -> list[str]:
        """Removed paths in claim order."""
        return [p.path for p in self.removed]

    def count_by_rule(self) -> dict[RuleKind, int]:
        """Count removed paths per matching rule."""
        counts = dict.fromkeys(RuleKind, 0)
        for pruned in self.removed:
            counts[pruned.rule] += 1
        return counts
