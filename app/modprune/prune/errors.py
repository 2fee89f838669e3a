"""Prune error taxonomy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modprune.prune.models import PruneResult


class PrunerError(Exception):
    """Base class for all pruning failures."""


class PathValidationError(PrunerError):
    """Raised when the prune root is missing or unusable."""


class RemovalError(PrunerError):
    """Raised when a path cannot be removed.

    Attributes:
        path: Path whose removal failed.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        super().__init__(f"Cannot remove {path}: {cause.strerror or cause}")


class PruneAbortedError(PrunerError):
    """Raised when a run stops on its first removal failure.

    Attributes:
        errors: Every removal failure collected before workers were cancelled.
        result: Partial result; paths claimed before the abort.
    """

    def __init__(self, errors: list[RemovalError], result: PruneResult) -> None:
        self.errors = errors
        self.result = result
        super().__init__(str(errors[0]) if errors else "Prune aborted")
