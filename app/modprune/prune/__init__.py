"""Pruning engine.

This module provides the junk rule table, entry classification,
tree enumeration, idempotent removal, and the concurrent pruner
that ties them together.
"""

from modprune.prune.classifier import Classifier
from modprune.prune.enumerator import enumerate_entries, resolve_root
from modprune.prune.errors import (
    PathValidationError,
    PruneAbortedError,
    PrunerError,
    RemovalError,
)
from modprune.prune.models import Entry, PrunedPath, PruneResult, RuleKind
from modprune.prune.pruner import DEFAULT_CONCURRENCY, Cursor, Pruner, ResultSet, prune
from modprune.prune.remover import Remover
from modprune.prune.rules import DEFAULT_RULES, JunkRules

__all__ = [
    "DEFAULT_CONCURRENCY",
    "DEFAULT_RULES",
    "Classifier",
    "Cursor",
    "Entry",
    "JunkRules",
    "PathValidationError",
    "PruneAbortedError",
    "PruneResult",
    "PrunedPath",
    "Pruner",
    "PrunerError",
    "RemovalError",
    "Remover",
    "ResultSet",
    "RuleKind",
    "enumerate_entries",
    "prune",
    "resolve_root",
]
