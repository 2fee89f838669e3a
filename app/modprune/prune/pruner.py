"""Concurrent pruning of a dependency tree.

Enumerates the root once, then fans a fixed number of asyncio workers
out over one shared cursor. Each worker pulls the next entry, classifies
it and, on a match, records it and hands it to the remover. Pulling,
classifying, and recording happen in a single step with no await in
between, so the cursor and result set need no locking; the only
suspension point is the removal itself.

The first removal failure cancels every other worker and is reported
as a PruneAbortedError together with the partial result.
"""

import asyncio
import logging
import time
from collections.abc import Iterable, Iterator
from pathlib import Path

from modprune.prune.classifier import Classifier
from modprune.prune.enumerator import enumerate_entries, resolve_root
from modprune.prune.errors import PruneAbortedError, RemovalError
from modprune.prune.models import Entry, PrunedPath, PruneResult, RuleKind
from modprune.prune.remover import Remover
from modprune.prune.rules import DEFAULT_RULES, JunkRules

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 100


class Cursor:
    """Shared position into the enumerated entries.

    Every pull advances the position once and hands out each entry
    exactly once, regardless of how many workers share the cursor.
    """

    def __init__(self, entries: Iterable[Entry]) -> None:
        self._iterator: Iterator[Entry] = iter(entries)
        self._pulled = 0

    @property
    def pulled(self) -> int:
        """Number of entries handed out so far."""
        return self._pulled

    def pull(self) -> Entry | None:
        """Return the next unclaimed entry, or None when exhausted."""
        entry = next(self._iterator, None)
        if entry is not None:
            self._pulled += 1
        return entry


class ResultSet:
    """Ordered, append-only record of claimed paths.

    A path is recorded at most once. Membership tests are by full path.
    """

    def __init__(self) -> None:
        self._records: list[PrunedPath] = []
        self._paths: set[str] = set()

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._records)

    def add(self, path: str, rule: RuleKind) -> bool:
        """Record a claimed path.

        Args:
            path: Full path being removed.
            rule: Rule that matched it.

        Returns:
            True if the path was newly recorded, False if already present.
        """
        if path in self._paths:
            return False
        self._paths.add(path)
        self._records.append(PrunedPath(path=path, rule=rule))
        return True

    def snapshot(self) -> tuple[PrunedPath, ...]:
        """Return the records claimed so far."""
        return tuple(self._records)


class Pruner:
    """Runs one prune over a directory tree.

    Args:
        rules: Junk classification table.
        concurrency: Number of concurrent workers (at least 1).
        dry_run: If True, classify and record without deleting anything.
    """

    def __init__(
        self,
        rules: JunkRules = DEFAULT_RULES,
        *,
        concurrency: int = DEFAULT_CONCURRENCY,
        dry_run: bool = False,
    ) -> None:
        if concurrency < 1:
            msg = f"Concurrency must be at least 1, got {concurrency}"
            raise ValueError(msg)
        self._rules = rules
        self._concurrency = concurrency
        self._remover = Remover(dry_run=dry_run)

    @property
    def concurrency(self) -> int:
        """Configured worker count."""
        return self._concurrency

    async def run(self, path: str | Path) -> PruneResult:
        """Prune junk entries beneath path.

        Args:
            path: Relative or absolute root directory.

        Returns:
            PruneResult describing every claimed path.

        Raises:
            PathValidationError: If the root is missing or unreadable.
            PruneAbortedError: If any removal fails.
        """
        started = time.perf_counter()
        root = resolve_root(path)
        logger.info("Pruning %s with %d workers", root, self._concurrency)

        entries = await asyncio.to_thread(enumerate_entries, root)
        cursor = Cursor(entries)
        results = ResultSet()
        classifier = Classifier(self._rules, root=root)

        try:
            async with asyncio.TaskGroup() as tasks:
                for _ in range(self._concurrency):
                    tasks.create_task(self._worker(cursor, results, classifier))
        except ExceptionGroup as group:
            failed, rest = group.split(RemovalError)
            if failed is None or rest is not None:
                raise
            errors = [e for e in failed.exceptions if isinstance(e, RemovalError)]
            partial = self._summarize(root, results, len(entries), started)
            logger.error("Prune aborted after %d removals: %s", partial.count, errors[0])
            raise PruneAbortedError(errors, partial) from None

        result = self._summarize(root, results, len(entries), started)
        logger.info(
            "Removed %d of %d entries in %.2fs", result.count, result.scanned, result.elapsed
        )
        return result

    async def _worker(self, cursor: Cursor, results: ResultSet, classifier: Classifier) -> None:
        """Pull and process entries until the cursor is exhausted."""
        while (entry := cursor.pull()) is not None:
            rule = classifier.classify(entry, results)
            if rule is None:
                continue
            full_path = entry.full_path
            if not results.add(full_path, rule):
                continue
            logger.debug("Matched %s rule: %s", rule.value, full_path)
            await self._remover.remove(full_path)

    def _summarize(
        self, root: str, results: ResultSet, scanned: int, started: float
    ) -> PruneResult:
        return PruneResult(
            root=root,
            removed=results.snapshot(),
            scanned=scanned,
            elapsed=time.perf_counter() - started,
            dry_run=self._remover.dry_run,
        )


def prune(
    path: str | Path,
    concurrency: int = DEFAULT_CONCURRENCY,
    *,
    rules: JunkRules = DEFAULT_RULES,
    dry_run: bool = False,
) -> PruneResult:
    """Prune junk entries beneath path and return the result.

    Synchronous convenience wrapper around Pruner.run.

    Args:
        path: Relative or absolute root directory.
        concurrency: Number of concurrent workers.
        rules: Junk classification table.
        dry_run: If True, nothing is deleted.

    Returns:
        PruneResult describing every claimed path.

    Raises:
        ValueError: If concurrency is below 1.
        PathValidationError: If the root is missing or unreadable.
        PruneAbortedError: If any removal fails.
    """
    pruner = Pruner(rules, concurrency=concurrency, dry_run=dry_run)
    return asyncio.run(pruner.run(path))
