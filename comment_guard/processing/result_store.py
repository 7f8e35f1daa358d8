"""
In-memory storage for classified comments with derived statistics.
"""

import logging
import threading
from collections.abc import Callable, Sequence
from enum import Enum

from ..models.category import Category
from ..models.record import ClassificationRecord
from ..utils.statistics import (
    AggregateStats,
    calculate_category_breakdown,
    calculate_stats,
)

logger = logging.getLogger(__name__)


class MergeMode(str, Enum):
    """How a batch is combined with the existing result set."""

    PREPEND = "prepend"
    REPLACE = "replace"


class ResultAggregator:
    """Ordered, newest-first result set shared by the orchestrators and monitor.

    Mutations and snapshots are serialized with a lock because live monitor
    ticks arrive on a timer thread. Statistics are recomputed from a snapshot
    on every call.
    """

    def __init__(self) -> None:
        self._records: list[ClassificationRecord] = []
        self._lock = threading.Lock()
        self._change_callback: Callable[[], None] | None = None

    def set_change_callback(self, callback: Callable[[], None] | None) -> None:
        """Set a function to call after every mutation."""
        self._change_callback = callback

    def merge(
        self, records: Sequence[ClassificationRecord], mode: MergeMode = MergeMode.PREPEND
    ) -> None:
        """Merge a batch into the result set.

        Args:
            records: New records, in the order they should appear
            mode: PREPEND places the batch before existing records,
                REPLACE discards the existing records

        """
        batch = list(records)
        with self._lock:
            if mode is MergeMode.REPLACE:
                self._records = batch
            else:
                if not batch:
                    return
                self._records = batch + self._records
            size = len(self._records)

        logger.debug(f"Merged {len(batch)} records ({mode.value}), {size} total")
        self._notify()

    def prepend_batch(self, records: Sequence[ClassificationRecord]) -> None:
        self.merge(records, MergeMode.PREPEND)

    def replace_all(self, records: Sequence[ClassificationRecord]) -> None:
        self.merge(records, MergeMode.REPLACE)

    def clear(self) -> None:
        """Remove every record."""
        with self._lock:
            self._records = []
        self._notify()

    def records(self) -> list[ClassificationRecord]:
        """Snapshot of the current records, newest first."""
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def compute_stats(self) -> AggregateStats:
        return calculate_stats(self.records())

    def compute_category_breakdown(self) -> dict[Category, int]:
        return calculate_category_breakdown(self.records())

    def _notify(self) -> None:
        if self._change_callback:
            self._change_callback()
