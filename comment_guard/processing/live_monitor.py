"""Live monitoring of an active source for newly arrived comments."""

import logging
import threading
from typing import TYPE_CHECKING

from ..config import POLL_INTERVAL_SECONDS
from ..exceptions import PollTransientFailure
from ..models.source import ActiveSource
from .result_store import ResultAggregator
from .scheduling import ThreadingScheduler

if TYPE_CHECKING:
    from ..models.record import ClassificationRecord
    from ..services.gateway import ClassificationGateway
    from .scheduling import RecurringTask

logger = logging.getLogger(__name__)


class LiveMonitor:
    """Polls the gateway on a fixed period and prepends new comments.

    At most one recurring task is live at a time. Each start bumps a
    generation counter; a tick whose poll finishes after the monitor was
    stopped or restarted is discarded instead of merged.
    """

    def __init__(
        self,
        gateway: "ClassificationGateway",
        results: ResultAggregator,
        scheduler: ThreadingScheduler | None = None,
        interval: float = POLL_INTERVAL_SECONDS,
    ) -> None:
        self.gateway = gateway
        self.results = results
        self.scheduler = scheduler or ThreadingScheduler()
        self.interval = interval
        self._lock = threading.RLock()
        self._task: "RecurringTask | None" = None
        self._source: ActiveSource | None = None
        self._generation = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None

    @property
    def source(self) -> ActiveSource | None:
        return self._source

    def start(self, source: ActiveSource | None) -> bool:
        """Start polling ``source``.

        Returns:
            False (and starts nothing) when there is no source, True otherwise

        """
        if source is None:
            logger.warning("Live monitoring requires an active source")
            return False

        with self._lock:
            self._cancel_locked()
            self._generation += 1
            generation = self._generation
            self._source = source
            self._task = self.scheduler.schedule_recurring(
                self.interval,
                lambda: self._tick(generation),
                name=f"live-monitor-{source.source_id}",
            )

        logger.info(f"Live monitoring started for {source.url}")
        return True

    def stop(self) -> None:
        """Stop polling. Stopping an idle monitor is a no-op."""
        with self._lock:
            was_running = self._task is not None
            self._cancel_locked()
            self._generation += 1
            self._source = None

        if was_running:
            logger.info("Live monitoring stopped")

    def _cancel_locked(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def _tick(self, generation: int) -> None:
        source = self._source
        if source is None or generation != self._generation:
            return

        try:
            new_records = self._poll(source)
        except PollTransientFailure as e:
            logger.debug(f"Live poll failed, treating as no new comments: {e}")
            return

        if not new_records:
            return

        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding poll results from a stopped monitor")
                return
            self.results.prepend_batch(new_records)

        logger.info(f"Live monitor added {len(new_records)} new comments")

    def _poll(self, source: ActiveSource) -> "list[ClassificationRecord]":
        try:
            return self.gateway.poll_recent(source.url)
        except Exception as e:
            raise PollTransientFailure(f"Poll for {source.url} failed: {e!s}") from e
