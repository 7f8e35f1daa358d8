"""Detector session: the shared state behind one dashboard."""

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from ..config import ANALYSIS_BUSY_MESSAGE, POLL_INTERVAL_SECONDS
from ..exceptions import AnalysisBusyError, CommentGuardError
from ..models.category import Category
from ..models.record import ClassificationRecord
from ..models.source import ActiveSource
from ..utils.statistics import AggregateStats
from .bulk_analysis import BulkAnalysisOrchestrator
from .live_monitor import LiveMonitor
from .result_store import ResultAggregator
from .scheduling import ThreadingScheduler
from .source_analysis import SourceAnalysisOrchestrator

if TYPE_CHECKING:
    from ..services.gateway import ClassificationGateway

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class AnalysisStatus:
    """Coarse progress signal for the UI."""

    in_progress: bool = False
    stage: str = ""


class DetectorSession:
    """Owns the result set, active source, live monitor and input buffers.

    Orchestrators receive the session explicitly and mutate it only through
    the methods below. One analysis may run at a time; the live monitor runs
    independently on its own timer thread.
    """

    def __init__(
        self,
        gateway: "ClassificationGateway",
        scheduler: ThreadingScheduler | None = None,
        *,
        poll_interval: float = POLL_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.gateway = gateway
        self.scheduler = scheduler or ThreadingScheduler()
        self.results = ResultAggregator()
        self.monitor = LiveMonitor(gateway, self.results, self.scheduler, poll_interval)
        self.bulk_analyzer = BulkAnalysisOrchestrator(gateway)
        self.source_analyzer = SourceAnalysisOrchestrator(
            gateway, self.scheduler, clock=clock, sleep=sleep
        )

        self.text_input = ""
        self.source_input = ""
        self.status = AnalysisStatus()
        self.error_message: str | None = None

        self._active_source: ActiveSource | None = None
        self._operation_lock = threading.Lock()
        self._stage_callback: Callable[[str], None] | None = None

    # Callbacks

    def set_stage_callback(self, callback: Callable[[str], None] | None) -> None:
        """Set a function to call whenever the stage label changes."""
        self._stage_callback = callback

    def set_results_callback(self, callback: Callable[[], None] | None) -> None:
        """Set a function to call whenever the result set changes."""
        self.results.set_change_callback(callback)

    def set_stage(self, label: str) -> None:
        self.status.stage = label
        if self._stage_callback:
            self._stage_callback(label)

    # Active source and monitoring

    @property
    def active_source(self) -> ActiveSource | None:
        return self._active_source

    def set_active_source(self, source: ActiveSource | None) -> None:
        """Bind a new active source; any change stops the live monitor."""
        if source != self._active_source:
            self.monitor.stop()
        self._active_source = source

    @property
    def is_monitoring(self) -> bool:
        return self.monitor.is_running

    def start_monitoring(self) -> bool:
        """Start live monitoring of the active source.

        Returns:
            False if there is no active source

        """
        if self.monitor.is_running:
            return True
        return self.monitor.start(self._active_source)

    def stop_monitoring(self) -> None:
        self.monitor.stop()

    def toggle_monitoring(self) -> bool:
        """Flip live monitoring on or off and return the new state."""
        if self.monitor.is_running:
            self.monitor.stop()
            return False
        return self.start_monitoring()

    # Analysis operations

    def analyze_text(self, text: str | None = None) -> list[ClassificationRecord]:
        """Run bulk analysis on ``text`` (defaults to the text input buffer)."""
        value = self.text_input if text is None else text
        return self._run_operation(self.bulk_analyzer.run, value)

    def analyze_source(self, reference: str | None = None) -> list[ClassificationRecord]:
        """Run source analysis on ``reference`` (defaults to the source input buffer)."""
        value = self.source_input if reference is None else reference
        return self._run_operation(self.source_analyzer.run, value)

    def _run_operation(
        self, operation: Callable[["DetectorSession", str], T], value: str
    ) -> T:
        if not self._operation_lock.acquire(blocking=False):
            raise AnalysisBusyError(ANALYSIS_BUSY_MESSAGE)

        self.error_message = None
        self.status.in_progress = True
        try:
            return operation(self, value)
        except CommentGuardError as e:
            self.error_message = str(e)
            raise
        finally:
            self.status.in_progress = False
            self.set_stage("")
            self._operation_lock.release()

    # Result set

    def clear_log(self) -> None:
        """Discard every result and start over without an active source."""
        self.monitor.stop()
        self.set_active_source(None)
        self.results.clear()
        logger.info("Result log cleared")

    def records(self) -> list[ClassificationRecord]:
        return self.results.records()

    def stats(self) -> AggregateStats:
        return self.results.compute_stats()

    def category_breakdown(self) -> dict[Category, int]:
        return self.results.compute_category_breakdown()

    def shutdown(self) -> None:
        """Stop background activity before the session is discarded."""
        self.monitor.stop()
