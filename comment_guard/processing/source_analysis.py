"""Analysis of a video source reference."""

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..config import (
    INVALID_SOURCE_MESSAGE,
    SOURCE_ANALYSIS_STAGES,
    SOURCE_FETCH_FAILED_MESSAGE,
    SOURCE_MIN_DURATION_SECONDS,
    SOURCE_STAGE_INTERVAL_SECONDS,
)
from ..exceptions import GatewayError, SourceFetchError, ValidationError
from ..models.record import ClassificationRecord
from ..models.source import ActiveSource
from ..utils.source_reference import extract_source_id, is_valid_source_reference
from .scheduling import ThreadingScheduler

if TYPE_CHECKING:
    from ..services.gateway import ClassificationGateway
    from .scheduling import RecurringTask
    from .session import DetectorSession

logger = logging.getLogger(__name__)


class SourceAnalysisOrchestrator:
    """Fetches an initial classified batch for a source and binds it as active.

    Stage labels advance on a short timer purely as progress feedback. The
    operation finishes when the gateway responds, but never before
    ``min_duration`` seconds have passed since it started.
    """

    def __init__(
        self,
        gateway: "ClassificationGateway",
        scheduler: ThreadingScheduler | None = None,
        *,
        stage_interval: float = SOURCE_STAGE_INTERVAL_SECONDS,
        min_duration: float = SOURCE_MIN_DURATION_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.gateway = gateway
        self.scheduler = scheduler or ThreadingScheduler()
        self.stage_interval = stage_interval
        self.min_duration = min_duration
        self._clock = clock
        self._sleep = sleep

    def run(self, session: "DetectorSession", reference: str) -> list[ClassificationRecord]:
        """Analyze ``reference`` and replace the session's results.

        Args:
            session: Session whose results and active source are updated
            reference: Video URL

        Returns:
            The batch now held by the result set

        Raises:
            ValidationError: If the reference is not a recognised video URL
            SourceFetchError: If the gateway fails; session state is restored

        """
        if not is_valid_source_reference(reference):
            raise ValidationError(INVALID_SOURCE_MESSAGE)
        reference = reference.strip()

        session.stop_monitoring()
        previous_source = session.active_source
        session.set_active_source(None)

        started = self._clock()
        stages = self._start_stage_feedback(session)
        try:
            try:
                records = self.gateway.analyze_source(reference)
                if not records:
                    raise GatewayError(f"No comments returned for {reference}")
            except Exception as e:
                logger.error(f"Source analysis failed for {reference}: {e!s}")
                session.set_active_source(previous_source)
                raise SourceFetchError(SOURCE_FETCH_FAILED_MESSAGE) from e

            source = ActiveSource(source_id=extract_source_id(reference), url=reference)
            session.set_active_source(source)
            session.results.replace_all(records)
            session.source_input = ""

            logger.info(f"Source {source.source_id} analyzed: {len(records)} comments")
            return records
        finally:
            self._wait_for_min_duration(started)
            stages.cancel()

    def _start_stage_feedback(self, session: "DetectorSession") -> "RecurringTask":
        labels = iter(SOURCE_ANALYSIS_STAGES)
        session.set_stage(next(labels))
        task: "RecurringTask | None" = None

        def advance() -> None:
            label = next(labels, None)
            if label is None:
                if task is not None:
                    task.cancel()
                return
            session.set_stage(label)

        task = self.scheduler.schedule_recurring(
            self.stage_interval, advance, name="source-analysis-stages"
        )
        return task

    def _wait_for_min_duration(self, started: float) -> None:
        remaining = self.min_duration - (self._clock() - started)
        if remaining > 0:
            self._sleep(remaining)
