"""Bulk analysis of pasted comments, one classification per line."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..config import MIN_SAMPLE_LENGTH, TEXT_ANALYSIS_FAILED_MESSAGE, TEXT_ANALYSIS_STAGE
from ..exceptions import TextAnalysisError
from ..models.record import ClassificationRecord

if TYPE_CHECKING:
    from ..services.gateway import ClassificationGateway
    from .session import DetectorSession

logger = logging.getLogger(__name__)


def split_samples(text: str, min_length: int = MIN_SAMPLE_LENGTH) -> list[str]:
    """Split pasted text into samples, dropping near-empty lines.

    Args:
        text: Raw multi-line input
        min_length: Lines whose stripped length is at or below this are skipped

    Returns:
        Retained lines in input order

    """
    return [line for line in text.split("\n") if len(line.strip()) > min_length]


class BulkAnalysisOrchestrator:
    """Classifies pasted comments sequentially and merges them as one batch.

    The batch is all-or-nothing: the first failed classification aborts the
    remaining samples and nothing is merged.
    """

    def __init__(
        self,
        gateway: "ClassificationGateway",
        min_sample_length: int = MIN_SAMPLE_LENGTH,
    ) -> None:
        self.gateway = gateway
        self.min_sample_length = min_sample_length

    def run(self, session: "DetectorSession", text: str) -> list[ClassificationRecord]:
        """Analyze ``text`` and prepend the results to the session.

        Args:
            session: Session whose result set and input state are updated
            text: Raw multi-line input

        Returns:
            The merged batch, or an empty list when there was nothing to analyze

        Raises:
            TextAnalysisError: If any sample fails to classify

        """
        samples = split_samples(text or "", self.min_sample_length)
        if not samples:
            logger.debug("No samples long enough to analyze")
            return []

        session.set_stage(TEXT_ANALYSIS_STAGE)
        batch = self.classify_all(samples, progress=session.set_stage)

        session.results.prepend_batch(batch)
        session.text_input = ""
        # Manual analysis and source monitoring are mutually exclusive
        session.stop_monitoring()
        session.set_active_source(None)

        logger.info(f"Bulk analysis merged {len(batch)} comments")
        return batch

    def classify_all(
        self,
        samples: list[str],
        progress: Callable[[str], None] | None = None,
    ) -> list[ClassificationRecord]:
        """Classify samples one at a time, in order, aborting on first failure."""
        batch: list[ClassificationRecord] = []
        total = len(samples)

        for index, sample in enumerate(samples, start=1):
            if progress:
                progress(f"Analyzing comment {index} of {total}...")
            try:
                batch.append(self.gateway.classify_sample(sample))
            except Exception as e:
                logger.error(f"Classification failed on comment {index}/{total}: {e!s}")
                raise TextAnalysisError(TEXT_ANALYSIS_FAILED_MESSAGE) from e

        return batch
