"""Background worker thread for running analyses off the GUI thread."""

import logging

from PyQt6.QtCore import QThread, pyqtSignal

from ..exceptions import CommentGuardError
from .session import DetectorSession

logger = logging.getLogger(__name__)


class AnalysisWorker(QThread):
    """Background thread for one bulk or source analysis.

    Emits signals to update the GUI when the analysis finishes or fails.
    Stage labels reach the GUI through the session's stage callback.
    """

    # Signals for communicating with GUI
    analysis_complete = pyqtSignal(int)  # number of records merged
    error_occurred = pyqtSignal(str)  # user-facing error message

    MODE_TEXT = "text"
    MODE_SOURCE = "source"

    def __init__(self, session: DetectorSession, mode: str, value: str) -> None:
        """Initialize the analysis worker.

        Args:
            session: Session to run the analysis against
            mode: MODE_TEXT for pasted comments, MODE_SOURCE for a video URL
            value: The pasted text or the URL

        """
        super().__init__()
        if mode not in (self.MODE_TEXT, self.MODE_SOURCE):
            raise ValueError(f"Invalid analysis mode: {mode}")
        self.session = session
        self.mode = mode
        self.value = value

    def run(self) -> None:
        """Execute the analysis in the background thread."""
        try:
            if self.mode == self.MODE_TEXT:
                records = self.session.analyze_text(self.value)
            else:
                records = self.session.analyze_source(self.value)
            self.analysis_complete.emit(len(records))
        except CommentGuardError as e:
            self.error_occurred.emit(str(e))
        except Exception as e:
            logger.exception("Unexpected analysis failure")
            self.error_occurred.emit(f"Analysis failed: {e!s}")
