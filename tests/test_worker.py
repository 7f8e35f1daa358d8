"""
Tests for the background analysis worker, run synchronously.
"""

import pytest

pytest.importorskip("PyQt6.QtCore")

from comment_guard.processing.worker import AnalysisWorker  # noqa: E402


class TestAnalysisWorker:
    """Test AnalysisWorker.run without starting a thread."""

    def test_invalid_mode(self, session):
        with pytest.raises(ValueError):
            AnalysisWorker(session, "video", "x")

    def test_text_success_emits_count(self, session):
        counts = []
        worker = AnalysisWorker(session, AnalysisWorker.MODE_TEXT, "first comment\nsecond comment")
        worker.analysis_complete.connect(counts.append)

        worker.run()

        assert counts == [2]
        assert len(session.records()) == 2

    def test_failure_emits_message(self, session, gateway):
        errors = []
        gateway.fail_texts.add("broken comment")
        worker = AnalysisWorker(session, AnalysisWorker.MODE_TEXT, "broken comment")
        worker.error_occurred.connect(errors.append)

        worker.run()

        assert errors == [session.error_message]

    def test_invalid_source_emits_message(self, session):
        errors = []
        worker = AnalysisWorker(session, AnalysisWorker.MODE_SOURCE, "not a url")
        worker.error_occurred.connect(errors.append)

        worker.run()

        assert errors == ["Please enter a valid YouTube URL."]
