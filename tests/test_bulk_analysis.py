"""
Tests for bulk analysis of pasted comments.
"""

import pytest

from comment_guard.exceptions import AnalysisError, TextAnalysisError
from comment_guard.models.source import ActiveSource
from comment_guard.processing.bulk_analysis import BulkAnalysisOrchestrator, split_samples
from conftest import make_record


class TestSplitSamples:
    """Test line filtering."""

    def test_short_lines_are_dropped(self):
        assert split_samples("a\nbb\nvalid line\n\n  x  ") == ["valid line"]

    def test_length_threshold_is_exclusive(self):
        assert split_samples("abc\nabcd") == ["abcd"]

    def test_retained_lines_are_not_stripped(self):
        assert split_samples("  hello world  \nok") == ["  hello world  "]

    def test_order_is_preserved(self):
        assert split_samples("first one\nsecond one\nthird one") == [
            "first one",
            "second one",
            "third one",
        ]


class TestBulkAnalysis:
    """Test BulkAnalysisOrchestrator through the session."""

    def test_only_long_lines_are_classified(self, session, gateway):
        session.analyze_text("a\nbb\nvalid line\n\n  x  ")

        assert gateway.classified == ["valid line"]
        assert [r.text for r in session.records()] == ["valid line"]

    def test_empty_input_is_noop(self, session, gateway):
        """Input with nothing to analyze changes nothing."""
        session.results.prepend_batch([make_record("existing")])
        session.text_input = "ab"

        assert session.analyze_text() == []
        assert gateway.classified == []
        assert [r.text for r in session.records()] == ["existing"]
        assert session.text_input == "ab"

    def test_batch_is_prepended_in_input_order(self, session):
        session.results.prepend_batch([make_record("existing")])

        session.analyze_text("comment one\nspam comment two")

        texts = [r.text for r in session.records()]
        assert texts == ["comment one", "spam comment two", "existing"]
        assert session.records()[1].is_spam

    def test_failure_aborts_whole_batch(self, session, gateway):
        """A failure on the second of three lines merges nothing."""
        session.results.prepend_batch([make_record("existing")])
        session.text_input = "line one ok\nline two bad\nline three ok"
        gateway.fail_texts.add("line two bad")

        with pytest.raises(TextAnalysisError) as exc_info:
            session.analyze_text()

        assert isinstance(exc_info.value, AnalysisError)
        assert gateway.classified == ["line one ok", "line two bad"]
        assert [r.text for r in session.records()] == ["existing"]
        assert session.text_input == "line one ok\nline two bad\nline three ok"
        assert session.error_message == str(exc_info.value)

    def test_success_clears_input_and_source(self, session):
        session.set_active_source(ActiveSource("dQw4w9WgXcQ", "https://youtu.be/dQw4w9WgXcQ"))
        session.start_monitoring()
        session.text_input = "some pasted comment"

        session.analyze_text()

        assert session.text_input == ""
        assert session.active_source is None
        assert not session.is_monitoring

    def test_progress_labels(self, gateway):
        labels = []
        orchestrator = BulkAnalysisOrchestrator(gateway)

        orchestrator.classify_all(["one sample", "two sample"], progress=labels.append)

        assert labels == ["Analyzing comment 1 of 2...", "Analyzing comment 2 of 2..."]
