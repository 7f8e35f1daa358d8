"""
Tests for source analysis.
"""

import pytest

from comment_guard.config import SOURCE_ANALYSIS_STAGES, SOURCE_MIN_DURATION_SECONDS
from comment_guard.exceptions import (
    AnalysisError,
    GatewayError,
    SourceFetchError,
    ValidationError,
)
from comment_guard.models.source import ActiveSource
from conftest import make_record

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@pytest.fixture
def previous_source():
    """Create a source that is already bound before the analysis."""
    return ActiveSource("abcdefghijk", "https://youtu.be/abcdefghijk")


class TestSourceAnalysis:
    """Test SourceAnalysisOrchestrator through the session."""

    @pytest.mark.parametrize("reference", ["", "   ", "https://example.com/watch?v=dQw4w9WgXcQ"])
    def test_invalid_reference_is_rejected(self, session, gateway, reference):
        with pytest.raises(ValidationError):
            session.analyze_source(reference)

        assert gateway.source_calls == []
        assert session.error_message == "Please enter a valid YouTube URL."

    def test_success_binds_source_and_replaces_results(self, session, gateway):
        session.results.prepend_batch([make_record("stale")])
        session.source_input = f"  {VIDEO_URL} "

        records = session.analyze_source()

        assert gateway.source_calls == [VIDEO_URL]
        assert session.records() == records == gateway.source_records
        assert session.active_source.source_id == "dQw4w9WgXcQ"
        assert session.active_source.url == VIDEO_URL
        assert session.source_input == ""
        assert session.error_message is None

    def test_reference_without_id_binds_unknown(self, session):
        session.analyze_source("https://www.youtube.com/feed/trending")
        assert session.active_source.source_id == "unknown"

    def test_analysis_stops_running_monitor(self, session, gateway, scheduler, previous_source):
        session.set_active_source(previous_source)
        session.start_monitoring()
        observed = []
        gateway.on_analyze = lambda: observed.append(session.is_monitoring)

        session.analyze_source(VIDEO_URL)

        assert observed == [False]
        assert not session.is_monitoring
        assert scheduler.active_tasks("live-monitor") == []

    def test_failure_restores_previous_state(self, session, gateway, previous_source):
        kept = [make_record("kept")]
        session.results.replace_all(kept)
        session.set_active_source(previous_source)
        session.start_monitoring()
        gateway.source_error = GatewayError("quota exceeded")

        with pytest.raises(SourceFetchError) as exc_info:
            session.analyze_source(VIDEO_URL)

        assert isinstance(exc_info.value, AnalysisError)
        assert isinstance(exc_info.value.__cause__, GatewayError)
        assert session.records() == kept
        assert session.active_source == previous_source
        assert not session.is_monitoring
        assert session.error_message == str(exc_info.value)

    def test_empty_batch_is_a_failure(self, session, gateway):
        gateway.source_records = []

        with pytest.raises(SourceFetchError):
            session.analyze_source(VIDEO_URL)

        assert session.active_source is None

    def test_waits_for_minimum_duration(self, session, clock):
        """A fast gateway still takes the minimum duration."""
        session.analyze_source(VIDEO_URL)
        assert clock.sleeps == [pytest.approx(SOURCE_MIN_DURATION_SECONDS)]

    def test_minimum_duration_counts_elapsed_time(self, session, gateway, clock):
        gateway.on_analyze = lambda: clock.advance(1.0)

        session.analyze_source(VIDEO_URL)

        assert clock.sleeps == [pytest.approx(SOURCE_MIN_DURATION_SECONDS - 1.0)]

    def test_slow_gateway_does_not_wait(self, session, gateway, clock):
        gateway.on_analyze = lambda: clock.advance(SOURCE_MIN_DURATION_SECONDS + 2)

        session.analyze_source(VIDEO_URL)

        assert clock.sleeps == []

    def test_failure_also_waits_for_minimum_duration(self, session, gateway, clock):
        gateway.source_error = GatewayError("down")

        with pytest.raises(SourceFetchError):
            session.analyze_source(VIDEO_URL)

        assert clock.sleeps == [pytest.approx(SOURCE_MIN_DURATION_SECONDS)]

    def test_stage_labels_advance_until_done(self, session, gateway, scheduler):
        labels = []
        session.set_stage_callback(labels.append)

        def fire_stage_timer():
            for _ in range(len(SOURCE_ANALYSIS_STAGES) + 2):
                scheduler.fire("source-analysis-stages")

        gateway.on_analyze = fire_stage_timer

        session.analyze_source(VIDEO_URL)

        assert labels == [*SOURCE_ANALYSIS_STAGES, ""]
        assert scheduler.active_tasks("source-analysis-stages") == []
        assert session.status.stage == ""
        assert not session.status.in_progress
