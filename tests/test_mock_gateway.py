"""
Tests for the heuristic classifier, the workflow and the offline gateway.
"""

from collections import Counter

import pytest

from comment_guard.exceptions import GatewayError
from comment_guard.langgraph.nodes.mock_classifier import mock_classify_comment
from comment_guard.langgraph.workflow import process_comment
from comment_guard.models.category import Category
from comment_guard.services.gateway import ClassificationGateway, create_gateway
from comment_guard.services.mock_gateway import LIVE_COMMENTS, MockGateway


@pytest.fixture
def gateway():
    """Create a seeded offline gateway."""
    return MockGateway(seed=7)


class TestMockClassifier:
    """Test the keyword heuristics."""

    @pytest.mark.parametrize(
        "text, category",
        [
            ("Message me on Telegram for crypto signals", "Scam"),
            ("sub4sub? I always sub back", "Spam"),
            ("Check out my channel for more tutorials like this one", "Self-Promotion"),
            ("free stuff at https://example.com", "Spam"),
            ("Nice video", "Bot"),
            ("I never thought about sorting this way, the diagrams really helped", "Safe"),
        ],
    )
    def test_categories(self, text, category):
        result = mock_classify_comment({"text": text, "prepared_text": text})

        assert result["category"] == category
        assert result["is_spam"] is (category != "Safe")
        assert 0.0 <= result["confidence"] <= 1.0

    def test_skips_on_prior_error(self):
        assert mock_classify_comment({"text": "x", "error": "boom"}) == {}


class TestWorkflow:
    """Test the compiled LangGraph workflow with the mock classifier."""

    def test_process_comment(self):
        result = process_comment("  DM me on   whatsapp  ", use_mock=True)

        assert result["prepared_text"] == "DM me on whatsapp"
        assert result["category"] == "Scam"
        assert result["error"] is None

    def test_blank_comment_stops_before_classification(self):
        result = process_comment("   ", use_mock=True)

        assert result["error"]
        assert result["category"] is None


class TestMockGateway:
    """Test MockGateway against the gateway contract."""

    def test_satisfies_protocol(self, gateway):
        assert isinstance(gateway, ClassificationGateway)

    def test_classify_sample(self, gateway):
        record = gateway.classify_sample("sub 4 sub anyone?")

        assert record.text == "sub 4 sub anyone?"
        assert record.category is Category.SPAM
        assert record.is_spam

    def test_classify_blank_sample_raises(self, gateway):
        with pytest.raises(GatewayError):
            gateway.classify_sample("   ")

    def test_analyze_source_mix(self, gateway):
        records = gateway.analyze_source("https://youtu.be/dQw4w9WgXcQ")

        counts = Counter(r.category for r in records)
        assert len(records) == 6
        assert counts == {
            Category.SAFE: 2,
            Category.SCAM: 1,
            Category.SPAM: 1,
            Category.BOT: 1,
            Category.SELF_PROMOTION: 1,
        }
        assert len({r.id for r in records}) == 6

    def test_poll_recent(self, gateway):
        for _ in range(5):
            records = gateway.poll_recent("https://youtu.be/dQw4w9WgXcQ")
            assert 1 <= len(records) <= 2
            assert all(r.text in LIVE_COMMENTS for r in records)

    def test_seeded_polls_repeat(self):
        first = MockGateway(seed=3).poll_recent("ref")
        second = MockGateway(seed=3).poll_recent("ref")
        assert [r.text for r in first] == [r.text for r in second]


class TestCreateGateway:
    """Test gateway selection."""

    def test_forced_mock(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert isinstance(create_gateway(use_mock=True), MockGateway)

    def test_falls_back_without_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        assert isinstance(create_gateway(), MockGateway)

    def test_openai_required_without_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ValueError):
            create_gateway(use_mock=False)
