"""
Tests for aggregate statistics.
"""

import math

import pytest

from comment_guard.models.category import Category
from comment_guard.utils.statistics import (
    AggregateStats,
    calculate_category_breakdown,
    calculate_stats,
)
from conftest import make_record


@pytest.fixture
def mixed_records():
    """Create a result set with every kind of verdict."""
    return [
        make_record("buy followers", is_spam=True, confidence=0.9, category=Category.SPAM),
        make_record("telegram me", is_spam=True, confidence=0.95, category=Category.SCAM),
        make_record("my channel", is_spam=True, confidence=0.7, category=Category.SELF_PROMOTION),
        make_record("loved it", confidence=0.8),
        make_record("great editing", confidence=0.65),
    ]


class TestCalculateStats:
    """Test calculate_stats."""

    def test_empty_result_set(self):
        """No records yields zeros rather than NaN."""
        stats = calculate_stats([])

        assert stats.total == 0
        assert stats.spam_count == 0
        assert stats.safe_count == 0
        assert stats.average_confidence == 0.0
        assert set(stats.category_breakdown) == set(Category)
        assert all(count == 0 for count in stats.category_breakdown.values())
        assert stats.spam_rate == 0.0

    def test_mixed_records(self, mixed_records):
        stats = calculate_stats(mixed_records)

        assert stats.total == 5
        assert stats.spam_count == 3
        assert stats.safe_count == 2
        assert stats.average_confidence == pytest.approx((0.9 + 0.95 + 0.7 + 0.8 + 0.65) / 5)
        assert stats.spam_rate == pytest.approx(60.0)

    def test_breakdown_sums_to_total(self, mixed_records):
        breakdown = calculate_category_breakdown(mixed_records)

        assert sum(breakdown.values()) == len(mixed_records)
        assert breakdown[Category.BOT] == 0
        assert breakdown[Category.SAFE] == 2

    def test_out_of_range_confidence_is_averaged_as_is(self):
        """Stored confidences are not clamped before averaging."""
        stats = calculate_stats([make_record(confidence=1.5), make_record(confidence=0.5)])
        assert stats.average_confidence == pytest.approx(1.0)


class TestDisplayString:
    """Test AggregateStats.to_display_string."""

    def test_format(self):
        stats = AggregateStats(total=4, spam_count=1, safe_count=3, average_confidence=0.8)
        assert stats.to_display_string() == (
            "Scanned: 4 | Threats: 1 | Clean: 3 | Avg. confidence: 80%"
        )

    @pytest.mark.parametrize(
        "confidence, expected", [(1.7, "100%"), (-0.2, "0%"), (math.nan, "0%")]
    )
    def test_confidence_is_clamped(self, confidence, expected):
        stats = AggregateStats(total=1, spam_count=0, safe_count=1, average_confidence=confidence)
        assert stats.to_display_string().endswith(expected)
