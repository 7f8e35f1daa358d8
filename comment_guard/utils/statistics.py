"""Utility functions for calculating comment statistics."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..models.category import Category
from ..models.record import ClassificationRecord


@dataclass
class AggregateStats:
    """Container for result set statistics."""

    total: int
    spam_count: int
    safe_count: int
    average_confidence: float
    category_breakdown: dict[Category, int] = field(default_factory=dict)

    @property
    def spam_rate(self) -> float:
        """Percentage of records flagged as spam."""
        return (self.spam_count / self.total * 100) if self.total > 0 else 0.0

    def to_display_string(self) -> str:
        """Format statistics for display in UI."""
        confidence = self.average_confidence
        if not math.isfinite(confidence):
            confidence = 0.0
        confidence_pct = min(100.0, max(0.0, confidence * 100))
        return (
            f"Scanned: {self.total} | Threats: {self.spam_count} | "
            f"Clean: {self.safe_count} | Avg. confidence: {confidence_pct:.0f}%"
        )


def calculate_category_breakdown(
    records: Iterable[ClassificationRecord],
) -> dict[Category, int]:
    """Count records per category, including zero counts.

    Args:
        records: Records to analyze

    Returns:
        Mapping of every category to its record count, in display order

    """
    breakdown = {category: 0 for category in Category}
    for record in records:
        breakdown[record.category] += 1
    return breakdown


def calculate_stats(records: list[ClassificationRecord]) -> AggregateStats:
    """Calculate aggregate statistics for a list of records.

    Args:
        records: Classified records to analyze

    Returns:
        AggregateStats object containing calculated statistics

    """
    total = len(records)

    if total == 0:
        return AggregateStats(
            total=0,
            spam_count=0,
            safe_count=0,
            average_confidence=0.0,
            category_breakdown=calculate_category_breakdown([]),
        )

    spam_count = sum(1 for r in records if r.is_spam)
    average_confidence = math.fsum(float(r.confidence) for r in records) / total

    return AggregateStats(
        total=total,
        spam_count=spam_count,
        safe_count=total - spam_count,
        average_confidence=average_confidence,
        category_breakdown=calculate_category_breakdown(records),
    )
