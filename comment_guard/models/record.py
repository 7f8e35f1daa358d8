"""Classification record data model."""

import math
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from .category import Category


def generate_record_id() -> str:
    """Generate a new opaque record identifier."""
    return str(uuid4())


@dataclass(frozen=True)
class ClassificationRecord:
    """One classified comment.

    Records are created from gateway responses and never mutated afterwards.
    ``confidence`` is expected in [0, 1] but is stored exactly as received;
    use :attr:`display_confidence` for anything shown to a user.
    """

    text: str
    is_spam: bool
    confidence: float
    category: Category
    reason: str = ""
    id: str = field(default_factory=generate_record_id)

    @property
    def display_confidence(self) -> float:
        """Confidence clamped to [0, 1]; non-finite values read as 0."""
        try:
            value = float(self.confidence)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(value):
            return 0.0
        return min(1.0, max(0.0, value))

    @classmethod
    def from_payload(
        cls, payload: dict[str, Any], text: str | None = None
    ) -> "ClassificationRecord":
        """Build a record from a gateway payload.

        Args:
            payload: Mapping using the gateway field names
                (``isSpam``, ``confidence``, ``category``, ``reason``, ``text``)
            text: Sample text; overrides ``payload["text"]`` when given

        Returns:
            A new record with a freshly generated id

        """
        is_spam = bool(payload.get("isSpam", False))
        category = Category.from_string(payload.get("category"))
        if category is None:
            category = Category.SPAM if is_spam else Category.SAFE

        try:
            confidence = float(payload.get("confidence", 0.0))
        except (TypeError, ValueError):
            confidence = 0.0

        return cls(
            text=text if text is not None else str(payload.get("text", "")),
            is_spam=is_spam,
            confidence=confidence,
            category=category,
            reason=str(payload.get("reason") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert record to the gateway wire shape."""
        return {
            "id": self.id,
            "text": self.text,
            "isSpam": self.is_spam,
            "confidence": self.confidence,
            "category": self.category.value,
            "reason": self.reason,
        }
