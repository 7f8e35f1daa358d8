"""Comment category types."""

from enum import Enum


class Category(str, Enum):
    """Comment categories returned by the classifier."""

    SPAM = "Spam"
    SCAM = "Scam"
    SELF_PROMOTION = "Self-Promotion"
    BOT = "Bot"
    SAFE = "Safe"

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return self.value.replace("-", " ")

    @property
    def is_malicious(self) -> bool:
        return self is not Category.SAFE

    @classmethod
    def from_string(cls, value: str | None) -> "Category | None":
        """Create Category from a string value, ignoring case and separators."""
        if not value:
            return None
        normalized = value.strip().lower().replace("_", "-").replace(" ", "-")
        for category in cls:
            if category.value.lower() == normalized:
                return category
        return None
