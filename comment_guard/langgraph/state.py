from typing import TypedDict


class CommentState(TypedDict):
    """State that flows through the LangGraph workflow."""

    # Input fields
    text: str
    prepared_text: str | None

    # Classification results
    is_spam: bool | None
    confidence: float | None
    category: str | None  # "Spam", "Scam", "Self-Promotion", "Bot", "Safe"
    reason: str | None

    # Workflow control
    error: str | None
