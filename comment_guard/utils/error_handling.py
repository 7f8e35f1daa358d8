"""Error payloads for LangGraph comment nodes.

Nodes never raise; a failing node returns one of these payloads and the
gateway turns the ``error`` field into a ``GatewayError``.
"""

from collections.abc import Mapping
from typing import Any


def create_error_response(
    error: Exception | str,
    category: str | None = None,
    confidence: float = 0.0,
) -> dict[str, Any]:
    """Build the state update a node returns when it cannot classify.

    Args:
        error: The failure, or a message describing it
        category: Category to report alongside the error, if any
        confidence: Confidence to report alongside the error

    Returns:
        Partial comment state with ``error`` set and no verdict

    """
    message = str(error) or "Unknown error"

    return {
        "error": message,
        "is_spam": None,
        "category": category,
        "confidence": confidence,
        "reason": f"Classification skipped: {message}",
    }


def check_state_for_errors(state: Mapping[str, Any]) -> bool:
    """Return True if an earlier node recorded an error."""
    return bool(state.get("error"))
