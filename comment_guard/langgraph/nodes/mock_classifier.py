"""Mock classifier for running without an OpenAI API key.

This simulates moderation decisions with simple keyword heuristics.
"""

import re

from ...utils.error_handling import check_state_for_errors
from ..state import CommentState

SCAM_TERMS = [
    "telegram",
    "whatsapp",
    "t.me/",
    "crypto",
    "bitcoin",
    "btc",
    "forex",
    "investment",
    "profit",
    "giveaway",
    "send me",
]
SPAM_TERMS = ["sub4sub", "sub 4 sub", "like4like", "sub back", "subscribe back", "click here", "free followers"]
PROMOTION_TERMS = ["my channel", "check out my", "my latest video", "follow me", "my new song", "visit my"]
BOT_PHRASES = ["nice video", "great video", "great content", "amazing video", "love this video", "awesome video", "keep it up"]

LINK_PATTERN = re.compile(r"https?://|www\.", re.IGNORECASE)


def _contains_any(content: str, terms: list[str]) -> bool:
    return any(term in content for term in terms)


def mock_classify_comment(state: CommentState) -> dict:
    """Mock classify comment for testing."""
    if check_state_for_errors(state):
        return {}

    content = (state.get("prepared_text") or state.get("text") or "").lower()

    if _contains_any(content, SCAM_TERMS):
        is_spam = True
        category = "Scam"
        confidence = 0.95
        reason = "Mentions off-platform contact or financial schemes typical of crypto and investment scams."
    elif _contains_any(content, SPAM_TERMS):
        is_spam = True
        category = "Spam"
        confidence = 0.92
        reason = "Contains engagement-farming phrases such as sub4sub requests."
    elif _contains_any(content, PROMOTION_TERMS):
        is_spam = True
        category = "Self-Promotion"
        confidence = 0.81
        reason = "Advertises the author's own channel or content instead of engaging with the video."
    elif LINK_PATTERN.search(content):
        is_spam = True
        category = "Spam"
        confidence = 0.74
        reason = "Contains an external link with no other context."
    elif len(content) < 40 and _contains_any(content, BOT_PHRASES):
        is_spam = True
        category = "Bot"
        confidence = 0.68
        reason = "Short generic praise that could be posted under any video."
    else:
        is_spam = False
        category = "Safe"
        confidence = 0.88
        reason = "Reads as genuine engagement with the video."

    return {
        "is_spam": is_spam,
        "confidence": confidence,
        "category": category,
        "reason": reason,
    }
