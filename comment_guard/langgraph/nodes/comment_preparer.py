from ...config import MAX_COMMENT_CHARS
from ...utils.error_handling import create_error_response
from ..state import CommentState


def prepare_comment(state: CommentState) -> dict:
    """Normalize comment text before classification.

    Args:
        state: Comment state containing the raw text

    Returns:
        Dict with prepared text or error

    """
    text = state.get("text") or ""
    prepared = " ".join(text.split())

    if not prepared:
        return create_error_response("Comment contains only whitespace")

    if len(prepared) > MAX_COMMENT_CHARS:
        prepared = prepared[:MAX_COMMENT_CHARS]

    return {"prepared_text": prepared}
