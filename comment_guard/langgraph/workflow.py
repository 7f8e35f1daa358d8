from typing import Any, cast

from langgraph.graph import StateGraph
from langgraph.graph.state import CompiledStateGraph

from ..utils.error_handling import check_state_for_errors
from .nodes.classifier import classify_comment
from .nodes.comment_preparer import prepare_comment
from .nodes.mock_classifier import mock_classify_comment
from .state import CommentState


def get_compiled_workflow(use_mock: bool = False) -> CompiledStateGraph[CommentState, Any]:
    """Get or create the compiled workflow.

    Args:
        use_mock: Use the keyword-heuristic classifier instead of OpenAI

    Returns:
        Compiled LangGraph workflow

    """
    workflow = StateGraph(CommentState)

    workflow.add_node("prepare_comment", prepare_comment)
    workflow.add_node(
        "classify", mock_classify_comment if use_mock else classify_comment
    )

    # Skip classification when preparation already failed
    def route_after_prepare(state: CommentState) -> str:
        if check_state_for_errors(state):
            return "end"
        return "classify"

    workflow.add_conditional_edges(
        "prepare_comment",
        route_after_prepare,
        {
            "classify": "classify",
            "end": "__end__",
        },
    )

    workflow.set_entry_point("prepare_comment")
    workflow.set_finish_point("classify")

    return workflow.compile()


def create_initial_state(text: str) -> CommentState:
    """Create initial state for comment classification.

    Args:
        text: Raw comment text

    Returns:
        Initial comment state

    """
    return {
        "text": text,
        "prepared_text": None,
        "is_spam": None,
        "confidence": None,
        "category": None,
        "reason": None,
        "error": None,
    }


def process_comment(text: str, use_mock: bool = False) -> CommentState:
    """Classify a single comment through the workflow.

    Args:
        text: Comment to classify
        use_mock: Use the keyword-heuristic classifier

    Returns:
        Comment state after processing

    """
    app = get_compiled_workflow(use_mock=use_mock)
    result = app.invoke(create_initial_state(text))
    return cast(CommentState, result)
