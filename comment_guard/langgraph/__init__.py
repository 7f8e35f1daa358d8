"""LangGraph workflow components for comment classification."""

from .state import CommentState
from .workflow import get_compiled_workflow, process_comment

__all__ = ["CommentState", "get_compiled_workflow", "process_comment"]
