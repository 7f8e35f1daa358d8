"""Comment Guard - AI-powered spam detection for video comment feeds."""

from .config import CATEGORY_NAMES, MODEL_CONFIG
from .exceptions import (
    AnalysisBusyError,
    AnalysisError,
    CommentGuardError,
    GatewayError,
    PollTransientFailure,
    SourceFetchError,
    TextAnalysisError,
    ValidationError,
)

__version__ = "0.1.0"
__all__ = [
    "CATEGORY_NAMES",
    "MODEL_CONFIG",
    "AnalysisBusyError",
    "AnalysisError",
    "CommentGuardError",
    "GatewayError",
    "PollTransientFailure",
    "SourceFetchError",
    "TextAnalysisError",
    "ValidationError",
]
