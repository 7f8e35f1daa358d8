"""Custom exceptions for Comment Guard."""


class CommentGuardError(Exception):
    """Base exception for Comment Guard."""

    pass


class ValidationError(CommentGuardError):
    """Raised when input validation fails before any classification call."""

    pass


class AnalysisError(CommentGuardError):
    """Raised when a classification or source analysis fails."""

    pass


class GatewayError(AnalysisError):
    """Raised by a classification gateway on a transport or service fault."""

    pass


class TextAnalysisError(AnalysisError):
    """Raised when a bulk text analysis batch is aborted."""

    pass


class SourceFetchError(AnalysisError):
    """Raised when comments for a source reference cannot be fetched."""

    pass


class PollTransientFailure(CommentGuardError):
    """Raised inside the live monitor when a poll tick fails.

    Never propagated outside the monitor.
    """

    pass


class AnalysisBusyError(CommentGuardError):
    """Raised when an analysis is requested while another one is running."""

    pass
