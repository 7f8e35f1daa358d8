"""Helpers for recognising and parsing video source references."""

from ..config import SOURCE_HOST_PATTERN, SOURCE_ID_PATTERN, UNKNOWN_SOURCE_ID


def is_valid_source_reference(reference: str | None) -> bool:
    """Check that a reference points at a supported video host."""
    if not reference or not reference.strip():
        return False
    return SOURCE_HOST_PATTERN.search(reference) is not None


def extract_source_id(reference: str) -> str:
    """Extract the 11-character video id from a reference.

    The id is the first token following ``v=`` or a path separator.
    References without such a token yield ``"unknown"``.
    """
    match = SOURCE_ID_PATTERN.search(reference)
    return match.group(1) if match else UNKNOWN_SOURCE_ID
