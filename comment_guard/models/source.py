"""Active source data model."""

from dataclasses import dataclass

from ..config import DEFAULT_SOURCE_CHANNEL, DEFAULT_SOURCE_TITLE


@dataclass(frozen=True)
class ActiveSource:
    """The video currently bound for analysis and live monitoring."""

    source_id: str
    url: str
    title: str = DEFAULT_SOURCE_TITLE
    channel: str = DEFAULT_SOURCE_CHANNEL

    @property
    def label(self) -> str:
        """Short label for status bars."""
        return f"{self.title} ({self.source_id})"
