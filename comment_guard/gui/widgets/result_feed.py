"""Newest-first feed of classified comments."""

from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from ...constants import CATEGORY_COLORS, FEED_EMPTY_MESSAGE, FEED_REASON_MAX_CHARS
from ...models.record import ClassificationRecord
from ..styles import FEED_STYLE


class ResultFeed(QWidget):
    """Widget listing classified comments, most recent first."""

    def __init__(self) -> None:
        super().__init__()
        self._init_ui()

    def _init_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        self._list = QListWidget()
        self._list.setWordWrap(True)
        self._list.setStyleSheet(FEED_STYLE)
        layout.addWidget(self._list)

        self.setLayout(layout)
        self.display_records([])

    def display_records(self, records: list[ClassificationRecord]) -> None:
        """Replace the feed contents with ``records``."""
        self._list.clear()

        if not records:
            self._list.addItem(QListWidgetItem(FEED_EMPTY_MESSAGE))
            return

        for record in records:
            item = QListWidgetItem(self._format_record(record))
            item.setForeground(QColor(CATEGORY_COLORS.get(record.category.value, "#212529")))
            item.setToolTip(record.reason)
            self._list.addItem(item)

    def _format_record(self, record: ClassificationRecord) -> str:
        verdict = "THREAT" if record.is_spam else "CLEAN"
        reason = record.reason
        if len(reason) > FEED_REASON_MAX_CHARS:
            reason = reason[:FEED_REASON_MAX_CHARS] + "..."
        return (
            f"[{verdict}] {record.category.display_name} "
            f"({record.display_confidence:.0%})\n"
            f"{record.text}\n"
            f"{reason}"
        )
