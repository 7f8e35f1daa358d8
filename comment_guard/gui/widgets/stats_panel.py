"""Statistics panel widget for the aggregate view of analyzed comments."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from ...constants import (
    CATEGORY_COLORS,
    STAT_COLOR_NEUTRAL,
    STAT_COLOR_SAFE,
    STAT_COLOR_SPAM,
)
from ...models.category import Category
from ...utils.statistics import AggregateStats
from ..styles import (
    ACTIVITY_LOG_STYLE,
    STAT_LABEL_STYLE,
    category_bar_style,
    stat_value_style,
)


class StatsPanel(QWidget):
    """Panel for displaying aggregate statistics and the category breakdown.

    Shows totals, the average confidence, one bar per category and an
    activity log for analysis events.
    """

    def __init__(self) -> None:
        """Initialize the statistics panel."""
        super().__init__()
        self._init_ui()

    def _init_ui(self) -> None:
        """Initialize the user interface."""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        # Totals section
        stats_group = QGroupBox("Statistics")
        stats_layout = QHBoxLayout()

        self.stats_labels = {
            "total": self._create_stat_widget(
                "Scanned", "0", stats_layout, STAT_COLOR_NEUTRAL
            ),
            "spam": self._create_stat_widget(
                "Threats", "0", stats_layout, STAT_COLOR_SPAM
            ),
            "safe": self._create_stat_widget(
                "Clean", "0", stats_layout, STAT_COLOR_SAFE
            ),
            "confidence": self._create_stat_widget(
                "Avg. Confidence", "0%", stats_layout, STAT_COLOR_NEUTRAL
            ),
        }

        stats_group.setLayout(stats_layout)
        layout.addWidget(stats_group)

        # Category breakdown section
        breakdown_group = QGroupBox("Threat Categories")
        breakdown_layout = QVBoxLayout()

        self.category_bars: dict[Category, QProgressBar] = {}
        for category in Category:
            row = QHBoxLayout()
            name_label = QLabel(category.display_name)
            name_label.setMinimumWidth(120)
            row.addWidget(name_label)

            bar = QProgressBar()
            bar.setTextVisible(True)
            bar.setFormat("%v")
            bar.setMaximum(1)
            bar.setValue(0)
            bar.setStyleSheet(category_bar_style(CATEGORY_COLORS[category.value]))
            row.addWidget(bar, 1)

            breakdown_layout.addLayout(row)
            self.category_bars[category] = bar

        breakdown_group.setLayout(breakdown_layout)
        layout.addWidget(breakdown_group)

        # Activity log section
        log_group = QGroupBox("Activity Log")
        log_layout = QVBoxLayout()

        self.activity_log = QTextEdit()
        self.activity_log.setReadOnly(True)
        self.activity_log.setStyleSheet(ACTIVITY_LOG_STYLE)
        log_layout.addWidget(self.activity_log)

        log_group.setLayout(log_layout)
        layout.addWidget(log_group, 1)

        self.setLayout(layout)

    def _create_stat_widget(
        self,
        label: str,
        value: str,
        parent_layout: QHBoxLayout,
        color: str | None = None,
    ) -> QLabel:
        """Create a statistics widget.

        Args:
            label: The statistic label
            value: The initial value
            parent_layout: Layout to add the widget to
            color: Optional color for the value

        Returns:
            The value label for updates

        """
        container = QWidget()
        layout = QVBoxLayout()
        layout.setContentsMargins(10, 5, 10, 5)
        layout.setSpacing(2)

        label_widget = QLabel(label)
        label_widget.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label_widget.setStyleSheet(STAT_LABEL_STYLE)
        layout.addWidget(label_widget)

        value_widget = QLabel(value)
        value_widget.setAlignment(Qt.AlignmentFlag.AlignCenter)
        value_widget.setStyleSheet(stat_value_style(color))
        layout.addWidget(value_widget)

        container.setLayout(layout)
        parent_layout.addWidget(container)

        return value_widget

    def update_statistics(self, stats: AggregateStats) -> None:
        """Update all statistics displays.

        Args:
            stats: Freshly computed aggregate statistics

        """
        confidence_pct = min(100.0, max(0.0, stats.average_confidence * 100))
        self.stats_labels["total"].setText(str(stats.total))
        self.stats_labels["spam"].setText(str(stats.spam_count))
        self.stats_labels["safe"].setText(str(stats.safe_count))
        self.stats_labels["confidence"].setText(f"{confidence_pct:.0f}%")

        maximum = max(1, stats.total)
        for category, bar in self.category_bars.items():
            bar.setMaximum(maximum)
            bar.setValue(stats.category_breakdown.get(category, 0))

    def add_log_entry(self, message: str) -> None:
        """Add an entry to the activity log."""
        self.activity_log.append(message)
        scrollbar = self.activity_log.verticalScrollBar()
        if scrollbar:
            scrollbar.setValue(scrollbar.maximum())
