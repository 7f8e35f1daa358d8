"""Input panel with the link and manual-paste analysis modes."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QLabel,
    QLineEdit,
    QPushButton,
    QTabWidget,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from ...constants import (
    BUTTON_STYLE_PRIMARY,
    MANUAL_INPUT_MIN_HEIGHT,
    STAGE_LABEL_MAX_HEIGHT,
    TAB_LINK,
    TAB_MANUAL,
)
from ..styles import STAGE_LABEL_STYLE


class InputPanel(QWidget):
    """Collects either a video URL or pasted comments.

    Emits a request signal when the user starts an analysis; the window
    decides how to run it.
    """

    source_analysis_requested = pyqtSignal(str)  # video URL
    text_analysis_requested = pyqtSignal(str)  # pasted comments

    def __init__(self) -> None:
        super().__init__()
        self._busy = False
        self._init_ui()

    def _init_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        self.tabs = QTabWidget()

        # Link mode
        link_widget = QWidget()
        link_layout = QVBoxLayout()
        self.link_input = QLineEdit()
        self.link_input.setPlaceholderText("Paste YouTube Video Link...")
        self.link_input.textChanged.connect(self._update_buttons)
        self.link_input.returnPressed.connect(self._request_source_analysis)
        link_layout.addWidget(self.link_input)

        self.scan_btn = QPushButton("Initialize Scan")
        self.scan_btn.setStyleSheet(BUTTON_STYLE_PRIMARY)
        self.scan_btn.clicked.connect(self._request_source_analysis)
        link_layout.addWidget(self.scan_btn)
        link_layout.addStretch()
        link_widget.setLayout(link_layout)

        # Manual mode
        manual_widget = QWidget()
        manual_layout = QVBoxLayout()
        self.text_input = QTextEdit()
        self.text_input.setPlaceholderText("Paste comments here (one per line)...")
        self.text_input.setMinimumHeight(MANUAL_INPUT_MIN_HEIGHT)
        self.text_input.textChanged.connect(self._update_buttons)
        manual_layout.addWidget(self.text_input)

        self.analyze_btn = QPushButton("Analyze Bulk Text")
        self.analyze_btn.setStyleSheet(BUTTON_STYLE_PRIMARY)
        self.analyze_btn.clicked.connect(self._request_text_analysis)
        manual_layout.addWidget(self.analyze_btn)
        manual_widget.setLayout(manual_layout)

        self.tabs.addTab(link_widget, TAB_LINK)
        self.tabs.addTab(manual_widget, TAB_MANUAL)
        layout.addWidget(self.tabs)

        self.stage_label = QLabel("")
        self.stage_label.setMaximumHeight(STAGE_LABEL_MAX_HEIGHT)
        self.stage_label.setStyleSheet(STAGE_LABEL_STYLE)
        layout.addWidget(self.stage_label)

        self.setLayout(layout)
        self._update_buttons()

    def _request_source_analysis(self) -> None:
        url = self.link_input.text()
        if self._busy or not url.strip():
            return
        self.source_analysis_requested.emit(url)

    def _request_text_analysis(self) -> None:
        text = self.text_input.toPlainText()
        if self._busy or not text.strip():
            return
        self.text_analysis_requested.emit(text)

    def _update_buttons(self) -> None:
        self.scan_btn.setEnabled(not self._busy and bool(self.link_input.text().strip()))
        self.analyze_btn.setEnabled(
            not self._busy and bool(self.text_input.toPlainText().strip())
        )
        self.analyze_btn.setText("Processing..." if self._busy else "Analyze Bulk Text")

    def set_busy(self, busy: bool) -> None:
        """Enable or disable input while an analysis runs."""
        self._busy = busy
        if not busy:
            self.stage_label.setText("")
        self._update_buttons()

    def set_stage(self, label: str) -> None:
        self.stage_label.setText(label)

    def clear_link(self) -> None:
        self.link_input.clear()

    def clear_text(self) -> None:
        self.text_input.clear()
