from datetime import datetime

from PyQt6.QtCore import QObject, Qt, pyqtSignal
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from ..constants import (
    BUTTON_STYLE_MONITOR_ACTIVE,
    BUTTON_STYLE_SECONDARY,
    MAIN_LAYOUT_MARGINS,
    MONITOR_ACTIVE_LABEL,
    MONITOR_START_LABEL,
    SPLITTER_SIZES,
    TIME_FORMAT,
    WINDOW_INITIAL_POSITION,
    WINDOW_INITIAL_SIZE,
    WINDOW_TITLE,
)
from ..processing.session import DetectorSession
from ..processing.worker import AnalysisWorker
from ..services.gateway import ClassificationGateway
from .styles import (
    ERROR_LABEL_STYLE,
    MAIN_WINDOW_STYLE,
    MUTED_LABEL_STYLE,
    create_title_label,
)
from .widgets.input_panel import InputPanel
from .widgets.result_feed import ResultFeed
from .widgets.stats_panel import StatsPanel


class SessionSignals(QObject):
    """Re-emits session callbacks as Qt signals.

    Session callbacks fire on worker and timer threads; queued signal
    delivery moves the updates onto the GUI thread.
    """

    results_changed = pyqtSignal()
    stage_changed = pyqtSignal(str)


class MainWindow(QMainWindow):
    """Main application window for the comment moderation dashboard.

    Hosts the input modes, the live-defense toggle, the result feed and the
    aggregate statistics for a single detector session.
    """

    def __init__(self, gateway: ClassificationGateway) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setGeometry(
            WINDOW_INITIAL_POSITION[0],
            WINDOW_INITIAL_POSITION[1],
            WINDOW_INITIAL_SIZE[0],
            WINDOW_INITIAL_SIZE[1],
        )

        self.session = DetectorSession(gateway)
        self.worker: AnalysisWorker | None = None

        self._signals = SessionSignals()
        self.session.set_results_callback(self._signals.results_changed.emit)
        self.session.set_stage_callback(self._signals.stage_changed.emit)

        self._init_ui()
        self._connect_signals()
        self.setStyleSheet(MAIN_WINDOW_STYLE)
        self._refresh_results()
        self._update_monitor_controls()

    def _init_ui(self) -> None:
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(*MAIN_LAYOUT_MARGINS)

        # Header
        header = QHBoxLayout()
        header.addWidget(create_title_label("AI Moderation Engine"))
        header.addStretch()

        self.source_label = QLabel("")
        self.source_label.setStyleSheet(MUTED_LABEL_STYLE)
        header.addWidget(self.source_label)

        self.monitor_btn = QPushButton(MONITOR_START_LABEL)
        self.monitor_btn.clicked.connect(self._toggle_monitoring)
        header.addWidget(self.monitor_btn)

        self.clear_btn = QPushButton("Clear Log")
        self.clear_btn.setStyleSheet(BUTTON_STYLE_SECONDARY)
        self.clear_btn.clicked.connect(self._clear_log)
        header.addWidget(self.clear_btn)
        layout.addLayout(header)

        # Error banner (at most one message at a time)
        self.error_label = QLabel("")
        self.error_label.setStyleSheet(ERROR_LABEL_STYLE)
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        splitter = QSplitter()
        splitter.setOrientation(Qt.Orientation.Horizontal)

        # Left side - input and feed
        left_widget = QWidget()
        left_layout = QVBoxLayout()
        left_layout.setContentsMargins(0, 0, 10, 0)
        self.input_panel = InputPanel()
        left_layout.addWidget(self.input_panel)
        self.result_feed = ResultFeed()
        left_layout.addWidget(self.result_feed, 1)
        left_widget.setLayout(left_layout)
        splitter.addWidget(left_widget)

        # Right side - statistics
        self.stats_panel = StatsPanel()
        splitter.addWidget(self.stats_panel)
        splitter.setSizes(SPLITTER_SIZES)

        layout.addWidget(splitter, 1)

    def _connect_signals(self) -> None:
        self.input_panel.source_analysis_requested.connect(self._start_source_analysis)
        self.input_panel.text_analysis_requested.connect(self._start_text_analysis)
        self._signals.results_changed.connect(self._refresh_results)
        self._signals.stage_changed.connect(self.input_panel.set_stage)

    def _start_source_analysis(self, url: str) -> None:
        self._log(f"Scanning source: {url.strip()}")
        self._start_worker(AnalysisWorker.MODE_SOURCE, url)

    def _start_text_analysis(self, text: str) -> None:
        self._log("Analyzing pasted comments")
        self._start_worker(AnalysisWorker.MODE_TEXT, text)

    def _start_worker(self, mode: str, value: str) -> None:
        if self.worker is not None and self.worker.isRunning():
            return

        self._show_error(None)
        self.input_panel.set_busy(True)
        self._update_monitor_controls()

        self.worker = AnalysisWorker(self.session, mode, value)
        self.worker.analysis_complete.connect(self._on_analysis_complete)
        self.worker.error_occurred.connect(self._on_analysis_error)
        self.worker.finished.connect(self._on_worker_finished)
        self.worker.start()

    def _on_analysis_complete(self, count: int) -> None:
        mode = self.worker.mode if self.worker else AnalysisWorker.MODE_TEXT
        if mode == AnalysisWorker.MODE_SOURCE:
            self.input_panel.clear_link()
        elif count:
            self.input_panel.clear_text()
        self._log(f"Analysis complete: {count} comments")

    def _on_analysis_error(self, message: str) -> None:
        self._show_error(message)
        self._log(f"Error: {message}")

    def _on_worker_finished(self) -> None:
        self.input_panel.set_busy(False)
        self._update_monitor_controls()

    def _toggle_monitoring(self) -> None:
        running = self.session.toggle_monitoring()
        self._log("Live defense started" if running else "Live defense stopped")
        self._update_monitor_controls()

    def _clear_log(self) -> None:
        self.session.clear_log()
        self._show_error(None)
        self._update_monitor_controls()
        self._log("Log cleared")

    def _refresh_results(self) -> None:
        self.result_feed.display_records(self.session.records())
        self.stats_panel.update_statistics(self.session.stats())

    def _update_monitor_controls(self) -> None:
        source = self.session.active_source
        busy = self.worker is not None and self.worker.isRunning()

        self.monitor_btn.setVisible(source is not None)
        self.monitor_btn.setEnabled(not busy)
        self.source_label.setText(source.label if source else "")

        if self.session.is_monitoring:
            self.monitor_btn.setText(MONITOR_ACTIVE_LABEL)
            self.monitor_btn.setStyleSheet(BUTTON_STYLE_MONITOR_ACTIVE)
        else:
            self.monitor_btn.setText(MONITOR_START_LABEL)
            self.monitor_btn.setStyleSheet(BUTTON_STYLE_SECONDARY)

    def _show_error(self, message: str | None) -> None:
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime(TIME_FORMAT)
        self.stats_panel.add_log_entry(f"[{timestamp}] {message}")

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop live monitoring before the window closes."""
        self.session.shutdown()
        if self.worker is not None and self.worker.isRunning():
            self.worker.wait()
        super().closeEvent(event)
