"""Stylesheets shared by the Comment Guard dashboard widgets."""

from ..constants import MONOSPACE_FONT_STACK

# Application-wide defaults, applied once on the QApplication
APP_STYLESHEET = """
    QGroupBox {
        font-size: 15px;
        font-weight: bold;
    }
    QGroupBox::title {
        subcontrol-origin: margin;
        padding: 0 3px;
    }
    QLabel {
        font-size: 14px;
    }
"""

MAIN_WINDOW_STYLE = """
    QMainWindow {
        background-color: #fafafa;
    }
    QTabWidget::pane {
        border: 1px solid #e0e0e0;
        background-color: white;
    }
    QTabBar::tab {
        padding: 6px 14px;
    }
    QTabBar::tab:selected {
        background-color: white;
        border-bottom: 2px solid #cc0000;
    }
"""

ERROR_LABEL_STYLE = """
    QLabel {
        padding: 8px;
        background-color: #f8d7da;
        border: 1px solid #f5c2c7;
        border-radius: 3px;
        color: #842029;
    }
"""

FEED_STYLE = """
    QListWidget {
        background-color: #f8f9fa;
        border: 1px solid #dee2e6;
        font-size: 13px;
    }
    QListWidget::item {
        padding: 6px;
        border-bottom: 1px solid #e9ecef;
    }
"""

_LOG_FONT = MONOSPACE_FONT_STACK.split(",")[0].strip("'")

ACTIVITY_LOG_STYLE = f"""
    QTextEdit {{
        background-color: #f8f9fa;
        border: 1px solid #dee2e6;
        font-family: {_LOG_FONT};
        font-size: 12px;
    }}
"""

TITLE_LABEL_STYLE = "font-size: 24px; font-weight: bold; margin-bottom: 10px;"
MUTED_LABEL_STYLE = "color: #666;"
STAGE_LABEL_STYLE = "font-style: italic; color: #666;"
STAT_LABEL_STYLE = "font-size: 12px; color: #666;"


def stat_value_style(color: str | None = None) -> str:
    """Style for a large statistic value, optionally colored."""
    style = "font-size: 20px; font-weight: bold;"
    if color:
        style += f" color: {color};"
    return style


def category_bar_style(color: str) -> str:
    return f"QProgressBar::chunk {{ background-color: {color}; }}"


def create_title_label(text: str):
    """Create a standardized title label."""
    from PyQt6.QtWidgets import QLabel

    label = QLabel(text)
    label.setStyleSheet(TITLE_LABEL_STYLE)
    return label
