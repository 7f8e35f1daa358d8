"""Constants used throughout the Comment Guard application."""

# Window configuration
WINDOW_TITLE = "COMMENT GUARD"
WINDOW_INITIAL_SIZE = (1280, 860)
WINDOW_INITIAL_POSITION = (100, 100)

# Application styling
APP_STYLE = "Fusion"

# Input tab names
TAB_LINK = "Analyze Link"
TAB_MANUAL = "Manual Paste"

# GUI Layout constants
SPLITTER_SIZES = [700, 500]  # feed, statistics
MANUAL_INPUT_MIN_HEIGHT = 140
STAGE_LABEL_MAX_HEIGHT = 30
MAIN_LAYOUT_MARGINS = (20, 20, 20, 20)

# Monitoring toggle labels
MONITOR_START_LABEL = "Start Live Defense"
MONITOR_ACTIVE_LABEL = "Live Defense Active"

# Time format
TIME_FORMAT = "%H:%M:%S"

# Feed display
FEED_REASON_MAX_CHARS = 160
FEED_EMPTY_MESSAGE = "No comments analyzed yet."

# Button styling
BUTTON_STYLE_PRIMARY = """
    QPushButton {
        padding: 10px 30px;
        background-color: #cc0000;
        color: white;
        border: none;
        border-radius: 3px;
        font-size: 16px;
        font-weight: bold;
    }
    QPushButton:hover:enabled {
        background-color: #a30000;
    }
    QPushButton:disabled {
        background-color: #cccccc;
    }
"""

BUTTON_STYLE_SECONDARY = """
    QPushButton {
        padding: 5px 15px;
        background-color: #343a40;
        color: white;
        border: none;
        border-radius: 3px;
    }
    QPushButton:hover:enabled {
        background-color: #23272b;
    }
    QPushButton:disabled {
        background-color: #cccccc;
        color: #666666;
    }
"""

BUTTON_STYLE_MONITOR_ACTIVE = """
    QPushButton {
        padding: 5px 15px;
        background-color: #cc0000;
        color: white;
        border: none;
        border-radius: 3px;
        font-weight: bold;
    }
"""

# Font settings
MONOSPACE_FONT_STACK = "'Courier New', Courier, Monaco, 'Lucida Console', monospace"

# Category display colors
CATEGORY_COLORS = {
    "Scam": "#dc3545",
    "Spam": "#fd7e14",
    "Bot": "#6f42c1",
    "Self-Promotion": "#0d6efd",
    "Safe": "#28a745",
}

# Statistics display colors
STAT_COLOR_SPAM = "#dc3545"
STAT_COLOR_SAFE = "#28a745"
STAT_COLOR_NEUTRAL = "#6c757d"
