"""Entry point for the Comment Guard dashboard."""

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from PyQt6.QtWidgets import QApplication

from .config import LOG_FORMAT, LOG_LEVEL
from .constants import APP_STYLE
from .gui.main_window import MainWindow
from .gui.styles import APP_STYLESHEET
from .services.gateway import create_gateway

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Log to stdout and keep HTTP client chatter out of the console."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, stream=sys.stdout)
    for name in ("httpx", "httpcore", "openai"):
        logging.getLogger(name).setLevel(logging.WARNING)


def main() -> None:
    """Launch the Comment Guard dashboard."""
    setup_logging()

    # .env may live next to the package (source checkout) or in the cwd
    load_dotenv(Path(__file__).parent.parent / ".env")
    load_dotenv()

    gateway = create_gateway()
    logger.info(f"Using {type(gateway).__name__} for classification")

    app = QApplication(sys.argv)
    app.setStyle(APP_STYLE)
    app.setStyleSheet(APP_STYLESHEET)

    window = MainWindow(gateway)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
