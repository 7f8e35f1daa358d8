"""Configuration settings for Comment Guard."""

import re
from re import Pattern

# Model configuration
MODEL_CONFIG: dict[str, str | float | int] = {
    "classification_model": "gpt-4o-mini",
    "simulation_model": "gpt-4o-mini",
    "temperature": 0.1,
    "simulation_temperature": 0.9,
    "max_tokens": 1000,
}

# Comment categories, in display order
CATEGORY_NAMES = ["Spam", "Scam", "Self-Promotion", "Bot", "Safe"]

# Bulk analysis: lines whose stripped length is at or below this are noise
MIN_SAMPLE_LENGTH = 3

# Longest comment forwarded to the classifier
MAX_COMMENT_CHARS = 2000

# Live monitoring
POLL_INTERVAL_SECONDS = 8.0

# Source analysis progress feedback
SOURCE_STAGE_INTERVAL_SECONDS = 0.8
SOURCE_MIN_DURATION_SECONDS = 3.2
SOURCE_ANALYSIS_STAGES = [
    "Locating video metadata...",
    "Accessing comment stream...",
    "Running AI security scan...",
    "Finalizing analysis results...",
]
TEXT_ANALYSIS_STAGE = "Analyzing text content..."

# Source reference recognition
SOURCE_HOST_PATTERN: Pattern = re.compile(r"youtube\.com|youtu\.be")
SOURCE_ID_PATTERN: Pattern = re.compile(r"(?:v=|/)([a-zA-Z0-9_-]{11})")
UNKNOWN_SOURCE_ID = "unknown"
DEFAULT_SOURCE_TITLE = "Latest Video Insights & Discussions"
DEFAULT_SOURCE_CHANNEL = "Verified Creator Content"

# Simulated feed sizes
SOURCE_SAMPLE_SIZE = 6
POLL_MAX_NEW_COMMENTS = 2

# User-facing error messages
TEXT_ANALYSIS_FAILED_MESSAGE = "Analysis failed. Please check your connection."
SOURCE_FETCH_FAILED_MESSAGE = "Failed to fetch from URL. The video might be restricted."
INVALID_SOURCE_MESSAGE = "Please enter a valid YouTube URL."
ANALYSIS_BUSY_MESSAGE = "An analysis is already in progress."

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = "INFO"
