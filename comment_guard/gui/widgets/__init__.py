"""GUI widget components."""

from .input_panel import InputPanel
from .result_feed import ResultFeed
from .stats_panel import StatsPanel

__all__ = ["InputPanel", "ResultFeed", "StatsPanel"]
