"""TMDB records and the values derived from them."""

from .summary import Report, SeriesSummary, WeeklyEntry, WeekWindow
from .tv_show import Episode, Network, Series

__all__ = [
    "Episode",
    "Network",
    "Report",
    "Series",
    "SeriesSummary",
    "WeeklyEntry",
    "WeekWindow",
]
