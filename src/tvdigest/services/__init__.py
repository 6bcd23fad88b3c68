"""Digest services - week window, aggregation, TMDB client, markdown rendering."""

from .markdown import to_markdown
from .schedule import adjust_air_date, compute_week, today
from .summary import build_index, build_report, build_week
from .tmdb_client import TMDBClient, TMDBError

__all__ = [
    "TMDBClient",
    "TMDBError",
    "adjust_air_date",
    "build_index",
    "build_report",
    "build_week",
    "compute_week",
    "to_markdown",
    "today",
]
