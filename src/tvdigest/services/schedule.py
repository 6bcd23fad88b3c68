"""Week boundaries and effective air dates."""

from collections.abc import Collection
from datetime import date, datetime, timezone

from tvdigest.models.summary import WeekWindow
from tvdigest.models.tv_show import Episode, Series

_MIN_ORDINAL = date.min.toordinal()
_MAX_ORDINAL = date.max.toordinal()


def today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def _from_ordinal(ordinal: int) -> date:
    """Build a date from a proleptic ordinal, clamped to the representable range."""
    return date.fromordinal(min(max(ordinal, _MIN_ORDINAL), _MAX_ORDINAL))


def saturating_add_days(day: date, days: int) -> date:
    """Add days to a date, saturating at date.min/date.max instead of overflowing."""
    return _from_ordinal(day.toordinal() + days)


def compute_week(day: date) -> WeekWindow:
    """Return the Sunday-to-Saturday week containing ``day``.

    ISO weeks start on Monday, so a Sunday is first pushed into the following
    ISO week. The window is then that ISO week shifted back by one day.
    Bounds falling outside the representable range are clamped.

    Args:
        day: Reference date

    Returns:
        Inclusive week window
    """
    probe = saturating_add_days(day, 1) if day.isoweekday() == 7 else day
    monday = probe.toordinal() - probe.weekday()
    start = _from_ordinal(monday - 1)
    end = _from_ordinal(monday + 6 - 1)
    return WeekWindow(start=start, end=end)


def adjust_air_date(series: Series, episode: Episode, streaming_networks: Collection[int]) -> date:
    """Effective air date used to place an episode in the weekly schedule.

    TMDB dates line up with streaming releases. Series on none of the
    streaming networks are shown one day later.
    """
    if series.network_ids.intersection(streaming_networks):
        return episode.air_date
    return saturating_add_days(episode.air_date, 1)
