"""Weekly schedule and series index built from fetched series."""

from collections import defaultdict
from collections.abc import Collection, Iterable, Sequence
from datetime import date

import structlog

from tvdigest.models.summary import Report, SeriesSummary, WeeklyEntry, WeekWindow
from tvdigest.models.tv_show import Series
from tvdigest.services.schedule import adjust_air_date, compute_week

logger = structlog.get_logger()


def to_weekly_entries(series: Series, streaming_networks: Collection[int]) -> list[WeeklyEntry]:
    """Candidate entries for the last and next episode of a series, if present."""
    return [
        WeeklyEntry(
            series_name=series.name,
            air_date=adjust_air_date(series, episode, streaming_networks),
            season=episode.season_number,
            episode=episode.episode_number,
        )
        for episode in series.episodes
    ]


def _collect_week(
    window: WeekWindow,
    series: Iterable[Series],
    streaming_networks: Collection[int],
) -> dict[date, list[WeeklyEntry]]:
    by_date: dict[date, list[WeeklyEntry]] = defaultdict(list)
    for tv in series:
        for entry in to_weekly_entries(tv, streaming_networks):
            if entry.air_date in window:
                by_date[entry.air_date].append(entry)

    return {
        day: sorted(by_date[day], key=lambda e: (e.series_name, e.season, e.episode))
        for day in sorted(by_date)
    }


def build_week(
    reference_date: date,
    series: Iterable[Series],
    streaming_networks: Collection[int],
) -> dict[date, list[WeeklyEntry]]:
    """Group this week's episodes by effective air date.

    Args:
        reference_date: Any date inside the wanted week
        series: Tracked series
        streaming_networks: Network ids exempt from the one-day shift

    Returns:
        Mapping of date to entries, ascending by date, only dates with
        entries; entries within a date sorted by series name, then
        season and episode
    """
    return _collect_week(compute_week(reference_date), series, streaming_networks)


def to_series_summary(series: Series) -> SeriesSummary:
    """Raw (unshifted) last/next air dates of a series."""
    return SeriesSummary(
        name=series.name,
        last_air=series.last_episode_to_air.air_date if series.last_episode_to_air else None,
        next_air=series.next_episode_to_air.air_date if series.next_episode_to_air else None,
    )


def build_index(series: Iterable[Series]) -> list[SeriesSummary]:
    """One summary per series, stably sorted by name."""
    return sorted((to_series_summary(tv) for tv in series), key=lambda s: s.name)


def build_report(
    reference_date: date,
    series: Sequence[Series],
    streaming_networks: Collection[int],
) -> Report:
    """Build the weekly schedule and series index for one digest."""
    window = compute_week(reference_date)
    report = Report(
        week=window,
        this_week=_collect_week(window, series, streaming_networks),
        all=build_index(series),
    )
    logger.debug(
        "report_built",
        reference_date=reference_date.isoformat(),
        week_start=window.start.isoformat(),
        week_end=window.end.isoformat(),
        series=len(report.all),
        episodes=report.episode_count,
        days=len(report.this_week),
    )
    return report
