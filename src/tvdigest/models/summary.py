"""Values derived from the tracked series for one digest."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterator, Optional


@dataclass(frozen=True)
class WeekWindow:
    """Inclusive date range covering "this week".

    Normally Sunday through Saturday. Near the edges of the representable
    date range the bounds are clamped to ``date.min``/``date.max``, so the
    window can be shorter than seven days.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"week window starts after it ends: {self.start} > {self.end}")

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end

    @property
    def is_clamped(self) -> bool:
        """True when a bound was cut off by the representable date range."""
        return self.start == date.min or self.end == date.max

    def days(self) -> Iterator[date]:
        """Iterate over every date in the window."""
        day = self.start
        while True:
            yield day
            if day == self.end:
                return
            day += timedelta(days=1)


@dataclass(frozen=True)
class WeeklyEntry:
    """One episode landing inside the week window."""

    series_name: str
    air_date: date  # Effective date, after the streaming day shift
    season: int
    episode: int

    @property
    def label(self) -> str:
        """Episode code, e.g. S03E07."""
        return f"S{self.season:02d}E{self.episode:02d}"


@dataclass(frozen=True)
class SeriesSummary:
    """Raw last/next air dates for one tracked series."""

    name: str
    last_air: Optional[date] = None
    next_air: Optional[date] = None


@dataclass
class Report:
    """The weekly schedule and the per-series index for one digest."""

    week: WeekWindow
    this_week: dict[date, list[WeeklyEntry]] = field(default_factory=dict)
    all: list[SeriesSummary] = field(default_factory=list)

    @property
    def episode_count(self) -> int:
        return sum(len(entries) for entries in self.this_week.values())
