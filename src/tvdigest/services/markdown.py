"""Render a digest report as GitHub-flavoured markdown."""

from datetime import date
from typing import Optional

from tvdigest.models.summary import Report, SeriesSummary, WeeklyEntry

# Fixed English names so output does not depend on the process locale
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MISSING_DATE = "?"


def to_markdown(report: Report) -> str:
    """Render the "This Week" section followed by the "Currently Watching" table."""
    return to_markdown_this_week(report.this_week) + to_markdown_all_table(report.all)


def to_markdown_this_week(this_week: dict[date, list[WeeklyEntry]]) -> str:
    lines = ["# This Week", ""]
    for day, entries in this_week.items():
        lines.append(f"## {WEEKDAY_NAMES[day.weekday()]} ({day.isoformat()})")
        lines.extend(f"- {entry.series_name} {entry.label}" for entry in entries)
    return "\n".join(lines) + "\n\n"


def _format_date(day: Optional[date]) -> str:
    return day.isoformat() if day else MISSING_DATE


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


def to_markdown_all_table(summaries: list[SeriesSummary]) -> str:
    lines = [
        "# Currently Watching",
        "",
        "| Series | Last | Next |",
        "| --- | --- | --- |",
    ]
    for summary in summaries:
        lines.append(
            f"| {_escape_cell(summary.name)} "
            f"| {_format_date(summary.last_air)} "
            f"| {_format_date(summary.next_air)} |"
        )
    return "\n".join(lines) + "\n"
