"""Main entry point for tvdigest."""

import asyncio
from datetime import date
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console

from tvdigest import __version__
from tvdigest.core.config import ConfigError, LoggingConfig, Settings, load_settings
from tvdigest.core.logging import configure_logging
from tvdigest.models.summary import Report
from tvdigest.services.markdown import to_markdown
from tvdigest.services.schedule import today
from tvdigest.services.summary import build_report
from tvdigest.services.tmdb_client import TMDBClient, TMDBError

app = typer.Typer(
    name="tvdigest",
    help="tvdigest - This week's episodes of the series you watch",
)
console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger()


async def generate_report(settings: Settings, reference_date: date) -> Report:
    """Fetch the tracked series and build the digest report."""
    async with TMDBClient(settings.tmdb) as client:
        series = await client.get_many(settings.tv_ids)

    return build_report(reference_date, series, settings.streaming_networks)


def _parse_date(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}") from None


def _setup(config: Optional[Path]) -> Settings:
    configure_logging(LoggingConfig())
    settings = load_settings(config)
    configure_logging(settings.logging)
    return settings


@app.command()
def run(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
    ),
    on: Optional[str] = typer.Option(
        None,
        "--date",
        "-d",
        help="Reference date (YYYY-MM-DD), defaults to today (UTC)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the markdown here instead of stdout",
    ),
) -> None:
    """Fetch tracked series and print this week's digest as markdown."""
    reference_date = _parse_date(on)
    settings = _setup(config)

    try:
        settings.ensure_runnable()
        report = asyncio.run(generate_report(settings, reference_date or today()))
    except ConfigError as e:
        err_console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(code=1)
    except TMDBError as e:
        err_console.print(f"[red]Fetch failed:[/red] {e}")
        raise typer.Exit(code=1)

    md = to_markdown(report)
    if output:
        output.write_text(md, encoding="utf-8")
        logger.info("digest_written", path=str(output), episodes=report.episode_count)
    else:
        typer.echo(md, nl=False)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"tvdigest v{__version__}")


@app.command()
def check(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
    ),
) -> None:
    """Check the configuration."""
    console.print("[bold]tvdigest - Configuration Check[/bold]\n")

    settings = _setup(config)

    if settings.tmdb.api_key:
        console.print("[green][OK][/green] TMDB API key configured")
    else:
        console.print("[red][X][/red] TMDB API key missing (tmdb.api_key)")

    if settings.tv_ids:
        console.print(f"[green][OK][/green] Tracking {len(settings.tv_ids)} series")
    else:
        console.print("[red][X][/red] No tracked series (tv_ids)")

    if settings.streaming_networks:
        console.print(
            f"[green][OK][/green] {len(settings.streaming_networks)} streaming networks configured"
        )
    else:
        console.print("[yellow][!][/yellow] No streaming networks configured")
        console.print("  (Every episode will be shifted one day later)")

    try:
        settings.ensure_runnable()
    except ConfigError:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
