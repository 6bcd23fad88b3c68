"""Pytest configuration and fixtures for tvdigest tests."""

from datetime import date
from typing import Optional

import pytest
import structlog

from tvdigest.models.tv_show import Episode, Network, Series

STREAMING = 123
BROADCAST = 456


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration done by the CLI under test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_episode():
    """Factory for episodes."""

    def _make(air_date: date, season: int = 1, episode: int = 1) -> Episode:
        return Episode(air_date=air_date, season_number=season, episode_number=episode)

    return _make


@pytest.fixture
def make_series():
    """Factory for series, on the streaming network unless told otherwise."""

    def _make(
        name: str,
        last: Optional[Episode] = None,
        next: Optional[Episode] = None,
        networks: tuple[int, ...] = (STREAMING,),
        series_id: int = 0,
    ) -> Series:
        return Series(
            id=series_id,
            name=name,
            last_episode_to_air=last,
            next_episode_to_air=next,
            networks=[Network(id=network_id) for network_id in networks],
        )

    return _make


@pytest.fixture
def tv_payload():
    """TMDB /tv/{id} payload, trimmed to the fields tvdigest reads plus a few extras."""

    def _payload(series_id: int, name: str, next_air: Optional[str] = "2022-05-03") -> dict:
        return {
            "id": series_id,
            "name": name,
            "status": "Returning Series",
            "last_episode_to_air": {
                "id": series_id * 10,
                "name": "Previously",
                "overview": "",
                "air_date": "2022-04-26",
                "episode_number": 4,
                "season_number": 2,
                "runtime": 45,
            },
            "next_episode_to_air": None
            if next_air is None
            else {
                "id": series_id * 10 + 1,
                "name": "Coming Up",
                "overview": "",
                "air_date": next_air,
                "episode_number": 5,
                "season_number": 2,
                "runtime": None,
            },
            "networks": [{"id": STREAMING, "name": "Streamer", "logo_path": None}],
        }

    return _payload
