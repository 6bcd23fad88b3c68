"""TV show models as returned by The Movie Database."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Network(BaseModel):
    """A network a series is distributed on."""

    id: int
    name: str = ""


class Episode(BaseModel):
    """An episode from TMDB (last aired or next to air)."""

    air_date: date  # "YYYY-MM-DD" in the API payload
    season_number: int = Field(ge=0)
    episode_number: int = Field(ge=0)
    id: Optional[int] = None
    name: Optional[str] = None
    overview: Optional[str] = None
    runtime: Optional[int] = None  # Duration in minutes


class Series(BaseModel):
    """A tracked series with at most one last and one next episode."""

    id: int
    name: str
    last_episode_to_air: Optional[Episode] = None
    next_episode_to_air: Optional[Episode] = None
    networks: list[Network] = Field(default_factory=list)

    @property
    def network_ids(self) -> set[int]:
        """Ids of all networks the series is distributed on."""
        return {network.id for network in self.networks}

    @property
    def episodes(self) -> list[Episode]:
        """The present episode slots, last before next."""
        return [
            episode
            for episode in (self.last_episode_to_air, self.next_episode_to_air)
            if episode is not None
        ]
