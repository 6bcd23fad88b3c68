"""The Movie Database (TMDB v3) client for fetching tracked series."""

import asyncio
from collections.abc import Iterable
from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from tvdigest import __version__
from tvdigest.core.config import TMDBConfig
from tvdigest.models.tv_show import Series

logger = structlog.get_logger()


class TMDBError(Exception):
    """Raised when a series cannot be fetched or parsed."""


class TMDBClient:
    """Client for the TMDB v3 TV endpoints."""

    def __init__(self, config: TMDBConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the TMDB client.

        Args:
            config: TMDB settings (API read access token, limits)
            transport: Optional httpx transport, used by tests to stub the API
        """
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=self._get_headers(),
            transport=transport,
        )

    async def __aenter__(self) -> "TMDBClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    def _get_headers(self) -> dict[str, str]:
        """Get request headers including authentication."""
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
            "User-Agent": f"tvdigest/{__version__}",
        }

    async def _get_json(self, path: str) -> dict:
        """GET a path, retrying transport failures.

        Raises:
            TMDBError: On an HTTP error status or once retries are exhausted
        """
        retries = self.config.retries
        last_error: Optional[httpx.TransportError] = None

        for attempt in range(1, retries + 1):
            try:
                response = await self._client.get(path)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as e:
                logger.error(
                    "tmdb_request_failed",
                    path=path,
                    status_code=e.response.status_code,
                    detail=e.response.text[:200],
                )
                raise TMDBError(
                    f"TMDB request {path} failed with status {e.response.status_code}"
                ) from e
            except httpx.TransportError as e:
                last_error = e
                if attempt < retries:
                    logger.warning(
                        "tmdb_request_retry",
                        path=path,
                        attempt=attempt,
                        max_attempts=retries,
                        error=str(e),
                    )
                    await asyncio.sleep(self.config.retry_delay * attempt)
            except ValueError as e:
                logger.error("tmdb_response_not_json", path=path)
                raise TMDBError(f"TMDB request {path} returned invalid JSON") from e

        logger.error("tmdb_request_all_retries_failed", path=path, attempts=retries)
        raise TMDBError(f"TMDB request {path} failed after {retries} attempts: {last_error}") from last_error

    async def get_series(self, series_id: int) -> Series:
        """
        Fetch one series with its last/next episode and networks.

        Args:
            series_id: TMDB tv id

        Returns:
            Parsed series

        Raises:
            TMDBError: If the request fails or the payload is malformed
        """
        data = await self._get_json(f"/tv/{series_id}")
        try:
            series = Series.model_validate(data)
        except ValidationError as e:
            logger.error("tmdb_payload_invalid", series_id=series_id, errors=e.error_count())
            raise TMDBError(f"Malformed TMDB payload for series {series_id}: {e}") from e

        logger.info(
            "series_fetched",
            series_id=series_id,
            name=series.name,
            has_last=series.last_episode_to_air is not None,
            has_next=series.next_episode_to_air is not None,
        )
        return series

    async def get_many(self, series_ids: Iterable[int]) -> list[Series]:
        """
        Fetch several series with bounded parallelism.

        Results keep the order of ``series_ids``. The first failure cancels
        the remaining fetches and is raised.
        """
        ids = list(series_ids)
        semaphore = asyncio.Semaphore(self.config.max_concurrent_requests)

        async def fetch(series_id: int) -> Series:
            async with semaphore:
                return await self.get_series(series_id)

        logger.info(
            "fetching_series",
            count=len(ids),
            max_concurrent=self.config.max_concurrent_requests,
        )
        tasks = [asyncio.ensure_future(fetch(series_id)) for series_id in ids]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
