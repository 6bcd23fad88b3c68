"""Configuration management using Pydantic Settings."""

from pathlib import Path
from typing import Optional

import structlog
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()


class ConfigError(Exception):
    """Raised when the loaded configuration cannot produce a digest."""


class TMDBConfig(BaseModel):
    """The Movie Database API settings."""

    api_key: str = ""
    base_url: str = "https://api.themoviedb.org/3"
    timeout: int = 30
    retries: int = Field(default=3, ge=1)
    retry_delay: float = 1.0  # Seconds, multiplied by the attempt number
    max_concurrent_requests: int = Field(default=2, ge=1)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "console"  # "console" or "json"


class Settings(BaseSettings):
    """Main settings container."""

    model_config = SettingsConfigDict(
        env_prefix="TVDIGEST_",
        env_nested_delimiter="__",
    )

    tmdb: TMDBConfig = Field(default_factory=TMDBConfig)
    streaming_networks: list[int] = Field(default_factory=list)
    tv_ids: list[int] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file."""
        import yaml

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls(**data) if data else cls()

    def ensure_runnable(self) -> None:
        """Check that a digest can be produced from these settings.

        Raises:
            ConfigError: If no series are tracked or the API key is missing
        """
        if not self.tv_ids:
            raise ConfigError("no tracked series configured (tv_ids is empty)")
        if not self.tmdb.api_key:
            raise ConfigError("TMDB API key is not configured (tmdb.api_key)")


DEFAULT_CONFIG_PATHS = [
    Path("config/config.yaml"),
    Path("config.yaml"),
    Path.home() / ".tvdigest" / "config.yaml",
]


def load_settings(config_path: Optional[Path]) -> Settings:
    """Load settings from file or defaults."""
    if config_path and config_path.exists():
        logger.info("loading_config", path=str(config_path))
        return Settings.from_yaml(config_path)

    for path in DEFAULT_CONFIG_PATHS:
        if path.exists():
            logger.info("loading_config", path=str(path))
            return Settings.from_yaml(path)

    logger.info("using_default_config")
    return Settings()
