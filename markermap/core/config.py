"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from markermap.schemas.map import Region


class Settings(BaseSettings):
    """Application settings loaded from environment variables and config files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App Info
    app_name: str = "Marker Map"

    # Database
    data_save_folder: str = "./data"
    db_file: str = "markers.db"
    sql_echo: bool = False

    @property
    def database_path(self) -> Path:
        """Location of the SQLite database file."""
        return Path(self.data_save_folder) / self.db_file

    @property
    def database_url(self) -> str:
        """SQLite database URL."""
        return f"sqlite+aiosqlite:///{self.database_path}"

    # Views
    # Re-fetch the marker list whenever the map screen regains focus
    refresh_list_on_focus: bool = False

    # Initial map region (overridable from the YAML map config)
    initial_latitude: float = 58.010455
    initial_longitude: float = 56.229443
    initial_latitude_delta: float = 0.0922
    initial_longitude_delta: float = 0.0421

    # Map Config File
    map_cfg_path: str | None = None


class MapConfig:
    """Map configuration loaded from YAML file (map.yml)."""

    def __init__(self, config_path: str | None = None):
        self._config: dict[str, Any] = {}
        if config_path:
            self.load(config_path)

    def load(self, config_path: str) -> None:
        """Load configuration from YAML file."""
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                self._config = yaml.safe_load(f) or {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key."""
        return self._config.get(key, default)

    def initial_region(self, settings: Settings) -> Region:
        """Initial map region, falling back to the settings defaults.

        The YAML file may carry an ``initial_region`` mapping with any of
        ``latitude``, ``longitude``, ``latitude_delta``, ``longitude_delta``.
        """
        region = self._config.get("initial_region") or {}
        return Region(
            latitude=region.get("latitude", settings.initial_latitude),
            longitude=region.get("longitude", settings.initial_longitude),
            latitude_delta=region.get("latitude_delta", settings.initial_latitude_delta),
            longitude_delta=region.get(
                "longitude_delta", settings.initial_longitude_delta
            ),
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_map_config() -> MapConfig:
    """Get cached map config instance."""
    settings = get_settings()
    return MapConfig(settings.map_cfg_path)
