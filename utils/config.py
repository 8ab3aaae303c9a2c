"""Configuration for the Kickstarter Graveyard web app.

Settings come from environment variables with defaults that work out of the
box, so a plain ``python main.py`` serves ``data/graveyard.json``.
"""

import os as _os
from pathlib import Path
from typing import Any, Dict

DEFAULT_DATA_PATH = "data/graveyard.json"


def _env_int(name: str, default: int) -> int:
    raw = _os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = _os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


class Config:
    """Base configuration class for organizing application settings."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary.

        Returns:
            Dictionary of all public config attributes
        """
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary, overriding the defaults.

        Args:
            data: Configuration dictionary

        Returns:
            Config instance with values from dictionary
        """
        config = cls()
        for key, value in data.items():
            setattr(config, key, value)
        return config


class AppConfig(Config):
    """Application-level configuration loaded from environment variables.

    Environment variables:
        APP_DATA_PATH: Dataset location, file path or http(s) URL
            (default: data/graveyard.json)
        APP_HOST: Server bind address (default: 127.0.0.1)
        APP_PORT: Server port (default: 8000)
        APP_LOG_FORMAT: Logging format, "text" or "json" (default: text)
        APP_CORS_ORIGINS: Comma-separated allowed origins (default: *)
        APP_FETCH_TIMEOUT: Seconds to wait when the dataset is a URL (default: 10)
        APP_VIEW_CACHE_SIZE: Number of memoised views kept (default: 256)
    """

    def __init__(self) -> None:
        self.data_path = _os.getenv("APP_DATA_PATH", DEFAULT_DATA_PATH)
        self.api_host = _os.getenv("APP_HOST", "127.0.0.1")
        self.api_port = _env_int("APP_PORT", 8000)
        self.log_format = _os.getenv("APP_LOG_FORMAT", "text").strip().lower()
        raw_origins = _os.getenv("APP_CORS_ORIGINS", "*")
        self.cors_origins: list[str] = (
            ["*"] if raw_origins.strip() == "*"
            else [o.strip() for o in raw_origins.split(",") if o.strip()]
        )
        self.fetch_timeout = _env_float("APP_FETCH_TIMEOUT", 10.0)
        self.view_cache_size = _env_int("APP_VIEW_CACHE_SIZE", 256)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()

    @property
    def data_source(self) -> str | Path:
        """``data_path`` as a Path, unless it is a URL."""
        if self.data_path.lower().startswith(("http://", "https://")):
            return self.data_path
        return Path(self.data_path)
