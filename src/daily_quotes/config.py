"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

ENVIRONMENTS = ("production", "development")
KNOWN_SOURCES = ("quotable", "zenquotes", "dummyjson", "typefit")


@dataclass
class TransportConfig:
    """How requests reach upstream providers."""
    environment: str = "production"
    proxy_base: str = "http://localhost:5173/api"
    timeout: float = 8.0
    verify_tls: bool = True

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def base_url_for(self, source_name: str, direct_base: str) -> str:
        """Base URL for a source: direct in production, via the proxy in development."""
        if self.is_development:
            return f"{self.proxy_base.rstrip('/')}/{source_name}"
        return direct_base


@dataclass
class HistoryConfig:
    """Recent-history window settings."""
    capacity: int = 10
    accept_duplicates_when_exhausted: bool = True


@dataclass
class SourcesConfig:
    """Source order and per-source switches."""
    order: list[str] = field(default_factory=lambda: list(KNOWN_SOURCES))
    disabled: list[str] = field(default_factory=list)

    @property
    def enabled(self) -> list[str]:
        return [name for name in self.order if name not in self.disabled]


@dataclass
class FavoritesConfig:
    """Favorites storage settings."""
    path: Path = Path("favorites.yaml")


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "WARNING"
    json: bool = False


@dataclass
class Settings:
    """Application settings."""

    transport: TransportConfig = field(default_factory=TransportConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    favorites: FavoritesConfig = field(default_factory=FavoritesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def environment(self) -> str:
        return self.transport.environment

    @property
    def timeout(self) -> float:
        return self.transport.timeout

    @property
    def history_capacity(self) -> int:
        return self.history.capacity

    @property
    def favorites_path(self) -> Path:
        return self.favorites.path

    def validate(self) -> None:
        """Reject values the quote service cannot run with."""
        if self.transport.environment not in ENVIRONMENTS:
            raise ValueError(
                f"Unknown environment '{self.transport.environment}', expected one of {ENVIRONMENTS}"
            )
        if self.transport.timeout <= 0:
            raise ValueError("transport.timeout must be positive")
        if not isinstance(self.history.capacity, int) or self.history.capacity <= 0:
            raise ValueError("history.capacity must be a positive integer")

        unknown = [name for name in [*self.sources.order, *self.sources.disabled] if name not in KNOWN_SOURCES]
        if unknown:
            raise ValueError(f"Unknown quote sources: {', '.join(unknown)}")


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Optional[Path] = None) -> Settings:
    """Get application settings from YAML config and environment."""
    if config_path is None:
        config_path = Path(os.getenv("DAILY_QUOTES_CONFIG", "config.yaml"))

    config = load_config(config_path)
    settings = Settings()

    if "transport" in config:
        for key, value in config["transport"].items():
            setattr(settings.transport, key, value)

    if "history" in config:
        for key, value in config["history"].items():
            setattr(settings.history, key, value)

    if "sources" in config:
        settings.sources = SourcesConfig(**config["sources"])

    if "favorites" in config:
        for key, value in config["favorites"].items():
            setattr(settings.favorites, key, Path(value) if key == "path" else value)

    if "logging" in config:
        for key, value in config["logging"].items():
            setattr(settings.logging, key, value)

    # Environment overrides
    environment = os.getenv("DAILY_QUOTES_ENV")
    if environment:
        settings.transport.environment = environment.strip().lower()

    settings.validate()
    return settings
