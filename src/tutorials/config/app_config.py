"""Application configuration loader.

Loads configuration from data/config/app_config_v1.yaml, falling back to
built-in defaults. Environment variables override the file:

- MONGO_URL: database connection string
- PORT: HTTP port

Usage:
    from tutorials.config.app_config import load_app_config

    config = load_app_config()
    url = config.database.url
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("data/config/app_config_v1.yaml")

DEFAULT_MONGO_URL = "mongodb://localhost:27017/tutorials_db"
DEFAULT_DB_NAME = "tutorials_db"

MONGO_URL_ENV = "MONGO_URL"
PORT_ENV = "PORT"


@dataclass
class DatabaseConfig:
    """Backing store connection settings."""

    url: str = DEFAULT_MONGO_URL
    name: str = ""
    collection: str = "tutorials"
    server_selection_timeout_ms: int = 5000

    def get_database_name(self) -> str:
        """Explicit name, else the path component of the URL."""
        if self.name:
            return self.name
        path = urlparse(self.url).path.lstrip("/")
        return path or DEFAULT_DB_NAME


@dataclass
class ServerConfig:
    """HTTP server settings."""

    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:8081"]
    )


@dataclass
class AppConfig:
    """Application-wide configuration."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    def to_dict(self) -> dict[str, Any]:
        return {
            "database": {
                "url": self.database.url,
                "name": self.database.get_database_name(),
                "collection": self.database.collection,
                "server_selection_timeout_ms": self.database.server_selection_timeout_ms,
            },
            "server": {
                "host": self.server.host,
                "port": self.server.port,
                "cors_origins": list(self.server.cors_origins),
            },
        }


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "database": {
            "url": DEFAULT_MONGO_URL,
            "name": "",
            "collection": "tutorials",
            "server_selection_timeout_ms": 5000,
        },
        "server": {
            "host": "0.0.0.0",
            "port": 8080,
            "cors_origins": ["http://localhost:8081"],
        },
    }


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    db_data = data.get("database") or {}
    database = DatabaseConfig(
        url=db_data.get("url", DEFAULT_MONGO_URL),
        name=db_data.get("name") or "",
        collection=db_data.get("collection", "tutorials"),
        server_selection_timeout_ms=int(
            db_data.get("server_selection_timeout_ms", 5000)
        ),
    )

    server_data = data.get("server") or {}
    server = ServerConfig(
        host=server_data.get("host", "0.0.0.0"),
        port=int(server_data.get("port", 8080)),
        cors_origins=list(
            server_data.get("cors_origins", ["http://localhost:8081"])
        ),
    )

    return AppConfig(database=database, server=server)


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    """Apply MONGO_URL and PORT from the environment."""
    mongo_url = os.environ.get(MONGO_URL_ENV)
    if mongo_url:
        config.database.url = mongo_url

    port = os.environ.get(PORT_ENV)
    if port:
        config.server.port = int(port)

    return config


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    data: dict[str, Any]

    if CONFIG_FILE.exists():
        logger.debug("loading_app_config", source=str(CONFIG_FILE))
        data = yaml.safe_load(CONFIG_FILE.read_text(encoding="utf-8")) or {}
    else:
        logger.info("using_default_config")
        data = _get_defaults()

    _cached_config = _apply_env_overrides(_parse_config(data))
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
