"""Tests for app configuration.

Tests config loading, environment overrides, and defaults.
"""

import pytest

from tutorials.config.app_config import (
    CONFIG_FILE,
    DEFAULT_MONGO_URL,
    AppConfig,
    DatabaseConfig,
    ServerConfig,
    clear_config_cache,
    load_app_config,
)


class TestLoadAppConfig:
    """Tests for load_app_config function."""

    def test_load_config_from_yaml(self):
        """Loads config from app_config_v1.yaml."""
        config = load_app_config()
        assert isinstance(config, AppConfig)
        assert isinstance(config.database, DatabaseConfig)
        assert isinstance(config.server, ServerConfig)

    def test_config_is_cached(self):
        assert load_app_config() is load_app_config()

    def test_force_reload(self):
        first = load_app_config()
        assert load_app_config(force_reload=True) is not first

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        """Built-in defaults apply when no config file exists."""
        monkeypatch.chdir(tmp_path)
        config = load_app_config(force_reload=True)
        assert config.database.url == DEFAULT_MONGO_URL
        assert config.database.collection == "tutorials"
        assert config.server.port == 8080
        assert config.server.cors_origins == ["http://localhost:8081"]

    def test_yaml_values(self, tmp_path, monkeypatch):
        """Values from the YAML file are used."""
        monkeypatch.chdir(tmp_path)
        config_file = tmp_path / CONFIG_FILE
        config_file.parent.mkdir(parents=True)
        config_file.write_text(
            "database:\n"
            "  url: mongodb://db:27017/school\n"
            "  collection: lessons\n"
            "server:\n"
            "  port: 9000\n",
            encoding="utf-8",
        )

        config = load_app_config(force_reload=True)
        assert config.database.url == "mongodb://db:27017/school"
        assert config.database.collection == "lessons"
        assert config.server.port == 9000
        assert config.server.host == "0.0.0.0"


class TestEnvironmentOverrides:
    """MONGO_URL and PORT override file values."""

    def test_mongo_url_override(self, monkeypatch):
        monkeypatch.setenv("MONGO_URL", "mongodb://mongo:27017/other_db")
        clear_config_cache()
        config = load_app_config()
        assert config.database.url == "mongodb://mongo:27017/other_db"
        assert config.database.get_database_name() == "other_db"

    def test_port_override(self, monkeypatch):
        monkeypatch.setenv("PORT", "3000")
        config = load_app_config(force_reload=True)
        assert config.server.port == 3000


class TestDatabaseConfig:
    """Tests for DatabaseConfig."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("mongodb://localhost:27017/tutorials_db", "tutorials_db"),
            ("mongodb://localhost:27017", "tutorials_db"),
            ("mongodb://user:pw@host:27017/app?authSource=admin", "app"),
        ],
    )
    def test_database_name_from_url(self, url, expected):
        assert DatabaseConfig(url=url).get_database_name() == expected

    def test_explicit_name_wins(self):
        config = DatabaseConfig(url="mongodb://localhost:27017/a", name="b")
        assert config.get_database_name() == "b"


class TestConfigFile:
    """Tests for config file existence."""

    def test_config_file_exists(self):
        """Config file exists."""
        assert CONFIG_FILE.exists(), f"Missing: {CONFIG_FILE}"
