"""
Tests for Settings: defaults, JSON config file, environment overrides.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from services.dreich.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for var in (
        "OPEN_WEATHER_MAP_APPID", "APP_ID", "DREICH_DEFAULT_LOCATION",
        "DREICH_CACHE_DIR", "DREICH_CACHE_TTL_S", "DREICH_LOG_LEVEL", "DREICH_BASE_URL",
    ):
        monkeypatch.delenv(var, raising=False)


def _settings_with_file(path: Path) -> type[Settings]:
    class FileSettings(Settings):
        model_config = {**Settings.model_config, "json_file": path, "env_file": None}

    return FileSettings


class TestDefaults:
    def test_defaults(self, clean_env, tmp_path):
        cfg = _settings_with_file(tmp_path / "missing.json")()
        assert cfg.app_id == ""
        assert cfg.default_location == "London,uk"
        assert cfg.cache_ttl_s == 300
        assert cfg.base_url == "http://api.openweathermap.org/data/2.5"
        assert cfg.cache_dir == Path.home() / ".dreich" / "cache"

    def test_cache_dir_home_expanded(self, clean_env):
        cfg = Settings(cache_dir="~/weather-cache")
        assert cfg.cache_dir == Path.home() / "weather-cache"

    def test_invalid_log_level_rejected(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")


class TestConfigFile:
    def test_values_read_from_json(self, clean_env, tmp_path):
        path = tmp_path / "dreich.conf.json"
        path.write_text(json.dumps({"app_id": "file-key", "default_location": "Glasgow,uk"}))

        cfg = _settings_with_file(path)()

        assert cfg.app_id == "file-key"
        assert cfg.default_location == "Glasgow,uk"

    def test_unknown_keys_ignored(self, clean_env, tmp_path):
        path = tmp_path / "dreich.conf.json"
        path.write_text(json.dumps({"app_id": "file-key", "units": "metric"}))
        assert _settings_with_file(path)().app_id == "file-key"

    def test_env_overrides_file(self, clean_env, monkeypatch, tmp_path):
        path = tmp_path / "dreich.conf.json"
        path.write_text(json.dumps({"app_id": "file-key", "default_location": "Glasgow,uk"}))
        monkeypatch.setenv("OPEN_WEATHER_MAP_APPID", "env-key")
        monkeypatch.setenv("DREICH_DEFAULT_LOCATION", "Oban,uk")

        cfg = _settings_with_file(path)()

        assert cfg.app_id == "env-key"
        assert cfg.default_location == "Oban,uk"

    def test_kwargs_override_everything(self, clean_env, monkeypatch, tmp_path):
        path = tmp_path / "dreich.conf.json"
        path.write_text(json.dumps({"app_id": "file-key"}))
        monkeypatch.setenv("OPEN_WEATHER_MAP_APPID", "env-key")
        assert _settings_with_file(path)(app_id="kwarg-key").app_id == "kwarg-key"


class TestEnvironment:
    def test_cache_ttl_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("DREICH_CACHE_TTL_S", "60")
        assert Settings().cache_ttl_s == 60

    def test_negative_ttl_rejected(self, clean_env, monkeypatch):
        monkeypatch.setenv("DREICH_CACHE_TTL_S", "-1")
        with pytest.raises(ValidationError):
            Settings()
