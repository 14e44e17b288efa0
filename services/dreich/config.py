"""
Application configuration via pydantic-settings.

Values come from (highest priority first) constructor kwargs, environment
variables, a local .env file and the JSON config file at ~/.dreich.conf.json
(override the path with DREICH_CONFIG). A missing config file is fine.

Example ~/.dreich.conf.json:
  {"app_id": "0123456789abcdef", "default_location": "Glasgow,uk"}
"""

import os
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, JsonConfigSettingsSource

CONFIG_FILE = Path(os.environ.get("DREICH_CONFIG", "~/.dreich.conf.json")).expanduser()


class Settings(BaseSettings):
    # App
    app_name: str = "dreich"
    app_version: str = "0.1.0"
    log_level: str = Field(default="WARNING", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    # OpenWeatherMap
    # The credential keeps the env var name the tool has always used.
    app_id: str = Field(
        default="",
        validation_alias=AliasChoices("app_id", "open_weather_map_appid"),
    )
    base_url: str = "http://api.openweathermap.org/data/2.5"
    weather_api_timeout_s: float = Field(default=8.0, gt=0)

    # Queries
    default_location: str = "London,uk"

    # Response cache
    cache_dir: Path = Path("~/.dreich/cache").expanduser()
    cache_ttl_s: int = Field(default=300, ge=0)

    @field_validator("cache_dir")
    @classmethod
    def expand_home(cls, v: Path) -> Path:
        return v.expanduser()

    model_config = {
        "env_prefix": "DREICH_",
        "env_file": ".env",
        "extra": "ignore",
        "json_file": CONFIG_FILE,
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


settings = Settings()
