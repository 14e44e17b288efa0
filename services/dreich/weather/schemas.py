"""
OpenWeatherMap response schemas.

Wire-level models only. Nothing outside weather.mapper should import these;
callers work with WeatherObservation.

/weather returns a single observation:
  {
    "weather": [{"id": 310, "main": "Drizzle", "description": "light intensity drizzle rain", "icon": "09d"}, ...],
    "main":    {"temp": 282.48, "pressure": 1008, "humidity": 87, ...},
    "wind":    {"speed": 7.7, "deg": 240},
    "clouds":  {"all": 90},
    "dt":      1524473400,
    "name":    "Airdrie",
    ...
  }

/forecast returns 3-hour slots:
  {
    "city": {"id": 1851632, "name": "Shuzenji", "country": "JP", ...},
    "list": [
      {"dt": 1406106000, "main": {...}, "weather": [{...}], "dt_txt": "2014-07-23 09:00:00"},
      ...
    ]
  }

Unknown keys are ignored. Sub-objects the provider omits (wind, clouds,
rain, snow) default to None.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class CoordData(_ProviderModel):
    lon: float | None = None
    lat: float | None = None


class ConditionData(_ProviderModel):
    id: int | None = None
    main: str = ""
    description: str = ""
    icon: str = ""


class MainData(_ProviderModel):
    temp: float | None = None
    pressure: float | None = None
    humidity: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None


class WindData(_ProviderModel):
    speed: float | None = None
    deg: float | None = None


class CloudData(_ProviderModel):
    cloudiness: int | None = Field(default=None, alias="all")


class VolumeData(_ProviderModel):
    """Rain or snow volume. The provider reports either the last 1h or 3h."""

    one_hour: float | None = Field(default=None, alias="1h")
    three_hours: float | None = Field(default=None, alias="3h")


class CurrentWeatherResponse(_ProviderModel):
    coord: CoordData | None = None
    conditions: list[ConditionData] = Field(default_factory=list, alias="weather")
    main: MainData | None = None
    visibility: int | None = None
    wind: WindData | None = None
    clouds: CloudData | None = None
    rain: VolumeData | None = None
    snow: VolumeData | None = None
    dt: int | None = None
    id: int | None = None
    name: str = ""


class ForecastElement(_ProviderModel):
    dt: int | None = None
    main: MainData | None = None
    conditions: list[ConditionData] = Field(default_factory=list, alias="weather")
    wind: WindData | None = None
    clouds: CloudData | None = None
    rain: VolumeData | None = None
    snow: VolumeData | None = None
    dt_txt: str = ""


class CityData(_ProviderModel):
    id: int | None = None
    name: str = ""
    coord: CoordData | None = None
    country: str = ""


class ForecastResponse(_ProviderModel):
    city: CityData | None = None
    forecasts: list[ForecastElement] = Field(
        default_factory=list,
        validation_alias=AliasChoices("list", "forecasts"),
    )
