# ABOUTME: Immutable Pydantic models for the normalized weather snapshot.
# ABOUTME: Temperatures are Celsius, wind km/h, precipitation mm; conversion happens only at display time.

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A resolved place with coordinates and its IANA timezone."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str = ""
    latitude: float
    longitude: float
    timezone: str = ""


class CurrentConditions(BaseModel):
    """Instantaneous conditions at request time."""

    model_config = ConfigDict(frozen=True)

    temperature: float
    apparent_temperature: float
    weather_code: int
    wind_speed: float
    precipitation: float


class HourlyPoint(BaseModel):
    """One hour of forecast data, timestamped in the location's local time."""

    model_config = ConfigDict(frozen=True)

    time: datetime
    temperature: float | None = None
    weather_code: int | None = None
    wind_speed: float | None = None
    precipitation_probability: float | None = None
    uv_index: float | None = None


class DailyPoint(BaseModel):
    """One day of forecast data."""

    model_config = ConfigDict(frozen=True)

    date: date
    max_temp: float | None = None
    min_temp: float | None = None
    weather_code: int | None = None
    sunrise: datetime | None = None
    sunset: datetime | None = None
    uv_index_max: float | None = None
    precipitation_sum: float | None = None


class AirQuality(BaseModel):
    model_config = ConfigDict(frozen=True)

    us_aqi: int | None = None


class Forecast(BaseModel):
    """Shaped forecast response, before it is joined with air quality."""

    model_config = ConfigDict(frozen=True)

    timezone: str
    utc_offset_seconds: int = 0
    current: CurrentConditions
    hourly: tuple[HourlyPoint, ...] = ()
    daily: tuple[DailyPoint, ...] = ()


class CityWeather(BaseModel):
    """Complete weather snapshot for one location.

    A new lookup always produces a new snapshot; nothing is updated in place.
    ``daily[0]`` is today and must exist.
    """

    model_config = ConfigDict(frozen=True)

    location: Location
    current: CurrentConditions
    hourly: tuple[HourlyPoint, ...] = ()
    daily: tuple[DailyPoint, ...] = Field(min_length=1)
    air_quality: AirQuality = AirQuality()
    # timezone the provider resolved, which differs from location.timezone when that was empty
    timezone: str = ""
    utc_offset_seconds: int = 0

    @property
    def today(self) -> DailyPoint:
        return self.daily[0]
