# ABOUTME: Pydantic schemas describing the raw Open-Meteo JSON payloads.
# ABOUTME: Validates shape and parallel-array alignment before responses are turned into domain models.

from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator


class GeocodingResult(BaseModel):
    """One candidate from the geocoding search endpoint."""

    name: str
    latitude: float
    longitude: float
    country: str = ""
    timezone: str = ""


class CurrentBlock(BaseModel):
    """The forecast endpoint's ``current`` object."""

    temperature_2m: float
    apparent_temperature: float
    weather_code: int
    wind_speed_10m: float
    precipitation: float


class ParallelSeries(BaseModel):
    """Column-oriented block where every list is indexed by the ``time`` column.

    Open-Meteo returns hourly and daily data as parallel arrays. Rows are built by index,
    so all columns must have exactly as many entries as ``time``.
    """

    @model_validator(mode="after")
    def check_aligned(self):
        expected = len(self.time)
        for name, value in self:
            if isinstance(value, list) and len(value) != expected:
                raise ValueError(f"column '{name}' has {len(value)} entries but 'time' has {expected}")
        return self


class HourlyBlock(ParallelSeries):
    time: list[datetime]
    temperature_2m: list[float | None]
    weather_code: list[int | None]
    wind_speed_10m: list[float | None]
    precipitation_probability: list[float | None]
    uv_index: list[float | None]


class DailyBlock(ParallelSeries):
    time: list[date] = Field(min_length=1)
    temperature_2m_max: list[float | None]
    temperature_2m_min: list[float | None]
    weather_code: list[int | None]
    sunrise: list[datetime | None]
    sunset: list[datetime | None]
    uv_index_max: list[float | None]
    precipitation_sum: list[float | None]


class AirQualityHourly(BaseModel):
    us_aqi: list[int | None] = []


class AirQualityPayload(BaseModel):
    """Air-quality endpoint response; only the hourly US AQI column is used."""

    hourly: AirQualityHourly | None = None


class ForecastPayload(BaseModel):
    """Top-level forecast response fields; the blocks are parsed separately."""

    timezone: str = ""
    utc_offset_seconds: int = 0
