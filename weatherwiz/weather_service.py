# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Handles geocoding, forecast and air-quality retrieval, and joins them into one CityWeather snapshot.

import asyncio
import logging

import httpx
from pydantic import BaseModel, ValidationError

from weatherwiz.config import AIR_QUALITY_URL, FORECAST_URL, GEOCODING_URL
from weatherwiz.errors import MalformedResponse, NetworkError
from weatherwiz.models import AirQuality, CityWeather, CurrentConditions, DailyPoint, Forecast, HourlyPoint, Location
from weatherwiz.schemas import (
    AirQualityPayload,
    CurrentBlock,
    DailyBlock,
    ForecastPayload,
    GeocodingResult,
    HourlyBlock,
)

logger = logging.getLogger(__name__)

CURRENT_PARAMS = "temperature_2m,apparent_temperature,weather_code,wind_speed_10m,precipitation"

HOURLY_PARAMS = "temperature_2m,weather_code,uv_index,precipitation_probability,wind_speed_10m"

DAILY_PARAMS = (
    "weather_code,temperature_2m_max,temperature_2m_min,sunrise,sunset,"
    "uv_index_max,precipitation_sum"
)

AIR_QUALITY_PARAMS = "us_aqi"


async def resolve_city(client: httpx.AsyncClient, name: str) -> Location | None:
    """Geocode a city name to a Location, taking the first match.

    Returns None for a blank name (without calling the API) or when nothing matches.
    """
    query = name.strip()
    if not query:
        return None

    data = await _get_json(client, GEOCODING_URL, {"name": query, "count": 1, "language": "en"}, "geocoding")
    if not isinstance(data, dict):
        raise MalformedResponse("geocoding response is not a JSON object")

    results = data.get("results")
    if not results:
        return None
    if not isinstance(results, list):
        raise MalformedResponse("geocoding 'results' is not a list")

    r = _validate(GeocodingResult, results[0], "geocoding result")
    return Location(
        name=r.name,
        country=r.country,
        latitude=r.latitude,
        longitude=r.longitude,
        timezone=r.timezone,
    )


async def get_forecast(client: httpx.AsyncClient, location: Location) -> Forecast:
    """Fetch current, hourly and daily forecast data for a location."""
    timezone = location.timezone or "auto"
    data = await _get_json(
        client,
        FORECAST_URL,
        {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "current": CURRENT_PARAMS,
            "hourly": HOURLY_PARAMS,
            "daily": DAILY_PARAMS,
            "timezone": timezone,
        },
        "forecast",
    )
    if not isinstance(data, dict):
        raise MalformedResponse("forecast response is not a JSON object")

    meta = _validate(ForecastPayload, data, "forecast response")
    return Forecast(
        timezone=meta.timezone or timezone,
        utc_offset_seconds=meta.utc_offset_seconds,
        current=parse_current_data(data.get("current")),
        hourly=parse_hourly_data(data.get("hourly")),
        daily=parse_daily_data(data.get("daily")),
    )


async def get_air_quality(client: httpx.AsyncClient, location: Location) -> AirQuality:
    """Fetch the current US AQI for a location (the first hourly reading)."""
    data = await _get_json(
        client,
        AIR_QUALITY_URL,
        {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "hourly": AIR_QUALITY_PARAMS,
            "timezone": location.timezone or "auto",
        },
        "air quality",
    )
    payload = _validate(AirQualityPayload, data, "air quality response")

    if payload.hourly is None or not payload.hourly.us_aqi:
        return AirQuality(us_aqi=None)
    return AirQuality(us_aqi=payload.hourly.us_aqi[0])


async def fetch_weather(client: httpx.AsyncClient, location: Location) -> CityWeather:
    """Fetch forecast and air quality concurrently and join them into a CityWeather.

    Both requests are started before either is awaited. If either fails the error
    propagates and no snapshot is returned.
    """
    logger.debug("Fetching weather for %s (%s, %s)", location.name, location.latitude, location.longitude)
    forecast, air_quality = await asyncio.gather(
        get_forecast(client, location),
        get_air_quality(client, location),
    )

    return CityWeather(
        location=location,
        current=forecast.current,
        hourly=forecast.hourly,
        daily=forecast.daily,
        air_quality=air_quality,
        timezone=forecast.timezone,
        utc_offset_seconds=forecast.utc_offset_seconds,
    )


def parse_current_data(raw: dict | None) -> CurrentConditions:
    """Parse the forecast ``current`` object into CurrentConditions."""
    block = _validate(CurrentBlock, raw, "current forecast block")
    return CurrentConditions(
        temperature=block.temperature_2m,
        apparent_temperature=block.apparent_temperature,
        weather_code=block.weather_code,
        wind_speed=block.wind_speed_10m,
        precipitation=block.precipitation,
    )


def parse_hourly_data(raw: dict | None) -> tuple[HourlyPoint, ...]:
    """Parse Open-Meteo column-oriented hourly data into row-oriented HourlyPoint objects."""
    block = _validate(HourlyBlock, raw, "hourly forecast block")
    rows = zip(
        block.time,
        block.temperature_2m,
        block.weather_code,
        block.wind_speed_10m,
        block.precipitation_probability,
        block.uv_index,
        strict=True,
    )
    return tuple(
        HourlyPoint(
            time=t,
            temperature=temperature,
            weather_code=code,
            wind_speed=wind,
            precipitation_probability=precip_prob,
            uv_index=uv,
        )
        for t, temperature, code, wind, precip_prob, uv in rows
    )


def parse_daily_data(raw: dict | None) -> tuple[DailyPoint, ...]:
    """Parse Open-Meteo column-oriented daily data into row-oriented DailyPoint objects."""
    block = _validate(DailyBlock, raw, "daily forecast block")
    rows = zip(
        block.time,
        block.temperature_2m_max,
        block.temperature_2m_min,
        block.weather_code,
        block.sunrise,
        block.sunset,
        block.uv_index_max,
        block.precipitation_sum,
        strict=True,
    )
    return tuple(
        DailyPoint(
            date=d,
            max_temp=max_temp,
            min_temp=min_temp,
            weather_code=code,
            sunrise=sunrise,
            sunset=sunset,
            uv_index_max=uv_max,
            precipitation_sum=precip_sum,
        )
        for d, max_temp, min_temp, code, sunrise, sunset, uv_max, precip_sum in rows
    )


async def _get_json(client: httpx.AsyncClient, url: str, params: dict, what: str):
    """GET a provider endpoint and decode the JSON body, raising NetworkError on failure."""
    try:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise NetworkError(f"{what} request failed: {e}") from e

    try:
        return resp.json()
    except ValueError as e:
        raise MalformedResponse(f"{what} response is not valid JSON") from e


def _validate(schema: type[BaseModel], raw, what: str):
    """Validate raw JSON against a schema, converting validation failures to MalformedResponse."""
    try:
        return schema.model_validate(raw)
    except ValidationError as e:
        raise MalformedResponse(f"unexpected {what}: {e}") from e
