# ABOUTME: Screen view models built from a CityWeather snapshot and the user's display settings.
# ABOUTME: Produces the text shown on the city, home and settings screens; no I/O and no hidden state.

from datetime import datetime
from typing import get_args

from pydantic import BaseModel

from weatherwiz.config import DisplaySettings, TempUnit, ThemeName
from weatherwiz.models import CityWeather, Location
from weatherwiz.presentation import (
    aqi_category,
    display_temp,
    local_now,
    round_half_away,
    upcoming_hours,
    uv_category,
    weather_condition,
    weather_icon,
)

RECENT_CITIES = ("Calgary", "London", "Delhi")
THEMES: tuple[str, ...] = get_args(ThemeName)
TEMP_UNITS: tuple[str, ...] = get_args(TempUnit)

HOURLY_STRIP_LENGTH = 8
MISSING = "--"


class HourCard(BaseModel):
    label: str
    icon: str
    temperature: str


class DayRow(BaseModel):
    label: str
    icon: str
    temperatures: str


class DetailWidgets(BaseModel):
    air_quality: str
    uv_index: str
    sunrise: str
    sunset: str
    wind: str
    rainfall: str


class CityView(BaseModel):
    """Everything the city screen displays, already formatted."""

    title: str
    city: str
    country: str
    temperature: str
    feels_like: str
    high_low: str
    condition: str
    hourly: list[HourCard]
    details: DetailWidgets
    weekly: list[DayRow]


def location_label(location: Location) -> str:
    """Label used when navigating to a city, e.g. 'Calgary, Canada'."""
    if location.country:
        return f"{location.name}, {location.country}"
    return location.name


def loading_message(location: Location) -> str:
    return f"Loading weather for {location_label(location)}..."


def build_city_view(weather: CityWeather, settings: DisplaySettings, now: datetime | None = None) -> CityView:
    """Render a snapshot for the city screen.

    ``now`` is the location's local time; it defaults to the current time at the
    provider-reported UTC offset.
    """
    unit = settings.temp_unit
    if now is None:
        now = local_now(weather.utc_offset_seconds)
    today = weather.today

    return CityView(
        title=location_label(weather.location),
        city=weather.location.name,
        country=weather.location.country,
        temperature=_temp(weather.current.temperature, unit),
        feels_like=f"Feels like {_temp(weather.current.apparent_temperature, unit)}",
        high_low=f"H: {_temp(today.max_temp, unit)} · L: {_temp(today.min_temp, unit)}",
        condition=weather_condition(weather.current.weather_code),
        hourly=[
            HourCard(
                label="Now" if i == 0 else _clock(point.time, minutes=False),
                icon=weather_icon(point.weather_code),
                temperature=_temp(point.temperature, unit),
            )
            for i, point in enumerate(upcoming_hours(weather.hourly, HOURLY_STRIP_LENGTH, now))
        ],
        details=build_detail_widgets(weather),
        weekly=[
            DayRow(
                label=day.date.strftime("%a"),
                icon=weather_icon(day.weather_code),
                temperatures=f"{_temp(day.max_temp, unit)} / {_temp(day.min_temp, unit)}",
            )
            for day in weather.daily
        ],
    )


def build_detail_widgets(weather: CityWeather) -> DetailWidgets:
    """Format today's air quality, UV, sun times, wind and rainfall."""
    today = weather.today
    us_aqi = weather.air_quality.us_aqi

    if us_aqi is None:
        air_quality = aqi_category(None)
    else:
        air_quality = f"{us_aqi} – {aqi_category(us_aqi)}"

    if today.uv_index_max is None:
        uv_index = MISSING
    else:
        uv_index = f"{round_half_away(today.uv_index_max)} – {uv_category(today.uv_index_max)}"

    if today.precipitation_sum is None:
        rainfall = MISSING
    else:
        rainfall = f"{today.precipitation_sum:.1f} mm today"

    return DetailWidgets(
        air_quality=air_quality,
        uv_index=uv_index,
        sunrise=_clock(today.sunrise) if today.sunrise else MISSING,
        sunset=_clock(today.sunset) if today.sunset else MISSING,
        wind=f"{round_half_away(weather.current.wind_speed)} km/h",
        rainfall=rainfall,
    )


def _temp(celsius: float | None, unit: TempUnit) -> str:
    if celsius is None:
        return MISSING
    return f"{display_temp(celsius, unit)}°"


def _clock(value: datetime, minutes: bool = True) -> str:
    """12-hour clock text: '7:05 AM', or '3 PM' without minutes."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    if minutes:
        return f"{hour}:{value.minute:02d} {suffix}"
    return f"{hour} {suffix}"
