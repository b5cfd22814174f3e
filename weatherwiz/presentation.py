# ABOUTME: Pure display helpers derived from a CityWeather snapshot.
# ABOUTME: Unit conversion, upcoming-hours window, weather-code icons, and AQI/UV categories.

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal

from weatherwiz.config import TempUnit
from weatherwiz.models import HourlyPoint

DEFAULT_CONDITION = "cloudy"

# (start, stop, condition) half-open ranges over WMO weather codes
_CONDITION_RANGES = (
    (0, 1, "clear"),
    (1, 4, "partly-cloudy"),
    (45, 46, "fog"),
    (48, 49, "fog"),
    (51, 58, "drizzle"),
    (61, 68, "rain"),
    (71, 78, "snow"),
    (80, 83, "rain-showers"),
    (85, 87, "snow-showers"),
    (95, 100, "thunderstorm"),
)

CONDITION_ICONS = {
    "clear": "☀️",
    "partly-cloudy": "⛅",
    "fog": "🌫️",
    "drizzle": "🌦️",
    "rain": "🌧️",
    "snow": "❄️",
    "rain-showers": "🌧️",
    "snow-showers": "🌨️",
    "thunderstorm": "⛈️",
    "cloudy": "☁️",
}


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with .5 going away from zero."""
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def display_temp(celsius: float, unit: TempUnit) -> int:
    """Convert a Celsius temperature to the display unit and round it."""
    if unit == "C":
        return round_half_away(celsius)
    if unit == "F":
        return round_half_away(celsius * 9 / 5 + 32)
    raise ValueError(f"Unknown temperature unit: {unit!r}")


def local_now(utc_offset_seconds: int = 0) -> datetime:
    """Current time as a naive datetime in a location's local time."""
    now = datetime.now(timezone.utc) + timedelta(seconds=utc_offset_seconds)
    return now.replace(tzinfo=None)


def upcoming_hours(hourly: Sequence[HourlyPoint], count: int, now: datetime | None = None) -> list[HourlyPoint]:
    """Return up to ``count`` hours starting at the first one not in the past.

    Falls back to the start of the series when every entry is in the past. ``now`` must be
    naive and in the same local time as the hourly timestamps; it defaults to the wall clock.
    """
    if now is None:
        now = datetime.now()
    start = next((i for i, point in enumerate(hourly) if point.time >= now), 0)
    return list(hourly[start : start + count])


def weather_condition(code: int | None) -> str:
    """Map a WMO weather code to a condition category; unknown codes are cloudy."""
    if code is None:
        return DEFAULT_CONDITION
    for start, stop, condition in _CONDITION_RANGES:
        if start <= code < stop:
            return condition
    return DEFAULT_CONDITION


def weather_icon(code: int | None) -> str:
    return CONDITION_ICONS[weather_condition(code)]


def aqi_category(us_aqi: int | None) -> str:
    """Classify a US AQI reading."""
    if us_aqi is None:
        return "Not available"
    if us_aqi <= 50:
        return "Good"
    if us_aqi <= 100:
        return "Moderate"
    return "Unhealthy"


def uv_category(uv_index: float) -> str:
    """Classify a maximum UV index."""
    if uv_index <= 2:
        return "Low"
    if uv_index <= 5:
        return "Moderate"
    return "High"
