# ABOUTME: Consumer-side session that drives city search and weather loading for a UI.
# ABOUTME: Translates service errors into user-facing messages and drops results from superseded loads.

import logging
from datetime import datetime

from pydantic import BaseModel

from weatherwiz.config import DisplaySettings, TempUnit, ThemeName
from weatherwiz.deps import WeatherDeps
from weatherwiz.errors import WeatherServiceError
from weatherwiz.models import CityWeather, Location
from weatherwiz.views import CityView, build_city_view, loading_message
from weatherwiz.weather_service import fetch_weather, resolve_city

logger = logging.getLogger(__name__)

CITY_NOT_FOUND_MESSAGE = "City not found. Try another city name."
SEARCH_FAILED_MESSAGE = "Unable to search for this city right now."
LOAD_FAILED_MESSAGE = "Could not load weather data."


class SearchResult(BaseModel):
    """Outcome of a city search: a location to navigate to, or a message to show."""

    location: Location | None = None
    message: str | None = None


class WeatherSession:
    """Holds the latest weather snapshot and display settings for one screen session.

    Every call to ``load`` gets a new generation number. When a load finishes after a
    newer one was started, its result (or error) is discarded so a slow earlier request
    can never overwrite a later one.
    """

    def __init__(self, deps: WeatherDeps, settings: DisplaySettings | None = None):
        self.deps = deps
        self.settings = settings or DisplaySettings()
        self.weather: CityWeather | None = None
        self.error: str | None = None
        self.loading: str | None = None
        self._generation = 0

    async def search(self, query: str) -> SearchResult:
        """Resolve a free-text city name."""
        if not query.strip():
            return SearchResult()
        try:
            location = await resolve_city(self.deps.http_client, query)
        except WeatherServiceError:
            logger.exception("City search failed for %r", query)
            return SearchResult(message=SEARCH_FAILED_MESSAGE)
        if location is None:
            return SearchResult(message=CITY_NOT_FOUND_MESSAGE)
        return SearchResult(location=location)

    async def load(self, location: Location) -> CityWeather | None:
        """Fetch weather for a location, keeping it only if no newer load has started."""
        self._generation += 1
        generation = self._generation
        self.loading = loading_message(location)

        try:
            weather = await fetch_weather(self.deps.http_client, location)
        except WeatherServiceError:
            logger.exception("Loading weather failed for %s", location.name)
            if generation == self._generation:
                self.loading = None
                self.weather = None
                self.error = LOAD_FAILED_MESSAGE
            return None

        if generation != self._generation:
            logger.info("Discarding stale weather for %s", location.name)
            return None

        self.loading = None
        self.weather = weather
        self.error = None
        return weather

    def set_temp_unit(self, unit: TempUnit) -> None:
        self.settings = self.settings.with_changes(temp_unit=unit)

    def set_theme(self, theme: ThemeName) -> None:
        self.settings = self.settings.with_changes(theme=theme)

    def city_view(self, now: datetime | None = None) -> CityView | None:
        """Render the current snapshot with the current settings, if one is loaded."""
        if self.weather is None:
            return None
        return build_city_view(self.weather, self.settings, now)
