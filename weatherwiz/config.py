# ABOUTME: Configuration for the weather service endpoints and user display preferences.
# ABOUTME: Endpoints come from the environment (or a .env file); preferences are explicit values.

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_AIR_QUALITY_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"


def endpoint_url(env_var: str, default: str) -> str:
    """Read an endpoint URL from the environment, falling back to the public Open-Meteo host."""
    return os.environ.get(env_var) or default


GEOCODING_URL = endpoint_url("WEATHERWIZ_GEOCODING_URL", DEFAULT_GEOCODING_URL)
FORECAST_URL = endpoint_url("WEATHERWIZ_FORECAST_URL", DEFAULT_FORECAST_URL)
AIR_QUALITY_URL = endpoint_url("WEATHERWIZ_AIR_QUALITY_URL", DEFAULT_AIR_QUALITY_URL)

ThemeName = Literal["purple", "light", "dark"]
TempUnit = Literal["C", "F"]


class DisplaySettings(BaseModel):
    """User display preferences, passed explicitly to anything that renders weather."""

    model_config = ConfigDict(frozen=True)

    theme: ThemeName = "purple"
    temp_unit: TempUnit = "C"

    def with_changes(self, **changes) -> "DisplaySettings":
        """Return a validated copy with the given fields replaced."""
        return self.model_validate({**self.model_dump(), **changes})
