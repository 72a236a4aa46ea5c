"""Core configuration and error types."""

from forecast_table.core.config import Settings, settings
from forecast_table.core.errors import (
    CitySelectionError,
    ForecastError,
    ForecastFetchError,
    ForecastFormatError,
)

__all__ = [
    "Settings",
    "settings",
    "ForecastError",
    "ForecastFetchError",
    "ForecastFormatError",
    "CitySelectionError",
]
