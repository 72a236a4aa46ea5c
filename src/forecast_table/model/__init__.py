"""Enums shared across the model, view and rendering layers."""

from __future__ import annotations

from enum import Enum


class WeatherCategory(str, Enum):
    """Main weather groups reported by the upstream API."""

    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"
    DRIZZLE = "Drizzle"
    THUNDERSTORM = "Thunderstorm"
    SNOW = "Snow"
    ATMOSPHERE = "Atmosphere"


class TimePeriod(str, Enum):
    """Part of the day a forecast slot falls into."""

    NIGHT = "night"
    MORNING = "morning"
    DAY = "day"
    EVENING = "evening"


class TableRow(str, Enum):
    """Rows of the forecast table, in display order."""

    ICON = "icon"
    CLOUDINESS = "cloudiness"
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    WIND = "wind"
    FEELS_LIKE = "feels_like"


# Slot i of the forecast is shown in the period at index i.
SLOT_PERIODS: tuple[TimePeriod, ...] = (
    TimePeriod.NIGHT,
    TimePeriod.MORNING,
    TimePeriod.DAY,
    TimePeriod.EVENING,
) * 2

FORECAST_POINTS = len(SLOT_PERIODS)
