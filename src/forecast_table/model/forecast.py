"""Forecast — the validated shape of an upstream forecast payload."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from forecast_table.core.errors import ForecastFormatError

from . import FORECAST_POINTS

# wire key -> attribute name
_NUMERIC_FIELDS = {
    "temp": "temp",
    "feelsLike": "feels_like",
    "humidity": "humidity",
    "windSpeed": "wind_speed",
    "clouds": "clouds",
}
_TEXT_FIELDS = {
    "mainWeather": "main_weather",
    "description": "description",
}


def _is_number(value: Any) -> bool:
    """True for a finite int or float; bools, NaN, infinities and ints
    too large for a float are rejected."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


@dataclass(frozen=True, slots=True)
class ForecastPoint:
    """One forecast slot."""

    temp: float
    feels_like: float
    humidity: float
    wind_speed: float
    clouds: float
    main_weather: str
    description: str

    @classmethod
    def from_dict(cls, data: Any, *, index: int = 0) -> ForecastPoint:
        if not isinstance(data, dict):
            raise ForecastFormatError(f"forecast[{index}] is not an object")
        kwargs: dict[str, Any] = {}
        for wire, attr in _NUMERIC_FIELDS.items():
            value = data.get(wire)
            if not _is_number(value):
                raise ForecastFormatError(
                    f"forecast[{index}].{wire} must be a finite number, got {value!r}"
                )
            kwargs[attr] = value
        for wire, attr in _TEXT_FIELDS.items():
            value = data.get(wire)
            if not isinstance(value, str):
                raise ForecastFormatError(
                    f"forecast[{index}].{wire} must be a string, got {value!r}"
                )
            kwargs[attr] = value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        d: dict = {wire: getattr(self, attr) for wire, attr in _NUMERIC_FIELDS.items()}
        d.update({wire: getattr(self, attr) for wire, attr in _TEXT_FIELDS.items()})
        return d


@dataclass(frozen=True, slots=True)
class Forecast:
    """A city and its eight forecast slots."""

    city: str
    points: tuple[ForecastPoint, ...]

    @classmethod
    def from_dict(cls, data: Any) -> Forecast:
        """Validate an upstream payload.

        Raises
        ------
        ForecastFormatError
            If *data* is not an object, ``city`` is not a string, or
            ``forecast`` is not a list of exactly eight well-formed points.
        """
        if not isinstance(data, dict) or not data:
            raise ForecastFormatError("payload is not a non-empty object")
        city = data.get("city")
        if not isinstance(city, str):
            raise ForecastFormatError(f"city must be a string, got {city!r}")
        raw_points = data.get("forecast")
        if not isinstance(raw_points, list):
            raise ForecastFormatError("forecast must be a list")
        if len(raw_points) != FORECAST_POINTS:
            raise ForecastFormatError(
                f"forecast must contain exactly {FORECAST_POINTS} points, "
                f"got {len(raw_points)}"
            )
        points = tuple(
            ForecastPoint.from_dict(p, index=i) for i, p in enumerate(raw_points)
        )
        return cls(city=city, points=points)

    def to_dict(self) -> dict:
        return {
            "city": self.city,
            "forecast": [p.to_dict() for p in self.points],
        }
