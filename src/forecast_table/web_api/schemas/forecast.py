"""
Forecast Schemas
================
Response models for forecast endpoints. Field aliases keep the upstream
camelCase wire names.
"""
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ForecastPointSchema(BaseModel):
    """One forecast slot"""

    model_config = ConfigDict(populate_by_name=True)

    temp: float
    feels_like: float = Field(..., alias="feelsLike")
    humidity: float
    wind_speed: float = Field(..., alias="windSpeed")
    clouds: float
    main_weather: str = Field(..., alias="mainWeather")
    description: str


class ForecastResponse(BaseModel):
    """Validated forecast for one city"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "city": "Мальме",
                "forecast": [
                    {
                        "temp": 4.6,
                        "feelsLike": 1.2,
                        "humidity": 81,
                        "windSpeed": 5.1,
                        "clouds": 75,
                        "mainWeather": "Clouds",
                        "description": "хмарно",
                    }
                ],
            }
        }
    )

    city: str
    forecast: List[ForecastPointSchema] = Field(..., min_length=8, max_length=8)
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CityListResponse(BaseModel):
    """Selectable cities"""

    cities: List[str]
