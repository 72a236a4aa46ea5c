"""
Pydantic Schemas
===============
Response models for the API.
"""
from .forecast import CityListResponse, ForecastPointSchema, ForecastResponse

__all__ = ["CityListResponse", "ForecastPointSchema", "ForecastResponse"]
