"""
Forecast Router
===============
JSON access to the validated upstream forecast.
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from forecast_table import __version__
from forecast_table.cities import VALID_CITIES, is_valid_city, normalize_city
from forecast_table.client import ForecastClient
from forecast_table.core.errors import ForecastError
from forecast_table.i18n import translate
from forecast_table.web_api.schemas.forecast import (
    CityListResponse,
    ForecastPointSchema,
    ForecastResponse,
)
from forecast_table.web_api.deps import get_forecast_client

router = APIRouter()


@router.get("")
async def api_info():
    """API info"""
    return {
        "name": "Forecast Table API",
        "version": __version__,
        "endpoints": ["/api/cities", "/api/forecast"],
    }


@router.get("/cities", response_model=CityListResponse)
async def list_cities():
    """Cities a forecast can be requested for."""
    return CityListResponse(cities=list(VALID_CITIES))


@router.get("/forecast", response_model=ForecastResponse)
async def get_forecast(
    city: str = Query(..., description="One of /api/cities"),
    client: ForecastClient = Depends(get_forecast_client),
):
    """
    Fetch the 8-point forecast for a city.

    - **400**: the city is not in the list
    - **502**: the upstream request failed or returned a malformed forecast
    """
    selected = normalize_city(city)
    if not is_valid_city(selected):
        raise HTTPException(status_code=400, detail=translate("errors.invalid_selection"))

    try:
        forecast = await client.fetch_forecast(selected)
    except ForecastError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return ForecastResponse(
        city=forecast.city,
        forecast=[ForecastPointSchema(**p.to_dict()) for p in forecast.points],
    )
