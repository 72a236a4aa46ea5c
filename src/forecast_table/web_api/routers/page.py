"""
Page Router
===========
Server-rendered forecast page.
"""
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from forecast_table.api import SelectionOutcome, handle_city_selection, init_app
from forecast_table.client import ForecastClient
from forecast_table.reports.exporters import export_html
from forecast_table.web_api.deps import get_forecast_client

router = APIRouter()

_STATUS_BY_OUTCOME = {
    SelectionOutcome.FETCHED: 200,
    SelectionOutcome.REJECTED: 400,
    SelectionOutcome.FAILED: 502,
}


@router.get("/", response_class=HTMLResponse)
async def index():
    """Empty forecast table with the city picker."""
    return HTMLResponse(export_html(init_app()))


@router.get("/weather", response_class=HTMLResponse)
async def weather_page(
    city: str = Query(default="", description="City picked from the suggestions"),
    client: ForecastClient = Depends(get_forecast_client),
):
    """
    Render the page for the submitted city.

    The page is returned for every outcome; the status code tells them apart.
    """
    page = init_app()
    outcome = await handle_city_selection(page, city, client)
    return HTMLResponse(export_html(page), status_code=_STATUS_BY_OUTCOME[outcome])
