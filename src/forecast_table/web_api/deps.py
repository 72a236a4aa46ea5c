"""
Shared FastAPI dependencies.
"""
from typing import AsyncIterator

from forecast_table.client import ForecastClient


async def get_forecast_client() -> AsyncIterator[ForecastClient]:
    """Yield a forecast client for the duration of one request."""
    async with ForecastClient() as client:
        yield client
