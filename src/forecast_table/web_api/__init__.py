"""
Forecast Table Web App
======================
FastAPI app serving the forecast page and a JSON forecast endpoint.

Quick Start:
    uvicorn forecast_table.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
