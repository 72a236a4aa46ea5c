"""
FastAPI Application
==================
Main entry point for the forecast web app.

Run with:
    uvicorn forecast_table.web_api.main:app --reload
"""
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from forecast_table import __version__
from forecast_table.core.config import settings
from forecast_table.web_api.routers import forecast, health, page

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

# Create application
app = FastAPI(
    title="Forecast Table",
    description="8-point weather forecast rendered as an HTML table",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(page.router, tags=["Page"])
app.include_router(forecast.router, prefix="/api", tags=["Forecast"])

# Icon assets, referenced from the page as img/<file>
app.mount("/img", StaticFiles(directory=STATIC_DIR / "img"), name="img")


# For running directly: python -m forecast_table.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
