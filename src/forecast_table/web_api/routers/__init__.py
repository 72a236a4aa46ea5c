"""
API Routers
===========
Each router handles a specific part of the app.
"""
from . import forecast, health, page

__all__ = ["forecast", "health", "page"]
