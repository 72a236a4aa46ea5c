"""
forecast_table.api
==================

Programmatic entrypoints tying the client to the page state.

Goals:
  - No argparse / FastAPI dependencies
  - Errors end up as page text, never as exceptions to the caller
  - The same flow backs the CLI and the web app

Usage::

    from forecast_table.api import init_app, handle_city_selection

    page = init_app()
    async with ForecastClient() as client:
        outcome = await handle_city_selection(page, "Мальме", client)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from forecast_table.cities import is_valid_city, normalize_city
from forecast_table.client import ForecastClient
from forecast_table.core.errors import ForecastError
from forecast_table.i18n import translate
from forecast_table.model.page import PageState
from forecast_table.view import (
    clear_error,
    display_error,
    populate_datalist,
    update_weather_ui,
)

_logger = logging.getLogger(__name__)


class SelectionOutcome(str, Enum):
    FETCHED = "fetched"
    REJECTED = "rejected"
    FAILED = "failed"


def init_app() -> PageState:
    """Return a fresh page with the city suggestions filled in."""
    page = PageState()
    populate_datalist(page)
    return page


async def get_weather_for_city(
    page: PageState,
    city: str,
    client: ForecastClient,
    *,
    icon_base: Optional[str] = None,
    locale: Optional[str] = None,
) -> bool:
    """Fetch *city* and render it into *page*.

    Returns True on success. On failure the previous table is left as is and
    the error text is displayed instead.
    """
    clear_error(page)
    try:
        forecast = await client.fetch_forecast(city)
        update_weather_ui(
            page, forecast.city, forecast.points, icon_base=icon_base, locale=locale
        )
    except ForecastError as e:
        _logger.error("Forecast lookup failed: %s", e)
        display_error(page, str(e))
        return False
    return True


async def handle_city_selection(
    page: PageState,
    raw_value: str,
    client: ForecastClient,
    *,
    icon_base: Optional[str] = None,
    locale: Optional[str] = None,
) -> SelectionOutcome:
    """Validate the submitted city and fetch its forecast.

    A value outside the city list is rejected without a request: the error is
    displayed and the input is cleared.
    """
    selected = normalize_city(raw_value)
    if not is_valid_city(selected):
        _logger.info("Rejected city selection %r", raw_value)
        display_error(page, translate("errors.invalid_selection", locale))
        page.city_input = ""
        return SelectionOutcome.REJECTED

    page.city_input = selected
    ok = await get_weather_for_city(
        page, selected, client, icon_base=icon_base, locale=locale
    )
    return SelectionOutcome.FETCHED if ok else SelectionOutcome.FAILED


async def render_city(
    raw_value: str,
    *,
    client: Optional[ForecastClient] = None,
    icon_base: Optional[str] = None,
    locale: Optional[str] = None,
) -> tuple[SelectionOutcome, PageState]:
    """One-shot helper: new page, one selection, result page.

    A client is created (and closed) when none is given.
    """
    page = init_app()
    if client is not None:
        outcome = await handle_city_selection(
            page, raw_value, client, icon_base=icon_base, locale=locale
        )
        return outcome, page

    async with ForecastClient(locale=locale) as owned:
        outcome = await handle_city_selection(
            page, raw_value, owned, icon_base=icon_base, locale=locale
        )
    return outcome, page
