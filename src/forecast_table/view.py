"""View updates — write forecast data and errors into a :class:`PageState`.

These functions are pure with respect to I/O: no network, no filesystem.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from forecast_table.cities import VALID_CITIES
from forecast_table.core.config import settings
from forecast_table.i18n import translate
from forecast_table.icons import icon_for, icon_src, period_for_slot
from forecast_table.model import TableRow
from forecast_table.model.forecast import ForecastPoint
from forecast_table.model.page import PageState

_logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf (-2.5 -> -2).

    ``floor(value + 0.5)`` is off for 0.49999999999999994, so the fraction
    is compared instead.
    """
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def format_number(value: float) -> str:
    """Render a finite reading the way a browser prints a number.

    Shortest round-trip digits, no spurious ``.0`` (3.0 -> "3"), plain
    notation for 1e-6 <= |value| < 1e21 and ``1e-7`` / ``1e+21`` outside.
    """
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    mantissa, _, exp = repr(abs(float(value))).partition("e")
    int_part, _, frac = mantissa.partition(".")
    all_digits = int_part + frac
    digits = all_digits.lstrip("0")
    # value == 0.<digits> * 10**point
    point = len(int_part) + int(exp or 0) - (len(all_digits) - len(digits))
    digits = digits.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        text = digits + "0" * (point - k)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        e = point - 1
        head = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        text = f"{head}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + text


def format_degrees(value: float) -> str:
    return f"{round_half_up(value)}°C"


def format_percent(value: float) -> str:
    return f"{format_number(value)}%"


def display_error(page: PageState, message: str) -> None:
    page.error_message = message
    page.error_visible = True


def clear_error(page: PageState) -> None:
    page.error_message = ""
    page.error_visible = False


def populate_datalist(page: PageState) -> None:
    page.suggestions.extend(VALID_CITIES)


def _set_text(page: PageState, row: TableRow, column: int, text: str) -> None:
    cell = page.cell(row, column)
    if cell is not None:
        cell.text = text


def update_weather_ui(
    page: PageState,
    city_name: str,
    points: Sequence[ForecastPoint],
    *,
    icon_base: Optional[str] = None,
    locale: Optional[str] = None,
) -> None:
    """Fill heading, caption and table cells from *points*.

    Slot ``i`` is written to column ``i + 1``; column 0 holds the row labels.
    Points beyond the table width are ignored.
    """
    base = settings.ICON_BASE if icon_base is None else icon_base

    page.city_display = city_name
    page.caption = translate("page.caption", locale, city=city_name)

    for index, point in enumerate(points):
        column = index + 1

        icon_cell = page.cell(TableRow.ICON, column)
        if icon_cell is None:
            _logger.warning("No table column for forecast slot %d", index)
            continue
        icon = icon_for(point.main_weather, period_for_slot(index))
        icon_cell.img_src = icon_src(icon, base)
        icon_cell.img_alt = point.description

        _set_text(page, TableRow.CLOUDINESS, column, format_percent(point.clouds))
        _set_text(page, TableRow.TEMPERATURE, column, format_degrees(point.temp))
        _set_text(page, TableRow.HUMIDITY, column, format_percent(point.humidity))
        _set_text(page, TableRow.WIND, column, format_number(point.wind_speed))
        _set_text(page, TableRow.FEELS_LIKE, column, format_degrees(point.feels_like))
