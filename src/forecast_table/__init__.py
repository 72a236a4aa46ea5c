"""forecast_table — 8-point city weather forecast rendered as an HTML table."""

__all__ = [
    "__version__",
    "VALID_CITIES",
    "ForecastClient",
    "Forecast",
    "ForecastPoint",
    "PageState",
    "SelectionOutcome",
    "init_app",
    "get_weather_for_city",
    "handle_city_selection",
    "render_city",
    "export_page",
]
__version__ = "0.1.0"

from forecast_table.cities import VALID_CITIES  # noqa: E402
from forecast_table.client import ForecastClient  # noqa: E402
from forecast_table.model.forecast import Forecast, ForecastPoint  # noqa: E402
from forecast_table.model.page import PageState  # noqa: E402
from forecast_table.api import (  # noqa: E402
    SelectionOutcome,
    get_weather_for_city,
    handle_city_selection,
    init_app,
    render_city,
)
from forecast_table.reports.exporters import export_page  # noqa: E402
