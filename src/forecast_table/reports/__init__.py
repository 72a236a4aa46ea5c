"""Reports — export a rendered forecast page in several formats."""

from forecast_table.reports.exporters import (
    export_html,
    export_json,
    export_markdown,
    export_page,
)

__all__ = [
    "export_html",
    "export_json",
    "export_markdown",
    "export_page",
]
