"""Shared utilities for forecast_table."""

from forecast_table.utils.exit_codes import ExitCode
from forecast_table.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
