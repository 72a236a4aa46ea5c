"""CLI entry-point for forecast_table.

Usage:
    python -m forecast_table <city>
    python -m forecast_table forecast <city> [--format html|json|markdown] [--output FILE]
    python -m forecast_table cities [--json]
    python -m forecast_table serve [--host HOST] [--port PORT]

Global options (before the command):
    --locale uk|en       message catalog for labels and errors
    --log-level LEVEL    logging threshold (default: $LOG_LEVEL or WARNING)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from forecast_table import __version__
from forecast_table.api import SelectionOutcome, render_city
from forecast_table.cities import VALID_CITIES
from forecast_table.core.config import settings
from forecast_table.i18n import available_locales
from forecast_table.reports.exporters import export_page
from forecast_table.utils.exit_codes import ExitCode
from forecast_table.utils.json_norm import stable_json_dumps

_FORMATS = ("html", "json", "markdown")

# Options whose value is a separate argv token.
_VALUE_OPTIONS = {"--locale", "--log-level", "--format", "--output", "-o", "--host", "--port"}

_EXIT_BY_OUTCOME = {
    SelectionOutcome.FETCHED: ExitCode.SUCCESS,
    SelectionOutcome.REJECTED: ExitCode.REJECTED,
    SelectionOutcome.FAILED: ExitCode.ERROR,
}


def _add_global_options(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--version", action="version", version=f"forecast-table {__version__}"
    )
    p.add_argument(
        "--locale",
        choices=available_locales(),
        default=None,
        help="Message catalog (default: $LOCALE or uk)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $LOG_LEVEL or WARNING)",
    )


def _add_forecast_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("city", help="City name, exactly as listed by `cities`")
    p.add_argument(
        "--format",
        choices=_FORMATS,
        default="html",
        help="Output format (default: html)",
    )
    p.add_argument(
        "--output", "-o",
        default=None,
        help="Write to FILE instead of stdout",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="forecast-table",
        description="Fetch an 8-point weather forecast and render it as a table.",
    )
    _add_global_options(p)
    sub = p.add_subparsers(dest="command")

    forecast_p = sub.add_parser(
        "forecast",
        help="Fetch the forecast for a city and render it",
    )
    _add_forecast_options(forecast_p)

    cities_p = sub.add_parser(
        "cities",
        help="List the selectable cities",
    )
    cities_p.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the list as JSON",
    )

    serve_p = sub.add_parser(
        "serve",
        help="Run the web app",
    )
    serve_p.add_argument("--host", default=settings.HOST)
    serve_p.add_argument("--port", type=int, default=settings.PORT)

    return p


def _build_default_parser() -> argparse.ArgumentParser:
    """Parser for the bare ``forecast-table <city>`` form."""
    p = argparse.ArgumentParser(prog="forecast-table")
    _add_global_options(p)
    _add_forecast_options(p)
    p.set_defaults(command="forecast")
    return p


def _configure_logging(level_name: str | None) -> None:
    name = (level_name or settings.LOG_LEVEL or "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _handle_forecast(args: argparse.Namespace) -> int:
    outcome, page = asyncio.run(render_city(args.city, locale=args.locale))
    rendered = export_page(page, args.format, locale=args.locale)

    if args.output:
        out_path = Path(args.output)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(rendered, encoding="utf-8")
        except OSError as e:
            print(f"error: cannot write {out_path}: {e}", file=sys.stderr)
            return ExitCode.ERROR
    else:
        sys.stdout.write(rendered)
        if not rendered.endswith("\n"):
            sys.stdout.write("\n")

    if page.error_visible:
        print(f"error: {page.error_message}", file=sys.stderr)
    return _EXIT_BY_OUTCOME[outcome]


def _handle_cities(args: argparse.Namespace) -> int:
    if args.as_json:
        sys.stdout.write(stable_json_dumps({"cities": list(VALID_CITIES)}))
    else:
        for city in VALID_CITIES:
            print(city)
    return ExitCode.SUCCESS


def _handle_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "forecast_table.web_api.main:app",
        host=args.host,
        port=args.port,
        log_level=(args.log_level or settings.LOG_LEVEL).lower(),
    )
    return ExitCode.SUCCESS


def _first_positional(argv: list[str]) -> str | None:
    """Return the first token that is neither an option nor an option value."""
    skip_next = False
    for token in argv:
        if skip_next:
            skip_next = False
            continue
        if token.startswith("-"):
            skip_next = token in _VALUE_OPTIONS
            continue
        return token
    return None


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = ok, 1 = city rejected, 2 = error)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    # A first positional that is not a command is a city name.
    known_commands = {"forecast", "cities", "serve"}
    first_positional = _first_positional(effective_argv)
    if first_positional and first_positional not in known_commands:
        args = _build_default_parser().parse_args(effective_argv)
    else:
        args = _build_parser().parse_args(effective_argv)

    if args.command is None:
        _build_parser().print_help(sys.stderr)
        return ExitCode.ERROR

    _configure_logging(args.log_level)

    if args.command == "forecast":
        return _handle_forecast(args)
    if args.command == "cities":
        return _handle_cities(args)
    if args.command == "serve":
        return _handle_serve(args)

    return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
