"""Multi-format exporters for a rendered forecast page.

Supports:

*  **HTML** — self-contained document with embedded CSS, the city picker and
   the forecast table.
*  **JSON** — machine-readable page state.
*  **Markdown** — the forecast table alone, for terminals and chat.

All exporters accept a :class:`PageState` and produce a string.
"""

from __future__ import annotations

import html as html_mod
from typing import Optional

from forecast_table.core.config import settings
from forecast_table.i18n import translate
from forecast_table.model import SLOT_PERIODS, TableRow
from forecast_table.model.page import PageState
from forecast_table.utils.json_norm import stable_json_dumps

# ════════════════════════════════════════════════════════════════════
# JSON exporter
# ════════════════════════════════════════════════════════════════════


def export_json(page: PageState, *, indent: int = 2) -> str:
    """Export a ``PageState`` as indented JSON."""
    return stable_json_dumps(page.to_dict(), indent=indent)


# ════════════════════════════════════════════════════════════════════
# Markdown exporter
# ════════════════════════════════════════════════════════════════════


def _row_label(row: TableRow, locale: Optional[str]) -> str:
    return translate(f"rows.{row.value}", locale)


def _period_labels(locale: Optional[str]) -> list[str]:
    return [translate(f"periods.{p.value}", locale) for p in SLOT_PERIODS]


def export_markdown(page: PageState, *, locale: Optional[str] = None) -> str:
    """Export the forecast table as Markdown.

    Icon cells show the alt text (the weather description).
    """
    lines: list[str] = []

    if page.error_visible:
        lines.append(f"> {page.error_message}")
        lines.append("")

    if page.has_forecast:
        lines.append(f"## {page.caption}")
        lines.append("")
        periods = _period_labels(locale)
        lines.append("| | " + " | ".join(periods) + " |")
        lines.append("|---|" + "---:|" * len(periods))
        for row, cells in page.rows.items():
            if row is TableRow.ICON:
                values = [c.img_alt for c in cells[1:]]
            else:
                values = [c.text for c in cells[1:]]
            lines.append(
                f"| {_row_label(row, locale)} | " + " | ".join(values) + " |"
            )
        lines.append("")

    return "\n".join(lines)


# ════════════════════════════════════════════════════════════════════
# HTML exporter
# ════════════════════════════════════════════════════════════════════

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="{lang}">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>
  body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 2rem; color: #212529; }}
  .city h2 {{ color: #343a40; min-height: 1.5em; }}
  #error-message {{ background: #f8d7da; color: #721c24; padding: 0.75rem 1rem; border-radius: 6px; }}
  .weather-table {{ border-collapse: collapse; width: 100%; margin-top: 1.5rem; }}
  .weather-table caption {{ text-align: left; font-weight: 600; padding-bottom: 0.5rem; }}
  .weather-table th, .weather-table td {{ text-align: center; padding: 6px 12px; border-bottom: 1px solid #dee2e6; }}
  .weather-table thead th {{ background: #e9ecef; }}
  .weather-table tbody th {{ text-align: left; }}
  .weather-table img {{ width: 40px; height: 40px; }}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def _attr(value: str) -> str:
    return html_mod.escape(value, quote=True)


def export_html(page: PageState, *, locale: Optional[str] = None) -> str:
    """Export a ``PageState`` as a self-contained HTML document."""
    esc = html_mod.escape
    parts: list[str] = []

    # City picker
    parts.append('<form class="search" method="get" action="weather">')
    parts.append(
        f'<label for="location">{esc(translate("page.input_label", locale))}</label>'
    )
    parts.append(
        f'<input id="location" name="city" list="city-suggestions" autocomplete="off"'
        f' placeholder="{_attr(translate("page.input_placeholder", locale))}"'
        f' value="{_attr(page.city_input)}">'
    )
    parts.append('<datalist id="city-suggestions">')
    for city in page.suggestions:
        parts.append(f'<option value="{_attr(city)}"></option>')
    parts.append("</datalist>")
    parts.append("</form>")

    # Error box
    display = "block" if page.error_visible else "none"
    parts.append(
        f'<p id="error-message" style="display: {display}">'
        f"{esc(page.error_message)}</p>"
    )

    # Heading
    parts.append(f'<div class="city"><h2>{esc(page.city_display)}</h2></div>')

    # Table
    parts.append('<table class="weather-table">')
    parts.append(f"<caption>{esc(page.caption)}</caption>")
    parts.append("<thead><tr><th></th>")
    for label in _period_labels(locale):
        parts.append(f"<th>{esc(label)}</th>")
    parts.append("</tr></thead>")
    parts.append("<tbody>")
    for row, cells in page.rows.items():
        parts.append(f'<tr class="{row.value}"><th>{esc(_row_label(row, locale))}</th>')
        for cell in cells[1:]:
            if cell.img_src is not None:
                src = f' src="{_attr(cell.img_src)}"' if cell.img_src else ""
                parts.append(f'<td><img{src} alt="{_attr(cell.img_alt)}"></td>')
            else:
                parts.append(f"<td>{esc(cell.text)}</td>")
        parts.append("</tr>")
    parts.append("</tbody>")
    parts.append("</table>")

    lang = locale or settings.LOCALE
    title = page.caption or translate("page.title", locale)
    return _HTML_TEMPLATE.format(lang=_attr(lang), title=esc(title), body="\n".join(parts))


# ════════════════════════════════════════════════════════════════════
# Dispatcher
# ════════════════════════════════════════════════════════════════════


def export_page(
    page: PageState,
    fmt: str = "html",
    *,
    locale: Optional[str] = None,
) -> str:
    """Export a ``PageState`` in the specified format.

    Parameters
    ----------
    page:
        The page to export.
    fmt:
        One of ``"html"``, ``"json"``, ``"markdown"``.
    locale:
        Message catalog for labels; defaults to ``settings.LOCALE``.

    Raises
    ------
    ValueError
        If *fmt* is not recognised.
    """
    if fmt == "html":
        return export_html(page, locale=locale)
    if fmt == "json":
        return export_json(page)
    if fmt in ("markdown", "md"):
        return export_markdown(page, locale=locale)
    raise ValueError(f"Unknown export format: {fmt!r} (use html|json|markdown)")
