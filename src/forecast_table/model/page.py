"""PageState — the in-memory page the view functions update.

Each field corresponds to one element of the rendered document:

=====================  ==============================
field                  element
=====================  ==============================
``city_input``         ``#location``
``city_display``       ``.city h2``
``caption``            ``.weather-table caption``
``rows``               ``.weather-table tbody``
``suggestions``        ``#city-suggestions``
``error_message``      ``#error-message``
=====================  ==============================
"""

from __future__ import annotations

from dataclasses import dataclass, field

from . import FORECAST_POINTS, TableRow


@dataclass
class Cell:
    """A table cell; icon cells also carry an image source and alt text."""

    text: str = ""
    img_src: str | None = None
    img_alt: str = ""

    def to_dict(self) -> dict:
        d: dict = {"text": self.text}
        if self.img_src is not None:
            d["img_src"] = self.img_src
            d["img_alt"] = self.img_alt
        return d


def _empty_row(row: TableRow) -> list[Cell]:
    # Column 0 holds the row header; forecast slots start at column 1.
    if row is TableRow.ICON:
        data = [Cell(img_src="") for _ in range(FORECAST_POINTS)]
    else:
        data = [Cell() for _ in range(FORECAST_POINTS)]
    return [Cell()] + data


def _empty_rows() -> dict[TableRow, list[Cell]]:
    return {row: _empty_row(row) for row in TableRow}


@dataclass
class PageState:
    city_input: str = ""
    city_display: str = ""
    caption: str = ""
    error_message: str = ""
    error_visible: bool = False
    suggestions: list[str] = field(default_factory=list)
    rows: dict[TableRow, list[Cell]] = field(default_factory=_empty_rows)

    def cell(self, row: TableRow, column: int) -> Cell | None:
        cells = self.rows.get(row)
        if cells is None or not 0 <= column < len(cells):
            return None
        return cells[column]

    @property
    def has_forecast(self) -> bool:
        return bool(self.city_display)

    def to_dict(self) -> dict:
        return {
            "city_input": self.city_input,
            "city": self.city_display,
            "caption": self.caption,
            "error": {"message": self.error_message, "visible": self.error_visible},
            "suggestions": list(self.suggestions),
            "rows": {
                row.value: [c.to_dict() for c in cells[1:]]
                for row, cells in self.rows.items()
            },
        }
