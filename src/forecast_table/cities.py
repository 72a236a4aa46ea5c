"""The fixed list of cities a forecast can be requested for."""

from __future__ import annotations

VALID_CITIES: tuple[str, ...] = (
    "Стокгольм",
    "Гетеборг",
    "Мальме",
    "Уппсала",
    "Вестерос",
    "Еребру",
    "Лінчепінг",
    "Гельсінборг",
    "Норчепінг",
    "Євле",
)


def normalize_city(raw: str | None) -> str:
    return (raw or "").strip()


def is_valid_city(raw: str | None) -> bool:
    """True when the trimmed value is exactly one of ``VALID_CITIES``.

    Matching is case-sensitive; suggestions are picked from a list, not typed.
    """
    city = normalize_city(raw)
    return bool(city) and city in VALID_CITIES
