"""Message catalogs.

Copy lives in ``<locale>.json`` next to this module and is addressed by
dot-separated keys, e.g. ``errors.fetch_failed``.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

_CATALOG_DIR = Path(__file__).resolve().parent

DEFAULT_LOCALE = "uk"


def available_locales() -> list[str]:
    return sorted(p.stem for p in _CATALOG_DIR.glob("*.json"))


@lru_cache(maxsize=None)
def load_catalog(locale: str) -> dict:
    path = _CATALOG_DIR / f"{locale}.json"
    if not path.exists():
        raise KeyError(f"unknown locale: {locale!r}")
    return json.loads(path.read_text(encoding="utf-8"))


def _resolve_dot_path(obj: Any, key: str) -> Any:
    cur = obj
    for part in key.split("."):
        if not isinstance(cur, dict):
            raise KeyError(f"non-dict while resolving {key} at {part}")
        if part not in cur:
            raise KeyError(f"missing {part} while resolving {key}")
        cur = cur[part]
    return cur


def translate(key: str, locale: str | None = None, **params: Any) -> str:
    """Return the message for *key*, formatted with *params*.

    Falls back to the configured locale when *locale* is None.
    """
    if locale is None:
        from forecast_table.core.config import settings

        locale = settings.LOCALE or DEFAULT_LOCALE
    value = _resolve_dot_path(load_catalog(locale), key)
    if not isinstance(value, str):
        raise KeyError(f"{key} does not name a message in locale {locale!r}")
    return value.format(**params) if params else value
