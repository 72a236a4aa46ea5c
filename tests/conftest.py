"""Shared fixtures: a canned upstream payload and a mock transport."""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from forecast_table.client import ForecastClient
from forecast_table.core.config import settings

MAIN_WEATHER = [
    "Clear", "Clear", "Clouds", "Rain", "Drizzle", "Thunderstorm", "Snow", "Atmosphere",
]


def make_point(i: int, **overrides) -> dict:
    point = {
        "temp": 4.5 + i,
        "feelsLike": 1.2 + i,
        "humidity": 80 + i,
        "windSpeed": 3.0 + i / 2,
        "clouds": 10 * i,
        "mainWeather": MAIN_WEATHER[i % len(MAIN_WEATHER)],
        "description": f"desc-{i}",
    }
    point.update(overrides)
    return point


def make_payload(city: str = "Мальме", n: int = 8) -> dict:
    return {"city": city, "forecast": [make_point(i) for i in range(n)]}


@pytest.fixture(autouse=True)
def _english_locale(monkeypatch):
    """Run tests against the English catalog unless a test says otherwise."""
    monkeypatch.setattr(settings, "LOCALE", "en")
    monkeypatch.setattr(settings, "ICON_BASE", "img")
    monkeypatch.setattr(settings, "BACKEND_API_URL", "https://forecast.test/api/weather")


@pytest.fixture
def payload() -> dict:
    return make_payload()


@pytest.fixture
def payload_factory() -> Callable[..., dict]:
    return make_payload


@pytest.fixture
def point_factory() -> Callable[..., dict]:
    return make_point


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(requests_seen) -> Callable[..., ForecastClient]:
    """Build a ForecastClient whose requests are answered by *handler*.

    *handler* is either a callable ``(request) -> httpx.Response`` or a
    ``(status, body)`` tuple; dict bodies are sent as JSON.
    """

    def _factory(handler, **kwargs) -> ForecastClient:
        if callable(handler):
            respond = handler
        else:
            status, body = handler

            def respond(request: httpx.Request) -> httpx.Response:
                if isinstance(body, (dict, list)):
                    return httpx.Response(
                        status,
                        content=json.dumps(body).encode("utf-8"),
                        headers={"Content-Type": "application/json"},
                    )
                return httpx.Response(status, text=body)

        def recording(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return respond(request)

        return ForecastClient(transport=httpx.MockTransport(recording), **kwargs)

    return _factory
