"""Tests for forecast_table.client — request shape and error wrapping."""

from __future__ import annotations

import asyncio
import logging
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from forecast_table.client import ForecastClient
from forecast_table.core.config import settings
from forecast_table.core.errors import CitySelectionError, ForecastFetchError


def _fetch(client: ForecastClient, city: str):
    async def go():
        async with client:
            return await client.fetch_forecast(city)

    return asyncio.run(go())


class TestRequest:
    def test_get_with_encoded_city_and_accept_header(
        self, make_client, payload, requests_seen
    ) -> None:
        _fetch(make_client((200, payload)), "Мальме")

        assert len(requests_seen) == 1
        request = requests_seen[0]
        assert request.method == "GET"
        assert request.headers["accept"] == "application/json"
        parts = urlsplit(str(request.url))
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == (
            "https://forecast.test/api/weather"
        )
        assert "%D0%9C" in parts.query  # non-ASCII is percent-encoded
        assert parse_qs(parts.query) == {"city": ["Мальме"]}

    def test_explicit_base_url_wins(self, make_client, payload, requests_seen) -> None:
        client = make_client((200, payload), base_url="https://other.test/weather")
        _fetch(client, "Мальме")
        assert requests_seen[0].url.host == "other.test"

    def test_empty_city_makes_no_request(self, make_client, requests_seen) -> None:
        with pytest.raises(CitySelectionError, match="City name cannot be empty"):
            _fetch(make_client((200, {})), "")
        assert requests_seen == []


class TestSuccess:
    def test_returns_validated_forecast(self, make_client, payload) -> None:
        forecast = _fetch(make_client((200, payload)), "Мальме")
        assert forecast.city == "Мальме"
        assert len(forecast.points) == 8

    def test_city_comes_from_response(self, make_client, payload_factory) -> None:
        forecast = _fetch(make_client((200, payload_factory(city="Malmö"))), "Мальме")
        assert forecast.city == "Malmö"


class TestHttpErrors:
    def test_message_from_json_body(self, make_client) -> None:
        with pytest.raises(ForecastFetchError) as exc_info:
            _fetch(make_client((404, {"message": "City not found"})), "Мальме")
        assert str(exc_info.value) == (
            "Failed to fetch weather data: HTTP error 404: City not found"
        )
        assert exc_info.value.status_code == 404

    def test_json_body_without_message(self, make_client) -> None:
        with pytest.raises(ForecastFetchError) as exc_info:
            _fetch(make_client((500, {"error": "boom"})), "Мальме")
        assert str(exc_info.value) == (
            "Failed to fetch weather data: HTTP error 500: Unknown error"
        )

    def test_unparseable_body_is_server_error(self, make_client) -> None:
        with pytest.raises(ForecastFetchError) as exc_info:
            _fetch(make_client((503, "<html>Bad gateway</html>")), "Мальме")
        assert str(exc_info.value) == (
            "Failed to fetch weather data: HTTP error 503: Server error"
        )
        assert exc_info.value.status_code == 503

    def test_error_is_logged(self, make_client, caplog) -> None:
        caplog.set_level(logging.ERROR, logger="forecast_table.client")
        with pytest.raises(ForecastFetchError):
            _fetch(make_client((500, {"message": "down"})), "Мальме")
        assert any("down" in r.getMessage() for r in caplog.records)


class TestPayloadErrors:
    def test_wrong_point_count(self, make_client, payload_factory) -> None:
        with pytest.raises(ForecastFetchError) as exc_info:
            _fetch(make_client((200, payload_factory(n=7))), "Мальме")
        assert str(exc_info.value) == (
            "Failed to fetch weather data: "
            "Invalid forecast structure (expected an array of 8 points)"
        )
        assert exc_info.value.status_code is None

    def test_array_instead_of_object(self, make_client) -> None:
        with pytest.raises(ForecastFetchError, match="Invalid forecast structure"):
            _fetch(make_client((200, [])), "Мальме")

    def test_invalid_json_on_success(self, make_client) -> None:
        with pytest.raises(ForecastFetchError, match="^Failed to fetch weather data: "):
            _fetch(make_client((200, "not json")), "Мальме")


class TestTransportErrors:
    def test_connect_error_is_wrapped(self, make_client) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ForecastFetchError) as exc_info:
            _fetch(make_client(refuse), "Мальме")
        assert str(exc_info.value) == (
            "Failed to fetch weather data: connection refused"
        )
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout_is_wrapped(self, make_client) -> None:
        def slow(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ForecastFetchError, match="timed out"):
            _fetch(make_client(slow), "Мальме")


class TestLocale:
    def test_ukrainian_messages(self, make_client) -> None:
        client = make_client((404, {"message": "nope"}), locale="uk")
        with pytest.raises(ForecastFetchError) as exc_info:
            _fetch(client, "Мальме")
        assert str(exc_info.value) == (
            "Не вдалося одержати дані про погоду: Помилка HTTP 404: nope"
        )


class TestClientLifecycle:
    def test_borrowed_client_is_not_closed(self, payload) -> None:
        transport = httpx.MockTransport(lambda r: httpx.Response(200, json=payload))

        async def go():
            async with httpx.AsyncClient(transport=transport) as http:
                async with ForecastClient(client=http) as fc:
                    await fc.fetch_forecast("Мальме")
                assert not http.is_closed
                await fc.fetch_forecast("Гетеборг")

        asyncio.run(go())

    def test_borrowed_client_gets_configured_timeout(self, payload) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.extensions["timeout"])
            return httpx.Response(200, json=payload)

        async def go():
            async with httpx.AsyncClient(
                transport=httpx.MockTransport(handler), timeout=60.0
            ) as http:
                async with ForecastClient(client=http, timeout=1.5) as fc:
                    await fc.fetch_forecast("Мальме")

        asyncio.run(go())
        assert seen[0]["read"] == 1.5
        assert seen[0]["connect"] == 1.5

    def test_settings_timeout_is_the_default(
        self, monkeypatch, make_client, payload, requests_seen
    ) -> None:
        monkeypatch.setattr(settings, "REQUEST_TIMEOUT", 4.0)
        _fetch(make_client((200, payload)), "Мальме")
        assert requests_seen[0].extensions["timeout"]["read"] == 4.0
