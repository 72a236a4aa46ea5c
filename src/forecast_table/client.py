"""Forecast API client.

One request per lookup::

    GET <BACKEND_API_URL>?city=<city>
    Accept: application/json

A successful response carries ``{"city": str, "forecast": [8 points]}``.
Every failure after the request is issued surfaces as a single
:class:`ForecastFetchError` whose message is ready to show to the user.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from forecast_table.core.config import settings
from forecast_table.core.errors import (
    CitySelectionError,
    ForecastFetchError,
    ForecastFormatError,
)
from forecast_table.i18n import translate
from forecast_table.model.forecast import Forecast

_logger = logging.getLogger(__name__)


class _UpstreamError(Exception):
    """Internal carrier for an error message before it is wrapped."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ForecastClient:
    """Async client for the forecast backend.

    Args:
        base_url: Forecast endpoint; defaults to ``settings.BACKEND_API_URL``.
        timeout: Request timeout in seconds, applied to every request, also
            on a borrowed client.
        locale: Message catalog for error text.
        client: Optional HTTP client for connection reuse. A borrowed client
            is never closed by this object.
        transport: Optional transport for the owned client (tests use
            ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        locale: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url or settings.BACKEND_API_URL
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.locale = locale
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self.timeout, transport=transport
        )

    async def __aenter__(self) -> ForecastClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _t(self, key: str, **params: Any) -> str:
        return translate(key, self.locale, **params)

    def _error_message(self, response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = {"message": self._t("errors.server_error")}
        message = body.get("message") if isinstance(body, dict) else None
        return self._t(
            "errors.http",
            status=response.status_code,
            message=message or self._t("errors.unknown_error"),
        )

    async def fetch_forecast(self, city: str) -> Forecast:
        """Fetch and validate the forecast for *city*.

        Raises
        ------
        CitySelectionError
            If *city* is empty. No request is made.
        ForecastFetchError
            On transport failure, a non-2xx status, an unparseable body or a
            payload without exactly eight forecast points.
        """
        if not city:
            raise CitySelectionError(self._t("errors.empty_city"))

        try:
            response = await self._client.get(
                self.base_url,
                params={"city": city},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            if not response.is_success:
                raise _UpstreamError(
                    self._error_message(response), status_code=response.status_code
                )
            data = response.json()
            try:
                forecast = Forecast.from_dict(data)
            except ForecastFormatError as e:
                _logger.debug("Rejected forecast payload for %s: %s", city, e)
                raise _UpstreamError(self._t("errors.invalid_structure")) from e
        except _UpstreamError as e:
            _logger.error("Error while fetching weather data for %s: %s", city, e)
            raise ForecastFetchError(
                self._t("errors.fetch_failed", message=str(e)),
                status_code=e.status_code,
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            detail = str(e) or type(e).__name__
            _logger.error("Error while fetching weather data for %s: %s", city, detail)
            raise ForecastFetchError(
                self._t("errors.fetch_failed", message=detail)
            ) from e

        _logger.info("Fetched %d forecast points for %s", len(forecast.points), city)
        return forecast
