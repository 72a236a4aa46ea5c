"""Exception hierarchy for forecast retrieval and city selection."""

from __future__ import annotations


class ForecastError(Exception):
    """Base class for every error surfaced to the user as page text."""


class ForecastFormatError(ForecastError):
    """The upstream payload does not have the expected forecast shape."""


class ForecastFetchError(ForecastError):
    """Retrieving the forecast failed.

    The message is already user-facing: callers display ``str(exc)`` as is.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CitySelectionError(ForecastError):
    """The submitted city is not one of the selectable cities."""

    def __init__(self, message: str, *, city: str = "") -> None:
        super().__init__(message)
        self.city = city
