"""Tests for forecast_table.model.forecast — payload validation."""

from __future__ import annotations

import pytest

from forecast_table.core.errors import ForecastFormatError
from forecast_table.model.forecast import Forecast, ForecastPoint


class TestForecastFromDict:
    def test_valid_payload(self, payload) -> None:
        forecast = Forecast.from_dict(payload)
        assert forecast.city == "Мальме"
        assert len(forecast.points) == 8
        first = forecast.points[0]
        assert first.temp == 4.5
        assert first.feels_like == 1.2
        assert first.wind_speed == 3.0
        assert first.main_weather == "Clear"
        assert first.description == "desc-0"

    @pytest.mark.parametrize("n", [0, 7, 9])
    def test_wrong_point_count(self, payload_factory, n: int) -> None:
        with pytest.raises(ForecastFormatError, match="exactly 8"):
            Forecast.from_dict(payload_factory(n=n))

    @pytest.mark.parametrize("data", [None, [], {}, "text", 42])
    def test_not_an_object(self, data) -> None:
        with pytest.raises(ForecastFormatError):
            Forecast.from_dict(data)

    def test_city_must_be_string(self, payload) -> None:
        payload["city"] = 123
        with pytest.raises(ForecastFormatError, match="city"):
            Forecast.from_dict(payload)

    def test_missing_city(self, payload) -> None:
        del payload["city"]
        with pytest.raises(ForecastFormatError, match="city"):
            Forecast.from_dict(payload)

    def test_forecast_must_be_list(self, payload) -> None:
        payload["forecast"] = {"0": payload["forecast"][0]}
        with pytest.raises(ForecastFormatError, match="list"):
            Forecast.from_dict(payload)

    def test_extra_keys_are_ignored(self, payload) -> None:
        payload["source"] = "owm"
        payload["forecast"][0]["pressure"] = 1013
        assert Forecast.from_dict(payload).city == "Мальме"

    def test_round_trip_keeps_wire_names(self, payload) -> None:
        assert Forecast.from_dict(payload).to_dict() == payload


class TestForecastPointFromDict:
    def test_missing_reading(self, point_factory) -> None:
        point = point_factory(0)
        del point["windSpeed"]
        with pytest.raises(ForecastFormatError, match=r"forecast\[3\]\.windSpeed"):
            ForecastPoint.from_dict(point, index=3)

    def test_boolean_is_not_a_number(self, point_factory) -> None:
        with pytest.raises(ForecastFormatError, match="temp"):
            ForecastPoint.from_dict(point_factory(0, temp=True))

    def test_numeric_string_is_rejected(self, point_factory) -> None:
        with pytest.raises(ForecastFormatError, match="humidity"):
            ForecastPoint.from_dict(point_factory(0, humidity="80"))

    def test_description_must_be_string(self, point_factory) -> None:
        with pytest.raises(ForecastFormatError, match="description"):
            ForecastPoint.from_dict(point_factory(0, description=None))

    def test_point_is_not_an_object(self) -> None:
        with pytest.raises(ForecastFormatError, match=r"forecast\[5\]"):
            ForecastPoint.from_dict([1, 2, 3], index=5)

    def test_ints_are_accepted(self, point_factory) -> None:
        point = ForecastPoint.from_dict(point_factory(0, temp=-3, clouds=100))
        assert point.temp == -3
        assert point.clouds == 100

    @pytest.mark.parametrize(
        "value", [float("nan"), float("inf"), float("-inf"), 10**400]
    )
    def test_non_finite_reading_is_rejected(self, point_factory, value) -> None:
        with pytest.raises(ForecastFormatError, match="temp must be a finite number"):
            ForecastPoint.from_dict(point_factory(0, temp=value))

    def test_non_finite_reading_fails_whole_payload(self, payload) -> None:
        payload["forecast"][4]["windSpeed"] = float("inf")
        with pytest.raises(ForecastFormatError, match=r"forecast\[4\]\.windSpeed"):
            Forecast.from_dict(payload)
