# backend/tests/test_weather_service.py

from datetime import date

import pytest

from budget_travel.services.weather_service import (
    WeatherService,
    classify_condition,
    daily_weather,
    seasonal_offset,
)


@pytest.mark.parametrize("chance, max_temp, expected", [
    (100, 20, "stormy"),
    (90, 20, "stormy"),
    (89, 20, "rainy"),
    (70, 20, "rainy"),
    (69, 20, "cloudy"),
    (40, 20, "cloudy"),
    (39, 20, "partly-cloudy"),
    (20, 20, "partly-cloudy"),
    (19, 20, "sunny"),
    (0, 20, "sunny"),
])
def test_classification_thresholds(chance, max_temp, expected):
    assert classify_condition(chance, max_temp) == expected


def test_rain_turns_to_snow_below_two_degrees():
    assert classify_condition(70, 1) == "snowy"
    assert classify_condition(75, -10) == "snowy"
    assert classify_condition(70, 2) == "rainy"
    # only rain is converted
    assert classify_condition(50, -10) == "cloudy"


def test_seasonal_offset_peaks_in_july():
    assert seasonal_offset(7) == pytest.approx(8)
    assert seasonal_offset(1) == pytest.approx(-8)
    assert seasonal_offset(4) == pytest.approx(0, abs=1e-9)
    assert seasonal_offset(10) == pytest.approx(0, abs=1e-9)


def test_forecast_covers_inclusive_range():
    forecast = WeatherService(max_days=14).get_forecast("Barcelona, Spain", "2025-07-01", "2025-07-05")

    assert [w.date for w in forecast] == [date(2025, 7, d) for d in range(1, 6)]


def test_forecast_is_capped():
    forecast = WeatherService(max_days=14).get_forecast("Oslo", "2025-01-01", "2025-02-15")
    assert len(forecast) == 14


def test_forecast_is_deterministic():
    service = WeatherService(max_days=14)
    first = service.get_forecast("Oslo", "2025-01-01", "2025-01-10")
    second = service.get_forecast("Oslo", "2025-01-01", "2025-01-10")
    assert [w.model_dump() for w in first] == [w.model_dump() for w in second]


def test_forecast_values_are_consistent():
    for w in WeatherService(max_days=14).get_forecast("Reykjavik", "2025-01-01", "2025-01-14"):
        assert w.temperature.min < w.temperature.max
        assert w.temperature.min <= w.temperature.current <= w.temperature.max
        assert 0 <= w.precipitation_chance <= 100
        assert w.condition == classify_condition(w.precipitation_chance, w.temperature.max)
        assert 0 <= w.humidity <= 100
        assert w.wind_speed >= 5


def test_location_lookup_ignores_case():
    day = date(2025, 3, 3)
    assert daily_weather("PARIS", day) == daily_weather("paris", day)


def test_summer_is_warmer_than_winter():
    winter = daily_weather("Chicago", date(2025, 1, 15))
    summer = daily_weather("Chicago", date(2025, 7, 15))
    # seasonal swing is 16C, daily noise at most 6C
    assert summer.temperature.max > winter.temperature.max


@pytest.mark.parametrize("location, start, end", [
    ("Oslo", "2025-01-10", "2025-01-01"),
    ("", "2025-01-01", "2025-01-03"),
    ("Oslo", "bad", "2025-01-03"),
])
def test_bad_input_gives_empty_forecast(location, start, end):
    assert WeatherService(max_days=14).get_forecast(location, start, end) == []
