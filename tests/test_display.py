"""Tests for :mod:`weathersky.display`."""

from __future__ import annotations

from dataclasses import replace

import pytest

from weathersky.display import (
    DAY_GRADIENT,
    NIGHT_GRADIENT,
    background_gradient,
    c_to_f,
    format_localtime,
    format_temperature,
    format_temperature_range,
    format_uv,
    icon_url,
    is_daytime,
    larger_icon_url,
    more_info_items,
    parse_localtime,
    uv_color,
    weekday_label,
)
from weathersky.models import Location, WeatherResponse
from weathersky.weather import decode_weather


@pytest.fixture
def weather(forecast_payload: dict) -> WeatherResponse:
    return decode_weather(forecast_payload)


def _at(weather: WeatherResponse, localtime: str) -> WeatherResponse:
    return replace(weather, location=replace(weather.location, localtime=localtime))


class TestTemperature:
    def test_c_to_f(self) -> None:
        assert c_to_f(0) == 32
        assert c_to_f(100) == 212

    def test_format_temperature(self) -> None:
        assert format_temperature(21.44) == "21.4°C"
        assert format_temperature(21.4, fahrenheit=True) == "70.5°F"

    def test_range_truncates(self) -> None:
        assert format_temperature_range(14.6, 23.8) == "14 / 23°C"
        assert format_temperature_range(-0.5, 19.2) == "0 / 19°C"
        assert format_temperature_range(14.6, 23.8, fahrenheit=True) == "58 / 74°F"


class TestUv:
    @pytest.mark.parametrize(
        "uv,color",
        [
            (0.0, "#34c759"),
            (2.9, "#34c759"),
            (3.0, "#ffcc00"),
            (5.99, "#ffcc00"),
            (6.0, "#ff9500"),
            (8.0, "#ff3b30"),
            (11.5, "#ff3b30"),
            (-1.0, "#8e8e93"),
            (float("nan"), "#8e8e93"),
        ],
    )
    def test_bands(self, uv: float, color: str) -> None:
        assert uv_color(uv) == color

    def test_format_uv(self) -> None:
        assert format_uv(0) == "0"
        assert format_uv(5.25) == "5.2"


class TestIcons:
    def test_larger_icon_url(self) -> None:
        assert (
            larger_icon_url("//cdn.weatherapi.com/weather/64x64/day/113.png")
            == "https://cdn.weatherapi.com/weather/128x128/day/113.png"
        )

    def test_larger_icon_url_keeps_absolute(self) -> None:
        assert larger_icon_url("https://x.test/a.png") == "https://x.test/a.png"

    def test_icon_url(self) -> None:
        assert icon_url("//cdn.test/a.png") == "https://cdn.test/a.png"


class TestDaytime:
    def test_no_weather_counts_as_day(self) -> None:
        assert is_daytime(None)
        assert background_gradient(None) == DAY_GRADIENT

    @pytest.mark.parametrize(
        "localtime,expected",
        [
            ("2025-07-30 5:59", False),
            ("2025-07-30 6:00", True),
            ("2025-07-30 17:59", True),
            ("2025-07-30 18:00", False),
            ("garbage", True),
        ],
    )
    def test_six_to_eighteen(self, weather: WeatherResponse, localtime: str, expected: bool) -> None:
        assert is_daytime(_at(weather, localtime)) is expected

    def test_night_gradient(self, weather: WeatherResponse) -> None:
        assert background_gradient(_at(weather, "2025-07-30 23:10")) == NIGHT_GRADIENT

    def test_parse_localtime_with_zone(self) -> None:
        dt = parse_localtime(Location("Taipei", "Taiwan", "2025-07-30 9:05", "Asia/Taipei"))
        assert dt is not None
        assert (dt.hour, dt.minute) == (9, 5)
        assert dt.utcoffset().total_seconds() == 8 * 3600

    def test_parse_localtime_unknown_zone_is_naive(self) -> None:
        dt = parse_localtime(Location("X", "Y", "2025-07-30 09:05", "Mars/Olympus"))
        assert dt is not None
        assert dt.tzinfo is None

    def test_format_localtime_shows_zone_abbreviation(self, weather: WeatherResponse) -> None:
        assert format_localtime(weather.location) == "2025-07-30 09:05 CEST"
        winter = replace(weather.location, localtime="2025-01-15 18:30")
        assert format_localtime(winter) == "2025-01-15 18:30 CET"

    def test_format_localtime_without_zone(self) -> None:
        assert format_localtime(Location("X", "Y", "2025-07-30 9:05")) == "2025-07-30 09:05"
        assert format_localtime(Location("X", "Y", "soon", "Europe/Berlin")) == "soon"


class TestWeekday:
    def test_chinese(self) -> None:
        # 2025-07-30 is a Wednesday
        assert weekday_label("2025-07-30", "zh_tw") == "星期三"
        assert weekday_label("2025-08-03", "zh_tw") == "星期日"

    def test_english(self) -> None:
        assert weekday_label("2025-07-30", "en") == "Wednesday"

    def test_unparsable(self) -> None:
        assert weekday_label("30/07/2025", "zh_tw") == ""


class TestMoreInfo:
    def test_uses_today_forecast(self, weather: WeatherResponse) -> None:
        items = more_info_items(weather, fahrenheit=False, lang="en")
        values = [i.value for i in items]
        assert values == ["13.0 km/h", "1.2 mm", "WSW", "22.0°C", "05:21 AM", "09:27 PM"]
        assert [i.toggles_unit for i in items] == [False, False, False, True, False, False]
        assert items[0].label == "Wind"

    def test_fallbacks_without_forecast(self, weather: WeatherResponse) -> None:
        bare = replace(
            weather,
            forecast_days=(),
            current=replace(weather.current, feelslike_c=None),
        )
        values = [i.value for i in more_info_items(bare, fahrenheit=True, lang="zh_tw")]
        assert values[1] == "0.1 mm"
        assert values[3] == "70.5°F"
        assert values[4:] == ["--:--", "--:--"]

    def test_rain_defaults_to_zero(self, weather: WeatherResponse) -> None:
        bare = replace(weather, forecast_days=(), current=replace(weather.current, precip_mm=None))
        assert more_info_items(bare, False, "zh_tw")[1].value == "0.0 mm"
