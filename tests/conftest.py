import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402
from hypothesis import HealthCheck, settings  # noqa: E402

from weathersky.config import Settings  # noqa: E402

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

_ENV_VARS = (
    "WEATHERAPI_KEY",
    "WEATHERAPI_BASE_URL",
    "WEATHER_LANG",
    "WEATHER_DAYS",
    "WEATHER_TIMEOUT",
    "WEATHER_DEFAULT_CITY",
    "SKY_STAR_COUNT",
    "SKY_TICK_SECONDS",
    "SKY_TICK_INCREMENT",
    "SKY_FRAME_SECONDS",
    "SKY_RENDERER",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env or shell exports out of the tests."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def api_settings() -> Settings:
    return Settings(api_key="test-key", base_url="https://weather.test/v1")


@pytest.fixture
def forecast_payload() -> dict:
    """A trimmed but real-shaped WeatherAPI forecast.json body."""

    return {
        "location": {
            "name": "Quickborn",
            "region": "Schleswig-Holstein",
            "country": "Germany",
            "tz_id": "Europe/Berlin",
            "localtime": "2025-07-30 9:05",
        },
        "current": {
            "temp_c": 21.4,
            "condition": {
                "text": "晴天",
                "icon": "//cdn.weatherapi.com/weather/64x64/day/113.png",
                "code": 1000,
            },
            "humidity": 64,
            "uv": 5.2,
            "wind_kph": 13.0,
            "wind_dir": "WSW",
            "vis_km": 10.0,
            "precip_mm": 0.1,
            "feelslike_c": 22.0,
        },
        "forecast": {
            "forecastday": [
                {
                    "date": "2025-07-30",
                    "day": {
                        "maxtemp_c": 23.8,
                        "mintemp_c": 14.6,
                        "totalprecip_mm": 1.25,
                        "condition": {
                            "text": "局部陣雨",
                            "icon": "//cdn.weatherapi.com/weather/64x64/day/176.png",
                        },
                    },
                    "astro": {"sunrise": "05:21 AM", "sunset": "09:27 PM"},
                },
                {
                    "date": "2025-07-31",
                    "day": {
                        "maxtemp_c": 19.2,
                        "mintemp_c": -0.5,
                        "totalprecip_mm": 0.0,
                        "condition": {
                            "text": "多雲",
                            "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png",
                        },
                    },
                    "astro": {"sunrise": "05:23 AM", "sunset": "09:25 PM"},
                },
            ]
        },
    }
