"""Weather fetch layer — one WeatherAPI.com forecast GET and the JSON → model decoding."""

from dataclasses import replace
from typing import Any

import httpx

from weathersky.config import Settings, load_settings
from weathersky.log import get_logger
from weathersky.models import (
    Astro,
    Condition,
    Current,
    ForecastDay,
    ForecastDayDetail,
    Location,
    WeatherResponse,
)

logger = get_logger(__name__)


class WeatherError(Exception):
    """Weather lookup failure."""


class WeatherRequestError(WeatherError):
    """Transport failure or non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class WeatherDecodeError(WeatherError):
    """Response body is not JSON or does not match the forecast schema."""


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _decode_condition(raw: dict) -> Condition:
    return Condition(text=str(raw["text"]), icon=str(raw["icon"]))


def _decode_forecast_day(raw: dict) -> ForecastDay:
    day = raw["day"]
    astro = raw["astro"]
    return ForecastDay(
        date=str(raw["date"]),
        day=ForecastDayDetail(
            maxtemp_c=float(day["maxtemp_c"]),
            mintemp_c=float(day["mintemp_c"]),
            totalprecip_mm=float(day["totalprecip_mm"]),
            condition=_decode_condition(day["condition"]),
        ),
        astro=Astro(sunrise=str(astro["sunrise"]), sunset=str(astro["sunset"])),
    )


def decode_weather(payload: Any) -> WeatherResponse:
    """Convert a decoded forecast.json document into a WeatherResponse.

    Args:
        payload: Parsed JSON (dict) as returned by the API.

    Returns:
        WeatherResponse. `forecast_days` is empty when the payload has no forecast.

    Raises:
        WeatherDecodeError: On any missing field or wrongly typed value.
    """
    try:
        loc = payload["location"]
        cur = payload["current"]
        location = Location(
            name=str(loc["name"]),
            country=str(loc["country"]),
            localtime=str(loc["localtime"]),
            tz_id=loc.get("tz_id"),
        )
        current = Current(
            temp_c=float(cur["temp_c"]),
            condition=_decode_condition(cur["condition"]),
            humidity=int(cur["humidity"]),
            uv=float(cur["uv"]),
            wind_kph=float(cur["wind_kph"]),
            wind_dir=str(cur["wind_dir"]),
            vis_km=float(cur["vis_km"]),
            precip_mm=_optional_float(cur.get("precip_mm")),
            feelslike_c=_optional_float(cur.get("feelslike_c")),
        )
        forecast = payload.get("forecast")
        days = (
            tuple(_decode_forecast_day(d) for d in forecast["forecastday"])
            if forecast is not None
            else ()
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise WeatherDecodeError(f"unexpected forecast schema: {e!r}") from e

    return WeatherResponse(location=location, current=current, forecast_days=days)


def _api_message(resp: httpx.Response) -> str:
    """Best-effort extraction of WeatherAPI's {"error": {"message": ...}} body."""
    try:
        return str(resp.json()["error"]["message"])
    except (ValueError, KeyError, TypeError):
        return resp.reason_phrase or "HTTP error"


def request_weather(
    city: str,
    settings: Settings,
    client: httpx.Client | None = None,
) -> WeatherResponse:
    """Single forecast.json call with a typed failure.

    Args:
        city: Free-form city query ("Quickborn", "台北").
        settings: Supplies api key, base URL, language, day window, and timeout.
        client: Optional pre-built client (tests inject a MockTransport here).

    Returns:
        Decoded WeatherResponse.

    Raises:
        WeatherRequestError: Missing key, transport error, or non-2xx status.
        WeatherDecodeError: Body is not JSON or does not match the schema.
    """
    if not settings.api_key:
        raise WeatherRequestError("WEATHERAPI_KEY is not set")

    params = {
        "key": settings.api_key,
        "q": city,
        "lang": settings.lang,
        "days": settings.days,
    }
    url = f"{settings.base_url}/forecast.json"
    try:
        if client is None:
            with httpx.Client(timeout=settings.timeout) as own_client:
                resp = own_client.get(url, params=params)
        else:
            resp = client.get(url, params=params)
    except httpx.HTTPError as e:
        raise WeatherRequestError(f"request failed: {e}") from e

    if resp.is_error:
        raise WeatherRequestError(
            f"HTTP {resp.status_code}: {_api_message(resp)}",
            status_code=resp.status_code,
        )

    try:
        payload = resp.json()
    except ValueError as e:
        raise WeatherDecodeError(f"response is not JSON: {e}") from e
    return decode_weather(payload)


def fetch_weather(
    city: str,
    *,
    api_key: str | None = None,
    lang: str | None = None,
    days: int | None = None,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> WeatherResponse | None:
    """Fetch current conditions + forecast for a city, or None when unavailable.

    Network errors, HTTP errors, and decode errors all collapse to None; the
    cause is only logged. Keyword overrides take precedence over settings.
    """
    base = settings or load_settings()
    effective = replace(
        base,
        api_key=api_key or base.api_key,
        lang=lang or base.lang,
        days=days or base.days,
    )
    try:
        weather = request_weather(city, effective, client=client)
    except WeatherError as e:
        logger.warning("Weather unavailable for %r: %s", city, e)
        return None
    logger.info(
        "Fetched weather for %s, %s (%d forecast days)",
        weather.location.name,
        weather.location.country,
        len(weather.forecast_days),
    )
    return weather
