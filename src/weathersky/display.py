"""Presentation rules for the weather card — units, UV bands, weekdays, icons, backgrounds."""

from dataclasses import dataclass
from datetime import datetime

import pytz

from weathersky.i18n import t, weekday_name
from weathersky.models import Location, WeatherResponse

# Gradient stops as (top-left, bottom-right) hex colours
DAY_GRADIENT = ("#8ec5fc", "#e0c3fc")
NIGHT_GRADIENT = ("#0a2a4a", "#270845")
SKY_DAY_GRADIENT = ("#ffedbc", "#8ec5fc")
SKY_NIGHT_GRADIENT = NIGHT_GRADIENT

_UV_BANDS: tuple[tuple[float, str], ...] = (
    (3.0, "#34c759"),  # green
    (6.0, "#ffcc00"),  # yellow
    (8.0, "#ff9500"),  # orange
)
_UV_EXTREME = "#ff3b30"  # red
_UV_UNKNOWN = "#8e8e93"  # gray

_PLACEHOLDER_TIME = "--:--"


def c_to_f(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def format_temperature(celsius: float, fahrenheit: bool = False) -> str:
    """One-decimal temperature with unit ("21.4°C")."""
    if fahrenheit:
        return f"{c_to_f(celsius):.1f}°F"
    return f"{celsius:.1f}°C"


def format_temperature_range(min_c: float, max_c: float, fahrenheit: bool = False) -> str:
    """Forecast row label ("12 / 19°C"). Values are truncated toward zero, not rounded."""
    if fahrenheit:
        return f"{int(c_to_f(min_c))} / {int(c_to_f(max_c))}°F"
    return f"{int(min_c)} / {int(max_c)}°C"


def format_uv(uv: float) -> str:
    return "0" if uv == 0 else f"{uv:.1f}"


def uv_color(uv: float) -> str:
    """Hex colour for a UV index band; gray for negative or NaN input."""
    if not uv >= 0:
        return _UV_UNKNOWN
    for upper, color in _UV_BANDS:
        if uv < upper:
            return color
    return _UV_EXTREME


def larger_icon_url(url: str) -> str:
    """Absolute https URL for the 128x128 variant of an API condition icon."""
    if url.startswith("//"):
        url = "https:" + url
    return url.replace("64x64", "128x128")


def icon_url(url: str) -> str:
    if url.startswith("//"):
        return "https:" + url
    return url


def parse_localtime(location: Location) -> datetime | None:
    """Location local time as a datetime, tz-aware when the API sent a tz_id.

    The API omits the leading zero on single-digit hours ("2025-07-30 9:05").
    """
    try:
        dt = datetime.strptime(location.localtime, "%Y-%m-%d %H:%M")
    except ValueError:
        return None
    if location.tz_id:
        try:
            return pytz.timezone(location.tz_id).localize(dt)
        except pytz.UnknownTimeZoneError:
            return dt
    return dt


def format_localtime(location: Location) -> str:
    """Card clock line, e.g. "2025-07-30 09:05 CEST". Falls back to the raw API string."""
    dt = parse_localtime(location)
    if dt is None:
        return location.localtime
    if dt.tzinfo is None:
        return dt.strftime("%Y-%m-%d %H:%M")
    return dt.strftime("%Y-%m-%d %H:%M %Z")


def is_daytime(weather: WeatherResponse | None) -> bool:
    """Day between 06:00 and 18:00 local time. Unknown time counts as day."""
    if weather is None:
        return True
    dt = parse_localtime(weather.location)
    if dt is None:
        return True
    return 6 <= dt.hour < 18


def background_gradient(weather: WeatherResponse | None) -> tuple[str, str]:
    return DAY_GRADIENT if is_daytime(weather) else NIGHT_GRADIENT


def weekday_label(date_str: str, lang: str) -> str:
    """Weekday name for a "YYYY-MM-DD" forecast date, "" when unparsable."""
    try:
        date = datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError:
        return ""
    return weekday_name(date.weekday(), lang)


@dataclass(frozen=True)
class InfoItem:
    """One cell of the "more info" grid."""

    icon: str  # Symbol shown above the value
    value: str
    label: str
    toggles_unit: bool = False  # Tapping flips °C/°F


def more_info_items(weather: WeatherResponse, fahrenheit: bool, lang: str) -> tuple[InfoItem, ...]:
    """The six-cell grid: wind speed, rain, wind direction, feels-like, sunrise, sunset.

    Rain prefers today's forecast total, then current precipitation, then 0.
    Feels-like falls back to the air temperature.
    """
    current = weather.current
    today = weather.forecast_days[0] if weather.forecast_days else None

    if today is not None:
        rain_mm = today.day.totalprecip_mm
    elif current.precip_mm is not None:
        rain_mm = current.precip_mm
    else:
        rain_mm = 0.0
    feelslike_c = current.feelslike_c if current.feelslike_c is not None else current.temp_c
    sunrise = today.astro.sunrise if today is not None else _PLACEHOLDER_TIME
    sunset = today.astro.sunset if today is not None else _PLACEHOLDER_TIME

    return (
        InfoItem("🌬", f"{current.wind_kph:.1f} km/h", t("info_wind_speed", lang)),
        InfoItem("☂", f"{rain_mm:.1f} mm", t("info_rain", lang)),
        InfoItem("🧭", current.wind_dir, t("info_wind_dir", lang)),
        InfoItem(
            "🌡",
            format_temperature(feelslike_c, fahrenheit),
            t("info_feelslike", lang),
            toggles_unit=True,
        ),
        InfoItem("🌅", sunrise, t("info_sunrise", lang)),
        InfoItem("🌇", sunset, t("info_sunset", lang)),
    )
