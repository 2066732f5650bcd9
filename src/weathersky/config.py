"""Environment-driven settings. Call load_dotenv() before load_settings() at entry points."""

import os
from dataclasses import dataclass

from weathersky.sky import DEFAULT_STAR_COUNT, TICK_INCREMENT, TICK_SECONDS

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"
RENDERERS = ("svg", "plotly")


class ConfigError(ValueError):
    """Malformed configuration value."""


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    lang: str = "zh_tw"
    days: int = 3
    timeout: float = 10.0
    default_city: str = "Quickborn"
    star_count: int = DEFAULT_STAR_COUNT
    tick_seconds: float = TICK_SECONDS
    tick_increment: float = TICK_INCREMENT
    frame_seconds: float = 0.5
    renderer: str = "svg"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def load_settings() -> Settings:
    """Read Settings from the process environment.

    Raises:
        ConfigError: When a numeric variable is malformed or SKY_RENDERER is unknown.
    """
    renderer = os.getenv("SKY_RENDERER", "svg").strip().lower() or "svg"
    if renderer not in RENDERERS:
        raise ConfigError(f"SKY_RENDERER must be one of {RENDERERS}, got {renderer!r}")

    return Settings(
        api_key=os.getenv("WEATHERAPI_KEY") or None,
        base_url=os.getenv("WEATHERAPI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        lang=os.getenv("WEATHER_LANG", "zh_tw"),
        days=_env_int("WEATHER_DAYS", 3),
        timeout=_env_float("WEATHER_TIMEOUT", 10.0),
        default_city=os.getenv("WEATHER_DEFAULT_CITY", "Quickborn"),
        star_count=_env_int("SKY_STAR_COUNT", DEFAULT_STAR_COUNT),
        tick_seconds=_env_float("SKY_TICK_SECONDS", TICK_SECONDS),
        tick_increment=_env_float("SKY_TICK_INCREMENT", TICK_INCREMENT),
        frame_seconds=_env_float("SKY_FRAME_SECONDS", 0.5),
        renderer=renderer,
    )
