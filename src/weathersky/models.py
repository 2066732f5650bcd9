"""Weather payload and sky frame types — the shapes passed between fetch, sky and render code."""

import math
from dataclasses import dataclass


# --- Weather payload (WeatherAPI.com forecast.json) ---


@dataclass(frozen=True)
class Location:
    """Resolved location returned by the weather API."""

    name: str  # City name as the API spells it ("Quickborn")
    country: str
    localtime: str  # "YYYY-MM-DD HH:MM" in the location's own timezone
    tz_id: str | None = None  # IANA zone ("Europe/Berlin"), may be absent


@dataclass(frozen=True)
class Condition:
    """Weather condition label + icon URL."""

    text: str  # Localized description ("晴天", "Sunny")
    icon: str  # Protocol-relative URL ("//cdn.weatherapi.com/weather/64x64/day/113.png")


@dataclass(frozen=True)
class Current:
    """Current conditions block."""

    temp_c: float
    condition: Condition
    humidity: int  # Percent
    uv: float
    wind_kph: float
    wind_dir: str  # Compass point ("NNW")
    vis_km: float
    precip_mm: float | None = None
    feelslike_c: float | None = None


@dataclass(frozen=True)
class ForecastDayDetail:
    """Daily aggregate for one forecast day."""

    maxtemp_c: float
    mintemp_c: float
    totalprecip_mm: float
    condition: Condition


@dataclass(frozen=True)
class Astro:
    """Sunrise/sunset strings exactly as the API formats them ("06:12 AM")."""

    sunrise: str
    sunset: str


@dataclass(frozen=True)
class ForecastDay:
    """One day of the multi-day forecast."""

    date: str  # "YYYY-MM-DD"
    day: ForecastDayDetail
    astro: Astro


@dataclass(frozen=True)
class WeatherResponse:
    """The sole input to the weather card. Fully decoded payload."""

    location: Location
    current: Current
    forecast_days: tuple[ForecastDay, ...] = ()  # Empty when the payload has no forecast


# --- Sky animation ---


@dataclass(frozen=True)
class AnimationClock:
    """Time-of-day fraction + starfield seed. Replaced, never mutated."""

    progress: float = 0.0  # [0, 1): 0 = sunrise, 0.5 = sunset/moonrise
    day_seed: int = 42  # Incremented once per full day/night cycle

    @property
    def is_day(self) -> bool:
        return self.progress < 0.5

    def tick(self, increment: float = 0.0018) -> "AnimationClock":
        """Advance by one tick; wrap to the next day when progress passes 1.0."""
        progress = self.progress + increment
        if progress > 1.0:
            return AnimationClock(progress=0.0, day_seed=self.day_seed + 1)
        return AnimationClock(progress=progress, day_seed=self.day_seed)


@dataclass(frozen=True)
class SkyArc:
    """Semicircular track the sun and moon travel along, sized to the container."""

    width: float
    height: float

    @property
    def radius(self) -> float:
        return self.width * 0.38

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def center_y(self) -> float:
        return self.height * 0.7

    def point_at(self, angle: float) -> tuple[float, float]:
        """Screen point for a sweep angle in radians (0 = left horizon, π = right horizon)."""
        return (
            self.center_x + math.cos(angle - math.pi) * self.radius,
            self.center_y + math.sin(angle - math.pi) * self.radius,
        )


@dataclass(frozen=True)
class CelestialPosition:
    """Where the sun (day) or moon (night) sits on the arc for one frame."""

    x: float
    y: float
    is_day: bool
    angle: float  # Radians along the arc, 0 → π


@dataclass(frozen=True)
class Star:
    """A single background star. Layout is fixed per (seed, index); brightness twinkles."""

    index: int
    x: float
    y: float
    size: float  # Diameter in screen units
    base_brightness: float  # Opacity before twinkle, [0.5, 0.95]
    display_brightness: float  # base_brightness × twinkle at the generating progress

    @property
    def layout(self) -> tuple[float, float, float, float]:
        """The deterministic part of the star, independent of progress."""
        return (self.x, self.y, self.size, self.base_brightness)


@dataclass(frozen=True)
class SkyFrame:
    """The sole input to renderers. One fully computed animation frame."""

    clock: AnimationClock
    arc: SkyArc
    body: CelestialPosition  # Sun when body.is_day, otherwise moon
    stars: tuple[Star, ...]  # Empty during the day
