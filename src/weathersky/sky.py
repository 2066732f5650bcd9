"""Sky animation core — solar/lunar arc position, seeded starfield, and the wall-clock driver.

Everything except ClockDriver is a pure function of its arguments, so a frame
can be recomputed at any time (view refresh, PNG export) without the sky
visibly reshuffling.
"""

import math
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from weathersky.models import AnimationClock, CelestialPosition, SkyArc, SkyFrame, Star

_MASK64 = (1 << 64) - 1
_MULTIPLIER = 2685821657736338717
_STREAM_STRIDE = 17

DEFAULT_STAR_COUNT = 100
TICK_SECONDS = 0.05
TICK_INCREMENT = 0.0018


# --- Solar / lunar position ---


def position(progress: float, width: float = 1.0, height: float = 1.0) -> CelestialPosition:
    """Place the sun (progress < 0.5) or moon on the arc for a container size.

    Each half re-derives its local fraction from 0, so the moon rises at the
    same left horizon point the sun rose from.

    Args:
        progress: Time-of-day fraction in [0, 1).
        width: Container width in screen units.
        height: Container height in screen units.

    Returns:
        CelestialPosition with screen x/y, day flag, and sweep angle.
    """
    is_day = progress < 0.5
    local = progress / 0.5 if is_day else (progress - 0.5) / 0.5
    angle = math.pi * local
    x, y = SkyArc(width, height).point_at(angle)
    return CelestialPosition(x=x, y=y, is_day=is_day, angle=angle)


# --- Seeded bit generator ---


def stream_for(seed: int, index: int) -> int:
    """Initial generator state for one star's private stream."""
    return (seed + index * _STREAM_STRIDE) & _MASK64


def next_u64(state: int) -> tuple[int, int]:
    """One xorshift64 step. Returns (output, next_state)."""
    state ^= state >> 12
    state ^= (state << 25) & _MASK64
    state ^= state >> 27
    return (state * _MULTIPLIER) & _MASK64, state


def unit_float(value: int) -> float:
    """Map a 64-bit output onto [0, 1) using its top 53 bits."""
    return (value >> 11) * (1.0 / (1 << 53))


class _Stream:
    """Threads generator state through consecutive uniform draws."""

    def __init__(self, state: int) -> None:
        self._state = state

    def uniform(self, low: float, high: float) -> float:
        value, self._state = next_u64(self._state)
        return low + (high - low) * unit_float(value)


# --- Starfield ---


def twinkle(progress: float, index: int) -> float:
    """Per-frame brightness multiplier, in [0.35, 0.95]."""
    return 0.65 + 0.3 * math.sin(progress * 6 + index)


def make_star(seed: int, index: int, width: float, height: float, progress: float = 0.0) -> Star:
    """Derive one star. Draw order (x, y, size, brightness) is part of the layout contract."""
    stream = _Stream(stream_for(seed, index))
    x = stream.uniform(0.0, width)
    y = stream.uniform(0.0, height)
    size = stream.uniform(1.2, 2.9)
    base_brightness = stream.uniform(0.5, 0.95)
    return Star(
        index=index,
        x=x,
        y=y,
        size=size,
        base_brightness=base_brightness,
        display_brightness=base_brightness * twinkle(progress, index),
    )


@dataclass(frozen=True)
class StarField:
    """Lazy, restartable sequence of `count` stars. Iterating twice yields the same layout."""

    seed: int
    count: int
    width: float
    height: float
    progress: float = 0.0

    def __iter__(self) -> Iterator[Star]:
        for index in range(self.count):
            yield make_star(self.seed, index, self.width, self.height, self.progress)

    def __len__(self) -> int:
        return self.count


def star_field(
    seed: int,
    count: int = DEFAULT_STAR_COUNT,
    width: float = 1.0,
    height: float = 1.0,
    progress: float = 0.0,
) -> StarField:
    """Build the starfield for a seed and container size.

    Args:
        seed: Day seed (AnimationClock.day_seed).
        count: Number of stars.
        width: Field width; stars land in [0, width].
        height: Field height; stars land in [0, height].
        progress: Time-of-day fraction driving the twinkle.

    Returns:
        StarField iterable of Star.
    """
    return StarField(seed=seed, count=count, width=width, height=height, progress=progress)


# --- Clock driver ---


class ClockDriver:
    """Advances an AnimationClock by wall-clock time, not by render frames.

    Each poll applies one tick for every whole `period` elapsed since the last
    applied tick, so the cycle length is the same however often the display
    refreshes.
    """

    def __init__(
        self,
        period: float = TICK_SECONDS,
        increment: float = TICK_INCREMENT,
        clock: AnimationClock | None = None,
        time_source: Callable[[], float] = time.monotonic,
    ) -> None:
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        if increment <= 0:
            raise ValueError(f"increment must be positive, got {increment}")
        self.period = period
        self.increment = increment
        self._time_source = time_source
        self._clock = clock or AnimationClock()
        self._last = time_source()

    @property
    def clock(self) -> AnimationClock:
        return self._clock

    def poll(self) -> AnimationClock:
        """Apply all ticks due since the previous poll and return the current clock."""
        now = self._time_source()
        due = int((now - self._last) // self.period)
        if due > 0:
            self._clock = advance(self._clock, due, self.increment)
            self._last += due * self.period
        return self._clock

    def reset(self, clock: AnimationClock | None = None) -> None:
        self._clock = clock or AnimationClock()
        self._last = self._time_source()


def _ticks_per_cycle(increment: float) -> int:
    """Ticks from progress 0 until the wrap tick, inclusive."""
    if increment <= 0:
        raise ValueError(f"increment must be positive, got {increment}")
    clock = AnimationClock(progress=0.0, day_seed=0)
    ticks = 0
    while clock.day_seed == 0:
        clock = clock.tick(increment)
        ticks += 1
    return ticks


def advance(clock: AnimationClock, ticks: int, increment: float = TICK_INCREMENT) -> AnimationClock:
    """Apply `ticks` ticks. Whole cycles past the first wrap are skipped arithmetically."""
    while ticks > 0 and clock.progress > 0.0:
        clock = clock.tick(increment)
        ticks -= 1
    if ticks <= 0:
        return clock
    cycle = _ticks_per_cycle(increment)
    skipped, ticks = divmod(ticks, cycle)
    clock = AnimationClock(progress=clock.progress, day_seed=clock.day_seed + skipped)
    for _ in range(ticks):
        clock = clock.tick(increment)
    return clock


def cycle_frames(
    clock: AnimationClock, frames: int, increment: float = TICK_INCREMENT
) -> Iterator[AnimationClock]:
    """Yield `frames` successive clocks starting at `clock` (for offline export)."""
    for _ in range(frames):
        yield clock
        clock = clock.tick(increment)


# --- Frame composition ---

STAR_BAND = 0.7  # Stars occupy the top 70% of the container


def compose_frame(
    clock: AnimationClock,
    width: float,
    height: float,
    star_count: int = DEFAULT_STAR_COUNT,
) -> SkyFrame:
    """Compute everything a renderer needs for one frame.

    Stars are generated only at night, inside the top STAR_BAND of the
    container, with the clock's progress driving their twinkle.
    """
    body = position(clock.progress, width, height)
    stars: tuple[Star, ...] = ()
    if not body.is_day:
        stars = tuple(
            star_field(clock.day_seed, star_count, width, height * STAR_BAND, clock.progress)
        )
    return SkyFrame(clock=clock, arc=SkyArc(width, height), body=body, stars=stars)
