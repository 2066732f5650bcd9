"""Matplotlib static renderer — PNG frames and GIF cycle export."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.colors import to_rgb
from matplotlib.figure import Figure
from matplotlib.patches import Arc

from weathersky.display import SKY_DAY_GRADIENT, SKY_NIGHT_GRADIENT
from weathersky.models import AnimationClock, SkyFrame
from weathersky.sky import DEFAULT_STAR_COUNT, TICK_INCREMENT, compose_frame, cycle_frames

_ROOT = Path(__file__).parent.parent.parent.parent
_DPI = 100


def _gradient_image(top: str, bottom: str, width: int, height: int) -> np.ndarray:
    """Diagonal top-left → bottom-right gradient as an RGB array."""
    t = np.add.outer(np.linspace(0, 0.5, height), np.linspace(0, 0.5, width))
    start = np.array(to_rgb(top))
    end = np.array(to_rgb(bottom))
    return start + t[..., None] * (end - start)


def _draw_frame(ax, frame: SkyFrame) -> None:
    arc = frame.arc
    body = frame.body
    w, h = int(arc.width), int(arc.height)

    ax.clear()
    top, bottom = SKY_DAY_GRADIENT if body.is_day else SKY_NIGHT_GRADIENT
    ax.imshow(_gradient_image(top, bottom, w, h), extent=(0, w, h, 0), zorder=0)

    if frame.stars:
        xs = np.array([s.x for s in frame.stars])
        ys = np.array([s.y for s in frame.stars])
        # scatter s is an area in points²
        areas = np.array([s.size for s in frame.stars]) ** 2
        colors = np.zeros((len(frame.stars), 4))
        colors[:, :3] = 1.0
        colors[:, 3] = np.clip([s.display_brightness for s in frame.stars], 0.0, 1.0)
        ax.scatter(xs, ys, s=areas, c=colors, marker="o", linewidths=0, zorder=1)

    # y axis is inverted, so theta 180°→360° is the upper half on screen
    ax.add_patch(
        Arc(
            (arc.center_x, arc.center_y),
            2 * arc.radius,
            2 * arc.radius,
            theta1=180,
            theta2=360,
            color="white",
            alpha=0.2,
            linewidth=2,
            linestyle=(0, (6, 8)),
            zorder=2,
        )
    )

    if body.is_day:
        ax.scatter([body.x], [body.y], s=48**2, color="#ffc107", alpha=0.9, linewidths=0, zorder=3)
    else:
        ax.scatter([body.x], [body.y], s=38**2, color="white", alpha=0.95, linewidths=0, zorder=3)

    ax.set_xlim(0, w)
    ax.set_ylim(h, 0)
    ax.axis("off")


def render_static_frame(frame: SkyFrame) -> Figure:
    """Render a SkyFrame as a matplotlib Figure sized 1:1 to the frame in pixels.

    Args:
        frame: Fully computed frame from sky.compose_frame().

    Returns:
        matplotlib Figure object.
    """
    fig = plt.figure(figsize=(frame.arc.width / _DPI, frame.arc.height / _DPI), dpi=_DPI)
    ax = fig.add_axes((0, 0, 1, 1))
    _draw_frame(ax, frame)
    return fig


def _default_path(clock: AnimationClock, suffix: str) -> Path:
    filename = f"sky__seed{clock.day_seed}__p{clock.progress:.3f}.{suffix}".replace(".", "_", 1)
    return _ROOT / "results" / filename


def save_static_frame(
    frame: SkyFrame,
    output_path: Path | None = None,
) -> Path:
    """Save one frame as PNG.

    Args:
        frame: Fully computed frame.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        output_path = _default_path(frame.clock, "png")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_frame(frame)
    fig.savefig(output_path, dpi=_DPI)
    plt.close(fig)
    return output_path


def save_cycle_gif(
    clock: AnimationClock,
    width: int,
    height: int,
    frames: int,
    output_path: Path | None = None,
    star_count: int = DEFAULT_STAR_COUNT,
    increment: float = TICK_INCREMENT,
    fps: int = 20,
) -> Path:
    """Render `frames` consecutive ticks starting at `clock` into an animated GIF.

    At the default 20 fps each GIF frame matches one 50 ms driver tick.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        output_path = _default_path(clock, "gif")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    clocks = list(cycle_frames(clock, frames, increment))
    fig = plt.figure(figsize=(width / _DPI, height / _DPI), dpi=_DPI)
    ax = fig.add_axes((0, 0, 1, 1))

    def _update(i: int):
        _draw_frame(ax, compose_frame(clocks[i], width, height, star_count))
        return ax.get_children()

    anim = FuncAnimation(fig, _update, frames=len(clocks), blit=False)
    anim.save(str(output_path), writer=PillowWriter(fps=fps), dpi=_DPI)
    plt.close(fig)
    return output_path
