"""SVG sky renderer.

Produces a self-contained SVG string for one SkyFrame, embedded by the app via
st.markdown(unsafe_allow_html=True). Coordinates are screen units with the
origin top-left and y pointing down, the same space sky.position() works in.
"""

from __future__ import annotations

from weathersky.display import SKY_DAY_GRADIENT, SKY_NIGHT_GRADIENT
from weathersky.models import SkyFrame

_STAR_COLOR = "#ffffff"
_TRACK_COLOR = "#ffffff"
_SUN_SIZE = 48
_MOON_SIZE = 38


def _arc_path(frame: SkyFrame) -> str:
    """Upper semicircle from the left horizon point to the right one."""
    arc = frame.arc
    x0 = arc.center_x - arc.radius
    x1 = arc.center_x + arc.radius
    y = arc.center_y
    r = arc.radius
    # sweep-flag=1: clockwise on a y-down screen, i.e. over the top
    return f"M {x0:.2f},{y:.2f} A {r:.2f},{r:.2f} 0 0 1 {x1:.2f},{y:.2f}"


def _sun_svg(x: float, y: float) -> str:
    r = _SUN_SIZE / 2
    return (
        f'<circle cx="{x:.2f}" cy="{y:.2f}" r="{r * 1.6:.2f}" fill="url(#sun-glow)"/>\n'
        f'    <circle cx="{x:.2f}" cy="{y:.2f}" r="{r:.2f}" fill="url(#sun-core)"/>'
    )


def _moon_svg(x: float, y: float) -> str:
    r = _MOON_SIZE / 2
    # Crescent: full disc masked by an offset disc
    return (
        f'<circle cx="{x:.2f}" cy="{y:.2f}" r="{r * 1.5:.2f}" fill="url(#moon-glow)"/>\n'
        f'    <circle cx="{x:.2f}" cy="{y:.2f}" r="{r:.2f}" fill="#ffffff" mask="url(#crescent)"/>'
    )


def render_sky_svg(frame: SkyFrame) -> str:
    """Return an SVG document for one animation frame.

    Layers bottom to top: background gradient (day or night colours), stars
    (night only), dashed arc track, then the sun or the moon.

    Args:
        frame: Fully computed frame from sky.compose_frame().

    Returns:
        SVG markup sized to the frame's container.
    """
    width = frame.arc.width
    height = frame.arc.height
    body = frame.body
    top, bottom = SKY_DAY_GRADIENT if body.is_day else SKY_NIGHT_GRADIENT

    star_parts = [
        f'<circle cx="{s.x:.2f}" cy="{s.y:.2f}" r="{s.size / 2:.2f}"'
        f' fill="{_STAR_COLOR}" fill-opacity="{s.display_brightness:.3f}"/>'
        for s in frame.stars
    ]
    stars_svg = "\n      ".join(star_parts)

    body_svg = _sun_svg(body.x, body.y) if body.is_day else _moon_svg(body.x, body.y)
    moon_r = _MOON_SIZE / 2

    return f"""<svg xmlns="http://www.w3.org/2000/svg" class="weathersky-sky"
     viewBox="0 0 {width:.0f} {height:.0f}" width="100%" height="100%"
     preserveAspectRatio="xMidYMid slice">
  <defs>
    <linearGradient id="sky-bg" x1="0" y1="0" x2="1" y2="1">
      <stop offset="0%" stop-color="{top}"/>
      <stop offset="100%" stop-color="{bottom}"/>
    </linearGradient>
    <radialGradient id="sun-core" cx="50%" cy="50%" r="50%">
      <stop offset="16%" stop-color="#ffeb3b" stop-opacity="0.9"/>
      <stop offset="60%" stop-color="#ff9800" stop-opacity="0.6"/>
      <stop offset="100%" stop-color="#ff9800" stop-opacity="0"/>
    </radialGradient>
    <radialGradient id="sun-glow" cx="50%" cy="50%" r="50%">
      <stop offset="0%" stop-color="#ffeb3b" stop-opacity="0.45"/>
      <stop offset="100%" stop-color="#ffeb3b" stop-opacity="0"/>
    </radialGradient>
    <radialGradient id="moon-glow" cx="50%" cy="50%" r="50%">
      <stop offset="0%" stop-color="#ffffff" stop-opacity="0.3"/>
      <stop offset="100%" stop-color="#ffffff" stop-opacity="0"/>
    </radialGradient>
    <mask id="crescent">
      <rect x="0" y="0" width="{width:.0f}" height="{height:.0f}" fill="#ffffff"/>
      <circle cx="{body.x + moon_r * 0.55:.2f}" cy="{body.y - moon_r * 0.3:.2f}" r="{moon_r:.2f}" fill="#000000"/>
    </mask>
  </defs>
  <rect x="0" y="0" width="{width:.0f}" height="{height:.0f}" fill="url(#sky-bg)"/>
  <g id="stars">
      {stars_svg}
  </g>
  <path d="{_arc_path(frame)}" fill="none" stroke="{_TRACK_COLOR}" stroke-opacity="0.2"
        stroke-width="2" stroke-linecap="round" stroke-dasharray="6 8"/>
  <g id="body">
    {body_svg}
  </g>
</svg>"""
