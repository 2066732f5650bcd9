"""Plotly sky renderer.

Alternative to the SVG renderer (SKY_RENDERER=plotly). Screen coordinates are
kept as-is; the y axis is reversed so y grows downward like the SVG scene.
"""

import numpy as np
import plotly.graph_objects as go
from plotly.colors import hex_to_rgb

from weathersky.display import SKY_DAY_GRADIENT, SKY_NIGHT_GRADIENT
from weathersky.models import SkyFrame

_STAR_COLOR = "#ffffff"
_TRACK_COLOR = "rgba(255,255,255,0.2)"
_SUN_COLOR = "#ffc107"
_MOON_COLOR = "#ffffff"
_ARC_SAMPLES = 64


def render_plotly_sky(frame: SkyFrame) -> go.Figure:
    """Render a SkyFrame as a Plotly figure.

    Plotly markers take a single opacity per trace, so per-star twinkle is
    encoded in rgba marker colours.

    Args:
        frame: Fully computed frame from sky.compose_frame().

    Returns:
        Plotly Figure object.
    """
    arc = frame.arc
    body = frame.body

    # Arc track: sampled upper semicircle, angle 0 → π
    angles = np.linspace(0.0, np.pi, _ARC_SAMPLES)
    track_x = arc.center_x + np.cos(angles - np.pi) * arc.radius
    track_y = arc.center_y + np.sin(angles - np.pi) * arc.radius
    track_trace = go.Scatter(
        x=track_x,
        y=track_y,
        mode="lines",
        line=dict(color=_TRACK_COLOR, width=2, dash="dash"),
        hoverinfo="skip",
        name="track",
    )

    traces = [track_trace]
    if frame.stars:
        xs = np.array([s.x for s in frame.stars])
        ys = np.array([s.y for s in frame.stars])
        sizes = np.array([s.size for s in frame.stars])
        r, g, b = hex_to_rgb(_STAR_COLOR)
        alphas = np.clip([s.display_brightness for s in frame.stars], 0.0, 1.0)
        traces.insert(
            0,
            go.Scatter(
                x=xs,
                y=ys,
                mode="markers",
                marker=dict(
                    size=list(sizes),
                    color=[f"rgba({r},{g},{b},{a:.3f})" for a in alphas],
                    line=dict(width=0),
                ),
                hoverinfo="skip",
                name="stars",
            ),
        )

    traces.append(
        go.Scatter(
            x=[body.x],
            y=[body.y],
            mode="markers",
            marker=dict(
                size=48 if body.is_day else 38,
                color=_SUN_COLOR if body.is_day else _MOON_COLOR,
                opacity=0.9,
                line=dict(width=0),
            ),
            hoverinfo="skip",
            name="sun" if body.is_day else "moon",
        )
    )

    top, _ = SKY_DAY_GRADIENT if body.is_day else SKY_NIGHT_GRADIENT
    fig = go.Figure(data=traces)
    fig.update_layout(
        paper_bgcolor=top,
        plot_bgcolor=top,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=int(arc.width),
        height=int(arc.height),
        xaxis=dict(visible=False, range=[0.0, arc.width], fixedrange=True),
        yaxis=dict(visible=False, range=[arc.height, 0.0], fixedrange=True),
    )
    fig._config = {"displayModeBar": False, "staticPlot": True}  # type: ignore[attr-defined]
    return fig
