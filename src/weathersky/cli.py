"""Command-line entry point: export sky frames and print a forecast.

    uv run weathersky frame --progress 0.75 --seed 42
    uv run weathersky cycle --frames 556 --output results/day.gif
    uv run weathersky forecast Quickborn
"""

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from weathersky.config import ConfigError, load_settings
from weathersky.display import format_localtime, format_temperature, format_temperature_range, weekday_label
from weathersky.log import get_logger
from weathersky.models import AnimationClock
from weathersky.renderers.static import save_cycle_gif, save_static_frame
from weathersky.sky import compose_frame
from weathersky.weather import fetch_weather

logger = get_logger(__name__)

app = typer.Typer(no_args_is_help=True)

DEFAULT_WIDTH = 390
DEFAULT_HEIGHT = 844


def _settings():
    try:
        return load_settings()
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        raise typer.Exit(code=2) from e


@app.command()
def frame(
    progress: Annotated[float, typer.Option(min=0.0, max=1.0, help="Time of day, 0 = sunrise, 0.5 = sunset")] = 0.0,
    seed: Annotated[int, typer.Option(min=0, help="Starfield day seed")] = 42,
    width: Annotated[int, typer.Option(min=1)] = DEFAULT_WIDTH,
    height: Annotated[int, typer.Option(min=1)] = DEFAULT_HEIGHT,
    output: Annotated[Path | None, typer.Option(help="PNG path, default results/")] = None,
) -> None:
    """Render one sky frame to PNG."""
    settings = _settings()
    clock = AnimationClock(progress=progress, day_seed=seed)
    sky_frame = compose_frame(clock, width, height, settings.star_count)
    path = save_static_frame(sky_frame, output)
    typer.echo(f"Saved: {path}")


@app.command()
def cycle(
    frames: Annotated[int, typer.Option(min=1, help="Number of driver ticks to render")] = 556,
    progress: Annotated[float, typer.Option(min=0.0, max=1.0)] = 0.0,
    seed: Annotated[int, typer.Option(min=0)] = 42,
    width: Annotated[int, typer.Option(min=1)] = DEFAULT_WIDTH,
    height: Annotated[int, typer.Option(min=1)] = DEFAULT_HEIGHT,
    output: Annotated[Path | None, typer.Option(help="GIF path, default results/")] = None,
) -> None:
    """Render consecutive driver ticks to an animated GIF."""
    settings = _settings()
    fps = max(1, round(1 / settings.tick_seconds))
    path = save_cycle_gif(
        AnimationClock(progress=progress, day_seed=seed),
        width,
        height,
        frames,
        output_path=output,
        star_count=settings.star_count,
        increment=settings.tick_increment,
        fps=fps,
    )
    typer.echo(f"Saved: {path}")


@app.command()
def forecast(
    city: Annotated[str | None, typer.Argument(help="City name, default WEATHER_DEFAULT_CITY")] = None,
    lang: Annotated[str | None, typer.Option(help="API language tag, e.g. zh_tw or en")] = None,
    fahrenheit: Annotated[bool, typer.Option("--fahrenheit", "-f")] = False,
) -> None:
    """Print current conditions and the forecast for a city."""
    settings = _settings()
    query = city or settings.default_city
    weather = fetch_weather(query, lang=lang, settings=settings)
    if weather is None:
        typer.echo(f"Weather unavailable for {query}", err=True)
        raise typer.Exit(code=1)

    ui_lang = "zh_tw" if (lang or settings.lang).startswith("zh") else "en"
    loc = weather.location
    cur = weather.current
    typer.echo(f"{loc.name}, {loc.country}  ({format_localtime(loc)})")
    typer.echo(f"{cur.condition.text}  {format_temperature(cur.temp_c, fahrenheit)}  {cur.humidity}%")
    for day in weather.forecast_days[:3]:
        label = weekday_label(day.date, ui_lang)
        temps = format_temperature_range(day.day.mintemp_c, day.day.maxtemp_c, fahrenheit)
        typer.echo(f"  {label:<10}{day.day.condition.text:<16}{temps}")


def main() -> None:
    load_dotenv()
    app()


if __name__ == "__main__":
    main()
