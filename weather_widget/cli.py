import asyncio

import click
from pydantic import ValidationError

from weather_widget.config import WidgetEnv, WidgetSettings, load_config
from weather_widget.controller import WidgetController
from weather_widget.display import DisplayState, TerminalSurface
from weather_widget.exceptions import ConfigError
from weather_widget.shared import configure_logging


def build_settings(
    config_path: str | None,
    latitude: float | None,
    longitude: float | None,
    interval_minutes: float | None,
    no_geolocate: bool,
    label: str | None = None,
) -> WidgetSettings:
    """Merge the optional YAML config with command line overrides"""
    settings = load_config(config_path) if config_path else WidgetSettings()

    overrides = {}
    if latitude is not None:
        overrides["default_latitude"] = latitude
    if longitude is not None:
        overrides["default_longitude"] = longitude
    if label is not None:
        overrides["default_location_label"] = label
    elif latitude is not None or longitude is not None:
        # A moved default must not keep the old location's name.
        overrides["default_location_label"] = None
    if interval_minutes is not None:
        overrides["update_interval_ms"] = int(interval_minutes * 60 * 1000)
    if no_geolocate:
        overrides["use_geolocation"] = False

    if not overrides:
        return settings
    return WidgetSettings.model_validate({**settings.model_dump(), **overrides})


async def _run(settings: WidgetSettings, once: bool) -> DisplayState:
    controller = WidgetController(TerminalSurface(), settings=settings)

    if once:
        return await controller.run_once()

    async with controller:
        await asyncio.Event().wait()
    return controller.state


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML config file (defaults to $WEATHER_WIDGET_CONFIG_PATH)",
)
@click.option("--lat", "latitude", type=float, default=None, help="Default latitude")
@click.option("--lon", "longitude", type=float, default=None, help="Default longitude")
@click.option("--label", default=None, help="Display name for the default location")
@click.option(
    "--interval-minutes", type=float, default=None, help="Refresh interval in minutes"
)
@click.option(
    "--no-geolocate", is_flag=True, help="Always use the default location"
)
@click.option("--once", is_flag=True, help="Fetch once and exit")
@click.option("--log-level", default=None, help="Logging level (e.g. INFO, DEBUG)")
def main(
    config_path, latitude, longitude, label, interval_minutes, no_geolocate, once, log_level
):
    """🌤️ Current weather panel, refreshed periodically"""
    env = WidgetEnv()
    configure_logging(log_level or env.log_level)

    try:
        settings = build_settings(
            config_path or env.config_path,
            latitude,
            longitude,
            interval_minutes,
            no_geolocate,
            label,
        )
    except (FileNotFoundError, ConfigError, ValidationError) as e:
        raise click.ClickException(str(e)) from e

    try:
        state = asyncio.run(_run(settings, once))
    except KeyboardInterrupt:
        return

    if once and state is DisplayState.ERROR:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
