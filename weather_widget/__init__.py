from weather_widget.config import WidgetSettings, load_config
from weather_widget.controller import RefreshTimer, WidgetController
from weather_widget.display import DisplayState, DisplaySurface, TerminalSurface
from weather_widget.exceptions import (
    ConfigError,
    LocationUnavailable,
    NetworkError,
    ParseError,
    WeatherWidgetError,
)
from weather_widget.location import (
    Coordinates,
    GeolocationProvider,
    IpGeolocationProvider,
    LocationResolver,
)
from weather_widget.shared import configure_logging
from weather_widget.weather import (
    WeatherClient,
    WeatherSnapshot,
    WeatherView,
    description_for,
    format_panel,
    icon_for,
    render,
)

__all__ = [
    "ConfigError",
    "Coordinates",
    "DisplayState",
    "DisplaySurface",
    "GeolocationProvider",
    "IpGeolocationProvider",
    "LocationResolver",
    "LocationUnavailable",
    "NetworkError",
    "ParseError",
    "RefreshTimer",
    "TerminalSurface",
    "WeatherClient",
    "WeatherSnapshot",
    "WeatherView",
    "WeatherWidgetError",
    "WidgetController",
    "WidgetSettings",
    "configure_logging",
    "description_for",
    "format_panel",
    "icon_for",
    "load_config",
    "render",
]
