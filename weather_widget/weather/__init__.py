"""Weather fetching and presentation."""

from .client import WeatherClient
from .presenter import description_for, format_panel, icon_for, render
from .views import WeatherSnapshot, WeatherView

__all__ = [
    "WeatherClient",
    "WeatherSnapshot",
    "WeatherView",
    "description_for",
    "format_panel",
    "icon_for",
    "render",
]
