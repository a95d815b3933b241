from .env import WidgetEnv
from .loader import load_config
from .models import TemperatureUnit, WidgetSettings

__all__ = [
    "WidgetEnv",
    "WidgetSettings",
    "TemperatureUnit",
    "load_config",
]
