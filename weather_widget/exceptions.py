"""
Error hierarchy for the weather widget.

Only NetworkError and ParseError ever reach the controller; LocationUnavailable
is swallowed by the resolver, which falls back to the default coordinates.
"""


class WeatherWidgetError(Exception):
    """Base class for all widget errors"""


class LocationUnavailable(WeatherWidgetError):
    """Device position was denied, failed, or could not be determined"""


class NetworkError(WeatherWidgetError):
    """Transport failure or a non-successful HTTP status"""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ParseError(WeatherWidgetError):
    """Response body is undecodable or misses expected fields"""


class ConfigError(WeatherWidgetError):
    """Configuration file is unreadable or holds invalid values"""


__all__ = [
    "WeatherWidgetError",
    "LocationUnavailable",
    "NetworkError",
    "ParseError",
    "ConfigError",
]
