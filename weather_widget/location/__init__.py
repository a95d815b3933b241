"""Location resolution with fallback to configured default coordinates."""

from .providers import GeolocationProvider, IpGeolocationProvider
from .resolver import LocationResolver
from .views import Coordinates

__all__ = [
    "Coordinates",
    "GeolocationProvider",
    "IpGeolocationProvider",
    "LocationResolver",
]
