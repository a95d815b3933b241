import asyncio

from weather_widget.exceptions import LocationUnavailable
from weather_widget.location.providers import GeolocationProvider
from weather_widget.location.views import Coordinates
from weather_widget.shared.logging_mixin import LoggingMixin


class LocationResolver(LoggingMixin):
    """Resolves coordinates, preferring a live position over the default"""

    def __init__(
        self,
        provider: GeolocationProvider | None = None,
        timeout_seconds: float = 5.0,
    ):
        self.provider = provider
        self.timeout_seconds = timeout_seconds

    async def resolve(self, default: Coordinates) -> Coordinates:
        """Return the provider's position, or default on denial, error or timeout."""
        if self.provider is None:
            self.logger.debug("No geolocation capability - using default location")
            return default

        try:
            return await asyncio.wait_for(
                self.provider.get_current_position(), timeout=self.timeout_seconds
            )
        except LocationUnavailable as e:
            self.logger.info("Location unavailable, using default: %s", e)
        except asyncio.TimeoutError:
            self.logger.info(
                "Geolocation timed out after %.1f seconds, using default",
                self.timeout_seconds,
            )
        except Exception:
            self.logger.exception("Geolocation failed, using default")

        return default
