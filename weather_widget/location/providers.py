from __future__ import annotations

from abc import ABC, abstractmethod

import aiohttp
from pydantic import ValidationError

from weather_widget.exceptions import LocationUnavailable
from weather_widget.location.views import Coordinates, IpLocationResponse
from weather_widget.shared.logging_mixin import LoggingMixin


class GeolocationProvider(ABC):
    """Host capability that reports the current device position"""

    @abstractmethod
    async def get_current_position(self) -> Coordinates:
        """
        Return the current position.

        Raises:
            LocationUnavailable: if the position was denied or could not be read
        """
        ...


class IpGeolocationProvider(GeolocationProvider, LoggingMixin):
    """Approximates the device position via IP geolocation"""

    url = "https://ipapi.co/json/"

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        url: str | None = None,
    ):
        # A supplied session is never closed here.
        self._session = session
        self.url = url or self.url

    async def get_current_position(self) -> Coordinates:
        if self._session is not None:
            return await self._lookup(self._session)

        async with aiohttp.ClientSession() as session:
            return await self._lookup(session)

    async def _lookup(self, session: aiohttp.ClientSession) -> Coordinates:
        try:
            async with session.get(self.url) as response:
                if response.status != 200:
                    raise LocationUnavailable(
                        f"Geolocation request failed with status {response.status}"
                    )
                data = await response.json()
        except (aiohttp.ClientError, ValueError) as e:
            raise LocationUnavailable(f"Location could not be determined: {e}") from e

        try:
            located = IpLocationResponse.model_validate(data)
        except ValidationError as e:
            raise LocationUnavailable(f"Location payload is incomplete: {e}") from e

        self.logger.debug(
            "IP location: %s, %s (%s, %s)",
            located.city,
            located.country,
            located.latitude,
            located.longitude,
        )
        return Coordinates(latitude=located.latitude, longitude=located.longitude)
