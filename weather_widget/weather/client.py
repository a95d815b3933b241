from __future__ import annotations

import asyncio
import math
from datetime import datetime

import aiohttp
from pydantic import ValidationError

from weather_widget.config.models import WidgetSettings
from weather_widget.exceptions import NetworkError, ParseError
from weather_widget.location.views import Coordinates
from weather_widget.shared.logging_mixin import LoggingMixin
from weather_widget.weather.views import OpenMeteoApiResponse, WeatherSnapshot

_HOURLY_FIELDS = "temperature_2m,relative_humidity_2m,wind_speed_10m"
_DAILY_FIELDS = "sunrise,sunset"


class WeatherClient(LoggingMixin):
    """Fetches current conditions from Open-Meteo and normalizes them"""

    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(
        self,
        settings: WidgetSettings | None = None,
        session: aiohttp.ClientSession | None = None,
        base_url: str | None = None,
    ):
        self.settings = settings or WidgetSettings()
        # A supplied session is never closed here.
        self._session = session
        self.base_url = base_url or self.base_url
        self.last_update: datetime | None = None

    async def fetch(self, coords: Coordinates) -> WeatherSnapshot:
        """
        Fetch current weather for coords.

        Raises:
            NetworkError: on transport failure or a non-2xx status
            ParseError: if the body is not JSON or misses expected fields
        """
        if self._session is not None:
            raw_data = await self._get(self._session, coords)
        else:
            async with aiohttp.ClientSession() as session:
                raw_data = await self._get(session, coords)

        self.last_update = datetime.now()
        return self._to_snapshot(raw_data)

    def build_params(self, coords: Coordinates) -> dict[str, str]:
        return {
            "latitude": str(coords.latitude),
            "longitude": str(coords.longitude),
            "current_weather": "true",
            "hourly": _HOURLY_FIELDS,
            "daily": _DAILY_FIELDS,
            "timezone": "auto",
        }

    async def _get(self, session: aiohttp.ClientSession, coords: Coordinates) -> object:
        params = self.build_params(coords)
        self.logger.debug(
            "Fetching weather: lat=%s lon=%s", coords.latitude, coords.longitude
        )

        try:
            async with session.get(self.base_url, params=params) as response:
                if not 200 <= response.status < 300:
                    raise NetworkError(
                        f"Weather API error: {response.status}", status=response.status
                    )
                try:
                    return await response.json()
                except (aiohttp.ContentTypeError, ValueError) as e:
                    raise ParseError(f"Weather API returned invalid JSON: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"Weather API request failed: {e}") from e

    def _to_snapshot(self, raw_data: object) -> WeatherSnapshot:
        try:
            api_response = OpenMeteoApiResponse.model_validate(raw_data)
            return transform_api_response(api_response, self.settings)
        except (ValidationError, ValueError) as e:
            raise ParseError(f"Unexpected weather payload: {e}") from e


def transform_api_response(
    api_response: OpenMeteoApiResponse, settings: WidgetSettings
) -> WeatherSnapshot:
    """Transform a validated API response into a snapshot."""
    current = api_response.current_weather

    return WeatherSnapshot(
        temperature=round_half_up(current.temperature),
        wind_speed_kmh=round_half_up(current.windspeed),
        wind_direction_deg=current.winddirection,
        weather_code=current.weathercode,
        observed_at=current.time,
        # First hourly bucket, not necessarily the current hour.
        humidity_percent=round_half_up(api_response.hourly.relative_humidity_2m[0]),
        sunrise=api_response.daily.sunrise[0],
        sunset=api_response.daily.sunset[0],
        location_label=location_label(
            Coordinates(
                latitude=api_response.latitude, longitude=api_response.longitude
            ),
            settings,
        ),
    )


def location_label(coords: Coordinates, settings: WidgetSettings) -> str:
    """Friendly label near the default location, formatted degrees elsewhere."""
    if settings.default_location_label and coords.is_near(settings.default_coordinates):
        return settings.default_location_label
    return f"{coords.latitude:.1f}°, {coords.longitude:.1f}°"


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
