from __future__ import annotations

import asyncio
import re
from datetime import datetime

import pytest
from aioresponses import aioresponses

from weather_widget.config import WidgetSettings
from weather_widget.display import DisplayState, DisplaySurface
from weather_widget.exceptions import LocationUnavailable
from weather_widget.location import Coordinates, GeolocationProvider
from weather_widget.weather import WeatherClient, WeatherSnapshot, WeatherView

FORECAST_URL = re.compile(r"^https://api\.open-meteo\.com/v1/forecast.*$")
IPAPI_URL = "https://ipapi.co/json/"


def make_payload(
    latitude: float = 47.6,
    longitude: float = -122.32,
    temperature: float = 21.6,
    windspeed: float = 12.4,
    weathercode: int = 61,
    humidity: list[float] | None = None,
) -> dict:
    return {
        "latitude": latitude,
        "longitude": longitude,
        "current_weather": {
            "temperature": temperature,
            "windspeed": windspeed,
            "winddirection": 230.0,
            "weathercode": weathercode,
            "time": "2024-06-01T14:00",
        },
        "hourly": {
            "time": ["2024-06-01T00:00", "2024-06-01T01:00"],
            "temperature_2m": [14.2, 13.9],
            "relative_humidity_2m": [65, 70] if humidity is None else humidity,
            "wind_speed_10m": [8.1, 7.6],
        },
        "daily": {
            "time": ["2024-06-01"],
            "sunrise": ["2024-06-01T05:12"],
            "sunset": ["2024-06-01T21:05"],
        },
    }


def make_snapshot(**overrides) -> WeatherSnapshot:
    values = {
        "temperature": 22,
        "wind_speed_kmh": 12,
        "wind_direction_deg": 230.0,
        "weather_code": 61,
        "observed_at": datetime(2024, 6, 1, 14, 0),
        "humidity_percent": 65,
        "sunrise": datetime(2024, 6, 1, 5, 12),
        "sunset": datetime(2024, 6, 1, 21, 5),
        "location_label": "Seattle, WA",
    }
    values.update(overrides)
    return WeatherSnapshot(**values)


async def wait_until(condition, attempts: int = 200) -> None:
    for _ in range(attempts):
        if condition():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition was never met")


# =============================================================================
# Fakes
# =============================================================================


class StaticProvider(GeolocationProvider):
    def __init__(self, coords: Coordinates) -> None:
        self.coords = coords
        self.calls = 0

    async def get_current_position(self) -> Coordinates:
        self.calls += 1
        return self.coords


class DeniedProvider(GeolocationProvider):
    async def get_current_position(self) -> Coordinates:
        raise LocationUnavailable("User denied Geolocation")


class SlowProvider(GeolocationProvider):
    async def get_current_position(self) -> Coordinates:
        await asyncio.sleep(10)
        return Coordinates(latitude=0.0, longitude=0.0)


class BrokenProvider(GeolocationProvider):
    async def get_current_position(self) -> Coordinates:
        raise RuntimeError("sensor exploded")


class StubClient(WeatherClient):
    """Returns a canned snapshot or raises a canned error."""

    def __init__(self, snapshot: WeatherSnapshot | None = None, error: Exception | None = None) -> None:
        super().__init__()
        self.snapshot = snapshot or make_snapshot()
        self.error = error
        self.calls: list[Coordinates] = []

    async def fetch(self, coords: Coordinates) -> WeatherSnapshot:
        self.calls.append(coords)
        if self.error is not None:
            raise self.error
        self.last_update = datetime.now()
        return self.snapshot


class RecordingSurface(DisplaySurface):
    """Keeps every visible state and checks that exactly one region is shown."""

    def __init__(self) -> None:
        self.history: list[DisplayState] = []
        self.writes: list[WeatherView] = []
        super().__init__()

    def _on_state_changed(self, state: DisplayState) -> None:
        assert sum(self.regions.values()) == 1
        self.history.append(state)

    def _on_content_written(self, view: WeatherView) -> None:
        self.writes.append(view)


class ManualSleep:
    """Sleep replacement that only returns when the test releases it."""

    def __init__(self) -> None:
        self.delays: list[float] = []
        self._gate = asyncio.Semaphore(0)

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        await self._gate.acquire()

    def release(self, times: int = 1) -> None:
        for _ in range(times):
            self._gate.release()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def settings() -> WidgetSettings:
    return WidgetSettings(use_geolocation=False)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def mocked():
    with aioresponses() as mock:
        yield mock


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.delenv("WEATHER_WIDGET_CONFIG_PATH", raising=False)
    monkeypatch.delenv("WEATHER_WIDGET_LOG_LEVEL", raising=False)
