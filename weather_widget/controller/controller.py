from __future__ import annotations

import asyncio
from datetime import datetime

from weather_widget.config.models import WidgetSettings
from weather_widget.controller.timer import RefreshTimer
from weather_widget.display.surface import DisplayState, DisplaySurface
from weather_widget.exceptions import NetworkError, ParseError
from weather_widget.location.providers import GeolocationProvider, IpGeolocationProvider
from weather_widget.location.resolver import LocationResolver
from weather_widget.shared.logging_mixin import LoggingMixin
from weather_widget.weather.client import WeatherClient
from weather_widget.weather.presenter import render


class WidgetController(LoggingMixin):
    """Runs resolve -> fetch -> render cycles and owns the refresh timer"""

    def __init__(
        self,
        surface: DisplaySurface,
        settings: WidgetSettings | None = None,
        resolver: LocationResolver | None = None,
        client: WeatherClient | None = None,
        timer: RefreshTimer | None = None,
    ):
        self.settings = settings or WidgetSettings()
        self.surface = surface
        self.resolver = resolver or LocationResolver(
            provider=self._default_provider(self.settings),
            timeout_seconds=self.settings.geolocation_timeout_seconds,
        )
        self.client = client or WeatherClient(self.settings)
        self.timer = timer or RefreshTimer(self.settings.update_interval_seconds)
        self._cycle_task: asyncio.Task | None = None

        self.surface.show(DisplayState.LOADING)

    @staticmethod
    def _default_provider(settings: WidgetSettings) -> GeolocationProvider | None:
        if not settings.use_geolocation:
            return None
        return IpGeolocationProvider()

    # Public API ---------------------------------------------------------
    @property
    def state(self) -> DisplayState:
        return self.surface.state

    @property
    def last_update(self) -> datetime | None:
        return self.client.last_update

    async def start(self) -> DisplayState:
        """Run the first cycle, then arm the refresh timer"""
        state = await self.refresh()
        self.timer.start(self.refresh)
        return state

    async def stop(self) -> None:
        await self.timer.stop()
        await self._cancel_in_flight()

    async def run_once(self) -> DisplayState:
        """Single cycle without arming the timer"""
        return await self.refresh()

    async def refresh(self) -> DisplayState:
        """Start a new cycle, cancelling any cycle still in flight"""
        await self._cancel_in_flight()

        task = asyncio.create_task(self._run_cycle(), name="weather_refresh_cycle")
        self._cycle_task = task
        try:
            return await task
        except asyncio.CancelledError:
            if self._cycle_task is task:
                raise
            self.logger.debug("Refresh cycle superseded by a newer one")
            return self.state
        finally:
            if self._cycle_task is task:
                self._cycle_task = None

    async def __aenter__(self) -> WidgetController:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    # Helpers ------------------------------------------------------------
    async def _run_cycle(self) -> DisplayState:
        self.surface.show(DisplayState.LOADING)

        coords = await self.resolver.resolve(self.settings.default_coordinates)

        try:
            snapshot = await self.client.fetch(coords)
        except (NetworkError, ParseError) as e:
            self.logger.error("Weather widget error: %s", e)
            self.surface.show(DisplayState.ERROR)
            return DisplayState.ERROR
        except Exception:
            self.logger.exception("Unexpected weather widget error")
            self.surface.show(DisplayState.ERROR)
            return DisplayState.ERROR

        self.surface.write_content(render(snapshot))
        self.surface.show(DisplayState.CONTENT)
        self.logger.info("Weather updated for %s", snapshot.location_label)
        return DisplayState.CONTENT

    async def _cancel_in_flight(self) -> None:
        task = self._cycle_task
        if not task or task.done():
            return

        self.logger.info("Cancelling in-flight refresh cycle")
        self._cycle_task = None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:  # NOSONAR
            pass
