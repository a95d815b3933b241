import asyncio
from collections.abc import Awaitable, Callable

from weather_widget.shared.logging_mixin import LoggingMixin

TickCallback = Callable[[], Awaitable[object]]


class RefreshTimer(LoggingMixin):
    """Cancellable repeating timer; each tick is awaited before sleeping again"""

    def __init__(
        self,
        interval_seconds: float,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.interval_seconds = interval_seconds
        self._sleep = sleep
        self._callback: TickCallback | None = None
        self._task: asyncio.Task | None = None
        self.tick_count = 0

    def start(self, callback: TickCallback) -> None:
        """Arm the timer; the first tick fires after one interval"""
        if self.is_active:
            self.logger.warning("Refresh timer already active")
            return

        self.logger.info("Starting refresh timer: %.1f seconds", self.interval_seconds)
        self._callback = callback
        self._task = asyncio.create_task(self._timer_loop(), name="weather_refresh_timer")

    async def stop(self) -> None:
        """Stop the timer"""
        if not self._task or self._task.done():
            self._task = None
            return

        self.logger.info("Stopping refresh timer")
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:  # NOSONAR
            self.logger.debug("Refresh timer cancelled")
        finally:
            self._task = None

    async def tick(self) -> None:
        """Run the callback once, as if the interval had elapsed"""
        if self._callback is None:
            self.logger.warning("Tick requested before the timer was started")
            return

        self.tick_count += 1
        try:
            await self._callback()
        except asyncio.CancelledError:
            raise
        except Exception:
            self.logger.exception("Refresh tick failed")

    async def _timer_loop(self) -> None:
        while True:
            await self._sleep(self.interval_seconds)
            await self.tick()

    @property
    def is_active(self) -> bool:
        return self._task is not None and not self._task.done()
