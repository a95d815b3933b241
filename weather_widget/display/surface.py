"""
Render target with three mutually exclusive regions.

The surface keeps a single visible state rather than three flags, so exactly
one region is shown at any time.
"""

from __future__ import annotations

from enum import Enum

from weather_widget.shared.logging_mixin import LoggingMixin
from weather_widget.weather.presenter import format_panel
from weather_widget.weather.views import WeatherView


class DisplayState(Enum):
    """Regions of the widget panel"""

    LOADING = "loading"
    CONTENT = "content"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


class DisplaySurface(LoggingMixin):
    """In-memory render target; subclasses draw on state and content changes"""

    def __init__(self):
        self._state = DisplayState.LOADING
        self._view: WeatherView | None = None
        self._content = ""

    @property
    def state(self) -> DisplayState:
        return self._state

    @property
    def view(self) -> WeatherView | None:
        return self._view

    @property
    def content(self) -> str:
        return self._content

    @property
    def regions(self) -> dict[DisplayState, bool]:
        """Visibility of every region"""
        return {state: state is self._state for state in DisplayState}

    def is_visible(self, state: DisplayState) -> bool:
        return state is self._state

    def show(self, state: DisplayState) -> None:
        self.logger.debug("Showing %s region", state)
        self._state = state
        self._on_state_changed(state)

    def write_content(self, view: WeatherView) -> None:
        self._view = view
        self._content = format_panel(view)
        self._on_content_written(view)

    def _on_state_changed(self, state: DisplayState) -> None:
        pass

    def _on_content_written(self, view: WeatherView) -> None:
        pass
