"""Maps WMO weather codes to display strings and formats snapshots."""

from datetime import datetime
from textwrap import dedent

from weather_widget.weather.views import WeatherSnapshot, WeatherView

# =============================================================================
# Constants
# =============================================================================

_DEFAULT_ICON = "🌤️"

_WEATHER_CODE_ICONS = {
    # Clear conditions
    0: "☀️",
    1: "🌤️",
    2: "⛅",
    3: "☁️",
    # Fog conditions
    45: "🌫️",
    48: "🌫️",
    # Drizzle conditions
    51: "🌦️",
    53: "🌦️",
    55: "🌦️",
    # Rain conditions
    61: "🌧️",
    63: "🌧️",
    65: "🌧️",
    # Snow conditions
    71: "🌨️",
    73: "🌨️",
    75: "🌨️",
    # Thunderstorm conditions
    95: "⛈️",
    96: "⛈️",
    99: "⛈️",
}

_WEATHER_CODE_DESCRIPTIONS = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Light rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Light snow",
    73: "Moderate snow",
    75: "Heavy snow",
    95: "Thunderstorm",
    96: "Thunderstorm with hail",
    99: "Thunderstorm with heavy hail",
}


def icon_for(weather_code: int) -> str:
    """Get the icon for a weather code, partly clear when unknown."""
    return _WEATHER_CODE_ICONS.get(weather_code, _DEFAULT_ICON)


def description_for(weather_code: int) -> str:
    """Get the description for a weather code."""
    return _WEATHER_CODE_DESCRIPTIONS.get(weather_code, "Unknown")


def render(snapshot: WeatherSnapshot, now: datetime | None = None) -> WeatherView:
    """Build the view-model; the update time is the render time, not the fetch time."""
    now = now or datetime.now()

    return WeatherView(
        location=snapshot.location_label,
        updated_at=f"Updated {now.strftime('%H:%M')}",
        temperature=f"{snapshot.temperature}°",
        icon=icon_for(snapshot.weather_code),
        description=description_for(snapshot.weather_code),
        humidity=f"{snapshot.humidity_percent}%",
        wind=f"{snapshot.wind_speed_kmh} km/h",
    )


def format_panel(view: WeatherView) -> str:
    """Format a view into a plain-text panel."""
    return dedent(
        f"""
        {view.location}
        {view.updated_at}

        {view.temperature}  {view.icon} {view.description}

        Humidity: {view.humidity}
        Wind: {view.wind}
        """
    ).strip()
