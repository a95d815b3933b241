from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# API Response Models (Open-Meteo API Mappings)
# =============================================================================


class OpenMeteoCurrentWeather(BaseModel):
    """Direct mapping to the legacy `current_weather` block."""

    model_config = ConfigDict(allow_inf_nan=False)

    temperature: float
    windspeed: float
    winddirection: float
    weathercode: int
    time: datetime


class OpenMeteoHourlyResponse(BaseModel):
    """Only the humidity series is consumed."""

    model_config = ConfigDict(allow_inf_nan=False)

    relative_humidity_2m: list[float] = Field(min_length=1)


class OpenMeteoDailyResponse(BaseModel):
    """Today's values are the first entries."""

    sunrise: list[datetime] = Field(min_length=1)
    sunset: list[datetime] = Field(min_length=1)


class OpenMeteoApiResponse(BaseModel):
    """Complete Open-Meteo forecast response structure."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    current_weather: OpenMeteoCurrentWeather
    hourly: OpenMeteoHourlyResponse
    daily: OpenMeteoDailyResponse


# =============================================================================
# Domain Models
# =============================================================================


class WeatherSnapshot(BaseModel):
    """Fully resolved weather readings for one point in time."""

    model_config = ConfigDict(frozen=True)

    temperature: int
    wind_speed_kmh: int
    wind_direction_deg: float
    weather_code: int
    observed_at: datetime
    humidity_percent: int
    sunrise: datetime
    sunset: datetime
    location_label: str


class WeatherView(BaseModel):
    """Display strings for one rendered panel."""

    model_config = ConfigDict(frozen=True)

    location: str
    updated_at: str
    temperature: str
    icon: str
    description: str
    humidity: str
    wind: str
