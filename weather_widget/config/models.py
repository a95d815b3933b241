from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

if TYPE_CHECKING:
    from weather_widget.location.views import Coordinates

DEFAULT_LATITUDE = 47.6062
DEFAULT_LONGITUDE = -122.3321
DEFAULT_LOCATION_LABEL = "Seattle, WA"


class TemperatureUnit(StrEnum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class WidgetSettings(BaseModel):
    """Configuration for a single widget instance"""

    model_config = ConfigDict(frozen=True)

    default_latitude: float = Field(default=DEFAULT_LATITUDE, ge=-90.0, le=90.0)
    default_longitude: float = Field(default=DEFAULT_LONGITUDE, ge=-180.0, le=180.0)
    # None means the default location is shown as formatted degrees.
    default_location_label: str | None = None
    # Recorded only, the API answers in Celsius and nothing converts it.
    units: TemperatureUnit = TemperatureUnit.CELSIUS
    update_interval_ms: int = Field(default=10 * 60 * 1000, gt=0)
    geolocation_timeout_seconds: float = Field(default=5.0, gt=0.0)
    use_geolocation: bool = True

    @model_validator(mode="before")
    @classmethod
    def _label_stock_location(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("default_location_label"):
            return data

        latitude = data.get("default_latitude", DEFAULT_LATITUDE)
        longitude = data.get("default_longitude", DEFAULT_LONGITUDE)
        if latitude == DEFAULT_LATITUDE and longitude == DEFAULT_LONGITUDE:
            return {**data, "default_location_label": DEFAULT_LOCATION_LABEL}
        return data

    @field_validator("units", mode="before")
    @classmethod
    def _coerce_units(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def update_interval_seconds(self) -> float:
        return self.update_interval_ms / 1000

    @property
    def default_coordinates(self) -> Coordinates:
        from weather_widget.location.views import Coordinates

        return Coordinates(
            latitude=self.default_latitude, longitude=self.default_longitude
        )
