from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def is_near(self, other: "Coordinates", tolerance: float = 0.1) -> bool:
        """True when both axes differ by less than tolerance degrees."""
        return (
            abs(self.latitude - other.latitude) < tolerance
            and abs(self.longitude - other.longitude) < tolerance
        )


class IpLocationResponse(BaseModel):
    """Subset of the ipapi.co JSON payload we rely on."""

    latitude: float
    longitude: float
    city: str | None = None
    region: str | None = None
    country: str | None = None
