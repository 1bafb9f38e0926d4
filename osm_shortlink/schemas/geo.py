"""
Coordinate Type Definitions

Pydantic model for a WGS84 point at the validated API boundary. The codec
functions themselves take plain floats and never reject input.
"""

import math

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class Coordinates(BaseModel):
    """
    Geographic coordinates in decimal degrees.
    """

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in decimal degrees")
    lon: float = Field(..., ge=-180.0, le=180.0, description="Longitude in decimal degrees")

    @field_validator("lat", "lon")
    @classmethod
    def validate_finite(cls, v: float, info: ValidationInfo) -> float:
        """Reject NaN, which slips through the range constraints."""
        if math.isnan(v):
            raise ValueError(f"{info.field_name} must be a number")
        return v

    def __str__(self) -> str:
        return f"({self.lat}, {self.lon})"
