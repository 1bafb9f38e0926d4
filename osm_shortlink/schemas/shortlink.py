"""
Shortlink Schemas

Pydantic models for shortlink encode requests and decode results.
"""

from pydantic import BaseModel, Field

from osm_shortlink.core.config import settings
from osm_shortlink.schemas.geo import Coordinates


class ShortlinkRequest(BaseModel):
    """Validated input for encoding a location."""

    coordinates: Coordinates
    zoom: int = Field(
        default=settings.DEFAULT_ZOOM,
        ge=0,
        le=20,
        description="Map zoom level (0-20)",
    )


class DecodedShortcode(BaseModel):
    """Location recovered from a short code."""

    lat: float = Field(..., description="Latitude in decimal degrees")
    lon: float = Field(..., description="Longitude in decimal degrees")
    zoom: int = Field(..., description="Zoom level, to within the 3-level digit granularity")

    @property
    def coordinates(self) -> Coordinates:
        """
        The decoded location as validated Coordinates.

        Decoding always lands in [-90, 90] x [-180, 180], even for codes
        built from out-of-range input, so this holds for any decode
        result. Models constructed by hand with out-of-range values raise
        pydantic.ValidationError here.
        """
        return Coordinates(lat=self.lat, lon=self.lon)
