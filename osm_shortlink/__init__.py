"""
OSM Shortlink

Encode a latitude, longitude and zoom level as a compact OpenStreetMap
short code (https://osm.org/go/0D_QEtY0--) and decode it again.
"""

from typing import Optional

from osm_shortlink.core.config import settings
from osm_shortlink.schemas.shortlink import DecodedShortcode
from osm_shortlink.services.shortlink_service import (
    ShortlinkServiceError,
    ShortlinkURLError,
    shortlink_service,
)
from osm_shortlink.utils import logger as _  # noqa: F401 - Import to configure logging

__version__ = settings.VERSION


def shortlink_url(lat: float, lon: float, zoom: Optional[int] = None) -> str:
    """Return the shortlink URL for a location, e.g. "https://osm.org/go/0D_QEtY0--"."""
    return shortlink_service.shortlink_url(lat, lon, zoom)


def encode_shortcode(lat: float, lon: float, zoom: Optional[int] = None) -> str:
    """Return the short code for a location, e.g. "0D_QEtY0--"."""
    return shortlink_service.encode_shortcode(lat, lon, zoom)


def decode_shortcode(code: str) -> DecodedShortcode:
    """Return the lat, lon and zoom encoded in a short code."""
    return shortlink_service.decode_shortcode(code)


def decode_shortlink_url(url: str) -> DecodedShortcode:
    """Return the lat, lon and zoom encoded in a shortlink URL."""
    return shortlink_service.decode_shortlink_url(url)


__all__ = [
    "DecodedShortcode",
    "ShortlinkServiceError",
    "ShortlinkURLError",
    "decode_shortcode",
    "decode_shortlink_url",
    "encode_shortcode",
    "shortlink_url",
]
