"""
Tests for coordinate and shortlink schemas.
"""

import pytest
from pydantic import ValidationError

from osm_shortlink.schemas.geo import Coordinates
from osm_shortlink.schemas.shortlink import DecodedShortcode, ShortlinkRequest


def test_coordinates_valid():
    """Test that in-range coordinates are accepted, bounds included."""
    assert Coordinates(lat=90.0, lon=180.0).lat == 90.0
    assert Coordinates(lat=-90.0, lon=-180.0).lon == -180.0


@pytest.mark.parametrize(
    "lat, lon",
    [
        (90.1, 0.0),
        (-90.1, 0.0),
        (0.0, 180.1),
        (0.0, -180.1),
        (float("nan"), 0.0),
    ],
)
def test_coordinates_invalid(lat, lon):
    """Test that out-of-range or NaN coordinates are rejected."""
    with pytest.raises(ValidationError):
        Coordinates(lat=lat, lon=lon)


def test_coordinates_str():
    """Test the string form of coordinates."""
    assert str(Coordinates(lat=60.1699, lon=24.9384)) == "(60.1699, 24.9384)"


def test_shortlink_request_default_zoom():
    """Test that the zoom defaults to the configured default."""
    request = ShortlinkRequest(coordinates=Coordinates(lat=0.0, lon=0.0))

    assert request.zoom == 15


@pytest.mark.parametrize("zoom", [-1, 21])
def test_shortlink_request_invalid_zoom(zoom):
    """Test that zoom levels outside 0-20 are rejected."""
    with pytest.raises(ValidationError):
        ShortlinkRequest(coordinates=Coordinates(lat=0.0, lon=0.0), zoom=zoom)


def test_decoded_shortcode_coordinates():
    """Test conversion of a decode result to validated coordinates."""
    decoded = DecodedShortcode(lat=50.1, lon=10.5, zoom=15)

    assert decoded.coordinates == Coordinates(lat=50.1, lon=10.5)
    assert decoded.model_dump() == {"lat": 50.1, "lon": 10.5, "zoom": 15}


def test_decoded_shortcode_coordinates_out_of_range():
    """Test that hand-built results outside the valid range fail validation."""
    decoded = DecodedShortcode(lat=95.0, lon=10.5, zoom=15)

    with pytest.raises(ValidationError):
        decoded.coordinates
