"""
Tests for the package-level functions.
"""

import pytest

import osm_shortlink
from osm_shortlink import (
    DecodedShortcode,
    ShortlinkURLError,
    decode_shortcode,
    decode_shortlink_url,
    encode_shortcode,
    shortlink_url,
)
from osm_shortlink.core.config import Settings, settings


def test_shortlink_url_documented_example():
    """Test the documented example URL."""
    assert shortlink_url(50.1111111, 10.5555555, 15) == "https://osm.org/go/0D_QEtY0--"
    assert shortlink_url(50.1111111, 10.5555555) == "https://osm.org/go/0D_QEtY0--"


def test_encode_and_decode():
    """Test the free functions against the documented example."""
    assert encode_shortcode(50.1111111, 10.5555555) == "0D_QEtY0--"

    result = decode_shortcode("0D_QEtY0--")

    assert isinstance(result, DecodedShortcode)
    assert result.lat == pytest.approx(50.11111, abs=1e-5)
    assert result.lon == pytest.approx(10.55554, abs=1e-5)
    assert result.zoom == 15


def test_decode_shortlink_url():
    """Test decoding a URL produced by shortlink_url."""
    url = shortlink_url(60.1699, 24.9384, 12)

    assert decode_shortlink_url(url) == decode_shortcode(encode_shortcode(60.1699, 24.9384, 12))

    with pytest.raises(ShortlinkURLError):
        decode_shortlink_url("https://osm.org/relation/62422")


def test_default_settings():
    """Test the built-in configuration defaults."""
    assert settings.SHORTLINK_BASE_URL == "https://osm.org/go/"
    assert settings.DEFAULT_ZOOM == 15
    assert osm_shortlink.__version__ == settings.VERSION


def test_settings_from_environment(monkeypatch):
    """Test that settings can be overridden through environment variables."""
    monkeypatch.setenv("SHORTLINK_BASE_URL", "https://openstreetmap.org/go/")
    monkeypatch.setenv("DEFAULT_ZOOM", "10")

    overridden = Settings()

    assert overridden.SHORTLINK_BASE_URL == "https://openstreetmap.org/go/"
    assert overridden.DEFAULT_ZOOM == 10
