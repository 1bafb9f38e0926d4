import pytest

from osm_shortlink.services.shortlink_service import ShortlinkService


@pytest.fixture(scope="function")
def service():
    """Provides a shortlink service with the default OSM base URL and zoom."""
    return ShortlinkService(base_url="https://osm.org/go/", default_zoom=15)


@pytest.fixture
def sample_locations():
    """Sample (lat, lon) pairs spread over all four hemispheres."""
    return [
        (50.1111111, 10.5555555),  # documented example
        (60.1699, 24.9384),  # Helsinki
        (-33.8688, 151.2093),  # Sydney
        (40.7128, -74.0060),  # New York
        (-22.9068, -43.1729),  # Rio de Janeiro
        (0.0, 0.0),
        (89.999, 179.999),
        (-89.999, -179.999),
    ]
