"""
Shortlink Service

Encodes coordinates and zoom levels into OpenStreetMap short codes and
decodes them again.

Format reference: https://wiki.openstreetmap.org/wiki/Shortlink
"""

import logging
from typing import List, Optional, Tuple
from urllib.parse import urlsplit

from osm_shortlink.codec.alphabet import (
    PAD_CHAR,
    decode_char,
    encode_digit,
    normalize_legacy,
)
from osm_shortlink.codec.interleave import (
    deinterleave_digit,
    interleave,
    unsigned_right_shift,
)
from osm_shortlink.codec.quantizer import dequantize, quantize
from osm_shortlink.core.config import settings
from osm_shortlink.schemas.shortlink import DecodedShortcode, ShortlinkRequest

logger = logging.getLogger(__name__)

# Digits carried by each of the two Morton codes
TIER_DIGITS = 5
DIGIT_MASK = 0x3F
LOW_TIER_MASK = 0x7FFF

SHORTLINK_PATH_PREFIX = "/go/"


class ShortlinkServiceError(Exception):
    """Base exception for shortlink service errors."""


class ShortlinkURLError(ShortlinkServiceError):
    """Raised when a URL does not contain a short code."""


def digit_layout(zoom: int) -> Tuple[int, int]:
    """
    Number of digits and pad characters a code for this zoom carries.

    Returns:
        Tuple of (digit_count, pad_count)
    """
    digits, pad = divmod(zoom + 8, 3)
    if pad > 0:  # ceil instead of floor
        digits += 1
    return max(digits, 0), pad


def _morton_digit(code: int, index: int) -> int:
    shift = 24 - 6 * index
    if shift < 0:
        # past the last encoded coordinate bit
        return 0
    return (code >> shift) & DIGIT_MASK


class ShortlinkService:
    """
    Service for converting between locations and OSM short codes.

    All operations are pure; a single shared instance is safe to use from
    any thread.
    """

    def __init__(self, base_url: Optional[str] = None, default_zoom: Optional[int] = None):
        self._base_url = base_url if base_url is not None else settings.SHORTLINK_BASE_URL
        self._default_zoom = default_zoom if default_zoom is not None else settings.DEFAULT_ZOOM

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def default_zoom(self) -> int:
        return self._default_zoom

    def encode_shortcode(self, lat: float, lon: float, zoom: Optional[int] = None) -> str:
        """
        Encode a coordinate and zoom level into a short code.

        Never fails: out-of-range coordinates or zoom levels produce a
        well-defined, if geographically meaningless, code.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees
            zoom: Zoom level (defaults to settings.DEFAULT_ZOOM)

        Returns:
            Short code, e.g. "0D_QEtY0--"
        """
        if zoom is None:
            zoom = self._default_zoom

        x, y = quantize(lat, lon)
        high = interleave(unsigned_right_shift(x, 17), unsigned_right_shift(y, 17))
        low = interleave(
            unsigned_right_shift(x, 2) & LOW_TIER_MASK,
            unsigned_right_shift(y, 2) & LOW_TIER_MASK,
        )

        digit_count, pad_count = digit_layout(zoom)
        chars: List[str] = []
        for i in range(digit_count):
            if i < TIER_DIGITS:
                digit = _morton_digit(high, i)
            else:
                digit = _morton_digit(low, i - TIER_DIGITS)
            chars.append(encode_digit(digit))
        chars.append(PAD_CHAR * pad_count)

        code = "".join(chars)
        logger.debug("Encoded (%s, %s) at zoom %s as %s", lat, lon, zoom, code)
        return code

    def decode_shortcode(self, code: str) -> DecodedShortcode:
        """
        Decode a short code into a coordinate and zoom level.

        Decoding stops at the first character outside the alphabet; the
        result then reflects only the valid prefix, with reduced precision.
        Legacy codes using "@" in place of "~" are accepted.

        Args:
            code: Short code, e.g. "0D_QEtY0--"

        Returns:
            DecodedShortcode with lat, lon and zoom
        """
        code = normalize_legacy(code)
        x = 0
        y = 0
        zoom = -8
        consumed = 0

        for char in code:
            digit = decode_char(char)
            if digit is None:
                break
            x_bits, y_bits = deinterleave_digit(digit)
            x = (x << 3) | x_bits
            y = (y << 3) | y_bits
            zoom += 3
            consumed += 1

        if consumed < len(code) and code[consumed] != PAD_CHAR:
            logger.info(
                "Short code %r ends at unexpected character %r (position %s)",
                code,
                code[consumed],
                consumed,
            )

        lat, lon = dequantize(x, y, consumed)

        if consumed < len(code) and code[consumed] == PAD_CHAR:
            zoom -= 2
            if consumed + 1 < len(code) and code[consumed + 1] == PAD_CHAR:
                zoom += 1

        logger.debug("Decoded %s as (%s, %s) at zoom %s", code, lat, lon, zoom)
        return DecodedShortcode(lat=lat, lon=lon, zoom=zoom)

    def shortlink_url(self, lat: float, lon: float, zoom: Optional[int] = None) -> str:
        """
        Build a shortlink URL, e.g. "https://osm.org/go/0D_QEtY0--".
        """
        return self._base_url + self.encode_shortcode(lat, lon, zoom)

    def decode_shortlink_url(self, url: str) -> DecodedShortcode:
        """
        Decode a shortlink URL or a bare short code.

        Any URL whose path starts with "/go/" is accepted, whatever its
        host, so links from openstreetmap.org and osm.org both work.

        Raises:
            ShortlinkURLError: If the URL has no "/go/" path segment
        """
        url = url.strip()
        if "/" not in url:
            return self.decode_shortcode(url)

        if "://" in url or url.startswith("/"):
            path = urlsplit(url).path
        else:
            # scheme-less, e.g. "osm.org/go/0D_QEtY0--"
            path = urlsplit("//" + url).path
        if not path.startswith(SHORTLINK_PATH_PREFIX):
            logger.error("URL does not contain a short code: %s", url)
            raise ShortlinkURLError(f"Not a shortlink URL: {url}")

        return self.decode_shortcode(path[len(SHORTLINK_PATH_PREFIX):])

    def encode_coordinates(self, request: ShortlinkRequest) -> str:
        """
        Encode a validated request.

        Range checks happen when the request model is built; the encoding
        itself is identical to encode_shortcode().
        """
        return self.encode_shortcode(
            request.coordinates.lat, request.coordinates.lon, request.zoom
        )

    def shortlink_url_for(self, request: ShortlinkRequest) -> str:
        return self._base_url + self.encode_coordinates(request)


# Singleton instance for dependency injection
shortlink_service = ShortlinkService()
