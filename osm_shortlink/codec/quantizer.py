"""
Quantizer

Maps WGS84 latitude/longitude onto a 2^30-wide fixed-point grid and back.
Longitude spans 360 degrees and latitude 180 degrees, so one grid step in x
covers twice the angle of one step in y.
"""

import math
from typing import NamedTuple, Tuple

GRID_SIZE = 1 << 30

# (2 ** 30) / 90 and (2 ** 30) / 45
LON_SCALE = GRID_SIZE / 90.0
LAT_SCALE = GRID_SIZE / 45.0


class QuantizedPoint(NamedTuple):
    """Fixed-point longitude (x) and latitude (y)."""

    x: int
    y: int


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    value - floor(value) is exact for any finite double, so ties are
    detected without intermediate rounding at every magnitude. Non-finite
    values round to 0.
    """
    if not math.isfinite(value):
        return 0
    if value < 0:
        return -round_half_away(-value)
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def quantize(lat: float, lon: float) -> QuantizedPoint:
    """
    Scale a coordinate onto the fixed-point grid.

    Out-of-range input is not clamped; the result may be negative or wider
    than 30 bits.
    """
    x = round_half_away((lon + 180.0) * LON_SCALE)
    y = round_half_away((lat + 90.0) * LAT_SCALE)
    return QuantizedPoint(x, y)


def _scale_down(value: int, factor: int, digits: int) -> float:
    # value * factor * 2^(2 - 3 * digits), rounded once
    shift = 3 * digits - 2
    if shift <= 0:
        return float(value * factor << -shift)
    return value * factor / (1 << shift)


def dequantize(x: int, y: int, digits: int) -> Tuple[float, float]:
    """
    Convert accumulated fixed-point values back to degrees.

    Integer true division keeps this exact for codes of any length, where
    x and y are far too wide to convert to a float directly.

    Args:
        x: Longitude bits folded in from the decoded digits
        y: Latitude bits folded in from the decoded digits
        digits: Number of digits folded in (three bits per coordinate each)

    Returns:
        Tuple of (lat, lon)
    """
    lon = _scale_down(x, 90, digits) - 180
    lat = _scale_down(y, 45, digits) - 90
    return lat, lon
