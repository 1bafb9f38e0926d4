"""
Bit interleaving (Morton / Z-order codes)

interleave() places bit k of x at bit 2k+1 and bit k of y at bit 2k of a
32-bit word. deinterleave_digit() reverses this for a single 6-bit digit.
"""

from typing import Tuple

WORD_MASK = 0xFFFFFFFFFFFFFFFF

_SPREAD_STEPS = (
    (8, 0x00FF00FF),
    (4, 0x0F0F0F0F),
    (2, 0x33333333),
    (1, 0x55555555),
)


def unsigned_right_shift(value: int, steps: int) -> int:
    """Logical right shift of a 64-bit two's-complement word."""
    return (value & WORD_MASK) >> steps


def spread_bits(value: int) -> int:
    """Spread the low 16 bits of value onto the even bit positions."""
    for shift, mask in _SPREAD_STEPS:
        value = (value | (value << shift)) & mask
    return value


def interleave(x: int, y: int) -> int:
    """Interleave x and y into a 32-bit Morton code, x taking the odd bits."""
    return (spread_bits(x) << 1) | spread_bits(y)


def deinterleave_digit(digit: int) -> Tuple[int, int]:
    """
    Split a 6-bit digit into its three x bits and three y bits.

    Returns:
        Tuple of (x_bits, y_bits), each in 0..7
    """
    x_bits = 0
    y_bits = 0
    for k in range(2, -1, -1):
        x_bits |= ((digit >> (2 * k + 1)) & 1) << k
        y_bits |= ((digit >> (2 * k)) & 1) << k
    return x_bits, y_bits
