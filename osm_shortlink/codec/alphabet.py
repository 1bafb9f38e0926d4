"""
Shortlink alphabet

64 URL-safe characters, one per 6-bit digit, plus the pad character that
carries sub-digit zoom precision.
"""

from typing import Dict, Optional

# 64 chars to encode 6 bits
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_~"
PAD_CHAR = "-"

# Older shortlinks used "@" where current ones use "~"
LEGACY_ALIASES: Dict[str, str] = {"@": "~"}

_ALPHABET_MAP: Dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}


def encode_digit(digit: int) -> str:
    return ALPHABET[digit]


def decode_char(char: str) -> Optional[int]:
    """Return the digit for char, or None if char is not in the alphabet."""
    return _ALPHABET_MAP.get(char)


def normalize_legacy(code: str) -> str:
    """Replace legacy alias characters with their current equivalents."""
    for legacy, current in LEGACY_ALIASES.items():
        code = code.replace(legacy, current)
    return code
