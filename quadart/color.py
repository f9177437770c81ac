"""Colour helpers: hex parsing and alpha replacement.

Colours are ``(red, green, blue, alpha)`` tuples of 8-bit channel values.
"""

from __future__ import annotations

import math
from string import hexdigits

RGBA = tuple[int, int, int, int]


def set_alpha(color: tuple[int, ...], alpha: float) -> RGBA:
    """Return *color* with its alpha channel replaced by *alpha* (0 to 1)."""
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be between 0 and 1, got {alpha}")
    red, green, blue = color[:3]
    return (red, green, blue, math.floor(alpha * 255 + 0.5))


def _parse_byte(pair: str) -> int:
    # Malformed digit pairs read as zero rather than failing the whole colour.
    if pair and all(char in hexdigits for char in pair):
        return int(pair, 16)
    return 0


def hex_to_color(hex_string: str) -> RGBA:
    """Parse ``RRGGBB`` or ``RRGGBBAA``, optionally prefixed by ``#``.

    Six digits give an opaque colour. Any other length raises ``ValueError``.
    """
    digits = hex_string[1:] if hex_string.startswith("#") else hex_string
    if len(digits) not in (6, 8):
        raise ValueError(
            f"invalid hex color format (must be 6 or 8 digits): {digits}"
        )
    channels = [_parse_byte(digits[start:start + 2]) for start in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(0xFF)
    red, green, blue, alpha = channels
    return (red, green, blue, alpha)