"""Hex color parsing and formatting.

Colors travel through the library as lowercase ``#rrggbb`` strings. These
helpers convert between that canonical form and 8-bit RGB triples.
"""

import re
from typing import Tuple

from genart.errors import InvalidArgumentError
from genart.types import RGB, HexColor

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def is_hex_color(value: object) -> bool:
    """Return True if ``value`` is a ``#rrggbb`` string."""
    return isinstance(value, str) and _HEX_COLOR_RE.match(value) is not None


def clamp_channel(value: int) -> int:
    return max(0, min(255, value))


def hex_to_rgb(color: HexColor) -> RGB:
    """Parse ``#rrggbb`` into an ``(r, g, b)`` tuple of ints in [0, 255]."""
    if not is_hex_color(color):
        raise InvalidArgumentError(f"Not a #rrggbb color: {color!r}")
    return (int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16))


def rgb_to_hex(rgb: Tuple[int, int, int]) -> HexColor:
    """Format an RGB triple as lowercase ``#rrggbb``; channels are clamped."""
    r, g, b = (clamp_channel(int(c)) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"
