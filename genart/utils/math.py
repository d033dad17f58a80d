"""Integer and scalar helpers shared by the RNG engine and palette code.

The RNG engine works on 32-bit words. Python integers are unbounded, so every
step is masked explicitly with :data:`UINT32_MASK`.
"""

import math

UINT32_MASK = 0xFFFFFFFF
UINT32_RANGE = 0x100000000


def to_uint32(value: int) -> int:
    """Return the unsigned 32-bit word with the same low bits as ``value``."""
    return value & UINT32_MASK


def to_int32(value: int) -> int:
    """Return ``value`` wrapped into the signed 32-bit range."""
    value &= UINT32_MASK
    return value - UINT32_RANGE if value & 0x80000000 else value


def imul(a: int, b: int) -> int:
    """32-bit integer multiply keeping only the low word (unsigned)."""
    return ((a & UINT32_MASK) * (b & UINT32_MASK)) & UINT32_MASK


def js_round(value: float) -> int:
    """Round half toward positive infinity.

    ``round()`` uses banker's rounding; color channels are rounded half up
    so that ``127.5`` becomes ``128``.
    """
    return math.floor(value + 0.5)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation, ``t`` is not clamped."""
    return a + (b - a) * t
