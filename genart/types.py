"""Common type aliases and enumerations.

``NoiseFn`` is the central extension point of the noise library: callers
inject their own base coherent-noise primitive instead of relying on an
ambient global one.
"""

from enum import StrEnum, auto
from typing import Callable, Tuple

from pyrsistent.typing import PVector

Seed = int

# Base coherent noise: (x, y) -> value in [0, 1], continuous and deterministic.
NoiseFn = Callable[[float, float], float]

Vec2 = Tuple[float, float]
ScalarFieldFn = Callable[[float, float], float]
VectorFieldFn = Callable[[float, float], Vec2]

HexColor = str
RGB = Tuple[int, int, int]
Palette = PVector[HexColor]


class PaletteName(StrEnum):
    """Built-in palette generators available through the registry."""

    HARMONIC = auto()
    ANALOGOUS = auto()
    COMPLEMENTARY = auto()
    TRIADIC = auto()
    MONO = auto()
    DARK_ACCENT = auto()
