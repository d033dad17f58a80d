"""Color-theory palette synthesis.

All generators take a caller-owned :class:`genart.rng.SeededRNG` and advance
it a fixed number of times per call:

==========================  ============================
generator                   draws
==========================  ============================
``harmonic_palette``        ``1 + 2 * count``
``analogous_palette``       ``1 + 2 * count``
``triadic_palette``         ``1 + 2 * count``
``complementary_palette``   ``1 + 3 * count``
``mono_palette``            ``2``
``dark_accent_palette``     ``5 + 2 * accent_count``
==========================  ============================

Palettes are immutable ``PVector`` s of lowercase ``#rrggbb`` strings; index
order is meaningful (hue spread, lightness ramp).
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Union

from pyrsistent import pvector

from genart.config import (
    ACCENT_HUE_SPREAD,
    ACCENT_LIGHTNESS,
    ACCENT_SATURATION,
    ANALOGOUS_HUE_SPREAD,
    COMPLEMENTARY_JITTER,
    DARK_BACKGROUND_LIGHTNESS,
    DARK_BACKGROUND_SATURATION,
    DEFAULT_ACCENT_COUNT,
    DEFAULT_ANALOGOUS_COUNT,
    DEFAULT_COMPLEMENTARY_COUNT,
    DEFAULT_HUE_SPREAD,
    DEFAULT_LIGHTNESS,
    DEFAULT_MONO_COUNT,
    DEFAULT_PALETTE_COUNT,
    DEFAULT_SATURATION,
    DEFAULT_TRIADIC_COUNT,
    MONO_LIGHTNESS,
    MONO_SATURATION,
    TRIADIC_HUE_SPREAD,
)
from genart.errors import InvalidArgumentError
from genart.rng import SeededRNG
from genart.types import HexColor, Palette, PaletteName
from genart.utils.color import hex_to_rgb, rgb_to_hex
from genart.utils.math import js_round, lerp

logger = logging.getLogger(__name__)

PaletteFn = Callable[[SeededRNG, int], Palette]


@dataclass(frozen=True)
class PaletteOptions:
    """Ranges for :func:`harmonic_palette`.

    Attributes:
        saturation: ``(low, high)`` percent range sampled per color.
        lightness: ``(low, high)`` percent range sampled per color.
        hue_spread: Degrees covered from the first to the last color.
    """

    saturation: Tuple[float, float] = DEFAULT_SATURATION
    lightness: Tuple[float, float] = DEFAULT_LIGHTNESS
    hue_spread: float = DEFAULT_HUE_SPREAD


DEFAULT_PALETTE_OPTIONS = PaletteOptions()


@dataclass(frozen=True)
class DarkAccentPalette:
    """Dark background plus a bright accent palette."""

    background: HexColor
    accents: Palette

    @property
    def combined(self) -> Palette:
        """Background first, then the accents."""
        return pvector([self.background]).extend(self.accents)


def _check_count(count: int) -> None:
    if count <= 0:
        raise InvalidArgumentError(f"Palette size must be positive, got {count}")


def hsl_to_hex(h: float, s: float, l: float) -> HexColor:
    """Convert HSL to ``#rrggbb``. h: 0-360, s: 0-100, l: 0-100."""
    h = h % 360
    s /= 100
    l /= 100
    a = s * min(l, 1 - l)

    def channel(n: int) -> int:
        k = (n + h / 30) % 12
        color = l - a * max(min(k - 3, 9 - k, 1), -1)
        return js_round(255 * color)

    return rgb_to_hex((channel(0), channel(8), channel(4)))


def harmonic_hues(base_hue: float, count: int, hue_spread: float) -> List[float]:
    """Hues spread linearly over ``hue_spread`` degrees starting at ``base_hue``.

    A single color sits at the midpoint of the spread.
    """
    _check_count(count)
    hues: List[float] = []
    for i in range(count):
        t = 0.5 if count == 1 else i / (count - 1)
        hues.append((base_hue + t * hue_spread) % 360)
    return hues


def harmonic_palette(
    rng: SeededRNG,
    count: int = DEFAULT_PALETTE_COUNT,
    options: Optional[PaletteOptions] = None,
) -> Palette:
    """Generate ``count`` colors with harmonic hue relationships.

    Args:
        rng (SeededRNG): Engine to draw from; advanced ``1 + 2 * count`` times.
        count (int): Number of colors (>= 1).
        options (Optional[PaletteOptions]): Saturation/lightness ranges and
            hue spread. Defaults to :data:`DEFAULT_PALETTE_OPTIONS`.

    Returns:
        Palette: Colors ordered along the hue spread.
    """
    _check_count(count)
    opts = options or DEFAULT_PALETTE_OPTIONS
    base_hue = rng.range(0, 360)
    colors: List[HexColor] = []
    for hue in harmonic_hues(base_hue, count, opts.hue_spread):
        sat = rng.range(*opts.saturation)
        lit = rng.range(*opts.lightness)
        colors.append(hsl_to_hex(hue, sat, lit))
    return pvector(colors)


def analogous_palette(rng: SeededRNG, count: int = DEFAULT_ANALOGOUS_COUNT) -> Palette:
    """Colors close together on the wheel."""
    return harmonic_palette(rng, count, PaletteOptions(hue_spread=ANALOGOUS_HUE_SPREAD))


def triadic_palette(rng: SeededRNG, count: int = DEFAULT_TRIADIC_COUNT) -> Palette:
    return harmonic_palette(rng, count, PaletteOptions(hue_spread=TRIADIC_HUE_SPREAD))


def complementary_palette(
    rng: SeededRNG, count: int = DEFAULT_COMPLEMENTARY_COUNT
) -> Palette:
    """Alternate a base hue and its opposite, each jittered by up to 15 degrees."""
    _check_count(count)
    base_hue = rng.range(0, 360)
    colors: List[HexColor] = []
    for i in range(count):
        offset = 0 if i % 2 == 0 else 180
        jitter = rng.range(-COMPLEMENTARY_JITTER, COMPLEMENTARY_JITTER)
        hue = (base_hue + offset + jitter) % 360
        sat = rng.range(*DEFAULT_SATURATION)
        lit = rng.range(*DEFAULT_LIGHTNESS)
        colors.append(hsl_to_hex(hue, sat, lit))
    return pvector(colors)


def mono_palette(rng: SeededRNG, count: int = DEFAULT_MONO_COUNT) -> Palette:
    """Single hue and saturation, lightness ramping from 20 to 80."""
    _check_count(count)
    hue = rng.range(0, 360)
    sat = rng.range(*MONO_SATURATION)
    low, high = MONO_LIGHTNESS
    denom = (count - 1) or 1
    return pvector(
        [hsl_to_hex(hue, sat, low + (high - low) * i / denom) for i in range(count)]
    )


def dark_accent_palette(
    rng: SeededRNG, accent_count: int = DEFAULT_ACCENT_COUNT
) -> DarkAccentPalette:
    """Dark, desaturated background with bright harmonic accents."""
    _check_count(accent_count)
    background = hsl_to_hex(
        rng.range(0, 360),
        rng.range(*DARK_BACKGROUND_SATURATION),
        rng.range(*DARK_BACKGROUND_LIGHTNESS),
    )
    accents = harmonic_palette(
        rng,
        accent_count,
        PaletteOptions(
            saturation=ACCENT_SATURATION,
            lightness=ACCENT_LIGHTNESS,
            hue_spread=rng.range(*ACCENT_HUE_SPREAD),
        ),
    )
    return DarkAccentPalette(background=background, accents=accents)


def lerp_color(hex1: HexColor, hex2: HexColor, t: float) -> HexColor:
    """Interpolate two colors per RGB channel.

    ``t`` outside [0, 1] extrapolates; channels are clamped to [0, 255].
    ``t`` must be finite.
    """
    if not math.isfinite(t):
        raise InvalidArgumentError(f"lerp_color() requires a finite t, got {t}")
    r1, g1, b1 = hex_to_rgb(hex1)
    r2, g2, b2 = hex_to_rgb(hex2)
    return rgb_to_hex(
        (
            js_round(lerp(r1, r2, t)),
            js_round(lerp(g1, g2, t)),
            js_round(lerp(b1, b2, t)),
        )
    )


# --- Registry ---


def _dark_accent_combined(rng: SeededRNG, count: int) -> Palette:
    # ``count`` is the accent count; the background is prepended.
    return dark_accent_palette(rng, count).combined


# Keys are plain strings; ``PaletteName`` members compare and hash as their value.
PALETTE_REGISTRY: Dict[str, PaletteFn] = {
    PaletteName.HARMONIC: harmonic_palette,
    PaletteName.ANALOGOUS: analogous_palette,
    PaletteName.COMPLEMENTARY: complementary_palette,
    PaletteName.TRIADIC: triadic_palette,
    PaletteName.MONO: mono_palette,
    PaletteName.DARK_ACCENT: _dark_accent_combined,
}

DEFAULT_COUNTS: Dict[str, int] = {
    PaletteName.HARMONIC: DEFAULT_PALETTE_COUNT,
    PaletteName.ANALOGOUS: DEFAULT_ANALOGOUS_COUNT,
    PaletteName.COMPLEMENTARY: DEFAULT_COMPLEMENTARY_COUNT,
    PaletteName.TRIADIC: DEFAULT_TRIADIC_COUNT,
    PaletteName.MONO: DEFAULT_MONO_COUNT,
    PaletteName.DARK_ACCENT: DEFAULT_ACCENT_COUNT,
}


def register_palette(
    name: Union[str, PaletteName], fn: PaletteFn, default_count: int = DEFAULT_PALETTE_COUNT
) -> None:
    """Register a palette generator under ``name``.

    New names are added; registering a built-in name replaces its generator.
    """
    _check_count(default_count)
    key = str(name)
    if key in PALETTE_REGISTRY:
        logger.debug("Overriding palette generator %s", key)
    PALETTE_REGISTRY[key] = fn
    DEFAULT_COUNTS[key] = default_count


def generate_palette(
    name: Union[str, PaletteName], rng: SeededRNG, count: Optional[int] = None
) -> Palette:
    """Generate a palette by name, e.g. ``generate_palette("mono", rng)``."""
    key = str(name)
    if key not in PALETTE_REGISTRY:
        raise InvalidArgumentError(f"Unknown palette: {name!r}")
    fn = PALETTE_REGISTRY[key]
    return fn(rng, DEFAULT_COUNTS[key] if count is None else count)
