"""genart - deterministic primitives for generative visual art.

Three independent components:

* :mod:`genart.rng` - ``SeededRNG``, a replayable mulberry32 stream.
* :mod:`genart.noise` / :mod:`genart.fields` - fBM, domain warping, curl and
  ridged fields over an injected base noise function.
* :mod:`genart.palette` - color-theory palettes driven by a ``SeededRNG``.

Same seed and same base noise function always reproduce the same sketch.
"""

__version__ = "0.1.0"

from .errors import InvalidArgumentError
from .fields import NoiseField, sample_grid, sample_vector_grid
from .noise import NoiseParams, curl_noise, fbm, ridge_noise, warped_noise
from .palette import (
    DarkAccentPalette,
    PaletteOptions,
    analogous_palette,
    complementary_palette,
    dark_accent_palette,
    generate_palette,
    harmonic_palette,
    hsl_to_hex,
    lerp_color,
    mono_palette,
    triadic_palette,
)
from .rng import SeededRNG
from .seeds import derive_seed, stable_u32
from .types import HexColor, NoiseFn, PaletteName, Seed, Vec2

__all__ = [
    "__version__",
    # Errors
    "InvalidArgumentError",
    # RNG
    "SeededRNG",
    "derive_seed",
    "stable_u32",
    # Noise
    "NoiseParams",
    "NoiseField",
    "fbm",
    "warped_noise",
    "curl_noise",
    "ridge_noise",
    "sample_grid",
    "sample_vector_grid",
    # Palettes
    "PaletteOptions",
    "DarkAccentPalette",
    "hsl_to_hex",
    "harmonic_palette",
    "analogous_palette",
    "triadic_palette",
    "complementary_palette",
    "mono_palette",
    "dark_accent_palette",
    "lerp_color",
    "generate_palette",
    # Types
    "HexColor",
    "NoiseFn",
    "PaletteName",
    "Seed",
    "Vec2",
]
