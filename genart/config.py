"""Library-wide defaults.

Values are fixed algorithm parameters; changing the warp offsets or the curl
epsilon changes every sketch that depends on them.
"""

from typing import Tuple

# Fractal layering
DEFAULT_OCTAVES = 4
DEFAULT_LACUNARITY = 2.0
DEFAULT_GAIN = 0.5

# Scene space -> noise space
DEFAULT_SCALE = 0.005
DEFAULT_RIDGE_SCALE = 1.0

# Domain warping
DEFAULT_WARP_AMOUNT = 4.0
WARP_OFFSET: Tuple[float, float] = (5.2, 1.3)

# Curl finite differences, in scene space
CURL_EPSILON = 1e-4

# Palettes (saturation / lightness in percent, hue in degrees)
DEFAULT_PALETTE_COUNT = 5
DEFAULT_ANALOGOUS_COUNT = 5
DEFAULT_TRIADIC_COUNT = 6
DEFAULT_COMPLEMENTARY_COUNT = 4
DEFAULT_MONO_COUNT = 5
DEFAULT_ACCENT_COUNT = 3
DEFAULT_SATURATION: Tuple[float, float] = (40.0, 80.0)
DEFAULT_LIGHTNESS: Tuple[float, float] = (30.0, 70.0)
DEFAULT_HUE_SPREAD = 360.0
ANALOGOUS_HUE_SPREAD = 60.0
TRIADIC_HUE_SPREAD = 240.0
COMPLEMENTARY_JITTER = 15.0
MONO_SATURATION: Tuple[float, float] = (20.0, 60.0)
MONO_LIGHTNESS: Tuple[float, float] = (20.0, 80.0)
DARK_BACKGROUND_SATURATION: Tuple[float, float] = (5.0, 15.0)
DARK_BACKGROUND_LIGHTNESS: Tuple[float, float] = (5.0, 12.0)
ACCENT_SATURATION: Tuple[float, float] = (60.0, 90.0)
ACCENT_LIGHTNESS: Tuple[float, float] = (50.0, 80.0)
ACCENT_HUE_SPREAD: Tuple[float, float] = (60.0, 200.0)
