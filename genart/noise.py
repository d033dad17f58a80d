"""Derived noise fields.

Every function composes calls to a caller-supplied base noise function
``noise_fn(x, y) -> [0, 1]`` (see :data:`genart.types.NoiseFn`). Nothing here
holds state or draws randomness, so identical inputs always give identical
samples.

* :func:`fbm` - fractal Brownian motion (layered octaves).
* :func:`warped_noise` - fBM sampled at coordinates displaced by fBM.
* :func:`curl_noise` - divergence-free 2D vector field.
* :func:`ridge_noise` - folded octaves with previous-output feedback.
"""

from dataclasses import dataclass

from genart.config import (
    CURL_EPSILON,
    DEFAULT_GAIN,
    DEFAULT_LACUNARITY,
    DEFAULT_OCTAVES,
    DEFAULT_RIDGE_SCALE,
    DEFAULT_SCALE,
    DEFAULT_WARP_AMOUNT,
    WARP_OFFSET,
)
from genart.errors import InvalidArgumentError
from genart.types import NoiseFn, Vec2


def _check_octaves(octaves: int) -> None:
    if octaves < 1:
        raise InvalidArgumentError(f"octaves must be >= 1, got {octaves}")


@dataclass(frozen=True)
class NoiseParams:
    """Parameter record shared by the derived fields.

    Attributes:
        octaves: Number of layers summed (>= 1).
        lacunarity: Frequency multiplier per octave.
        gain: Amplitude multiplier per octave.
        scale: Scene/pixel space to noise space factor.
        warp_amount: Displacement strength for domain warping.
    """

    octaves: int = DEFAULT_OCTAVES
    lacunarity: float = DEFAULT_LACUNARITY
    gain: float = DEFAULT_GAIN
    scale: float = DEFAULT_SCALE
    warp_amount: float = DEFAULT_WARP_AMOUNT

    def __post_init__(self) -> None:
        _check_octaves(self.octaves)


def fbm(
    noise_fn: NoiseFn,
    x: float,
    y: float,
    octaves: int = DEFAULT_OCTAVES,
    lacunarity: float = DEFAULT_LACUNARITY,
    gain: float = DEFAULT_GAIN,
) -> float:
    """Fractal Brownian motion: layered noise with decreasing amplitude.

    Coordinates are used as given; scale them before calling.

    Args:
        noise_fn (NoiseFn): Base coherent noise.
        x (float): Sample x in noise space.
        y (float): Sample y in noise space.
        octaves (int): Number of layers, at least 1.
        lacunarity (float): Frequency multiplier per octave.
        gain (float): Amplitude multiplier per octave.

    Returns:
        float: Weighted mean of the octaves, approximately in [0, 1]. With a
            single octave this is exactly ``noise_fn(x, y)``.
    """
    _check_octaves(octaves)
    value = 0.0
    amplitude = 1.0
    frequency = 1.0
    max_value = 0.0
    for _ in range(octaves):
        value += amplitude * noise_fn(x * frequency, y * frequency)
        max_value += amplitude
        amplitude *= gain
        frequency *= lacunarity
    return value / max_value


def warped_noise(
    noise_fn: NoiseFn,
    x: float,
    y: float,
    scale: float = DEFAULT_SCALE,
    warp_amount: float = DEFAULT_WARP_AMOUNT,
    octaves: int = DEFAULT_OCTAVES,
    lacunarity: float = DEFAULT_LACUNARITY,
    gain: float = DEFAULT_GAIN,
) -> float:
    """Domain-warped fBM: organic, fluid-like distortion.

    Two fBM samples (the second at a fixed offset so the warp axes are not
    correlated) displace the sampling point before the final fBM lookup.
    """
    sx = x * scale
    sy = y * scale
    qx = fbm(noise_fn, sx, sy, octaves, lacunarity, gain)
    qy = fbm(noise_fn, sx + WARP_OFFSET[0], sy + WARP_OFFSET[1], octaves, lacunarity, gain)
    return fbm(
        noise_fn,
        sx + warp_amount * qx,
        sy + warp_amount * qy,
        octaves,
        lacunarity,
        gain,
    )


def curl_noise(
    noise_fn: NoiseFn, x: float, y: float, scale: float = DEFAULT_SCALE
) -> Vec2:
    """Curl of the base noise potential, via central differences.

    Returns ``(d/dy, -d/dx)``. The vector is not normalized; its magnitude
    tracks how steep the potential is.
    """
    eps = CURL_EPSILON
    n1 = noise_fn(x * scale, (y + eps) * scale)
    n2 = noise_fn(x * scale, (y - eps) * scale)
    n3 = noise_fn((x + eps) * scale, y * scale)
    n4 = noise_fn((x - eps) * scale, y * scale)
    dx = (n1 - n2) / (2 * eps)
    dy = -(n3 - n4) / (2 * eps)
    return (dx, dy)


def ridge_noise(
    noise_fn: NoiseFn,
    x: float,
    y: float,
    octaves: int = DEFAULT_OCTAVES,
    scale: float = DEFAULT_RIDGE_SCALE,
    lacunarity: float = DEFAULT_LACUNARITY,
    gain: float = DEFAULT_GAIN,
) -> float:
    """Ridged multifractal noise: sharp ridges and valleys.

    Each octave sample is folded to ``1 - |2n - 1|``, squared, and weighted by
    the previous octave's output (not its amplitude). The feedback makes
    ridges correlate across octaves. Stays within [0, 1].
    """
    _check_octaves(octaves)
    sx = x * scale
    sy = y * scale
    value = 0.0
    amplitude = 1.0
    frequency = 1.0
    max_value = 0.0
    prev = 1.0
    for _ in range(octaves):
        n = noise_fn(sx * frequency, sy * frequency)
        n = 1.0 - abs(n * 2.0 - 1.0)
        n = n * n
        n *= prev
        prev = n
        value += amplitude * n
        max_value += amplitude
        amplitude *= gain
        frequency *= lacunarity
    return value / max_value
