# tests/unit/test_palette.py

import math
from typing import Callable, List

import pytest
from pyrsistent import PVector

from genart.config import (
    DEFAULT_ACCENT_COUNT,
    DEFAULT_ANALOGOUS_COUNT,
    DEFAULT_COMPLEMENTARY_COUNT,
    DEFAULT_MONO_COUNT,
    DEFAULT_PALETTE_COUNT,
    DEFAULT_TRIADIC_COUNT,
)
from genart.errors import InvalidArgumentError
from genart.palette import (
    DEFAULT_COUNTS,
    DarkAccentPalette,
    PaletteOptions,
    analogous_palette,
    complementary_palette,
    dark_accent_palette,
    generate_palette,
    harmonic_hues,
    harmonic_palette,
    hsl_to_hex,
    lerp_color,
    mono_palette,
    triadic_palette,
)
from genart.rng import SeededRNG
from genart.utils.color import hex_to_rgb
from tests.test_utils import advanced, assert_valid_palette, reference_hsl_to_rgb

PALETTE_FNS: List[Callable[[SeededRNG, int], object]] = [
    harmonic_palette,
    analogous_palette,
    triadic_palette,
    complementary_palette,
    mono_palette,
]


# --- hsl_to_hex ---


@pytest.mark.parametrize(
    "h, s, l, expected",
    [
        (0, 100, 50, "#ff0000"),
        (120, 100, 50, "#00ff00"),
        (240, 100, 50, "#0000ff"),
        (60, 100, 50, "#ffff00"),
        (30, 100, 50, "#ff8000"),
        (0, 0, 0, "#000000"),
        (0, 0, 100, "#ffffff"),
        (0, 0, 50, "#808080"),  # 127.5 rounds up
        (360, 100, 50, "#ff0000"),
        (-120, 100, 50, "#0000ff"),
    ],
)
def test_hsl_to_hex_known_values(h: float, s: float, l: float, expected: str) -> None:
    assert hsl_to_hex(h, s, l) == expected


def test_hsl_to_hex_matches_reference_within_one() -> None:
    rng = SeededRNG(123)
    for _ in range(2_000):
        h, s, l = rng.range(0, 360), rng.range(0, 100), rng.range(0, 100)
        got = hex_to_rgb(hsl_to_hex(h, s, l))
        ref = reference_hsl_to_rgb(h, s, l)
        assert all(abs(a - b) <= 1 for a, b in zip(got, ref)), (h, s, l, got, ref)


# --- harmonic ---


def test_harmonic_hues_spread() -> None:
    assert harmonic_hues(10.0, 5, 60.0) == [10.0, 25.0, 40.0, 55.0, 70.0]
    assert harmonic_hues(350.0, 3, 40.0) == [350.0, 10.0, 30.0]
    assert harmonic_hues(100.0, 1, 360.0) == [280.0]


def test_harmonic_full_spread_wraps_to_base_hue() -> None:
    twin = SeededRNG(42)
    base = twin.range(0, 360)
    hues = harmonic_hues(base, 5, 360.0)
    assert hues[-1] == pytest.approx(base)
    assert hues[0] == base

    palette = harmonic_palette(SeededRNG(42), 5)
    expected = [hsl_to_hex(h, twin.range(40, 80), twin.range(30, 70)) for h in hues]
    assert list(palette) == expected


def test_harmonic_options_and_draw_count() -> None:
    opts = PaletteOptions(saturation=(10, 20), lightness=(40, 45), hue_spread=90.0)
    rng = SeededRNG(5)
    palette = harmonic_palette(rng, 4, opts)
    twin = SeededRNG(5)
    hues = harmonic_hues(twin.range(0, 360), 4, 90.0)
    assert list(palette) == [
        hsl_to_hex(h, twin.range(10, 20), twin.range(40, 45)) for h in hues
    ]
    assert rng.state == advanced(5, 1 + 2 * 4).state


def test_harmonic_single_color_uses_midpoint() -> None:
    twin = SeededRNG(8)
    base = twin.range(0, 360)
    palette = harmonic_palette(SeededRNG(8), 1)
    assert list(palette) == [
        hsl_to_hex((base + 180.0) % 360, twin.range(40, 80), twin.range(30, 70))
    ]


@pytest.mark.parametrize(
    "fn, spread, default_count",
    [(analogous_palette, 60.0, 5), (triadic_palette, 240.0, 6)],
)
def test_fixed_spread_variants(fn: Callable, spread: float, default_count: int) -> None:
    assert fn(SeededRNG(3)) == harmonic_palette(
        SeededRNG(3), default_count, PaletteOptions(hue_spread=spread)
    )
    assert len(fn(SeededRNG(3))) == default_count


# --- complementary / mono / dark accent ---


def test_complementary_alternates_opposite_hues() -> None:
    rng = SeededRNG(17)
    palette = complementary_palette(rng, 4)
    twin = SeededRNG(17)
    base = twin.range(0, 360)
    expected = []
    for i in range(4):
        hue = (base + (0 if i % 2 == 0 else 180) + twin.range(-15, 15)) % 360
        expected.append(hsl_to_hex(hue, twin.range(40, 80), twin.range(30, 70)))
    assert list(palette) == expected
    assert rng.state == twin.state == advanced(17, 1 + 3 * 4).state


def test_mono_lightness_ramp() -> None:
    rng = SeededRNG(9)
    palette = mono_palette(rng, 4)
    twin = SeededRNG(9)
    hue, sat = twin.range(0, 360), twin.range(20, 60)
    assert list(palette) == [hsl_to_hex(hue, sat, 20 + 60 * i / 3) for i in range(4)]
    assert rng.state == advanced(9, 2).state


def test_mono_single_color() -> None:
    rng = SeededRNG(9)
    palette = mono_palette(rng, 1)
    twin = SeededRNG(9)
    assert len(palette) == 1
    assert palette[0] == hsl_to_hex(twin.range(0, 360), twin.range(20, 60), 20)


def test_dark_accent_structure_and_draws() -> None:
    rng = SeededRNG(2)
    result = dark_accent_palette(rng, 3)
    assert isinstance(result, DarkAccentPalette)

    twin = SeededRNG(2)
    bg = hsl_to_hex(twin.range(0, 360), twin.range(5, 15), twin.range(5, 12))
    spread = twin.range(60, 200)
    accents = harmonic_palette(
        twin, 3, PaletteOptions(saturation=(60, 90), lightness=(50, 80), hue_spread=spread)
    )
    assert result.background == bg
    assert result.accents == accents
    assert list(result.combined) == [bg, *accents]
    assert rng.state == advanced(2, 5 + 2 * 3).state


def test_dark_accent_background_is_dark() -> None:
    for seed in range(50):
        r, g, b = hex_to_rgb(dark_accent_palette(SeededRNG(seed)).background)
        assert max(r, g, b) <= 40


# --- validity and errors ---


@pytest.mark.parametrize("fn", PALETTE_FNS)
@pytest.mark.parametrize("count", [1, 2, 3, 5, 8])
def test_palettes_are_valid_colors(fn: Callable, count: int) -> None:
    for seed in range(25):
        palette = fn(SeededRNG(seed), count)
        assert isinstance(palette, PVector)
        assert len(palette) == count
        assert_valid_palette(list(palette))


def test_dark_accent_valid_colors() -> None:
    for seed in range(25):
        assert_valid_palette(list(dark_accent_palette(SeededRNG(seed), 4).combined))


@pytest.mark.parametrize("fn", [*PALETTE_FNS, dark_accent_palette])
@pytest.mark.parametrize("count", [0, -1])
def test_non_positive_count_raises_without_drawing(fn: Callable, count: int) -> None:
    rng = SeededRNG(1)
    with pytest.raises(InvalidArgumentError):
        fn(rng, count)
    assert rng.state == SeededRNG(1).state


def test_palettes_are_reproducible() -> None:
    for fn in PALETTE_FNS:
        assert fn(SeededRNG(77), 6) == fn(SeededRNG(77), 6)


# --- lerp_color ---


@pytest.mark.parametrize(
    "a, b, t, expected",
    [
        ("#000000", "#ffffff", 0.0, "#000000"),
        ("#000000", "#ffffff", 1.0, "#ffffff"),
        ("#000000", "#ffffff", 0.5, "#808080"),
        ("#ff0000", "#0000ff", 0.25, "#bf0040"),
        ("#000000", "#808080", 2.0, "#ffffff"),
        ("#808080", "#ffffff", -1.0, "#010101"),
        ("#101010", "#202020", -5.0, "#000000"),
    ],
)
def test_lerp_color(a: str, b: str, t: float, expected: str) -> None:
    assert lerp_color(a, b, t) == expected


def test_lerp_color_rejects_malformed() -> None:
    with pytest.raises(InvalidArgumentError):
        lerp_color("red", "#000000", 0.5)


@pytest.mark.parametrize(
    "a, b, t",
    [
        ("#101010", "#202020", math.inf),
        ("#101010", "#202020", -math.inf),
        ("#101010", "#101010", math.inf),
        ("#101010", "#202020", math.nan),
    ],
)
def test_lerp_color_rejects_non_finite_t(a: str, b: str, t: float) -> None:
    with pytest.raises(InvalidArgumentError):
        lerp_color(a, b, t)


def test_lerp_color_far_extrapolation_clamps() -> None:
    assert lerp_color("#101010", "#202020", 1e300) == "#ffffff"
    assert lerp_color("#101010", "#202020", -1e300) == "#000000"


@pytest.mark.parametrize(
    "fn, default_count",
    [
        (harmonic_palette, DEFAULT_PALETTE_COUNT),
        (analogous_palette, DEFAULT_ANALOGOUS_COUNT),
        (triadic_palette, DEFAULT_TRIADIC_COUNT),
        (complementary_palette, DEFAULT_COMPLEMENTARY_COUNT),
        (mono_palette, DEFAULT_MONO_COUNT),
    ],
)
def test_default_counts_shared_with_registry(fn: Callable, default_count: int) -> None:
    assert len(fn(SeededRNG(1))) == default_count
    name = fn.__name__.removesuffix("_palette")
    assert DEFAULT_COUNTS[name] == default_count
    assert generate_palette(name, SeededRNG(1)) == fn(SeededRNG(1))


def test_dark_accent_default_count() -> None:
    assert len(dark_accent_palette(SeededRNG(1)).accents) == DEFAULT_ACCENT_COUNT
    assert DEFAULT_COUNTS["dark_accent"] == DEFAULT_ACCENT_COUNT
