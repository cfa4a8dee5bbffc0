from __future__ import annotations

"""palette.colorspace の変換/正規化テスト。"""

import numpy as np
import pytest

from palette.colorspace import (
    CONTRAST_DARK,
    CONTRAST_LIGHT,
    HSL,
    clamp,
    get_contrast_color,
    hex_to_hsl,
    hsl_to_hex,
    normalize_hue,
    random_color,
    relative_luminance,
)


@pytest.mark.parametrize(
    "h, expected",
    [(0.0, 0.0), (360.0, 0.0), (370.0, 10.0), (-30.0, 330.0), (-720.0, 0.0), (719.5, 359.5)],
)
def test_normalize_hue_wraps(h: float, expected: float) -> None:
    assert normalize_hue(h) == pytest.approx(expected)


def test_normalize_hue_tiny_negative_stays_below_360() -> None:
    assert 0.0 <= normalize_hue(-1e-17) < 360.0


def test_clamp_bounds() -> None:
    assert clamp(-5, 0, 100) == 0
    assert clamp(150, 0, 100) == 100
    assert clamp(42.5, 0, 100) == 42.5


@pytest.mark.parametrize(
    "hsl, hex_str",
    [
        ((0, 100, 50), "#ff0000"),
        ((120, 100, 50), "#00ff00"),
        ((240, 100, 50), "#0000ff"),
        ((0, 0, 0), "#000000"),
        ((0, 0, 100), "#ffffff"),
        ((60, 100, 50), "#ffff00"),
        ((210, 50, 40), "#336699"),
    ],
)
def test_hsl_to_hex_known_values(hsl, hex_str: str) -> None:
    assert hsl_to_hex(*hsl) == hex_str


def test_hsl_to_hex_is_lower_case_and_coerces_input() -> None:
    out = hsl_to_hex(-120, 150, 50)
    assert out == out.lower()
    assert out == hsl_to_hex(240, 100, 50)


def test_hex_to_hsl_inverts_hsl_to_hex() -> None:
    hsl = hex_to_hsl("#336699")
    assert hsl.h == pytest.approx(210.0)
    assert hsl.s == pytest.approx(50.0)
    assert hsl.l == pytest.approx(40.0)
    assert hsl_to_hex(hsl.h, hsl.s, hsl.l) == "#336699"
    # 大文字・# 無しも受理
    assert hex_to_hsl("336699") == hex_to_hsl("#336699".upper())


def test_hex_to_hsl_gray_has_zero_saturation() -> None:
    hsl = hex_to_hsl("#808080")
    assert hsl.s == 0.0
    assert hsl.h == 0.0


@pytest.mark.parametrize("bad", ["#12345", "#gggggg", "", "1234567"])
def test_hex_to_hsl_rejects_malformed(bad: str) -> None:
    with pytest.raises(ValueError):
        hex_to_hsl(bad)


def test_random_color_stays_in_pleasant_band(rng: np.random.Generator) -> None:
    for _ in range(200):
        c = random_color(rng)
        assert 0.0 <= c.h < 360.0
        assert 60.0 <= c.s <= 100.0
        assert 40.0 <= c.l <= 70.0


def test_random_color_is_reproducible_with_seed() -> None:
    a = random_color(np.random.default_rng(7))
    b = random_color(np.random.default_rng(7))
    assert a == b


def test_contrast_color_picks_dark_on_light_and_light_on_dark() -> None:
    assert get_contrast_color("#ffffff") == CONTRAST_DARK
    assert get_contrast_color("#ffff00") == CONTRAST_DARK
    assert get_contrast_color("#000000") == CONTRAST_LIGHT
    assert get_contrast_color("#0000ff") == CONTRAST_LIGHT


def test_contrast_color_is_deterministic_and_never_raises() -> None:
    assert get_contrast_color("#777777") == get_contrast_color("#777777")
    assert get_contrast_color("not-a-color") in (CONTRAST_DARK, CONTRAST_LIGHT)


def test_relative_luminance_extremes() -> None:
    assert relative_luminance("#000000") == pytest.approx(0.0)
    assert relative_luminance("#ffffff") == pytest.approx(1.0)


def test_hsl_normalized_and_dict_roundtrip() -> None:
    hsl = HSL(h=-10, s=120, l=-5).normalized()
    assert hsl == HSL(h=350.0, s=100.0, l=0.0)
    assert HSL.from_dict(hsl.to_dict()) == hsl
    with pytest.raises(ValueError):
        HSL.from_dict({"h": 1})


@pytest.mark.parametrize("h", [float("inf"), float("-inf"), float("nan")])
def test_normalize_hue_non_finite_maps_to_zero(h: float) -> None:
    assert normalize_hue(h) == 0.0


def test_normalize_hue_is_idempotent() -> None:
    for h in (0.1, 123.456, 359.999):
        assert normalize_hue(normalize_hue(h)) == normalize_hue(h)


def test_clamp_non_finite() -> None:
    assert clamp(float("nan"), 0.0, 100.0) == 0.0
    assert clamp(float("inf"), 0.0, 100.0) == 100.0
    assert clamp(float("-inf"), 0.0, 100.0) == 0.0


def test_non_finite_hsl_still_yields_valid_hex() -> None:
    hsl = HSL(h=float("inf"), s=float("nan"), l=50.0).normalized()
    assert hsl == HSL(h=0.0, s=0.0, l=50.0)
    assert hsl_to_hex(float("nan"), 100.0, 50.0) == "#ff0000"
