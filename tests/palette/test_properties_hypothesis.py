import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from palette.colorspace import HSL, clamp, hex_to_hsl, hsl_to_hex, normalize_hue
from palette.harmony import HarmonyMode, generate_harmony

finite = st.floats(allow_nan=False, allow_infinity=False, min_value=-1e9, max_value=1e9)
modes = st.sampled_from(list(HarmonyMode))
bases = st.builds(
    HSL,
    h=st.floats(0, 359.99),
    s=st.floats(0, 100),
    l=st.floats(0, 100),
)


@given(h=finite)
def test_normalize_hue_range(h):
    assert 0.0 <= normalize_hue(h) < 360.0


@given(h=st.floats())
def test_normalize_hue_range_any_float(h):
    assert 0.0 <= normalize_hue(h) < 360.0


@given(v=st.floats(), a=finite, b=finite)
def test_clamp_range_any_value(v, a, b):
    lo, hi = min(a, b), max(a, b)
    assert lo <= clamp(v, lo, hi) <= hi


@given(v=finite, a=finite, b=finite)
def test_clamp_range(v, a, b):
    lo, hi = min(a, b), max(a, b)
    assert lo <= clamp(v, lo, hi) <= hi


@given(mode=modes, base=bases, count=st.integers(1, 12), seed=st.integers(0, 2**32 - 1))
def test_harmony_length_and_base(mode, base, count, seed):
    out = generate_harmony(mode, base, count, np.random.default_rng(seed))
    assert len(out) == count
    if mode != HarmonyMode.NONE:
        assert out[0] == base
    for c in out[1:]:
        assert 0.0 <= c.h < 360.0
        assert 0.0 <= c.s <= 100.0
        assert 0.0 <= c.l <= 100.0


@given(h=finite, s=finite, l=finite)
def test_hex_is_canonical_and_stable(h, s, l):
    hx = hsl_to_hex(h, s, l)
    assert len(hx) == 7 and hx.startswith("#") and hx == hx.lower()
    back = hex_to_hsl(hx)
    assert hsl_to_hex(back.h, back.s, back.l) == hx
