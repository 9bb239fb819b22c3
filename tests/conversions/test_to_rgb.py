from chromatween.conversions.to_rgb import (
    hue_to_rgb, hsl_to_rgb, hsl_to_unit_rgb, hsv_to_rgb, hsv_to_unit_rgb, np_hsl_to_rgb, np_hsv_to_rgb,
)
from samples import samples_rgb_hsl, samples_rgb_hsv
import math
import numpy as np
import pytest

def test_hsl_to_rgb():
    for rgb_expected, (h, s, l) in samples_rgb_hsl.items():
        assert hsl_to_rgb(h, s, l) == rgb_expected

def test_hsl_to_rgb_returns_integers():
    r, g, b = hsl_to_rgb(200, 40, 60)
    assert all(isinstance(c, int) for c in (r, g, b))

@pytest.mark.parametrize("hue", [0, 45, 120, 200, 359])
def test_hsl_achromatic(hue):
    assert hsl_to_rgb(hue, 0, 50) == (128, 128, 128)

def test_hsl_rounds_halves_up():
    # 0.5 * 255 = 127.5
    assert hsl_to_rgb(0, 0, 50) == (128, 128, 128)
    # 0.25 * 255 = 63.75, 0.75 * 255 = 191.25
    assert hsl_to_rgb(0, 0, 25) == (64, 64, 64)
    assert hsl_to_rgb(0, 0, 75) == (191, 191, 191)

def test_hue_to_rgb_wraps_offsets():
    p, q = 0.2, 0.8
    assert hue_to_rgb(p, q, -0.25) == hue_to_rgb(p, q, 0.75)
    assert hue_to_rgb(p, q, 1.25) == hue_to_rgb(p, q, 0.25)
    assert hue_to_rgb(p, q, 0.3) == q
    assert hue_to_rgb(p, q, 0.9) == p

def test_hsl_to_unit_rgb_is_unrounded():
    r, g, b = hsl_to_unit_rgb(0, 100, 25)
    assert r == pytest.approx(0.5)
    assert g == pytest.approx(0.0)
    assert b == pytest.approx(0.0)

def test_hsv_to_rgb():
    for (r_exp, g_exp, b_exp), (h, s, v) in samples_rgb_hsv.items():
        r, g, b = hsv_to_rgb(h, s, v)
        assert r == pytest.approx(r_exp, abs=1e-9)
        assert g == pytest.approx(g_exp, abs=1e-9)
        assert b == pytest.approx(b_exp, abs=1e-9)

def test_hsv_to_rgb_is_not_rounded():
    r, g, b = hsv_to_rgb(0, 0, 0.5)
    assert (r, g, b) == (127.5, 127.5, 127.5)

@pytest.mark.parametrize("sector, expected", [
    (0, (1.0, 0.5, 0.0)),
    (1, (0.5, 1.0, 0.0)),
    (2, (0.0, 1.0, 0.5)),
    (3, (0.0, 0.5, 1.0)),
    (4, (0.5, 0.0, 1.0)),
    (5, (1.0, 0.0, 0.5)),
])
def test_hsv_sectors(sector, expected):
    h = (sector + 0.5) / 6
    assert hsv_to_unit_rgb(h, 1.0, 1.0) == pytest.approx(expected)

def test_hsv_hue_of_one_wraps_to_red():
    assert hsv_to_unit_rgb(1.0, 1.0, 1.0) == pytest.approx((1.0, 0.0, 0.0))

def test_hsv_nan_propagates():
    assert all(math.isnan(c) for c in hsv_to_rgb(math.nan, 1.0, 1.0))

def test_hsl_to_rgb_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.values()))
    expected = np.array(list(samples_rgb_hsl.keys()))
    rgb = np_hsl_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(rgb, expected)

def test_hsl_to_rgb_numpy_matches_scalar():
    hues = np.arange(0, 360, 15)
    sats = np.array([0, 25, 50, 100])
    lights = np.array([0, 10, 50, 75, 100])
    h, s, l = np.meshgrid(hues, sats, lights, indexing="ij")
    result = np_hsl_to_rgb(h, s, l)
    expected = np.array([
        hsl_to_rgb(hh, ss, ll) for hh, ss, ll in zip(h.ravel(), s.ravel(), l.ravel())
    ]).reshape(result.shape)
    assert np.allclose(result, expected)

def test_hsv_to_rgb_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.values()))
    expected = np.array(list(samples_rgb_hsv.keys()))
    rgb = np_hsv_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(rgb, expected, atol=1e-9)

@pytest.mark.parametrize("h, s, v", [
    (math.inf, 1.0, 1.0),
    (-math.inf, 1.0, 1.0),
    (0.5, math.inf, 1.0),
    (0.5, 1.0, -math.inf),
])
def test_hsv_non_finite_gives_nan(h, s, v):
    assert all(math.isnan(c) for c in hsv_to_unit_rgb(h, s, v))
    assert all(math.isnan(c) for c in hsv_to_rgb(h, s, v))
