from chromaspace.conversions import hsv_to_unit_rgb, np_hsv_to_unit_rgb
import numpy as np
import pytest
from ..samples import samples_rgb_hsv


def test_hsv_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, v) in samples_rgb_hsv.items():
        r, g, b = hsv_to_unit_rgb(h, s, v)

        assert abs(r - r_exp) < 1e-6
        assert abs(g - g_exp) < 1e-6
        assert abs(b - b_exp) < 1e-6


def test_hsv_to_unit_rgb_numpy():
    hsv = np.array(list(samples_rgb_hsv.values()))
    expected = np.array(list(samples_rgb_hsv.keys()))
    rgb = np_hsv_to_unit_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])
    assert np.allclose(rgb, expected, atol=1e-6)


@pytest.mark.parametrize("h", [0.0, 359.999, 360.0, 720.0, -360.0])
def test_red_side_of_the_circle(h):
    r, g, b = hsv_to_unit_rgb(h, 1.0, 1.0)
    assert r == pytest.approx(1.0)
    assert g == pytest.approx(0.0, abs=1e-4)
    assert b == pytest.approx(0.0, abs=1e-4)


def test_zero_saturation_is_grey():
    for h in (0.0, 45.0, 200.0):
        assert hsv_to_unit_rgb(h, 0.0, 0.4) == pytest.approx((0.4, 0.4, 0.4))


def test_numpy_matches_scalar():
    hsv = np.random.default_rng(3).random((50, 3)) * np.array([360.0, 1.0, 1.0])
    batch = np_hsv_to_unit_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])
    for row, out in zip(hsv, batch):
        assert np.allclose(out, hsv_to_unit_rgb(*row), atol=1e-12)
