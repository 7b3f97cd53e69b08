from chromaspace.colors import LinearRGB, LinearRGBA, SRGB, SRGBA, SRGB24, SRGBA32, HSV, HSVA
from chromaspace.types import FormatType
import numpy as np
import pytest


def test_alpha_survives_colorspace_conversion():
    color = SRGBA((1.0, 0.5, 0.0, 0.5))
    linear = color.to_linear()
    assert isinstance(linear, LinearRGBA)
    assert linear.alpha == 0.5
    assert linear.to_encoded().alpha == 0.5


def test_alpha_is_not_gamma_encoded():
    for a in (0.0, 0.1, 0.5, 0.9, 1.0):
        assert LinearRGBA((0.2, 0.2, 0.2, a)).to_encoded().alpha == pytest.approx(a, abs=1e-12)


def test_alpha_survives_hsv_conversion():
    hsva = SRGBA((0.0, 0.0, 1.0, 0.25)).to_hsv()
    assert isinstance(hsva, HSVA)
    assert hsva.alpha == 0.25
    rgba = hsva.to_rgb()
    assert isinstance(rgba, SRGBA)
    assert rgba.value == pytest.approx((0.0, 0.0, 1.0, 0.25))


def test_alpha_changes_format():
    color = SRGBA32((255, 0, 0, 51))
    assert color.convert("rgba", FormatType.FLOAT).alpha == pytest.approx(0.2)
    assert SRGBA((1.0, 0.0, 0.0, 0.2)).convert("rgba", FormatType.INT).alpha == 51


def test_with_alpha():
    rgba = SRGB((0.1, 0.2, 0.3)).with_alpha(0.5)
    assert isinstance(rgba, SRGBA)
    assert rgba.value == (0.1, 0.2, 0.3, 0.5)

    opaque = SRGB24((1, 2, 3)).with_alpha()
    assert isinstance(opaque, SRGBA32)
    assert opaque.alpha == 255
    assert opaque.is_opaque

    replaced = rgba.with_alpha(0.75)
    assert replaced.value == (0.1, 0.2, 0.3, 0.75)


def test_with_alpha_keeps_existing_alpha():
    color = SRGBA((0.1, 0.2, 0.3, 0.4))
    assert color.with_alpha() is color


def test_with_alpha_on_arrays():
    colors = SRGB(np.array([[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]]))
    rgba = colors.with_alpha(np.array([0.5, 1.0]))
    assert isinstance(rgba, SRGBA)
    assert np.allclose(rgba.alpha, [0.5, 1.0])
    assert np.array_equal(rgba.is_opaque, [False, True])

    with pytest.raises(ValueError):
        colors.with_alpha(np.array([0.5, 0.5, 0.5]))
    with pytest.raises(TypeError):
        SRGB((0.1, 0.2, 0.3)).with_alpha(np.array([0.5]))


def test_without_alpha():
    color = HSVA((120.0, 0.5, 0.5, 0.3))
    hsv = color.without_alpha()
    assert isinstance(hsv, HSV)
    assert hsv.value == (120.0, 0.5, 0.5)
    plain = LinearRGB((0.1, 0.2, 0.3))
    assert plain.without_alpha() is plain


def test_alpha_is_clamped():
    assert SRGBA((0.0, 0.0, 0.0, 1.5)).alpha == 1.0
    assert SRGBA32((0, 0, 0, -4)).alpha == 0


def test_has_alpha_and_hue():
    assert SRGBA().has_alpha
    assert not SRGB().has_alpha
    assert HSV().has_hue
    assert not SRGB24().has_hue
