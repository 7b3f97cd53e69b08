from chromaspace.colors import LinearRGB, LinearRGBA, SRGB, blend, alpha_blend
from chromaspace.errors import ColorspaceMismatchError
import numpy as np
import pytest


def test_rgb_addition():
    result = LinearRGB((0.2, 0.3, 0.4)) + LinearRGB((0.5, 0.4, 0.3))
    assert isinstance(result, LinearRGB)
    assert np.allclose(result.value, (0.7, 0.7, 0.7))


def test_addition_clamps():
    result = LinearRGB((0.8, 0.9, 1.0)) + LinearRGB((0.5, 0.4, 0.3))
    assert result.value == (1.0, 1.0, 1.0)

    result = LinearRGB((0.6, 0.7, 0.8)) - LinearRGB((0.5, 0.6, 0.9))
    assert np.allclose(result.value, (0.1, 0.1, 0.0))


def test_scalar_operands():
    color = LinearRGB((0.2, 0.4, 0.6))
    assert np.allclose((color * 0.5).value, (0.1, 0.2, 0.3))
    assert np.allclose((2 * color).value, (0.4, 0.8, 1.0))
    assert np.allclose((color / 2).value, (0.1, 0.2, 0.3))
    assert np.allclose((1 - color).value, (0.8, 0.6, 0.4))
    assert np.allclose((0.1 + color).value, (0.3, 0.5, 0.7))


def test_alpha_of_left_operand_is_kept():
    result = LinearRGBA((0.2, 0.2, 0.2, 0.5)) + LinearRGB((0.1, 0.1, 0.1))
    assert isinstance(result, LinearRGBA)
    assert result.alpha == 0.5
    assert np.allclose(result.value[:3], (0.3, 0.3, 0.3))

    result = LinearRGBA((0.2, 0.2, 0.2, 0.5)) * LinearRGBA((0.5, 0.5, 0.5, 0.1))
    assert result.alpha == 0.5


def test_encoded_operands_are_refused():
    with pytest.raises(ColorspaceMismatchError):
        LinearRGB((0.1, 0.1, 0.1)) + SRGB((0.1, 0.1, 0.1))
    with pytest.raises(ColorspaceMismatchError):
        SRGB((0.1, 0.1, 0.1)) + LinearRGB((0.1, 0.1, 0.1))


def test_encoded_colors_have_no_operators():
    with pytest.raises(TypeError):
        SRGB((0.1, 0.1, 0.1)) * 2


def test_array_arithmetic():
    colors = LinearRGB(np.array([[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]]))
    result = colors * 2
    assert result.is_array
    assert np.allclose(result.value, [[0.2, 0.4, 0.6], [0.8, 1.0, 1.0]])

    shifted = colors + LinearRGB((0.1, 0.1, 0.1))
    assert np.allclose(shifted.value, [[0.2, 0.3, 0.4], [0.5, 0.6, 0.7]])


def test_blend_endpoints():
    bg = LinearRGB((0.1, 0.2, 0.3))
    fg = LinearRGB((0.9, 0.8, 0.7))
    assert np.allclose(blend(bg, fg, 1.0).value, bg.value)
    assert np.allclose(blend(bg, fg, 0.0).value, fg.value)
    assert np.allclose(blend(bg, fg, 0.5).value, (0.5, 0.5, 0.5))


def test_blend_ratio_is_clamped():
    bg = LinearRGB((0.1, 0.2, 0.3))
    fg = LinearRGB((0.9, 0.8, 0.7))
    assert np.allclose(blend(bg, fg, 3.0).value, bg.value)
    assert np.allclose(blend(bg, fg, -1.0).value, fg.value)


def test_blend_takes_background_class():
    bg = LinearRGBA((0.0, 0.0, 0.0, 0.0))
    fg = LinearRGB((1.0, 1.0, 1.0))
    mixed = blend(bg, fg, 0.25)
    assert isinstance(mixed, LinearRGBA)
    assert np.allclose(mixed.value, (0.75, 0.75, 0.75, 0.75))


def test_blend_refuses_encoded():
    with pytest.raises(ColorspaceMismatchError):
        blend(SRGB((0.1, 0.1, 0.1)), LinearRGB((0.1, 0.1, 0.1)), 0.5)


def test_alpha_blend_opaque_foreground_covers():
    bg = LinearRGB((0.0, 0.0, 1.0))
    fg = LinearRGB((1.0, 0.0, 0.0))
    assert np.allclose(alpha_blend(bg, fg).value, fg.value)


def test_alpha_blend_transparent_foreground_is_invisible():
    bg = LinearRGBA((0.0, 0.0, 1.0, 0.8))
    fg = LinearRGBA((1.0, 0.0, 0.0, 0.0))
    assert np.allclose(alpha_blend(bg, fg).value, bg.value)


def test_alpha_blend_half_over_opaque():
    out = alpha_blend(LinearRGB((0.0, 0.0, 1.0)), LinearRGBA((1.0, 0.0, 0.0, 0.5)))
    assert isinstance(out, LinearRGB)
    assert np.allclose(out.value, (0.5, 0.0, 0.5))


def test_alpha_blend_half_over_half():
    out = alpha_blend(LinearRGBA((0.0, 0.0, 1.0, 0.5)), LinearRGBA((1.0, 0.0, 0.0, 0.5)))
    assert isinstance(out, LinearRGBA)
    assert np.allclose(out.value, (2 / 3, 0.0, 1 / 3, 0.75))


def test_alpha_blend_both_transparent():
    out = alpha_blend(LinearRGBA((0.3, 0.3, 0.3, 0.0)), LinearRGBA((0.6, 0.6, 0.6, 0.0)))
    assert out.value == (0.0, 0.0, 0.0, 0.0)


def test_alpha_blend_batch():
    bg = LinearRGBA(np.array([[0.0, 0.0, 1.0, 1.0], [0.0, 1.0, 0.0, 1.0]]))
    fg = LinearRGBA((1.0, 0.0, 0.0, 0.5))
    out = alpha_blend(bg, fg)
    assert out.is_array
    assert np.allclose(out.value, [[0.5, 0.0, 0.5, 1.0], [0.5, 0.5, 0.0, 1.0]])
