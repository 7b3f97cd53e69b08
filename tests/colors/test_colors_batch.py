from chromaspace.colors import LinearRGB, SRGB, SRGBA, SRGB24, HSV
import numpy as np
import pytest
from ..samples import samples_rgb_hsv


def test_array_color():
    colors = SRGB(np.array([[1.0, 0.5, 0.0], [0.2, 0.4, 0.6]]))
    assert colors.is_array
    assert colors.shape == (2, 3)
    assert colors.value.dtype == np.float64


def test_array_is_clamped():
    colors = SRGB(np.array([[1.5, -0.5, 0.5]]))
    assert np.array_equal(colors.value, [[1.0, 0.0, 0.5]])


def test_array_hue_wraps_and_canonicalises():
    colors = HSV(np.array([[370.0, 0.5, 0.5], [90.0, 0.0, 0.5], [200.0, 1.0, 0.0]]))
    assert np.allclose(colors.value, [[10.0, 0.5, 0.5], [0.0, 0.0, 0.5], [0.0, 0.0, 0.0]])


def test_batch_to_hsv_matches_scalar():
    rgb = np.array(list(samples_rgb_hsv.keys()))
    batch = SRGB(rgb).to_hsv()
    assert isinstance(batch, HSV)
    for row, out in zip(rgb, batch.value):
        assert np.allclose(out, SRGB(tuple(row)).to_hsv().value, atol=1e-12)


def test_batch_to_linear_matches_scalar():
    rgb = np.random.default_rng(5).random((20, 3))
    batch = SRGB(rgb).to_linear()
    assert isinstance(batch, LinearRGB)
    for row, out in zip(rgb, batch.value):
        assert np.allclose(out, SRGB(tuple(row)).to_linear().value, atol=1e-12)


def test_8bit_array():
    colors = SRGB24(np.array([[255, 0, 0], [0, 128, 255]], dtype=np.uint8))
    assert colors.value.dtype == np.int64
    linear = colors.to_linear()
    assert np.allclose(linear.value[0], (1.0, 0.0, 0.0))


def test_8bit_rejects_float_arrays():
    with pytest.raises(TypeError):
        SRGB24(np.array([[0.5, 0.5, 0.5]]))


def test_wrong_channel_axis():
    with pytest.raises(ValueError):
        SRGB(np.zeros((4, 2)))
    with pytest.raises(ValueError):
        SRGBA(np.zeros((4, 3)))


def test_array_equality_and_hash():
    a = SRGB(np.array([[0.1, 0.2, 0.3]]))
    b = SRGB(np.array([[0.1, 0.2, 0.3]]))
    assert a == b
    assert a != SRGB((0.1, 0.2, 0.3))
    with pytest.raises(TypeError):
        hash(a)


def test_iteration_yields_channel_planes():
    colors = SRGB(np.array([[0.1, 0.2, 0.3], [0.4, 0.5, 0.6]]))
    r, g, b = colors
    assert np.allclose(r, [0.1, 0.4])
    assert np.allclose(b, [0.3, 0.6])


def test_batch_of_images():
    image = np.random.default_rng(9).random((4, 5, 3))
    hsv = SRGB(image).to_hsv()
    assert hsv.shape == (4, 5, 3)
    assert np.allclose(hsv.to_rgb().value, image, atol=1e-6)
