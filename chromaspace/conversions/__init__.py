"""
Chromaspace Conversions
=======================

Scalar and vectorized (numpy) conversion functions.

Transfer curve:
    srgb_to_linear(c) / np_srgb_to_linear(c)
        Encoded sRGB channel to linear light
    linear_to_srgb(c) / np_linear_to_srgb(c)
        Linear-light channel to encoded sRGB

RGB → HSV (encoded RGB only):
    unit_rgb_to_hsv(r, g, b) / np_unit_rgb_to_hsv(r, g, b)

HSV → RGB (always produces encoded RGB):
    hsv_to_unit_rgb(h, s, v) / np_hsv_to_unit_rgb(h, s, v)

High-Level API
--------------
    convert(color, from_space, to_space, input_type, output_type, from_colorspace, to_colorspace)
    np_convert(...)
        Same, on arrays whose last axis holds the channels

Examples
--------
>>> from chromaspace.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> unit_rgb_to_hsv(0.0, 1.0, 0.0)
(120.0, 1.0, 1.0)
>>> hsv_to_unit_rgb(120.0, 1.0, 1.0)
(0.0, 1.0, 0.0)
"""

from .transfer import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
from .wrapper import convert, np_convert

from ..types.colorspace import Colorspace
from ..types.format_type import FormatType

__all__ = [
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'convert',
    'np_convert',
    'Colorspace',
    'FormatType',
]
