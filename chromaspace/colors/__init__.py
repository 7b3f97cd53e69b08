"""
Chromaspace Color Classes
=========================

Immutable RGB and HSV color classes, each tagged with the colorspace its
channels live in, for single colors and for numpy batches of colors.

Features
--------
- Immutable color instances (frozen after initialization)
- Scalar colors and array colors (last axis holds the channels)
- Channel clamping on construction, hue wrapping for HSV
- Linear and encoded (sRGB) RGB, in float or 8-bit formats
- Conversion between models, formats and colorspaces
- Alpha channel support with the WithAlpha mixin
- Arithmetic and blending for linear-light colors

Scalar Usage
------------
>>> from chromaspace.colors import SRGB24, HSV
>>> orange = SRGB24((255, 128, 0))
>>> orange.to_linear().is_linear
True
>>> orange.to_hsv().saturation
1.0
>>> str(orange)
'255, 128,   0'

Array Usage
-----------
>>> import numpy as np
>>> from chromaspace.colors import SRGB
>>> colors = SRGB(np.array([[1.0, 0.5, 0.0], [0.2, 0.4, 0.6]]))
>>> colors.shape
(2, 3)
>>> colors.to_linear().is_array
True
"""
from .color_base import ColorBase, WithAlpha
from .rgb import RGBBase, LinearRGB, LinearRGBA, SRGB, SRGBA, SRGB24, SRGBA32
from .hsv import HSVBase, HSV, HSVA
from .color import color_convert, convert_color, get_color_class, unified_tuple_to_class
from .arithmetic import alpha_blend, blend

__all__ = [
    "ColorBase",
    "WithAlpha",
    "RGBBase",
    "LinearRGB",
    "LinearRGBA",
    "SRGB",
    "SRGBA",
    "SRGB24",
    "SRGBA32",
    "HSVBase",
    "HSV",
    "HSVA",
    "color_convert",
    "convert_color",
    "get_color_class",
    "unified_tuple_to_class",
    "blend",
    "alpha_blend",
]
