"""Chromaspace: colorspace-aware RGB and HSV colors."""

from .types import Colorspace, FormatType
from .colors.color_base import ColorBase, WithAlpha
from .colors.rgb import (
    RGBBase,
    LinearRGB,
    LinearRGBA,
    SRGB,
    SRGBA,
    SRGB24,
    SRGBA32,
)
from .colors.hsv import HSVBase, HSV, HSVA
from .colors.color import color_convert, convert_color, get_color_class
from .colors.arithmetic import blend, alpha_blend
from .conversions import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    convert,
    np_convert,
)
from .luminance import relative_luminance, np_relative_luminance
from .shades import Shade, BaseColor, classify, classify_luminance, np_classify_luminance, shades
from .ansi import ansi_sequence, ansi_colorize, ansi_bgcolor
from .hexcode import parse_hex, to_hex
from .palette import ColorSet, Palette, ColorInfo
from .errors import ColorspaceMismatchError, InvalidHexError, PaletteError, ColorWithoutSetError

__all__ = [
    # tags and formats
    "Colorspace",
    "FormatType",
    # core color types
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
    "blend",
    "alpha_blend",
    # conversions
    "srgb_to_linear",
    "linear_to_srgb",
    "np_srgb_to_linear",
    "np_linear_to_srgb",
    "unit_rgb_to_hsv",
    "np_unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "np_hsv_to_unit_rgb",
    "convert",
    "np_convert",
    # luminance and shades
    "relative_luminance",
    "np_relative_luminance",
    "Shade",
    "BaseColor",
    "classify",
    "classify_luminance",
    "np_classify_luminance",
    "shades",
    # text output
    "ansi_sequence",
    "ansi_colorize",
    "ansi_bgcolor",
    "parse_hex",
    "to_hex",
    # palettes
    "ColorSet",
    "Palette",
    "ColorInfo",
    # errors
    "ColorspaceMismatchError",
    "InvalidHexError",
    "PaletteError",
    "ColorWithoutSetError",
]
