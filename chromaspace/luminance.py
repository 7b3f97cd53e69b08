from __future__ import annotations
from typing import Union

import numpy as np
from numpy import ndarray

from .colors.color_base import ColorBase
from .colors.rgb import LinearRGB
from .constants import LUMINANCE_WEIGHTS
from .types.colorspace import Colorspace
from .types.format_type import FormatType

_WEIGHTS = np.array(LUMINANCE_WEIGHTS)


def np_relative_luminance(linear_rgb: ndarray) -> ndarray:
    """
    Relative luminance of linear RGB channels.

    Args:
        linear_rgb: array whose last axis holds linear r, g, b in [0, 1]

    Returns:
        Array with the channel axis removed
    """
    linear_rgb = np.asarray(linear_rgb, dtype=float)
    return linear_rgb[..., :3] @ _WEIGHTS


def _as_linear_rgb(color: ColorBase) -> ColorBase:
    if color.mode == "rgb" and color.colorspace is Colorspace.LINEAR and color.format_type is FormatType.FLOAT:
        return color
    if color.has_hue:
        color = color.convert("rgb", FormatType.FLOAT, Colorspace.ENCODED)
    return color.convert("rgb", FormatType.FLOAT, Colorspace.LINEAR)


def relative_luminance(color: ColorBase) -> Union[float, ndarray]:
    """
    Relative luminance ``0.2126 R + 0.7152 G + 0.0722 B`` over linear channels.

    Any RGB class (linear or encoded, float or 8-bit) or HSV is accepted;
    the color is taken to linear RGB first and alpha is ignored. Batches
    return an array of luminances, single colors a float.
    """
    linear = _as_linear_rgb(color)
    if linear.is_array:
        return np_relative_luminance(linear.value)
    r, g, b = linear.value
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b


__all__ = ["relative_luminance", "np_relative_luminance"]
