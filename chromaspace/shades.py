"""
Shade classification.

Two views of "what kind of color is this":

- :func:`classify` bins a color's relative luminance into dark, mid and
  light.
- :func:`shades` names the base colors of the rainbow (plus black, grey and
  white) that a color is a shade of, with weights.
"""
from __future__ import annotations
from enum import Enum
from typing import List, Tuple, Union

import numpy as np
from numpy import ndarray

from .colors.color_base import ColorBase
from .colors.hsv import HSV
from .colors.rgb import SRGB24
from .constants import (
    BLACK_CUTOFF_LUMINANCE,
    BLACK_LUMINANCE,
    DARK_LUMINANCE_THRESHOLD,
    GREY_LUMINANCE_MAX,
    GREY_LUMINANCE_MIN,
    GREY_SATURATION,
    GREYSCALE_SATURATION,
    HUE_MARGIN,
    LIGHT_LUMINANCE_THRESHOLD,
    WHITE_LUMINANCE,
    WHITE_SATURATION,
)
from .luminance import relative_luminance
from .types.colorspace import Colorspace
from .types.format_type import FormatType, HUE_360


class Shade(str, Enum):
    DARK = "dark"
    MID = "mid"
    LIGHT = "light"

    def __str__(self) -> str:
        return self.value


def classify_luminance(y: float) -> Shade:
    """
    Bin a relative luminance.

    ``y < 0.045`` is dark, ``0.045 <= y < 0.40`` is mid and ``y >= 0.40`` is
    light. Values outside [0, 1] fall into the outer bins.
    """
    if y < DARK_LUMINANCE_THRESHOLD:
        return Shade.DARK
    if y < LIGHT_LUMINANCE_THRESHOLD:
        return Shade.MID
    return Shade.LIGHT


def np_classify_luminance(y: ndarray) -> ndarray:
    """Vectorized :func:`classify_luminance`; returns an object array of Shade."""
    y = np.asarray(y, dtype=float)
    out = np.full(y.shape, Shade.LIGHT, dtype=object)
    out[y < LIGHT_LUMINANCE_THRESHOLD] = Shade.MID
    out[y < DARK_LUMINANCE_THRESHOLD] = Shade.DARK
    return out


def classify(color: ColorBase) -> Union[Shade, ndarray]:
    """Shade of a color (any RGB class or HSV), by its relative luminance."""
    y = relative_luminance(color)
    if isinstance(y, ndarray):
        return np_classify_luminance(y)
    return classify_luminance(y)


class BaseColor(str, Enum):
    """The basic colors of the rainbow, plus the greyscale ones."""
    BLACK = "black"
    GREY = "grey"
    WHITE = "white"
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    MAGENTA = "magenta"

    def __str__(self) -> str:
        return self.value

    def srgb24(self) -> SRGB24:
        return SRGB24(_BASE_SRGB24[self])

    def hsv(self) -> HSV:
        return HSV(_BASE_HSV[self])


_BASE_SRGB24 = {
    BaseColor.BLACK:   (0, 0, 0),
    BaseColor.GREY:    (128, 128, 128),
    BaseColor.WHITE:   (255, 255, 255),
    BaseColor.RED:     (255, 0, 0),
    BaseColor.YELLOW:  (255, 255, 0),
    BaseColor.GREEN:   (0, 255, 0),
    BaseColor.CYAN:    (0, 255, 255),
    BaseColor.BLUE:    (0, 0, 255),
    BaseColor.MAGENTA: (255, 0, 255),
}

_BASE_HSV = {
    BaseColor.BLACK:   (0.0, 0.0, 0.0),
    BaseColor.GREY:    (0.0, 0.0, 0.5),
    BaseColor.WHITE:   (0.0, 0.0, 1.0),
    BaseColor.RED:     (0.0, 1.0, 1.0),
    BaseColor.YELLOW:  (60.0, 1.0, 1.0),
    BaseColor.GREEN:   (120.0, 1.0, 1.0),
    BaseColor.CYAN:    (180.0, 1.0, 1.0),
    BaseColor.BLUE:    (240.0, 1.0, 1.0),
    BaseColor.MAGENTA: (300.0, 1.0, 1.0),
}

# red sits on the wrap-around and is measured separately
_HUED_BASE_COLORS = (
    (60.0, BaseColor.YELLOW),
    (120.0, BaseColor.GREEN),
    (180.0, BaseColor.CYAN),
    (240.0, BaseColor.BLUE),
    (300.0, BaseColor.MAGENTA),
)


def _hue_weights(h: float) -> List[Tuple[BaseColor, float]]:
    weights = []
    red_distance = min(h, HUE_360 - h)
    if red_distance <= HUE_MARGIN:
        weights.append((BaseColor.RED, 1.0 - red_distance / HUE_MARGIN))
    for hue, base in _HUED_BASE_COLORS:
        distance = abs(h - hue)
        if distance <= HUE_MARGIN:
            weights.append((base, 1.0 - distance / HUE_MARGIN))
    return weights


def shades(color: ColorBase) -> List[Tuple[BaseColor, float]]:
    """
    The base colors ``color`` is a shade of, heaviest first.

    Weights are normalised to sum to 1. A hue within 45 degrees of a base
    hue contributes ``1 - distance / 45`` of that base color once the color
    has some saturation; black, white and grey each contribute 1 depending
    on luminance and saturation. Nearly black colors are just black.

    Args:
        color: a single (non-batch) RGB or HSV color, alpha is ignored

    Returns:
        List of ``(BaseColor, weight)`` pairs
    """
    if color.is_array:
        raise ValueError("shades() takes a single color, not a batch")

    lum = relative_luminance(color)
    if lum < BLACK_CUTOFF_LUMINANCE:
        return [(BaseColor.BLACK, 1.0)]

    if color.has_hue:
        h, s = color.value[0], color.value[1]  # type: ignore[index]
    else:
        encoded = color.convert("rgb", FormatType.FLOAT, Colorspace.ENCODED)
        h, s, _ = encoded.convert("hsv").value  # type: ignore[misc]

    weights: List[Tuple[BaseColor, float]] = []
    if s > GREYSCALE_SATURATION:
        weights.extend(_hue_weights(h))

    if lum <= BLACK_LUMINANCE:
        weights.append((BaseColor.BLACK, 1.0))
    elif lum >= WHITE_LUMINANCE and s <= WHITE_SATURATION:
        weights.append((BaseColor.WHITE, 1.0))

    if s <= GREY_SATURATION and GREY_LUMINANCE_MIN <= lum <= GREY_LUMINANCE_MAX:
        weights.append((BaseColor.GREY, 1.0))

    total = sum(w for _, w in weights)
    weights.sort(key=lambda item: item[1], reverse=True)
    return [(base, w / total) for base, w in weights]


__all__ = [
    "Shade",
    "classify_luminance",
    "np_classify_luminance",
    "classify",
    "BaseColor",
    "shades",
]
