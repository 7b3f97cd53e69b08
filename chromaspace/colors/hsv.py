from typing import Callable, ClassVar, Tuple

from boundednumbers import BoundType
from numpy import ndarray
import numpy as np

from ..types.colorspace import Colorspace
from ..types.format_type import FormatType, HUE_360
from ..types.color_types import ColorMode, Scalar
from .color_base import ColorBase, WithAlpha, build_registry

_HSV_BOUNDS = (BoundType.CYCLIC, BoundType.CLAMP, BoundType.CLAMP)
_HSV_DISPLAY = (("%5.1f°", 1.0), ("%5.1f%%", 100.0), ("%5.1f%%", 100.0))


class HSVBase(ColorBase):
    """
    Hue (degrees), saturation and value over encoded RGB.

    Hue wraps into [0, 360); saturation, value and alpha are clamped to
    [0, 1]. Degenerate colors are stored in one canonical form so that
    equal colors compare equal: black is (0, 0, 0) and greys have hue 0.
    """
    __slots__ = ()

    mode:       ClassVar[ColorMode] = "hsv"
    colorspace: ClassVar[Colorspace] = Colorspace.ENCODED

    @classmethod
    def _normalize_tuple(cls, value: Tuple[Scalar, ...]) -> Tuple[Scalar, ...]:
        h, s, v = value[:3]
        if v == 0:
            h, s = 0.0, 0.0
        elif s == 0:
            h = 0.0
        return (h, s, v) + value[3:]

    @classmethod
    def _normalize_array(cls, arr: ndarray) -> ndarray:
        arr = arr.copy()
        black = arr[..., 2] == 0
        grey = arr[..., 1] == 0
        arr[..., 0] = np.where(black | grey, 0.0, arr[..., 0])
        arr[..., 1] = np.where(black, 0.0, arr[..., 1])
        return arr

    # attached in colors/color.py
    to_rgb: Callable[[], ColorBase]

    @property
    def hue(self):
        return self.value[..., 0] if isinstance(self.value, ndarray) else self.value[0]

    @property
    def saturation(self):
        return self.value[..., 1] if isinstance(self.value, ndarray) else self.value[1]

    @property
    def brightness(self):
        """The V channel."""
        return self.value[..., 2] if isinstance(self.value, ndarray) else self.value[2]


class HSV(HSVBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorMode] = "hsv"
    maxima:       ClassVar[Tuple[float, float, float]] = (HUE_360, 1.0, 1.0)
    bounds:       ClassVar[Tuple[BoundType, ...]] = _HSV_BOUNDS
    null_value:   ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type:  ClassVar[FormatType] = FormatType.FLOAT
    display = _HSV_DISPLAY


class HSVA(HSVBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode:         ClassVar[ColorMode] = "hsva"
    maxima:       ClassVar[Tuple[float, float, float, float]] = (HUE_360, 1.0, 1.0, 1.0)
    bounds:       ClassVar[Tuple[BoundType, ...]] = _HSV_BOUNDS + (BoundType.CLAMP,)
    null_value:   ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 1.0)
    format_type:  ClassVar[FormatType] = FormatType.FLOAT
    display = _HSV_DISPLAY + (("%5.3f", 1.0),)


hsv_tuple_to_class = build_registry(
    HSV,
    HSVA,
)
