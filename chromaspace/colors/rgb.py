from typing import Callable, ClassVar, Tuple

from boundednumbers import BoundType

from ..types.colorspace import Colorspace
from ..types.format_type import FormatType
from ..types.color_types import ColorMode
from .color_base import ColorBase, WithAlpha, build_registry

_CLAMP3 = (BoundType.CLAMP,) * 3
_CLAMP4 = (BoundType.CLAMP,) * 4
_PERCENT = ("%5.1f%%", 100.0)
_BYTE = ("%3d", 1)
_UNIT = ("%5.3f", 1.0)


class RGBBase(ColorBase):
    """Common base of every RGB class; the colorspace conversions live here."""
    __slots__ = ()

    mode: ClassVar[ColorMode] = "rgb"

    # attached in colors/color.py
    to_colorspace: Callable[[Colorspace], "RGBBase"]
    to_hsv: Callable[[], ColorBase]

    def to_linear(self) -> "RGBBase":
        return self.to_colorspace(Colorspace.LINEAR)

    def to_encoded(self) -> "RGBBase":
        return self.to_colorspace(Colorspace.ENCODED)

    @property
    def is_linear(self) -> bool:
        return self.colorspace is Colorspace.LINEAR


class LinearRGB(RGBBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorMode] = "rgb"
    colorspace:   ClassVar[Colorspace] = Colorspace.LINEAR
    maxima:       ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    bounds:       ClassVar[Tuple[BoundType, ...]] = _CLAMP3
    null_value:   ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type:  ClassVar[FormatType] = FormatType.FLOAT
    display = (_PERCENT,) * 3


class LinearRGBA(RGBBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode:         ClassVar[ColorMode] = "rgba"
    colorspace:   ClassVar[Colorspace] = Colorspace.LINEAR
    maxima:       ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    bounds:       ClassVar[Tuple[BoundType, ...]] = _CLAMP4
    null_value:   ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 1.0)
    format_type:  ClassVar[FormatType] = FormatType.FLOAT
    display = (_PERCENT,) * 3 + (_UNIT,)


class SRGB(RGBBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorMode] = "rgb"
    colorspace:   ClassVar[Colorspace] = Colorspace.ENCODED
    maxima:       ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    bounds:       ClassVar[Tuple[BoundType, ...]] = _CLAMP3
    null_value:   ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type:  ClassVar[FormatType] = FormatType.FLOAT
    display = (_PERCENT,) * 3


class SRGBA(RGBBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode:         ClassVar[ColorMode] = "rgba"
    colorspace:   ClassVar[Colorspace] = Colorspace.ENCODED
    maxima:       ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    bounds:       ClassVar[Tuple[BoundType, ...]] = _CLAMP4
    null_value:   ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 1.0)
    format_type:  ClassVar[FormatType] = FormatType.FLOAT
    display = (_PERCENT,) * 3 + (_UNIT,)


class SRGB24(RGBBase):
    """8 bits per channel encoded RGB, as found in hex codes and terminals."""
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorMode] = "rgb"
    colorspace:   ClassVar[Colorspace] = Colorspace.ENCODED
    maxima:       ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    bounds:       ClassVar[Tuple[BoundType, ...]] = _CLAMP3
    null_value:   ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    format_type:  ClassVar[FormatType] = FormatType.INT
    display = (_BYTE,) * 3
    display_separator = ", "

    # attached in hexcode.py
    from_hex: ClassVar[Callable[[str], "SRGB24"]]


class SRGBA32(RGBBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    mode:         ClassVar[ColorMode] = "rgba"
    colorspace:   ClassVar[Colorspace] = Colorspace.ENCODED
    maxima:       ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    bounds:       ClassVar[Tuple[BoundType, ...]] = _CLAMP4
    null_value:   ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 255)
    format_type:  ClassVar[FormatType] = FormatType.INT
    display = (_BYTE,) * 4
    display_separator = ", "

    from_hex: ClassVar[Callable[[str], "SRGBA32"]]


rgb_tuple_to_class = build_registry(
    LinearRGB,
    LinearRGBA,
    SRGB,
    SRGBA,
    SRGB24,
    SRGBA32,
)
