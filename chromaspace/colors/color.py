from __future__ import annotations
from .color_base import ColorBase
from .hsv import HSVBase, hsv_tuple_to_class
from .rgb import RGBBase, rgb_tuple_to_class
from ..errors import ColorspaceMismatchError
from ..types.colorspace import Colorspace
from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorMode, ColorValue, base_mode, is_hue_space
from typing import Optional, Tuple, cast
from numpy import ndarray
import numpy as np

unified_tuple_to_class: dict[tuple[str, FormatType, Colorspace], type[ColorBase]] = {
    **rgb_tuple_to_class,
    **hsv_tuple_to_class,
}


def get_color_class(
    color_space: str,
    format_type: FormatType = FormatType.FLOAT,
    colorspace: Colorspace = Colorspace.ENCODED,
) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((color_space.lower(), FormatType(format_type), Colorspace(colorspace)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format/colorspace combination: "
            f"{color_space}/{FormatType(format_type).value}/{Colorspace(colorspace).value}"
        )
    return color_class


def _resolve_format(to_space: str, to_format: FormatType | None, from_format: FormatType, colorspace: Colorspace) -> FormatType:
    # keep the current format where the target has a class for it, otherwise fall back to float
    if to_format is not None:
        return FormatType(to_format)
    if (to_space, from_format, colorspace) in unified_tuple_to_class:
        return from_format
    return FormatType.FLOAT


def color_convert(
    self: ColorBase,
    to_space: ColorMode | None = None,
    to_format: FormatType | None = None,
    to_colorspace: Colorspace | None = None,
) -> ColorBase:
    """
    Convert this color to a different mode, format and/or colorspace.

    Automatically detects whether the value is a scalar or array and uses
    the appropriate conversion path.

    Args:
        to_space: Target mode ("rgb", "rgba", "hsv", "hsva"). Defaults to the current mode.
        to_format: Target format (INT, FLOAT). Defaults to the current format when the
            target has a class for it, float otherwise.
        to_colorspace: Target colorspace. Defaults to encoded for HSV targets and to the
            current colorspace for RGB targets.

    Returns:
        New ColorBase instance, or ``self`` when nothing changes

    Raises:
        ColorspaceMismatchError: the request pairs HSV with linear channels
    """
    to_space = cast(ColorMode, (to_space or self.mode).lower())
    if to_colorspace is None:
        to_colorspace = Colorspace.ENCODED if is_hue_space(to_space) else self.colorspace
    to_colorspace = Colorspace(to_colorspace)
    to_format = _resolve_format(to_space, to_format, self.format_type, to_colorspace)

    cls = get_color_class(to_space, to_format, to_colorspace)
    if cls is type(self):
        return self
    return cls(self)


def with_alpha(self: ColorBase, alpha: Optional[ColorValue] = None) -> ColorBase:
    """
    Return the alpha variant of this color with the given alpha.

    Args:
        alpha: Alpha value to set, in this color's format. If None, keeps the current
               alpha or uses full opacity. Can be a scalar or an array matching the
               shape of the color array.

    Returns:
        New ColorBase instance with alpha channel.
    """
    if alpha is None:
        if self.has_alpha:
            return self
        alpha = max_non_hue[self.format_type]

    channels = self.channels
    if isinstance(channels, ndarray):
        # Handle array case
        if isinstance(alpha, ndarray):
            # Alpha is an array - must match color array shape (excluding channels)
            expected_shape = channels.shape[:-1]
            if alpha.shape != expected_shape:
                raise ValueError(
                    f"Alpha array shape {alpha.shape} doesn't match color shape {expected_shape}"
                )
            alpha_array = np.expand_dims(alpha, axis=-1).astype(channels.dtype)
        else:
            # Alpha is scalar - broadcast to all elements
            alpha_array = np.full(channels.shape[:-1] + (1,), alpha, dtype=channels.dtype)

        new_value = np.concatenate([channels, alpha_array], axis=-1)
    else:
        # Handle scalar/tuple case
        if isinstance(alpha, ndarray):
            raise TypeError("Cannot use array alpha with scalar color value")
        new_value = tuple(cast(Tuple, channels)) + (alpha,)

    cls = get_color_class(base_mode(self.mode) + "a", self.format_type, self.colorspace)
    return cls(new_value)


def without_alpha(self: ColorBase) -> ColorBase:
    """Drop the alpha channel; opaque colors are returned unchanged."""
    if not self.has_alpha:
        return self
    cls = get_color_class(base_mode(self.mode), self.format_type, self.colorspace)
    return cls(self.channels)


def to_colorspace(self: RGBBase, colorspace: Colorspace) -> RGBBase:
    """
    Re-express this color's channels in ``colorspace``.

    The transfer curve is applied to r, g and b only; alpha is copied. A
    color already in ``colorspace`` is returned as is.
    """
    colorspace = Colorspace(colorspace)
    if colorspace is self.colorspace:
        return self
    return cast(RGBBase, self.convert(self.mode, None, colorspace))


def rgb_to_hsv(self: RGBBase) -> HSVBase:
    """HSV view of an encoded RGB color; alpha is carried over."""
    if self.colorspace is not Colorspace.ENCODED:
        raise ColorspaceMismatchError(
            f"{self.__class__.__name__} is linear; call to_encoded() before converting to HSV"
        )
    target = "hsva" if self.has_alpha else "hsv"
    return cast(HSVBase, self.convert(target, FormatType.FLOAT, Colorspace.ENCODED))


def hsv_to_rgb(self: HSVBase) -> RGBBase:
    """Encoded float RGB for this HSV color; use to_linear() on the result for linear light."""
    target = "rgba" if self.has_alpha else "rgb"
    return cast(RGBBase, self.convert(target, FormatType.FLOAT, Colorspace.ENCODED))


ColorBase.convert = color_convert
ColorBase.with_alpha = with_alpha
ColorBase.without_alpha = without_alpha
RGBBase.to_colorspace = to_colorspace
RGBBase.to_hsv = rgb_to_hsv
HSVBase.to_rgb = hsv_to_rgb


def convert_color(value, color_space: str, format_type: FormatType = FormatType.FLOAT,
                  colorspace: Colorspace = Colorspace.ENCODED) -> ColorBase:
    """Build a color of the requested class from a ColorBase or raw channels."""
    color_class = get_color_class(color_space, format_type, colorspace)
    if isinstance(value, ColorBase):
        return value.convert(color_space, format_type, colorspace)
    return color_class(value)
