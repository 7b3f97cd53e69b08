"""24-bit ("truecolor") ANSI escape sequences for terminal text."""
from __future__ import annotations
from typing import Tuple

from .colors.color_base import ColorBase
from .colors.rgb import SRGB24
from .conversions.transfer import srgb_to_linear
from .errors import ColorspaceMismatchError
from .luminance import relative_luminance
from .types.colorspace import Colorspace
from .types.format_type import FormatType

CSI = "\033["
RESET = f"{CSI}0m"
FOREGROUND = 38
BACKGROUND = 48

# backgrounds darker than mid-grey get white text
CONTRAST_LUMINANCE = srgb_to_linear(0.5)


def _srgb24_channels(color: ColorBase) -> Tuple[int, int, int]:
    if color.is_array:
        raise ValueError("ANSI coloring takes a single color, not a batch")
    if color.colorspace is not Colorspace.ENCODED:
        raise ColorspaceMismatchError(
            f"{color.__class__.__name__} is linear; terminals expect encoded sRGB, call to_encoded() first"
        )
    if not isinstance(color, SRGB24):
        color = color.convert("rgb", FormatType.INT, Colorspace.ENCODED)
    r, g, b = color.value  # type: ignore[misc]
    return r, g, b


def ansi_sequence(color: ColorBase, background: bool = False) -> str:
    """The escape sequence that selects ``color`` as text or background color."""
    r, g, b = _srgb24_channels(color)
    target = BACKGROUND if background else FOREGROUND
    return f"{CSI}{target};2;{r};{g};{b}m"


def ansi_colorize(color: ColorBase, text: str, background: bool = False) -> str:
    """
    Wrap ``text`` in escapes that paint it in ``color``, followed by a reset.

    Args:
        color: encoded RGB (float or 8-bit) or HSV color; alpha is ignored
        text: the text to color
        background: color the background instead of the glyphs

    Raises:
        ColorspaceMismatchError: the color is linear
    """
    return f"{ansi_sequence(color, background)}{text}{RESET}"


def ansi_bgcolor(color: ColorBase, text: str) -> str:
    """
    Paint ``text`` on a ``color`` background, in black or white for contrast.

    White is used when the background's relative luminance is below that of
    encoded mid-grey, black otherwise.
    """
    bg = ansi_sequence(color, background=True)
    fg_channel = 255 if relative_luminance(color) < CONTRAST_LUMINANCE else 0
    fg = f"{CSI}{FOREGROUND};2;{fg_channel};{fg_channel};{fg_channel}m"
    return f"{fg}{bg}{text}{RESET}"


__all__ = ["ansi_colorize", "ansi_bgcolor", "ansi_sequence", "RESET"]
