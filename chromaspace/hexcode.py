"""Hex color codes (``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``)."""
from __future__ import annotations
import re
from typing import Tuple

from .colors.color_base import ColorBase
from .colors.rgb import SRGB24, SRGBA32
from .errors import ColorspaceMismatchError, InvalidHexError
from .types.colorspace import Colorspace
from .types.format_type import FormatType

_HEX_RE = re.compile(r"#?([0-9a-fA-F]+)")
_VALID_LENGTHS = (3, 4, 6, 8)


def parse_hex(code: str) -> Tuple[int, ...]:
    """
    Read a hex code into 8-bit channels.

    A leading ``#`` is optional. Short forms repeat each digit, so ``"F5A"``
    reads like ``"FF55AA"``. Four and eight digit codes carry alpha last.

    Returns:
        ``(r, g, b)`` or ``(r, g, b, a)`` with values in 0-255

    Raises:
        InvalidHexError: not a 3, 4, 6 or 8 digit hex code
    """
    match = _HEX_RE.fullmatch(code.strip()) if isinstance(code, str) else None
    if match is None or len(match.group(1)) not in _VALID_LENGTHS:
        raise InvalidHexError(f"Invalid hex color code: {code!r}")
    digits = match.group(1)
    if len(digits) <= 4:
        digits = "".join(d * 2 for d in digits)
    return tuple(int(digits[i:i + 2], 16) for i in range(0, len(digits), 2))


def to_hex(color: ColorBase, upper: bool = True, prefix: str = "") -> str:
    """
    Hex code of an encoded color; alpha, if present, adds two digits.

    Raises:
        ColorspaceMismatchError: the color is linear
    """
    if color.is_array:
        raise ValueError("to_hex() takes a single color, not a batch")
    if color.colorspace is not Colorspace.ENCODED:
        raise ColorspaceMismatchError(
            f"{color.__class__.__name__} is linear; hex codes hold encoded sRGB, call to_encoded() first"
        )
    target = "rgba" if color.has_alpha else "rgb"
    channels = color.convert(target, FormatType.INT, Colorspace.ENCODED).value
    template = "%02X" if upper else "%02x"
    return prefix + "".join(template % c for c in channels)  # type: ignore[union-attr]


def _srgb24_from_hex(cls, code: str) -> SRGB24:
    """Build an opaque 8-bit color from a 3 or 6 digit hex code."""
    channels = parse_hex(code)
    if len(channels) != 3:
        raise InvalidHexError(f"{cls.__name__} takes a 3 or 6 digit hex code, got {code!r}")
    return cls(channels)


def _srgba32_from_hex(cls, code: str) -> SRGBA32:
    """Build an 8-bit color with alpha; codes without alpha are opaque."""
    channels = parse_hex(code)
    if len(channels) == 3:
        channels = channels + (255,)
    return cls(channels)


SRGB24.from_hex = classmethod(_srgb24_from_hex)
SRGBA32.from_hex = classmethod(_srgba32_from_hex)


__all__ = ["parse_hex", "to_hex"]
