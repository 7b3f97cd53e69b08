"""
Named color palettes and one-line color reports.

Palette files are plain text. A line with a colon starts a color set named
by the text before the colon, and bullet lines add named colors to the most
recent set::

    Warm colors:
    * Brick red  #B22222
    * Tangerine  #F28500

    Cool colors:
    * Teal  #008080

Everything else (blank lines, free text) is ignored.
"""
from __future__ import annotations
import re
import warnings
from os import PathLike
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .colors.color_base import ColorBase
from .colors.hsv import HSV
from .colors.rgb import SRGB24
from .errors import ColorWithoutSetError
from .hexcode import parse_hex
from .luminance import relative_luminance
from .shades import BaseColor, shades
from .types.colorspace import Colorspace
from .types.format_type import FormatType

SET_NAME_RE = re.compile(r"^(.*?):")
COLOR_LINE_RE = re.compile(r"^\*\s*([^#]+?)\s*#([0-9a-fA-F]{6})")


class ColorSet:
    """An ordered, read-only group of 8-bit colors."""

    def __init__(self, colors: Iterable[SRGB24] = ()):
        self._colors: Tuple[SRGB24, ...] = tuple(colors)

    def __iter__(self) -> Iterator[SRGB24]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, index: int) -> SRGB24:
        return self._colors[index]

    def __repr__(self) -> str:
        return f"ColorSet({list(self._colors)!r})"


class Palette:
    def __init__(self, colors: Dict[SRGB24, str], colorsets: List[Tuple[str, ColorSet]]):
        self._colors = dict(colors)
        self._colorsets = list(colorsets)

    @classmethod
    def parse(cls, lines: Iterable[str], *, stacklevel: int = 2) -> "Palette":
        """
        Build a palette from the lines of a palette file.

        Color names are lowercased. A bullet line whose hex code cannot be
        read is skipped with a warning, as is a second name for a color
        already in the palette (the first name is kept).

        Args:
            lines: palette file lines
            stacklevel: passed to ``warnings.warn`` so warnings point at the caller

        Raises:
            ColorWithoutSetError: a color appears before any set name
        """
        colors: Dict[SRGB24, str] = {}
        colorsets: List[Tuple[str, List[SRGB24]]] = []

        for line_number, line in enumerate(lines, start=1):
            line = line.rstrip("\r\n")
            set_match = SET_NAME_RE.match(line)
            if set_match:
                colorsets.append((set_match.group(1).strip(), []))
                continue

            color_match = COLOR_LINE_RE.match(line)
            if color_match is None:
                if line.lstrip().startswith("*"):
                    warnings.warn(
                        f"Skipping palette line {line_number}, no #RRGGBB color code: {line!r}",
                        UserWarning,
                        stacklevel=stacklevel,
                    )
                continue

            name = color_match.group(1).lower()
            if not colorsets:
                raise ColorWithoutSetError(name, line_number)

            color = SRGB24(parse_hex(color_match.group(2)))
            colorsets[-1][1].append(color)
            if color in colors and colors[color] != name:
                warnings.warn(
                    f"Palette line {line_number}: {color.value} is already named "
                    f"`{colors[color]}`, ignoring `{name}`",
                    UserWarning,
                    stacklevel=stacklevel,
                )
                continue
            colors.setdefault(color, name)

        return cls(colors, [(name, ColorSet(members)) for name, members in colorsets])

    @classmethod
    def from_file(cls, path: Union[str, PathLike], encoding: str = "utf-8") -> "Palette":
        with open(path, encoding=encoding) as palette_file:
            return cls.parse(palette_file, stacklevel=3)

    def iter_colorsets(self) -> Iterator[Tuple[str, ColorSet]]:
        """Yield ``(set name, ColorSet)`` in file order."""
        return iter(self._colorsets)

    def name_color(self, color: ColorBase) -> Optional[str]:
        """The palette name of ``color`` (compared as 8-bit sRGB), if any."""
        if not isinstance(color, SRGB24):
            color = color.convert("rgb", FormatType.INT, Colorspace.ENCODED)
        return self._colors.get(color)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, color: ColorBase) -> bool:
        return self.name_color(color) is not None


class ColorInfo:
    """A color summarised for humans: 8-bit sRGB, HSV, luminance and base-color shades."""

    def __init__(self, color: ColorBase):
        if color.colorspace is Colorspace.LINEAR:
            color = color.convert("rgb", FormatType.FLOAT, Colorspace.ENCODED)
        self.srgb: SRGB24 = color.convert("rgb", FormatType.INT, Colorspace.ENCODED)  # type: ignore[assignment]
        self.hsv: HSV = color.convert("hsv", FormatType.FLOAT, Colorspace.ENCODED)  # type: ignore[assignment]
        self.luminance: float = relative_luminance(color)  # type: ignore[assignment]
        self.shades_of: List[Tuple[BaseColor, float]] = shades(color)

    def __str__(self) -> str:
        head = f"sRGB: ({self.srgb}), HSV: ({self.hsv}), lum: {100.0 * self.luminance:3.0f}%, "
        names = [str(base) for base, _ in self.shades_of]
        if len(names) == 1:
            return head + f"is a shade of {names[0]}."
        return head + f"is shades of {', '.join(names[:-1])} and {names[-1]}."

    def __repr__(self) -> str:
        return f"ColorInfo({self.srgb!r})"


__all__ = ["ColorSet", "Palette", "ColorInfo"]
