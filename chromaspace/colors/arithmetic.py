"""
Channel arithmetic on linear-light colors.

Sums, differences and scaling of RGB channels only mean something physically
in linear light, so the operators are installed on ``LinearRGB`` and
``LinearRGBA`` alone. Results go back through the class constructor and are
therefore clamped to [0, 1]. The alpha channel of the left operand is kept.
"""
from boundednumbers import clamp01
import numpy as np
from typing import Callable, Union

from ..errors import ColorspaceMismatchError
from ..types.colorspace import Colorspace
from .color_base import ColorBase
from .rgb import LinearRGB, LinearRGBA, RGBBase

Operand = Union[ColorBase, float, int, np.ndarray]


def _require_linear(color: ColorBase, what: str) -> None:
    if not isinstance(color, RGBBase) or color.colorspace is not Colorspace.LINEAR:
        raise ColorspaceMismatchError(
            f"{what} needs linear RGB colors, got {color.__class__.__name__}; "
            "convert with to_linear() first"
        )


def _channels_array(color: ColorBase) -> np.ndarray:
    return np.asarray(color.channels, dtype=float)


def _rebuild(cls: type[ColorBase], rgb: np.ndarray, alpha=None) -> ColorBase:
    """Instance of ``cls`` from an rgb array and an optional alpha."""
    if alpha is not None:
        alpha = np.broadcast_to(np.asarray(alpha, dtype=float), rgb.shape[:-1])
        rgb = np.concatenate([rgb, alpha[..., None]], axis=-1)
    if rgb.ndim > 1:
        return cls(rgb)
    return cls(tuple(rgb.tolist()))


def _alpha_of(color: ColorBase):
    return color.value[..., -1] if color.is_array else color.value[-1]  # type: ignore[index]


def _operate(self: ColorBase, other: Operand, op: Callable[[np.ndarray, np.ndarray], np.ndarray]) -> ColorBase:
    if isinstance(other, ColorBase):
        _require_linear(other, "Color arithmetic")
        b = _channels_array(other)
    else:
        b = np.asarray(other, dtype=float)

    result = op(_channels_array(self), b)
    alpha = _alpha_of(self) if self.has_alpha else None
    return _rebuild(self.__class__, result, alpha)


def _add(self, other):
    return _operate(self, other, np.add)


def _sub(self, other):
    return _operate(self, other, np.subtract)


def _mul(self, other):
    return _operate(self, other, np.multiply)


def _truediv(self, other):
    return _operate(self, other, np.divide)


def _radd(self, other):
    return _add(self, other)


def _rsub(self, other):
    # other - self
    return _operate(self, other, lambda a, b: np.subtract(b, a))


def _rmul(self, other):
    return _mul(self, other)


for _cls in (LinearRGB, LinearRGBA):
    _cls.__add__ = _add
    _cls.__sub__ = _sub
    _cls.__mul__ = _mul
    _cls.__truediv__ = _truediv
    _cls.__radd__ = _radd
    _cls.__rsub__ = _rsub
    _cls.__rmul__ = _rmul


def blend(background: ColorBase, foreground: ColorBase, ratio: float) -> ColorBase:
    """
    Mix two linear colors: ``background * ratio + foreground * (1 - ratio)``.

    ``ratio`` is clamped to [0, 1]. The foreground is brought to the
    background's class (alpha added or dropped) and alpha mixes like the
    other channels.
    """
    _require_linear(background, "blend")
    _require_linear(foreground, "blend")
    ratio = clamp01(ratio)

    fg = foreground if type(foreground) is type(background) else background.__class__(foreground)
    a = np.asarray(background.value, dtype=float)
    b = np.asarray(fg.value, dtype=float)
    mixed = a * ratio + b * (1.0 - ratio)
    if mixed.ndim > 1:
        return background.__class__(mixed)
    return background.__class__(tuple(mixed.tolist()))


def alpha_blend(background: ColorBase, foreground: ColorBase) -> ColorBase:
    """
    Composite a straight-alpha foreground over a background in linear light.

    Colors without an alpha channel count as opaque. The result has the
    background's class.
    """
    _require_linear(background, "alpha_blend")
    _require_linear(foreground, "alpha_blend")

    fg_rgb = _channels_array(foreground)
    bg_rgb = _channels_array(background)
    fg_a = np.asarray(_alpha_of(foreground) if foreground.has_alpha else 1.0, dtype=float)
    bg_a = np.asarray(_alpha_of(background) if background.has_alpha else 1.0, dtype=float)

    out_a = fg_a + bg_a * (1.0 - fg_a)
    weighted = fg_rgb * fg_a[..., None] + bg_rgb * (bg_a * (1.0 - fg_a))[..., None]
    safe_a = np.where(out_a > 0, out_a, 1.0)
    out_rgb = np.where(out_a[..., None] > 0, weighted / safe_a[..., None], 0.0)

    return _rebuild(background.__class__, out_rgb, out_a if background.has_alpha else None)


__all__ = ["blend", "alpha_blend", "Operand"]
