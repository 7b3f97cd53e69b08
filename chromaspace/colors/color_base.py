from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple, Union, cast
from abc import ABC

from boundednumbers import BoundType, boundtype_to_function, bound_type_to_np_function
from numpy import ndarray
import numpy as np

from ..conversions import convert, np_convert
from ..types.colorspace import Colorspace
from ..types.format_type import FormatType, format_valid_dtypes, default_format_dtypes
from ..types.color_types import ColorValue, ColorMode, Scalar, HUE_SPACES


def _to_int_channel(v: Scalar) -> int:
    return int(round(v))


channel_casts: dict[FormatType, Callable[[Scalar], Scalar]] = {
    FormatType.INT: _to_int_channel,
    FormatType.FLOAT: float,
}


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorMode]
    colorspace:   ClassVar[Colorspace] = Colorspace.ENCODED
    maxima:       ClassVar[Tuple[Scalar, ...]]
    bounds:       ClassVar[Tuple[BoundType, ...]]
    null_value:   ClassVar[Tuple[Scalar, ...]]
    format_type:  ClassVar[FormatType]
    # printf-style template and scale factor per channel, used by __str__
    display:      ClassVar[Tuple[Tuple[str, float], ...]]
    display_separator: ClassVar[str] = ","

    # attached in colors/color.py once the class registry exists
    convert: Callable[..., ColorBase]
    with_alpha: Callable[..., ColorBase]
    without_alpha: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorValue, ColorBase, None] = None) -> None:
        if self.num_channels != len(self.maxima) or self.num_channels != len(self.bounds):
            raise ValueError(f"{self.__class__.__name__} expects {self.num_channels}-channel maxima and bounds")

        if value is None:
            value = self.null_value

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = self._value_from(value)

        if isinstance(value, ndarray):
            value = self._prepare_array(value)
        else:
            value = self._prepare_tuple(cast(Tuple[Scalar, ...], value))

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _value_from(cls, other: ColorBase) -> ColorValue:
        """Channel values of ``other`` expressed in this class's mode, format and colorspace."""
        if type(other) is cls:
            return other.value
        converter = np_convert if other.is_array else convert
        return converter(
            other.value,
            from_space=other.mode,
            to_space=cls.mode,
            input_type=other.format_type,
            output_type=cls.format_type,
            from_colorspace=other.colorspace,
            to_colorspace=cls.colorspace,
        )

    @classmethod
    def _prepare_array(cls, arr: ndarray) -> ndarray:
        # Validate dtype
        valid_types = format_valid_dtypes[cls.format_type]
        if not isinstance(arr.dtype.type(0), valid_types):
            raise TypeError(
                f"{cls.__name__} with format {cls.format_type.value} expects dtype compatible with "
                f"{valid_types}, got {arr.dtype}"
            )

        # Validate shape: last dimension should match num_channels
        if arr.ndim == 0 or arr.shape[-1] != cls.num_channels:
            raise ValueError(
                f"{cls.__name__} expects last dimension to be {cls.num_channels}, "
                f"got shape {arr.shape}"
            )

        target_dtype = default_format_dtypes[cls.format_type]
        work = arr.astype(float)
        if cls.format_type == FormatType.INT:
            work = np.round(work)

        channels = [
            bound_type_to_np_function[bound](work[..., i], 0, maximum)
            for i, (bound, maximum) in enumerate(zip(cls.bounds, cls.maxima))
        ]
        out = np.stack(channels, axis=-1).astype(target_dtype)
        return cls._normalize_array(out)

    @classmethod
    def _prepare_tuple(cls, value: Tuple[Scalar, ...]) -> Tuple[Scalar, ...]:
        if len(value) != cls.num_channels:
            raise ValueError(
                f"{cls.__name__} expects {cls.num_channels} channels, got {len(value)}"
            )
        cast_channel = channel_casts[cls.format_type]
        bounded = tuple(
            cast_channel(boundtype_to_function[bound](v, 0, maximum))
            for v, bound, maximum in zip(value, cls.bounds, cls.maxima)
        )
        return cls._normalize_tuple(bounded)

    @classmethod
    def _normalize_tuple(cls, value: Tuple[Scalar, ...]) -> Tuple[Scalar, ...]:
        """Hook for classes with a canonical form; identity by default."""
        return value

    @classmethod
    def _normalize_array(cls, arr: ndarray) -> ndarray:
        return arr

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    @property
    def channels(self) -> ColorValue:
        """The color channels without alpha."""
        if not self.has_alpha:
            return self._value
        if isinstance(self._value, ndarray):
            return self._value[..., :-1]
        return cast(Tuple[Scalar, ...], self._value)[:-1]

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        if self.is_array or other.is_array:
            return (
                self.is_array and other.is_array
                and bool(np.array_equal(self._value, other._value))
            )
        return self._value == other._value

    def __hash__(self) -> int:
        if isinstance(self._value, ndarray):
            raise TypeError(f"unhashable color array: {self.__class__.__name__}")
        return hash((self.__class__, self._value))

    def __iter__(self) -> Iterator[Any]:
        if isinstance(self._value, ndarray):
            return iter(np.moveaxis(self._value, -1, 0))
        return iter(cast(Tuple[Scalar, ...], self._value))

    def __len__(self) -> int:
        return self.num_channels

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"

    def __str__(self) -> str:
        if isinstance(self._value, ndarray):
            return repr(self)
        values = cast(Tuple[Scalar, ...], self._value)
        return self.display_separator.join(template % (v * factor) for v, (template, factor) in zip(values, self.display))


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel and is never gamma encoded.

    Note: For array values, alpha operations work on the entire array.
    Use array indexing arr[..., -1] to access alpha channel.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    value: ColorValue  # Can be scalar tuple or ndarray

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Union[Scalar, ndarray]:
        """
        Get alpha channel value.

        Returns:
            Scalar if value is tuple, ndarray if value is array.
        """
        if isinstance(self.value, ndarray):
            return self.value[..., self.alpha_index]
        return cast(Tuple[Scalar, ...], self.value)[self.alpha_index]

    @property
    def is_opaque(self) -> Union[bool, ndarray]:
        """True where alpha is at its maximum."""
        return self.alpha == cast(ColorBase, self).maxima[self.alpha_index]


def build_registry(*classes: type[ColorBase]) -> dict[tuple[str, FormatType, Colorspace], type[ColorBase]]:
    return {
        (cls.mode, cls.format_type, cls.colorspace): cls
        for cls in classes
    }

