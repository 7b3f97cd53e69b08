from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[IntVector, ScalarVector]
ColorValue = Union[ColorElement, ndarray]  # Includes array support
ColorMode = Literal["rgb", "rgba", "hsv", "hsva"]
HUE_SPACES = {"hsv", "hsva"}


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple of channels or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.array(element, dtype=float)


def is_hue_space(mode: str) -> bool:
    """Check if the given color mode is hue-based (HSV)."""
    return mode.lower() in HUE_SPACES


def base_mode(mode: str) -> str:
    """Strip the alpha suffix from a color mode: ``"rgba"`` -> ``"rgb"``."""
    mode = mode.lower()
    return mode[:-1] if mode.endswith("a") else mode
