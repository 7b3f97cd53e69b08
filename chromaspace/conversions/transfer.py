"""sRGB transfer curve between linear-light and gamma-encoded channels.

The functions work on a single normalised channel (or an array of them). They
do not clamp: values outside ``[0, 1]`` are extrapolated with the same
formula. Alpha channels must never be passed through here.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..constants import (
    SRGB_ENCODED_CUTOFF,
    SRGB_GAMMA,
    SRGB_LINEAR_CUTOFF,
    SRGB_OFFSET,
    SRGB_SCALE,
    SRGB_SLOPE,
)


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= SRGB_ENCODED_CUTOFF:
        return c / SRGB_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= SRGB_LINEAR_CUTOFF:
        return SRGB_SLOPE * c
    return SRGB_SCALE * (c ** (1 / SRGB_GAMMA)) - SRGB_OFFSET


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    # the unused branch of np.where is still evaluated; keep its base positive
    curve = ((np.maximum(c, SRGB_ENCODED_CUTOFF) + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA
    return np.where(c <= SRGB_ENCODED_CUTOFF, c / SRGB_SLOPE, curve)


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    curve = SRGB_SCALE * (np.maximum(c, SRGB_LINEAR_CUTOFF) ** (1 / SRGB_GAMMA)) - SRGB_OFFSET
    return np.where(c <= SRGB_LINEAR_CUTOFF, SRGB_SLOPE * c, curve)
