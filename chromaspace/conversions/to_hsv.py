import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..types.format_type import HUE_360

SECTOR_DEGREES = 60.0


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert encoded RGB (0..1) to HSV with the max/min hue-sector algorithm.

    Achromatic input (r == g == b) gives hue 0 and saturation 0; black gives
    saturation 0.

    Returns:
        (h, s, v) with h in [0, 360), s and v in [0, 1]
    """
    v = max(r, g, b)
    delta = v - min(r, g, b)

    s = 0.0 if v == 0 else delta / v

    if delta == 0:
        h = 0.0
    elif v == r:
        h = SECTOR_DEGREES * ((g - b) / delta)
    elif v == g:
        h = SECTOR_DEGREES * ((b - r) / delta + 2.0)
    else:
        h = SECTOR_DEGREES * ((r - g) / delta + 4.0)

    if h < 0:
        h += HUE_360
    # a tiny negative hue rounds up to 360.0 when wrapped
    if h >= HUE_360:
        h -= HUE_360
    return h, s, v


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized encoded RGB (0..1) to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1] encoded sRGB

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)
    r, g, b = np.broadcast_arrays(r, g, b)

    v = np.maximum.reduce([r, g, b])
    delta = v - np.minimum.reduce([r, g, b])

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)

    h = np.select(
        [v == r, v == g],
        [(g - b) / safe_delta, (b - r) / safe_delta + 2.0],
        default=(r - g) / safe_delta + 4.0,
    ) * SECTOR_DEGREES
    h = np.where(chromatic, h, 0.0)
    h = np.where(h < 0, h + HUE_360, h)
    h = np.where(h >= HUE_360, h - HUE_360, h)

    s = np.where(v > 0, delta / np.where(v > 0, v, 1.0), 0.0)

    return np.stack([h, s, v], axis=-1)
