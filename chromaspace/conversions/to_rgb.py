import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..types.format_type import HUE_360
from .to_hsv import SECTOR_DEGREES


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to encoded RGB (0..1).

    Splits the hue circle into six 60 degree sectors and builds each channel
    from the chroma, the intermediate component and the minimum.
    """
    h = h % HUE_360
    hp = h / SECTOR_DEGREES
    sector = min(int(hp), 5)

    chroma = v * s
    x = chroma * (1.0 - abs(hp % 2.0 - 1.0))
    m = v - chroma

    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to encoded RGB (0..1).

    Args:
        h: array-like or scalar, hue in degrees (wrapped)
        s: array-like or scalar, [0,1] saturation
        v: array-like or scalar, [0,1] value

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)
    h, s, v = np.broadcast_arrays(h, s, v)

    hp = np.mod(h, HUE_360) / SECTOR_DEGREES
    sector = np.clip(np.floor(hp).astype(int), 0, 5)

    chroma = v * s
    x = chroma * (1.0 - np.abs(np.mod(hp, 2.0) - 1.0))
    m = v - chroma
    zero = np.zeros_like(chroma)

    conditions = [sector == i for i in range(5)]
    r = np.select(conditions, [chroma, x, zero, zero, x], default=chroma)
    g = np.select(conditions, [x, chroma, chroma, x, zero], default=zero)
    b = np.select(conditions, [zero, zero, x, chroma, chroma], default=x)

    return np.stack([r + m, g + m, b + m], axis=-1)
