from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360), s ∈ [0, 1], v ∈ [0, 1]

    Greys (r == g == b) have no hue; they all map to hue 0, saturation 0.
    """
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min

    if delta == 0:
        h = 0.0
    elif c_max == r:
        h = ((g - b) / delta) % 6.0
    elif c_max == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    h *= 60.0
    if h < 0:
        h += 360.0

    s = 0.0 if c_max == 0 else 1.0 - c_min / c_max
    return h, s, c_max


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized unit RGB to HSV.

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    c_max = np.maximum.reduce([r, g, b])
    c_min = np.minimum.reduce([r, g, b])
    delta = c_max - c_min

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)

    h = np.where(
        c_max == r,
        np.mod((g - b) / safe_delta, 6.0),
        np.where(c_max == g, (b - r) / safe_delta + 2.0, (r - g) / safe_delta + 4.0),
    )
    h = np.where(chromatic, h * 60.0, 0.0)

    s = np.zeros_like(c_max)
    mask = c_max > 0
    s[mask] = 1.0 - c_min[mask] / c_max[mask]

    return np.stack([h, s, c_max], axis=-1)
