from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

# Sector offsets used by the chroma formula for each output channel
RED_SECTOR = 5
GREEN_SECTOR = 3
BLUE_SECTOR = 1


def hsv_to_rgb_component(n: int, h: float, s: float, v: float) -> float:
    """
    Single RGB channel from HSV using the chroma / hue-sector formula.

    ``n`` selects the channel: 5 for red, 3 for green, 1 for blue.
    """
    k = (n + h / 60.0) % 6.0
    return v - v * s * max(0.0, min(k, 4.0 - k, 1.0))


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to unit RGB.

    Input:
        h ∈ [0, 360), s ∈ [0, 1], v ∈ [0, 1]

    Output:
        r, g, b ∈ [0, 1]
    """
    return (
        hsv_to_rgb_component(RED_SECTOR, h, s, v),
        hsv_to_rgb_component(GREEN_SECTOR, h, s, v),
        hsv_to_rgb_component(BLUE_SECTOR, h, s, v),
    )


def _np_component(n: int, h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    k = np.mod(n + h / 60.0, 6.0)
    return v - v * s * np.clip(np.minimum(k, 4.0 - k), 0.0, 1.0)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to unit RGB.

    Args:
        h: array-like or scalar, [0,360) hue
        s: array-like or scalar, [0,1] saturation
        v: array-like or scalar, [0,1] value

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    return np.stack([
        _np_component(RED_SECTOR, h, s, v),
        _np_component(GREEN_SECTOR, h, s, v),
        _np_component(BLUE_SECTOR, h, s, v),
    ], axis=-1)
