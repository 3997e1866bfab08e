"""Rectangle mapping for the saturation / value picker at a fixed hue."""
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from ..types.geometry_types import Point, SaturationValue, as_point


def rectangle_color_at(position: Point, width: float, height: float) -> SaturationValue:
    """
    Saturation and value under ``position``.

    x runs from saturation 0 (left) to 1 (right); y runs from value 1 (top)
    to 0 (bottom). The position is clamped into the rectangle first, so this
    never rejects. A zero-sized side gives 0 for its coordinate.
    """
    x, y = as_point(position)

    if width > 0:
        saturation = min(max(x, 0.0), width) / width
    else:
        saturation = 0.0

    if height > 0:
        value = 1.0 - min(max(y, 0.0), height) / height
    else:
        value = 0.0

    return saturation, value


def rectangle_thumb_position(saturation: float, value: float, width: float, height: float) -> Point:
    return saturation * width, height - value * height


def np_rectangle_color_at(x: NDArray, y: NDArray, width: float, height: float) -> Tuple[NDArray, NDArray]:
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if width > 0:
        saturation = np.clip(x, 0.0, width) / width
    else:
        saturation = np.zeros_like(x)
    if height > 0:
        value = 1.0 - np.clip(y, 0.0, height) / height
    else:
        value = np.zeros_like(y)
    return saturation, value
