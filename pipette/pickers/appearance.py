from typing import List, Tuple

from ..colors import HsvColor
from .defaults import BORDER_ALPHA, HUE_STOP_COUNT, THUMB_BORDER_WIDTH

WHITE = HsvColor(0.0, 0.0, 1.0)
BLACK = HsvColor(0.0, 0.0, 0.0)

# Rec. 709 luma weights
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)


def relative_luminance(r: float, g: float, b: float) -> float:
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def is_dark(color: HsvColor) -> bool:
    return relative_luminance(*color.to_rgb()) < 0.5


def contrasting_color(color: HsvColor) -> HsvColor:
    """White on dark colors, black on light ones; used for the thumb border."""
    return WHITE if is_dark(color) else BLACK


def hue_sweep_stops(saturation: float = 1.0, value: float = 1.0, count: int = HUE_STOP_COUNT) -> List[HsvColor]:
    """
    Evenly spaced stops around the hue circle, first and last both red.

    The disc draws these at full saturation and the current value; the ring
    uses the current saturation and value.
    """
    if count < 2:
        return [HsvColor(0.0, saturation, value)] * max(count, 0)
    step = 360.0 / (count - 1)
    return [HsvColor(i * step, saturation, value) for i in range(count)]


def square_corner_colors(hue: float) -> Tuple[HsvColor, HsvColor, HsvColor, HsvColor]:
    """Top-left, top-right, bottom-left, bottom-right colors of the square picker."""
    return WHITE, HsvColor(hue, 1.0, 1.0), BLACK, BLACK


def thumb_border(color: HsvColor) -> Tuple[HsvColor, float, float]:
    """Border color, alpha and stroke width drawn around a thumb filled with ``color``."""
    return contrasting_color(color), BORDER_ALPHA, THUMB_BORDER_WIDTH
