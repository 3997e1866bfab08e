"""Toolkit-agnostic picker sessions, defaults and appearance helpers."""

from .session import CircularPicker, GestureState, PickerSession, RingPicker, SquarePicker
from .appearance import (
    contrasting_color,
    hue_sweep_stops,
    is_dark,
    relative_luminance,
    square_corner_colors,
    thumb_border,
)
from . import defaults

__all__ = [
    'CircularPicker', 'GestureState', 'PickerSession', 'RingPicker', 'SquarePicker',
    'contrasting_color', 'hue_sweep_stops', 'is_dark', 'relative_luminance', 'square_corner_colors',
    'thumb_border',
    'defaults',
]
