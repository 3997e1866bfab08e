"""
Pipette - Color Picker Geometry and HSV Colors
==============================================

The toolkit-independent core of circular, ring and square color pickers.

Key Features
------------
- ``HsvColor``: immutable HSV value packed into one integer, with lossy
  HSV ↔ RGB conversion and ARGB helpers
- Pointer geometry for disc, ring and rectangle layouts, both directions
- Tap (reject outside) and drag (never reject) hit policies
- Vectorized numpy variants of the conversions and mappings
- Gesture sessions that wire the geometry to any UI toolkit's pointer events

Quick Start
-----------
>>> from pipette import HsvColor, disc_color_at, HitPolicy
>>>
>>> color = HsvColor(0.0, 1.0, 1.0)
>>> disc_color_at((64.0, 0.0), radius=64.0, policy=HitPolicy.TAP)
(270.0, 1.0)
>>>
>>> from pipette import SquarePicker
>>> picker = SquarePicker(color, on_color_change=print, size=(100.0, 100.0))
>>> picker.press((50.0, 0.0))
HsvColor(hue=0.0, saturation=0.5, value=1.0)
True

Modules
-------
- colors: HsvColor and the packed-integer layout
- conversions: HSV / RGB / ARGB conversion functions
- geometry: position ↔ color mappings
- pickers: gesture sessions, defaults, appearance helpers
"""

from .colors import HsvColor, pack_hsv, unpack_hsv
from .conversions import (
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
    argb_to_unit_rgb,
    unit_rgb_to_argb,
)
from .geometry import (
    HitPolicy,
    clamp_position_to_radius,
    disc_color_at,
    disc_thumb_position,
    np_disc_color_at,
    ring_hit_test,
    ring_hue_at,
    ring_radius,
    ring_thumb_position,
    np_ring_hue_at,
    rectangle_color_at,
    rectangle_thumb_position,
    np_rectangle_color_at,
)
from .pickers import (
    CircularPicker,
    GestureState,
    PickerSession,
    RingPicker,
    SquarePicker,
    contrasting_color,
    hue_sweep_stops,
    is_dark,
    square_corner_colors,
)

__version__ = "0.1.0"

__all__ = [
    # Colors
    "HsvColor", "pack_hsv", "unpack_hsv",

    # Conversions
    "hsv_to_unit_rgb", "np_hsv_to_unit_rgb",
    "unit_rgb_to_hsv", "np_unit_rgb_to_hsv",
    "argb_to_unit_rgb", "unit_rgb_to_argb",

    # Geometry
    "HitPolicy", "clamp_position_to_radius",
    "disc_color_at", "disc_thumb_position", "np_disc_color_at",
    "ring_hit_test", "ring_hue_at", "ring_radius", "ring_thumb_position", "np_ring_hue_at",
    "rectangle_color_at", "rectangle_thumb_position", "np_rectangle_color_at",

    # Pickers
    "CircularPicker", "GestureState", "PickerSession", "RingPicker", "SquarePicker",
    "contrasting_color", "hue_sweep_stops", "is_dark", "square_corner_colors",

    # Version
    "__version__",
]
