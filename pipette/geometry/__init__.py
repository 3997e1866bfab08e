"""
Pipette Pointer Geometry
========================

Pure functions that turn a pointer position into color coordinates, and
color coordinates back into a thumb position.

Layouts
-------
Disc:
    disc_color_at(position, radius, center=None, policy=HitPolicy.DRAG)
        -> (hue, saturation) or None
    disc_thumb_position(hue, saturation, radius, center=None)
Ring:
    ring_hue_at(position, center, radius, stroke_width, policy=HitPolicy.DRAG)
        -> hue or None
    ring_hit_test(position, center, radius, stroke_width)
    ring_thumb_position(hue, radius, center)
Rectangle:
    rectangle_color_at(position, width, height) -> (saturation, value)
    rectangle_thumb_position(saturation, value, width, height)

Each layout also has an ``np_`` variant taking coordinate arrays.

Policies
--------
HitPolicy.TAP rejects positions outside the hit region by returning None.
HitPolicy.DRAG never rejects. The rectangle always clamps and takes no policy.

Nothing here raises for numeric input, and zero-sized controls map to
saturation / value 0.
"""

from .policy import HitPolicy, as_policy
from .polar import (
    angle_of,
    clamp_position_to_radius,
    compute_center,
    distance,
    distance_squared,
    normalize_angle,
    polar_to_position,
)
from .disc import disc_center, disc_color_at, disc_thumb_position, np_disc_color_at
from .ring import ring_band, ring_hit_test, ring_hue_at, ring_radius, ring_thumb_position, np_ring_hue_at
from .rectangle import rectangle_color_at, rectangle_thumb_position, np_rectangle_color_at

__all__ = [
    'HitPolicy', 'as_policy',

    # Polar helpers
    'angle_of', 'clamp_position_to_radius', 'compute_center', 'distance',
    'distance_squared', 'normalize_angle', 'polar_to_position',

    # Disc
    'disc_center', 'disc_color_at', 'disc_thumb_position', 'np_disc_color_at',

    # Ring
    'ring_band', 'ring_hit_test', 'ring_hue_at', 'ring_radius',
    'ring_thumb_position', 'np_ring_hue_at',

    # Rectangle
    'rectangle_color_at', 'rectangle_thumb_position', 'np_rectangle_color_at',
]
