"""
Pipette Color Classes
=====================

``HsvColor`` is an immutable HSV value packed into one integer.

Features
--------
- Hue to 0.01 degree, saturation and value to 1e-6
- Inputs wrapped (hue) or clamped (saturation, value), never rejected
- Equality and hashing on the packed integer
- Derived red / green / blue computed on access
- Save / restore through a single 64-bit integer

Usage
-----
>>> from pipette.colors import HsvColor
>>> color = HsvColor(120.0, 1.0, 1.0)
>>> color.to_rgb()
(0.0, 1.0, 0.0)
>>> dimmer = color.with_value(0.5)
>>> HsvColor.from_packed_value(dimmer.to_long()) == dimmer
True
>>> hue, saturation, value = HsvColor.from_argb(0xFFFF8000)
"""

from .hsv_color import HsvColor, normalize_hue, clamp_unit
from .packing import pack_hsv, unpack_hsv

__all__ = ['HsvColor', 'normalize_hue', 'clamp_unit', 'pack_hsv', 'unpack_hsv']
