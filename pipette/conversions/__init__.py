"""
Pipette Color Conversions
=========================

HSV ↔ RGB conversions used by the pickers, with scalar and vectorized
(numpy) variants, plus ARGB integer helpers.

Conversion Functions
-------------------

HSV → RGB:
    hsv_to_rgb_component(n, h, s, v)
        One channel of the chroma / hue-sector formula
    hsv_to_unit_rgb(h, s, v)
        Scalar HSV to RGB conversion
    np_hsv_to_unit_rgb(h, s, v)
        Vectorized HSV to RGB conversion

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
        Scalar RGB to HSV conversion
    np_unit_rgb_to_hsv(r, g, b)
        Vectorized RGB to HSV conversion

ARGB:
    argb_to_unit_rgb(color)
        8-bit-per-channel integer to unit RGB
    unit_rgb_to_argb(r, g, b, alpha=255)
        Unit RGB to 8-bit-per-channel integer

Notes
-----
RGB → HSV is many-to-one: every grey maps to hue 0, saturation 0.

Examples
--------
>>> from pipette.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> h, s, v = unit_rgb_to_hsv(1.0, 0.5, 0.0)
>>> r, g, b = hsv_to_unit_rgb(h, s, v)
"""

from .to_rgb import (
    hsv_to_rgb_component,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
)
from .to_hsv import (
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
)
from .argb import (
    argb_to_unit_rgb,
    unit_rgb_to_argb,
)

__all__ = [
    # HSV → RGB
    'hsv_to_rgb_component',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',

    # RGB → HSV
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # ARGB
    'argb_to_unit_rgb',
    'unit_rgb_to_argb',
]
