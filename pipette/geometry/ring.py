"""
Ring mapping for the hue-only picker.

Only the angle matters for the color; the distance decides whether a tap
landed on the visible band.
"""
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from ..types.geometry_types import Point, as_point
from .policy import HitPolicy, PolicyLike, as_policy
from .polar import angle_of, distance_squared, polar_to_position


def ring_radius(width: float, stroke_width: float) -> float:
    """Centerline radius of a ring stroked with ``stroke_width`` inside a square of ``width``."""
    return max((width - stroke_width) / 2.0, 0.0)


def ring_band(radius: float, stroke_width: float) -> Tuple[float, float]:
    """Squared inner and outer radii of the ring band."""
    half_stroke = stroke_width / 2.0
    inner = max(radius - half_stroke, 0.0)
    outer = radius + half_stroke
    return inner * inner, outer * outer


def ring_hit_test(position: Point, center: Point, radius: float, stroke_width: float) -> bool:
    """True when ``position`` lies on the band, edges included."""
    inner_sq, outer_sq = ring_band(radius, stroke_width)
    return inner_sq <= distance_squared(as_point(position), as_point(center)) <= outer_sq


def ring_hue_at(
    position: Point,
    center: Point,
    radius: float,
    stroke_width: float,
    policy: PolicyLike = HitPolicy.DRAG,
) -> Optional[float]:
    """
    Hue under ``position`` on a ring.

    With ``TAP`` a position off the band returns ``None``. With ``DRAG`` the
    hue is computed wherever the pointer is.
    """
    position = as_point(position)
    center = as_point(center)
    if as_policy(policy) is HitPolicy.TAP and not ring_hit_test(position, center, radius, stroke_width):
        return None
    return angle_of(position, center)


def ring_thumb_position(hue: float, radius: float, center: Point) -> Point:
    return polar_to_position(as_point(center), radius, hue)


def np_ring_hue_at(
    x: NDArray,
    y: NDArray,
    center: Point,
    radius: float,
    stroke_width: float,
) -> Tuple[NDArray, NDArray]:
    """Vectorized ring mapping. Returns hue and an ``in_band`` mask."""
    dx = np.asarray(x, dtype=float) - center[0]
    dy = np.asarray(y, dtype=float) - center[1]
    inner_sq, outer_sq = ring_band(radius, stroke_width)
    dist_sq = dx**2 + dy**2
    hue = (np.degrees(np.arctan2(dy, dx)) + 360.0) % 360.0
    in_band = (dist_sq >= inner_sq) & (dist_sq <= outer_sq)
    return hue, in_band
