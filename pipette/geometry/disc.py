"""
Disc mapping for the circular hue / saturation picker.

Angle around the center selects the hue, distance from the center over the
radius selects the saturation.
"""
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from ..types.geometry_types import HueSaturation, Point, as_point
from .policy import HitPolicy, PolicyLike, as_policy
from .polar import (
    angle_of,
    clamp_position_to_radius,
    distance,
    distance_squared,
    polar_to_position,
)


def disc_center(radius: float, center: Optional[Point] = None) -> Point:
    """A disc of ``radius`` drawn in a ``2R x 2R`` box is centered at ``(R, R)``."""
    if center is not None:
        return as_point(center)
    return float(radius), float(radius)


def saturation_for_distance(dist: float, radius: float) -> float:
    if radius <= 0:
        return 0.0
    return min(max(dist / radius, 0.0), 1.0)


def disc_color_at(
    position: Point,
    radius: float,
    center: Optional[Point] = None,
    policy: PolicyLike = HitPolicy.DRAG,
) -> Optional[HueSaturation]:
    """
    Hue and saturation under ``position`` on a disc.

    Args:
        position: Pointer position, same coordinate space as ``center``.
        radius: Disc radius.
        center: Disc center, ``(radius, radius)`` by default.
        policy: ``TAP`` returns ``None`` when the position lies outside the
            disc (the rim itself counts as inside). ``DRAG`` first pulls the
            position onto the disc and always returns a result.

    Returns:
        ``(hue, saturation)``, or ``None`` for a rejected tap.
    """
    position = as_point(position)
    center = disc_center(radius, center)

    if as_policy(policy) is HitPolicy.TAP:
        if distance_squared(position, center) > radius * radius:
            return None
    else:
        position = clamp_position_to_radius(position, center, radius)

    hue = angle_of(position, center)
    saturation = saturation_for_distance(distance(position, center), radius)
    return hue, saturation


def disc_thumb_position(
    hue: float,
    saturation: float,
    radius: float,
    center: Optional[Point] = None,
) -> Point:
    """Where the thumb sits for a given hue and saturation."""
    return polar_to_position(disc_center(radius, center), saturation * radius, hue)


def np_disc_color_at(
    x: NDArray,
    y: NDArray,
    radius: float,
    center: Optional[Point] = None,
) -> Tuple[NDArray, NDArray, NDArray]:
    """
    Vectorized disc mapping, e.g. for a lookup grid built with ``np.indices``.

    Returns:
        hue, saturation and an ``inside`` mask (what a tap would accept).
        Saturation is clamped to 1 outside the disc, as a drag would report.
    """
    cx, cy = disc_center(radius, center)
    dx = np.asarray(x, dtype=float) - cx
    dy = np.asarray(y, dtype=float) - cy

    distances = np.sqrt(dx**2 + dy**2)
    hue = (np.degrees(np.arctan2(dy, dx)) + 360.0) % 360.0
    if radius > 0:
        saturation = np.clip(distances / radius, 0.0, 1.0)
    else:
        saturation = np.zeros_like(distances)
    inside = dx**2 + dy**2 <= radius * radius
    return hue, saturation, inside
