"""Polar helpers shared by the disc and ring mappings."""
import math
from typing import Optional

from ..types.geometry_types import Point


def normalize_angle(angle: float) -> float:
    """Normalize angle to [0, 360) range."""
    return angle % 360.0


def distance_squared(position: Point, center: Point) -> float:
    dx = position[0] - center[0]
    dy = position[1] - center[1]
    return dx * dx + dy * dy


def distance(position: Point, center: Point) -> float:
    return math.hypot(position[0] - center[0], position[1] - center[1])


def angle_of(position: Point, center: Point) -> float:
    """
    Angle of ``position`` around ``center`` in degrees, in [0, 360).

    Screen coordinates: y grows downward, so 90 points straight down and 270
    straight up. A position on the center yields 0.
    """
    degrees = math.degrees(math.atan2(position[1] - center[1], position[0] - center[0]))
    return normalize_angle(degrees + 360.0)


def clamp_position_to_radius(position: Point, center: Point, radius: float) -> Point:
    """
    Keep ``position`` inside the circle of ``radius`` around ``center``.

    Positions inside (or on) the circle are returned unchanged; positions
    outside are projected onto the circle along the ray from the center,
    infinitely distant ones included.
    """
    if distance_squared(position, center) <= radius * radius:
        return position
    return polar_to_position(center, max(radius, 0.0), angle_of(position, center))


def polar_to_position(center: Point, radius: float, angle: float) -> Point:
    """Point at ``radius`` from ``center`` in direction ``angle`` (degrees)."""
    rad = math.radians(angle)
    return center[0] + radius * math.cos(rad), center[1] + radius * math.sin(rad)


def compute_center(width: float, height: float, center: Optional[Point] = None) -> Point:
    """Resolve the center of a control: explicit if given, else the box midpoint."""
    if center is not None:
        return float(center[0]), float(center[1])
    return width / 2.0, height / 2.0
