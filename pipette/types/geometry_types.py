from typing import Tuple, TypeAlias

Point: TypeAlias = Tuple[float, float]
HueSaturation: TypeAlias = Tuple[float, float]
SaturationValue: TypeAlias = Tuple[float, float]


def as_point(position) -> Point:
    """Coerce any two-element sequence into a float ``(x, y)`` tuple."""
    x, y = position
    return float(x), float(y)
