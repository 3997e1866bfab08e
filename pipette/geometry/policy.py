from enum import Enum
from typing import Union


class HitPolicy(str, Enum):
    """
    How a mapping treats positions outside its hit region.

    TAP rejects them (the mapping returns ``None``); DRAG never rejects, so a
    gesture that has already started keeps tracking once the pointer leaves
    the control.
    """
    TAP = "tap"
    DRAG = "drag"


PolicyLike = Union[HitPolicy, str]


def as_policy(policy: PolicyLike) -> HitPolicy:
    try:
        return HitPolicy(policy)
    except ValueError:
        raise ValueError(f"Invalid hit policy: {policy!r}") from None
