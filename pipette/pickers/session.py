"""
Gesture adapters that drive the pointer geometry for a UI toolkit.

A session owns the ``IDLE -> ACTIVE -> IDLE`` lifecycle of one picker. The
host forwards pointer events to ``press`` / ``move`` / ``release`` /
``cancel`` and receives new colors through ``on_color_change``. Nothing here
draws or knows about a particular toolkit.

The current color is read from the ``color`` source on every event, so edits
made outside the picker between two events are never overwritten with a
stale copy: each event only replaces the fields its layout controls.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional, Tuple, Union
import warnings

from ..colors import HsvColor
from ..geometry import (
    HitPolicy,
    compute_center,
    disc_color_at,
    disc_thumb_position,
    rectangle_color_at,
    rectangle_thumb_position,
    ring_hue_at,
    ring_radius,
    ring_thumb_position,
)
from ..types.geometry_types import Point
from .defaults import COMPONENT_SIZE, RING_STROKE_WIDTH, thumb_radius

ColorSource = Union[HsvColor, Callable[[], HsvColor]]


class GestureState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"


class PickerSession(ABC):
    """
    Base class for the three picker layouts.

    Args:
        color: The current color, or a zero-argument callable returning it.
            A plain ``HsvColor`` is replaced by each emitted color; a callable
            is assumed to reflect the host's state, typically updated by
            ``on_color_change``.
        on_color_change: Called with each new color.
        on_color_change_finished: Called when a gesture ends, by release or
            cancellation.
        size: Measured ``(width, height)`` of the control.
    """

    def __init__(
        self,
        color: ColorSource,
        on_color_change: Callable[[HsvColor], None],
        on_color_change_finished: Optional[Callable[[], None]] = None,
        size: Tuple[float, float] = (COMPONENT_SIZE, COMPONENT_SIZE),
    ) -> None:
        self._color = color
        self._on_color_change = on_color_change
        self._on_color_change_finished = on_color_change_finished
        self.state = GestureState.IDLE
        self.width = 0.0
        self.height = 0.0
        self.resize(*size)

    # ------------------ STATE ------------------
    @property
    def color(self) -> HsvColor:
        return self._color() if callable(self._color) else self._color

    @property
    def is_active(self) -> bool:
        return self.state is GestureState.ACTIVE

    @property
    def center(self) -> Point:
        return compute_center(self.width, self.height)

    def resize(self, width: float, height: float) -> None:
        """Record the control's measured size. Negative sizes are treated as 0."""
        if width < 0 or height < 0:
            warnings.warn(
                f"{self.__class__.__name__} resized to ({width}, {height}); using 0 for negative sides",
                RuntimeWarning,
                stacklevel=2,
            )
        self.width = max(float(width), 0.0)
        self.height = max(float(height), 0.0)

    # ------------------ EVENTS ------------------
    def press(self, position: Point) -> bool:
        """
        Pointer down. Returns whether the press landed on the hit region.

        A rejected press emits nothing and leaves the session idle.
        """
        color = self.color_at(position, HitPolicy.TAP)
        if color is None:
            return False
        self.state = GestureState.ACTIVE
        self._emit(color)
        return True

    def move(self, position: Point) -> bool:
        """Pointer move. Ignored unless a gesture is active; never rejected once it is."""
        if not self.is_active:
            return False
        self._emit(self.color_at(position, HitPolicy.DRAG))
        return True

    def release(self) -> None:
        self._finish()

    def cancel(self) -> None:
        """End the gesture without emitting another color."""
        self._finish()

    def _finish(self) -> None:
        if not self.is_active:
            return
        self.state = GestureState.IDLE
        if self._on_color_change_finished is not None:
            self._on_color_change_finished()

    def _emit(self, color: HsvColor) -> None:
        if not callable(self._color):
            self._color = color
        self._on_color_change(color)

    # ------------------ RENDERING HINTS ------------------
    def thumb_radius(self) -> float:
        return thumb_radius(self.is_active)

    @abstractmethod
    def color_at(self, position: Point, policy: HitPolicy) -> Optional[HsvColor]:
        """The current color updated for ``position``, or ``None`` if rejected."""

    @abstractmethod
    def thumb_position(self) -> Point:
        """Where the thumb should be drawn for the current color."""


class CircularPicker(PickerSession):
    """Disc picker: hue by angle, saturation by distance. Value is kept."""

    @property
    def radius(self) -> float:
        return min(self.width, self.height) / 2.0

    def color_at(self, position: Point, policy: HitPolicy) -> Optional[HsvColor]:
        result = disc_color_at(position, self.radius, self.center, policy)
        if result is None:
            return None
        hue, saturation = result
        return self.color.copy(hue=hue, saturation=saturation)

    def thumb_position(self) -> Point:
        color = self.color
        return disc_thumb_position(color.hue, color.saturation, self.radius, self.center)


class RingPicker(PickerSession):
    """Ring picker: hue only. Saturation and value are kept."""

    def __init__(
        self,
        color: ColorSource,
        on_color_change: Callable[[HsvColor], None],
        on_color_change_finished: Optional[Callable[[], None]] = None,
        size: Tuple[float, float] = (COMPONENT_SIZE, COMPONENT_SIZE),
        stroke_width: float = RING_STROKE_WIDTH,
    ) -> None:
        self.stroke_width = stroke_width
        super().__init__(color, on_color_change, on_color_change_finished, size)

    @property
    def radius(self) -> float:
        return ring_radius(min(self.width, self.height), self.stroke_width)

    def color_at(self, position: Point, policy: HitPolicy) -> Optional[HsvColor]:
        hue = ring_hue_at(position, self.center, self.radius, self.stroke_width, policy)
        if hue is None:
            return None
        return self.color.copy(hue=hue)

    def thumb_position(self) -> Point:
        return ring_thumb_position(self.color.hue, self.radius, self.center)


class SquarePicker(PickerSession):
    """Square picker: saturation left to right, value bottom to top. Hue is kept."""

    def color_at(self, position: Point, policy: HitPolicy) -> Optional[HsvColor]:
        saturation, value = rectangle_color_at(position, self.width, self.height)
        return self.color.copy(saturation=saturation, value=value)

    def thumb_position(self) -> Point:
        color = self.color
        return rectangle_thumb_position(color.saturation, color.value, self.width, self.height)
