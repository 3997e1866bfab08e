from __future__ import annotations
from typing import Iterator, Optional, Tuple
import math
import warnings

from boundednumbers.functions import clamp, cyclic_wrap_float

from ..conversions import argb_to_unit_rgb, hsv_to_rgb_component, unit_rgb_to_argb, unit_rgb_to_hsv
from ..conversions.to_rgb import BLUE_SECTOR, GREEN_SECTOR, RED_SECTOR
from .packing import (
    CHANNEL_SCALE,
    HUE_QUANTA,
    HUE_SCALE,
    HUE_SHIFT,
    PACKED_MASK,
    pack_fields,
    quantize_channel,
    quantize_hue,
    unpack_fields,
)


def normalize_hue(hue: float) -> float:
    """Wrap a hue in degrees into ``[0, 360)``. Infinite or NaN hues become 0."""
    if not math.isfinite(hue):
        return 0.0
    return float(cyclic_wrap_float(hue, 0.0, 360.0))


def clamp_unit(channel: float) -> float:
    if math.isnan(channel):
        return 0.0
    return float(clamp(channel, 0.0, 1.0))


class HsvColor:
    """
    Immutable HSV color stored as a single packed integer.

    Hue is kept to 0.01 degree, saturation and value to 1e-6. Inputs are
    normalized before packing: hue wraps into ``[0, 360)``, saturation and
    value are clamped into ``[0, 1]``. Two colors are equal when their packed
    values are equal.

    >>> HsvColor(352.0, 0.5, 0.5).hue
    352.0
    >>> HsvColor.from_rgb(1.0, 0.0, 0.0) == HsvColor(0.0, 1.0, 1.0)
    True
    """

    __slots__ = ('_packed',)

    def __init__(self, hue: float, saturation: float, value: float) -> None:
        hue_q = quantize_hue(normalize_hue(hue)) % HUE_QUANTA
        saturation_q = quantize_channel(clamp_unit(saturation))
        value_q = quantize_channel(clamp_unit(value))
        object.__setattr__(self, '_packed', pack_fields(hue_q, saturation_q, value_q))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def from_packed_value(cls, packed: int) -> HsvColor:
        """
        Restore a color saved with ``packed_value`` / ``to_long``.

        Bits above the 56 used ones are discarded. A hue field outside
        ``[0, 360)`` cannot come from this class; it is kept unchanged and a
        ``RuntimeWarning`` is issued.
        """
        packed = int(packed) & PACKED_MASK
        if (packed >> HUE_SHIFT) >= HUE_QUANTA:
            warnings.warn(
                f"Packed value {packed:#x} carries hue {(packed >> HUE_SHIFT) / HUE_SCALE}, outside [0, 360)",
                RuntimeWarning,
                stacklevel=2,
            )
        color = cls.__new__(cls)
        object.__setattr__(color, '_packed', packed)
        return color

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float) -> HsvColor:
        """
        Build a color from unit RGB channels.

        Lossy: greys collapse to hue 0 and saturation 0.
        """
        return cls(*unit_rgb_to_hsv(red, green, blue))

    @classmethod
    def from_argb(cls, color: int) -> HsvColor:
        """Build a color from an ARGB integer (alpha is ignored)."""
        return cls.from_rgb(*argb_to_unit_rgb(color))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def packed_value(self) -> int:
        return self._packed

    @property
    def hue(self) -> float:
        return unpack_fields(self._packed)[0] / HUE_SCALE

    @property
    def saturation(self) -> float:
        return unpack_fields(self._packed)[1] / CHANNEL_SCALE

    @property
    def value(self) -> float:
        return unpack_fields(self._packed)[2] / CHANNEL_SCALE

    @property
    def red(self) -> float:
        return hsv_to_rgb_component(RED_SECTOR, self.hue, self.saturation, self.value)

    @property
    def green(self) -> float:
        return hsv_to_rgb_component(GREEN_SECTOR, self.hue, self.saturation, self.value)

    @property
    def blue(self) -> float:
        return hsv_to_rgb_component(BLUE_SECTOR, self.hue, self.saturation, self.value)

    # ------------------ CONVERSIONS ------------------
    def to_rgb(self) -> Tuple[float, float, float]:
        return self.red, self.green, self.blue

    def to_argb(self) -> int:
        """Opaque ARGB integer for this color."""
        return unit_rgb_to_argb(*self.to_rgb())

    def to_long(self) -> int:
        """The packed value, ready to store as a signed 64-bit integer."""
        return self._packed

    # ------------------ COPIES ------------------
    def copy(
        self,
        hue: Optional[float] = None,
        saturation: Optional[float] = None,
        value: Optional[float] = None,
    ) -> HsvColor:
        """Return a new color, replacing only the fields that are given."""
        return HsvColor(
            self.hue if hue is None else hue,
            self.saturation if saturation is None else saturation,
            self.value if value is None else value,
        )

    def with_hue(self, hue: float) -> HsvColor:
        return self.copy(hue=hue)

    def with_saturation(self, saturation: float) -> HsvColor:
        return self.copy(saturation=saturation)

    def with_value(self, value: float) -> HsvColor:
        return self.copy(value=value)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[float]:
        yield self.hue
        yield self.saturation
        yield self.value

    def __eq__(self, other) -> bool:
        if not isinstance(other, HsvColor):
            return NotImplemented
        return self._packed == other._packed

    def __hash__(self) -> int:
        return hash(self._packed)

    def __repr__(self) -> str:
        return f"HsvColor(hue={self.hue}, saturation={self.saturation}, value={self.value})"

    def __reduce__(self):
        return (self.__class__.from_packed_value, (self._packed,))
