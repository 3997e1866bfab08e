"""
Fixed-point packing of an HSV triple into a single integer.

Layout (least significant bit first)::

    bits  0-19  value       * 1_000_000   (20 bits)
    bits 20-39  saturation  * 1_000_000   (20 bits)
    bits 40-55  hue         * 100         (16 bits)
    bits 56-63  unused

The packed value is always non-negative and fits in a signed 64-bit integer,
so it can be stored anywhere a ``long`` can.

Fields are rounded to the nearest quantum, so ``pack_hsv(123.456, 0, 0)``
stores hue 12346. Writers that truncate store 12345 for the same input; both
read back through ``unpack_hsv`` the same way, only values between quanta
differ.

``pack_hsv`` does not validate. Each field is masked to its bit width, so an
out-of-range float is silently truncated modulo the field size. Normalize
first (``HsvColor`` does).
"""
from typing import Tuple

HUE_SCALE = 100
CHANNEL_SCALE = 1_000_000

HUE_BITS = 16
CHANNEL_BITS = 20

HUE_MASK = (1 << HUE_BITS) - 1          # 0xFFFF
CHANNEL_MASK = (1 << CHANNEL_BITS) - 1  # 0xFFFFF

VALUE_SHIFT = 0
SATURATION_SHIFT = CHANNEL_BITS
HUE_SHIFT = 2 * CHANNEL_BITS

PACKED_MASK = (1 << (HUE_SHIFT + HUE_BITS)) - 1

# Number of hue quanta in a full turn (360.00 degrees)
HUE_QUANTA = 360 * HUE_SCALE


def quantize_hue(hue: float) -> int:
    return int(round(hue * HUE_SCALE))


def quantize_channel(channel: float) -> int:
    return int(round(channel * CHANNEL_SCALE))


def pack_fields(hue_q: int, saturation_q: int, value_q: int) -> int:
    """Pack already-quantized fields, masking each to its width."""
    return (
        ((hue_q & HUE_MASK) << HUE_SHIFT)
        | ((saturation_q & CHANNEL_MASK) << SATURATION_SHIFT)
        | ((value_q & CHANNEL_MASK) << VALUE_SHIFT)
    )


def pack_hsv(hue: float, saturation: float, value: float) -> int:
    return pack_fields(quantize_hue(hue), quantize_channel(saturation), quantize_channel(value))


def unpack_fields(packed: int) -> Tuple[int, int, int]:
    return (
        (packed >> HUE_SHIFT) & HUE_MASK,
        (packed >> SATURATION_SHIFT) & CHANNEL_MASK,
        (packed >> VALUE_SHIFT) & CHANNEL_MASK,
    )


def unpack_hsv(packed: int) -> Tuple[float, float, float]:
    hue_q, saturation_q, value_q = unpack_fields(packed)
    return hue_q / HUE_SCALE, saturation_q / CHANNEL_SCALE, value_q / CHANNEL_SCALE
