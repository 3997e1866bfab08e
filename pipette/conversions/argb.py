from typing import Tuple

OPAQUE_ALPHA = 0xFF
CHANNEL_MAX = 255


def argb_to_unit_rgb(color: int) -> Tuple[float, float, float]:
    """
    Split an ARGB integer into unit RGB floats, ignoring alpha.

    Works for unsigned 32-bit ints, signed 32-bit ints and 64-bit longs alike:
    only the low 24 bits are read.
    """
    r = ((color >> 16) & 0xFF) / CHANNEL_MAX
    g = ((color >> 8) & 0xFF) / CHANNEL_MAX
    b = (color & 0xFF) / CHANNEL_MAX
    return r, g, b


def _to_byte(channel: float) -> int:
    return max(0, min(CHANNEL_MAX, int(round(channel * CHANNEL_MAX))))


def unit_rgb_to_argb(r: float, g: float, b: float, alpha: int = OPAQUE_ALPHA) -> int:
    """Pack unit RGB floats into an unsigned 32-bit ARGB integer."""
    return (
        ((alpha & 0xFF) << 24)
        | (_to_byte(r) << 16)
        | (_to_byte(g) << 8)
        | _to_byte(b)
    )
