"""Default dimensions for the pickers, in the caller's pixel units."""

# Size a picker is laid out at when the host does not size it
COMPONENT_SIZE = 128.0

THUMB_RADIUS = 10.0
THUMB_RADIUS_PRESSED = 14.0
THUMB_BORDER_WIDTH = 1.0
BORDER_ALPHA = 0.5

RING_STROKE_WIDTH = 16.0

# Hue stops for the sweep gradient: 0, 60, ..., 360
HUE_STOP_COUNT = 7


def thumb_radius(active: bool) -> float:
    """Thumb radius while a gesture is active vs. at rest."""
    return THUMB_RADIUS_PRESSED if active else THUMB_RADIUS
