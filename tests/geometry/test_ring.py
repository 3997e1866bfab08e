import numpy as np
import pytest

from pipette.geometry import (
    HitPolicy,
    np_ring_hue_at,
    ring_hit_test,
    ring_hue_at,
    ring_radius,
    ring_thumb_position,
)
from pipette.geometry.ring import ring_band

WIDTH = 128.0
STROKE = 16.0
CENTER = (64.0, 64.0)
RADIUS = ring_radius(WIDTH, STROKE)


def test_ring_radius():
    assert RADIUS == 56.0
    assert ring_radius(0.0, STROKE) == 0.0


def test_ring_band():
    assert ring_band(56.0, 16.0) == (48.0**2, 64.0**2)
    assert ring_band(4.0, 16.0) == (0.0, 12.0**2)


def test_tap_at_top_of_ring():
    hue = ring_hue_at((64.0, 0.0), CENTER, RADIUS, STROKE, policy=HitPolicy.TAP)
    assert hue is not None
    assert round(hue) == 270


def test_tap_inside_band_accepted():
    for d in (48.5, 56.0, 63.5):
        assert ring_hit_test((64.0 + d, 64.0), CENTER, RADIUS, STROKE)
        assert ring_hue_at((64.0 - d, 64.0), CENTER, RADIUS, STROKE, policy=HitPolicy.TAP) == pytest.approx(180.0)


def test_tap_outside_band_rejected():
    for d in (0.0, 20.0, 47.5, 64.5, 100.0):
        assert not ring_hit_test((64.0, 64.0 + d), CENTER, RADIUS, STROKE)
        assert ring_hue_at((64.0, 64.0 + d), CENTER, RADIUS, STROKE, policy=HitPolicy.TAP) is None


def test_drag_never_rejected():
    for position in [(64.0, 64.0 + 10.0), (64.0, 500.0), (-300.0, 64.0)]:
        assert ring_hue_at(position, CENTER, RADIUS, STROKE, policy=HitPolicy.DRAG) is not None
    assert ring_hue_at((64.0, 500.0), CENTER, RADIUS, STROKE) == pytest.approx(90.0)


def test_thumb_position():
    x, y = ring_thumb_position(270.0, RADIUS, CENTER)
    assert x == pytest.approx(64.0)
    assert y == pytest.approx(8.0)
    for hue in (0.0, 45.0, 181.0, 359.0):
        position = ring_thumb_position(hue, RADIUS, CENTER)
        assert ring_hit_test(position, CENTER, RADIUS, STROKE)
        assert ring_hue_at(position, CENTER, RADIUS, STROKE, policy=HitPolicy.TAP) == pytest.approx(hue)


def test_np_ring_hue_at():
    xs = np.array([64.0, 64.0, 4.0, 124.0, 64.0])
    ys = np.array([0.0, 64.0, 64.0, 64.0, 100.0])
    hue, in_band = np_ring_hue_at(xs, ys, CENTER, RADIUS, STROKE)
    assert in_band.tolist() == [True, False, True, True, False]
    assert np.allclose(hue[[0, 2, 3]], [270.0, 180.0, 0.0])
