import numpy as np

from pipette.conversions import hsv_to_unit_rgb, np_unit_rgb_to_hsv, unit_rgb_to_hsv
from tests.samples import samples_rgb_hsv, samples_hsv_rgb


def test_unit_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = unit_rgb_to_hsv(r, g, b)

        assert abs(h_out - h_exp) < 1e-6
        assert abs(s_out - s_exp) < 1e-6
        assert abs(v_out - v_exp) < 1e-6


def test_hue_is_never_negative():
    # max is red and green < blue, the (g - b) / delta term is negative
    h, _, _ = unit_rgb_to_hsv(1.0, 0.0, 0.2)
    assert 0.0 <= h < 360.0
    assert abs(h - 348.0) < 1e-6


def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    hsv = np_unit_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(hsv, expected, atol=1e-6)


def test_round_trip_hsv_rgb():
    for (h, s, v) in samples_hsv_rgb:
        if s == 0 or v == 0:
            continue
        h_out, s_out, v_out = unit_rgb_to_hsv(*hsv_to_unit_rgb(h, s, v))
        assert abs(h_out - h) < 1e-6
        assert abs(s_out - s) < 1e-6
        assert abs(v_out - v) < 1e-6
