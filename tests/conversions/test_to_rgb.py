import numpy as np

from pipette.conversions import hsv_to_rgb_component, hsv_to_unit_rgb, np_hsv_to_unit_rgb
from pipette.conversions.to_rgb import BLUE_SECTOR, GREEN_SECTOR, RED_SECTOR
from tests.samples import samples_hsv_rgb


def test_hsv_to_unit_rgb():
    for (h, s, v), (r_exp, g_exp, b_exp) in samples_hsv_rgb.items():
        r, g, b = hsv_to_unit_rgb(h, s, v)

        assert abs(r - r_exp) < 1e-6
        assert abs(g - g_exp) < 1e-6
        assert abs(b - b_exp) < 1e-6


def test_components_match_tuple():
    h, s, v = 275.0, 0.4, 0.9
    assert hsv_to_unit_rgb(h, s, v) == (
        hsv_to_rgb_component(RED_SECTOR, h, s, v),
        hsv_to_rgb_component(GREEN_SECTOR, h, s, v),
        hsv_to_rgb_component(BLUE_SECTOR, h, s, v),
    )


def test_zero_saturation_is_grey():
    for h in (0.0, 45.0, 180.0, 359.0):
        assert hsv_to_unit_rgb(h, 0.0, 0.42) == (0.42, 0.42, 0.42)


def test_hsv_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_hsv_rgb.keys()))
    expected = np.array(list(samples_hsv_rgb.values()))
    result = np_hsv_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert result.shape == expected.shape
    assert np.allclose(result, expected, atol=1e-6)


def test_hsv_to_unit_rgb_numpy_broadcasts():
    hues = np.linspace(0.0, 300.0, 6)
    rgb = np_hsv_to_unit_rgb(hues, 1.0, 1.0)
    assert rgb.shape == (6, 3)
    for hue, row in zip(hues, rgb):
        assert np.allclose(row, hsv_to_unit_rgb(hue, 1.0, 1.0))
