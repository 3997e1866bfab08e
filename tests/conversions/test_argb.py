from pipette.conversions import argb_to_unit_rgb, unit_rgb_to_argb


def test_argb_to_unit_rgb_ignores_alpha():
    assert argb_to_unit_rgb(0xFF0000) == (1.0, 0.0, 0.0)
    assert argb_to_unit_rgb(0x80FF0000) == (1.0, 0.0, 0.0)
    assert argb_to_unit_rgb(0xFF00FF00) == (0.0, 1.0, 0.0)
    assert argb_to_unit_rgb(0x123456000000FF) == (0.0, 0.0, 1.0)


def test_signed_int_decodes_like_unsigned():
    assert argb_to_unit_rgb(-16776961) == argb_to_unit_rgb(0xFF0000FF)


def test_unit_rgb_to_argb():
    assert unit_rgb_to_argb(1.0, 0.0, 0.0) == 0xFFFF0000
    assert unit_rgb_to_argb(0.2, 0.4, 0.8) == 0xFF3366CC
    assert unit_rgb_to_argb(0.0, 0.0, 0.0, alpha=0) == 0x00000000


def test_unit_rgb_to_argb_clamps_channels():
    assert unit_rgb_to_argb(1.5, -0.5, 0.5) == 0xFFFF0080
