import pytest

from umbra.core.color import Color, hsb_to_rgb01


def test_hsb_to_rgb01_primary_and_gray():
    assert hsb_to_rgb01(0, 100, 100) == pytest.approx((1.0, 0.0, 0.0))
    assert hsb_to_rgb01(120, 100, 100) == pytest.approx((0.0, 1.0, 0.0))
    assert hsb_to_rgb01(10, 0, 5) == pytest.approx((0.05, 0.05, 0.05))


def test_hsb_to_rgb01_clamps_out_of_range_components():
    assert hsb_to_rgb01(0, 250, 250) == pytest.approx((1.0, 0.0, 0.0))


def test_gray_saturates_above_brightness_max():
    assert Color.gray(200) == Color(1.0, 1.0, 1.0, 1.0)
    assert Color.gray(50, 0.5).rgb == pytest.approx((0.5, 0.5, 0.5))


def test_color_string_forms():
    c = Color.from_hsb(0, 0, 20, 0.25)
    assert c.hex() == "#333333"
    assert c.rgb255() == (51, 51, 51)
    assert c.css() == "rgba(51,51,51,0.25)"
    assert Color.from_hsb(0, 100, 100).hex() == "#FF0000"


def test_transparent():
    assert Color.transparent().a == 0.0
