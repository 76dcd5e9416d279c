import pytest

from umbra.core.remap import remap, shadow_blur_radius


def test_remap_maps_endpoints_and_midpoint():
    assert remap(0, 0, 255, 10, 100) == pytest.approx(10.0)
    assert remap(255, 0, 255, 10, 100) == pytest.approx(100.0)
    assert remap(127.5, 0, 255, 10, 100) == pytest.approx(55.0)


def test_remap_supports_descending_output_range():
    assert remap(0.25, 0.0, 1.0, 1.0, 0.0) == pytest.approx(0.75)


def test_remap_does_not_clamp():
    assert remap(2.0, 0.0, 1.0, 0.0, 10.0) == pytest.approx(20.0)


def test_remap_rejects_zero_input_span():
    with pytest.raises(ValueError):
        remap(1.0, 3.0, 3.0, 0.0, 1.0)


@pytest.mark.parametrize(
    ("density", "expected"),
    [(0, 0.0), (25, 12.5), (35, 24.5), (50, 50.0)],
)
def test_shadow_blur_radius_is_quadratic(density, expected):
    assert shadow_blur_radius(density) == pytest.approx(expected)


def test_shadow_blur_radius_is_monotonic_on_slider_range():
    values = [shadow_blur_radius(d) for d in range(0, 51)]
    assert all(a < b for a, b in zip(values, values[1:]))


def test_shadow_blur_radius_rejects_non_positive_max_density():
    with pytest.raises(ValueError):
        shadow_blur_radius(10, max_density=0)
