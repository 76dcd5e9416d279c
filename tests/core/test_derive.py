import pytest

from umbra.core.derive import derive_params
from umbra.core.inputs import SketchInputs


def test_derive_params_for_defaults():
    p = derive_params(SketchInputs.defaults())
    assert p.ego_brightness == pytest.approx(10.0 + 90.0 * 150.0 / 255.0)
    assert p.ego_alpha == pytest.approx(0.1 + 0.9 * 150.0 / 255.0)
    assert p.dark_alpha == pytest.approx(1.0 - p.ego_alpha)
    assert p.shadow_blur == pytest.approx(24.5)
    assert p.shadow_saturation == pytest.approx(59.0)
    assert p.x_offset == 0.0
    assert p.y_offset == 0.0


def test_derive_params_at_light_ratio_extremes():
    dark = derive_params(SketchInputs(light_ratio=0))
    assert dark.ego_brightness == pytest.approx(10.0)
    assert dark.ego_alpha == pytest.approx(0.1)
    assert dark.dark_alpha == pytest.approx(0.9)

    bright = derive_params(SketchInputs(light_ratio=255))
    assert bright.ego_brightness == pytest.approx(100.0)
    assert bright.ego_alpha == pytest.approx(1.0)
    assert bright.dark_alpha == pytest.approx(0.0)


def test_alphas_are_complementary_and_in_range():
    for light in range(0, 256, 15):
        p = derive_params(SketchInputs(light_ratio=light))
        assert p.ego_alpha + p.dark_alpha == pytest.approx(1.0)
        assert 0.0 <= p.dark_alpha <= 0.9 + 1e-9
        assert 0.1 - 1e-9 <= p.ego_alpha <= 1.0 + 1e-9


def test_light_ratio_is_monotonic():
    ps = [derive_params(SketchInputs(light_ratio=v)) for v in range(0, 256)]
    assert all(a.ego_brightness < b.ego_brightness for a, b in zip(ps, ps[1:]))
    assert all(a.dark_alpha > b.dark_alpha for a, b in zip(ps, ps[1:]))


def test_shadow_density_extremes():
    none = derive_params(SketchInputs(shadow_density=0))
    assert none.shadow_blur == 0.0
    assert none.shadow_saturation == pytest.approx(10.0)

    full = derive_params(SketchInputs(shadow_density=50))
    assert full.shadow_blur == pytest.approx(50.0)
    assert full.shadow_saturation == pytest.approx(80.0)


@pytest.mark.parametrize("torsion", [-10.0, -2.5, 0.0, 3.3, 10.0])
def test_torsion_offsets(torsion):
    p = derive_params(SketchInputs(torsion=torsion))
    assert p.x_offset == pytest.approx(torsion)
    assert p.y_offset == pytest.approx(-0.5 * torsion)
