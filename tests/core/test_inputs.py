import math

import pytest

from umbra.core.inputs import (
    INTEGRATION_TORSION,
    LIGHT_RATIO,
    SHADOW_DENSITY,
    SLIDER_SPECS,
    SketchInputs,
    SliderSpec,
    step_decimals,
)


def test_slider_definitions_match_ranges_and_defaults():
    assert (LIGHT_RATIO.minimum, LIGHT_RATIO.maximum, LIGHT_RATIO.step, LIGHT_RATIO.default) == (
        0,
        255,
        1,
        150,
    )
    assert (
        SHADOW_DENSITY.minimum,
        SHADOW_DENSITY.maximum,
        SHADOW_DENSITY.step,
        SHADOW_DENSITY.default,
    ) == (0, 50, 1, 35)
    assert INTEGRATION_TORSION.minimum == -10.0
    assert INTEGRATION_TORSION.maximum == 10.0
    assert INTEGRATION_TORSION.step == pytest.approx(0.1)
    assert INTEGRATION_TORSION.default == 0.0
    assert [s.name for s in SLIDER_SPECS] == ["light_ratio", "shadow_density", "torsion"]


def test_integer_flags():
    assert LIGHT_RATIO.is_integer
    assert SHADOW_DENSITY.is_integer
    assert not INTEGRATION_TORSION.is_integer


@pytest.mark.parametrize(("step", "expected"), [(1, 0), (0.1, 1), (0.25, 2), (5.0, 0)])
def test_step_decimals(step, expected):
    assert step_decimals(step) == expected


def test_clamp_integer_slider_rounds_and_clamps():
    assert LIGHT_RATIO.clamp(149.6) == 150
    assert isinstance(LIGHT_RATIO.clamp(149.6), int)
    assert LIGHT_RATIO.clamp(300) == 255
    assert LIGHT_RATIO.clamp(-5) == 0


def test_clamp_float_slider_snaps_to_grid():
    assert INTEGRATION_TORSION.clamp(0.33) == pytest.approx(0.3)
    assert INTEGRATION_TORSION.clamp(-3.14159) == pytest.approx(-3.1)
    assert INTEGRATION_TORSION.clamp(99) == pytest.approx(10.0)
    assert INTEGRATION_TORSION.clamp(-99) == pytest.approx(-10.0)


def test_clamp_nan_falls_back_to_default():
    assert SHADOW_DENSITY.clamp(math.nan) == 35


def test_clamp_never_exceeds_maximum_off_grid():
    spec = SliderSpec(name="x", label="x", minimum=0, maximum=1.0, step=0.3, default=0)
    assert spec.clamp(1.0) == pytest.approx(0.9)


def test_slider_spec_rejects_invalid_definitions():
    with pytest.raises(ValueError):
        SliderSpec(name="x", label="x", minimum=0, maximum=1, step=0, default=0)
    with pytest.raises(ValueError):
        SliderSpec(name="x", label="x", minimum=2, maximum=1, step=1, default=2)


def test_sketch_inputs_defaults():
    inputs = SketchInputs.defaults()
    assert inputs == SketchInputs()
    assert (inputs.light_ratio, inputs.shadow_density, inputs.torsion) == (150, 35, 0.0)


def test_sketch_inputs_clamped():
    inputs = SketchInputs.clamped(light_ratio=999, shadow_density=-1, torsion=4.44)
    assert inputs.light_ratio == 255
    assert inputs.shadow_density == 0
    assert inputs.torsion == pytest.approx(4.4)
