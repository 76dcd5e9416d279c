import pytest

from umbra.core.inputs import SketchInputs
from umbra.core.slider_store import SliderStore


def test_store_starts_at_defaults():
    store = SliderStore()
    assert store.snapshot() == SketchInputs.defaults()
    assert [s.name for s in store.specs()] == ["light_ratio", "shadow_density", "torsion"]


def test_set_from_ui_clamps_and_reports_change():
    store = SliderStore()
    assert store.set_from_ui("light_ratio", 400) is True
    assert store.get("light_ratio") == 255
    assert store.set_from_ui("light_ratio", 255.2) is False

    assert store.set_from_ui("torsion", 1.26) is True
    assert store.get("torsion") == pytest.approx(1.3)


def test_snapshot_is_a_frozen_copy():
    store = SliderStore()
    before = store.snapshot()
    store.set_from_ui("shadow_density", 10)
    assert before.shadow_density == 35
    assert store.snapshot().shadow_density == 10


def test_reset_restores_defaults():
    store = SliderStore()
    assert store.reset() is False
    store.set_from_ui("torsion", -4.0)
    assert store.reset() is True
    assert store.snapshot() == SketchInputs.defaults()


def test_unknown_slider_raises_key_error():
    store = SliderStore()
    with pytest.raises(KeyError):
        store.get("missing")
    with pytest.raises(KeyError):
        store.set_from_ui("missing", 1.0)
