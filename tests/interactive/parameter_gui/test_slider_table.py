from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from umbra.core.inputs import INTEGRATION_TORSION, LIGHT_RATIO, SHADOW_DENSITY
from umbra.core.slider_store import SliderStore
from umbra.interactive.parameter_gui.monitor_bar import format_monitor_text
from umbra.interactive.parameter_gui.store_bridge import render_slider_table
from umbra.interactive.parameter_gui.widgets import (
    float_slider_format,
    int_slider_range,
    widget_slider,
)
from umbra.interactive.runtime.monitor import MonitorSnapshot


@dataclass
class _FakeImGui:
    """store_bridge/widgets が使う pyimgui API だけを持つ偽物。"""

    slider_results: dict[str, Any] = field(default_factory=dict)
    pressed_buttons: set[str] = field(default_factory=set)
    calls: list[tuple[Any, ...]] = field(default_factory=list)
    SLIDER_FLAGS_ALWAYS_CLAMP: int = 16

    _current_id: str = ""

    def get_content_region_available_width(self) -> float:
        return 400.0

    def columns(self, *args, **kwargs) -> None:
        self.calls.append(("columns", args))

    def set_column_width(self, *args) -> None:
        pass

    def next_column(self) -> None:
        pass

    def push_id(self, name: str) -> None:
        self._current_id = name

    def pop_id(self) -> None:
        self._current_id = ""

    def push_item_width(self, _w: float) -> None:
        pass

    def pop_item_width(self) -> None:
        pass

    def text(self, label: str) -> None:
        self.calls.append(("text", label))

    def slider_int(self, label: str, value: int, lo: int, hi: int):
        self.calls.append(("slider_int", self._current_id, value, lo, hi))
        if self._current_id in self.slider_results:
            return True, self.slider_results[self._current_id]
        return False, value

    def slider_float(self, label: str, value: float, lo: float, hi: float, *, format: str, flags: int):
        self.calls.append(("slider_float", self._current_id, value, lo, hi, format))
        if self._current_id in self.slider_results:
            return True, self.slider_results[self._current_id]
        return False, value

    def button(self, label: str) -> bool:
        return self._current_id in self.pressed_buttons


def test_widget_ranges_and_formats():
    assert int_slider_range(LIGHT_RATIO) == (0, 255)
    assert int_slider_range(SHADOW_DENSITY) == (0, 50)
    assert float_slider_format(INTEGRATION_TORSION) == "%.1f"


def test_widget_slider_dispatches_by_kind():
    imgui = _FakeImGui()
    widget_slider(imgui, LIGHT_RATIO, 150)
    widget_slider(imgui, INTEGRATION_TORSION, 0.0)
    kinds = [c[0] for c in imgui.calls]
    assert kinds == ["slider_int", "slider_float"]
    assert imgui.calls[1][-1] == "%.1f"


def test_render_slider_table_writes_clamped_values_to_store():
    store = SliderStore()
    imgui = _FakeImGui(slider_results={"light_ratio": 500, "torsion": 2.34})

    assert render_slider_table(imgui, store) is True
    assert store.get("light_ratio") == 255
    assert store.get("torsion") == 2.3
    assert store.get("shadow_density") == 35

    labels = [c[1] for c in imgui.calls if c[0] == "text"]
    assert labels == [LIGHT_RATIO.label, SHADOW_DENSITY.label, INTEGRATION_TORSION.label]


def test_render_slider_table_reset_button():
    store = SliderStore()
    store.set_from_ui("shadow_density", 3)
    imgui = _FakeImGui(pressed_buttons={"shadow_density"})

    assert render_slider_table(imgui, store) is True
    assert store.get("shadow_density") == 35


def test_render_slider_table_without_edits_reports_no_change():
    assert render_slider_table(_FakeImGui(), SliderStore()) is False


def test_format_monitor_text():
    text = format_monitor_text(MonitorSnapshot(fps=59.94, cpu_percent=12.0, rss_mb=1234.4, raster_ms=3.25))
    assert text == "FPS:  59.9 | CPU:  12.0% | MEM: 1,234MB | Raster:   3.2ms"
