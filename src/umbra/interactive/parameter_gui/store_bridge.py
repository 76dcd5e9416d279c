# どこで: `src/umbra/interactive/parameter_gui/store_bridge.py`。
# 何を: SliderStore の各スライダーを 1 行ずつ描画し、編集結果を store に反映する。
# なぜ: GUI ライフサイクル（gui.py）から「store と UI の橋渡し」を分離するため。

from __future__ import annotations

from typing import Any

from umbra.core.slider_store import SliderStore

from .widgets import widget_slider

COLUMN_WEIGHTS_DEFAULT = (0.45, 0.45, 0.10)


def render_slider_table(
    imgui: Any,
    store: SliderStore,
    *,
    column_weights: tuple[float, float, float] = COLUMN_WEIGHTS_DEFAULT,
) -> bool:
    """スライダー表を描画し、どれかの値が変わった場合 True を返す。"""

    changed_any = False
    width = float(imgui.get_content_region_available_width())
    label_w, slider_w, _reset_w = (float(w) * width for w in column_weights)

    imgui.columns(3, "##sliders", border=False)
    imgui.set_column_width(0, label_w)
    imgui.set_column_width(1, slider_w)

    for spec in store.specs():
        imgui.push_id(spec.name)
        try:
            imgui.text(spec.label)
            imgui.next_column()

            imgui.push_item_width(-1)
            changed, value = widget_slider(imgui, spec, store.get(spec.name))
            imgui.pop_item_width()
            if changed:
                changed_any = store.set_from_ui(spec.name, value) or changed_any
            imgui.next_column()

            if imgui.button("reset"):
                changed_any = store.set_from_ui(spec.name, spec.default) or changed_any
            imgui.next_column()
        finally:
            imgui.pop_id()

    imgui.columns(1)
    return changed_any
