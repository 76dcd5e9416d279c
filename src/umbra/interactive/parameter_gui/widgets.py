# どこで: `src/umbra/interactive/parameter_gui/widgets.py`。
# 何を: SliderSpec を pyimgui のスライダーウィジェットへ対応付けて描画する。
# なぜ: int/float ごとの UI 実装を閉じ込め、行描画（store_bridge）から分離するため。

from __future__ import annotations

from typing import Any

from umbra.core.inputs import SliderSpec, step_decimals

# ImGui の slider_int は min/max が int32 の “半分レンジ” 以内であることを要求する。
_IMGUI_INT_LIMIT = 1_073_741_823


def int_slider_range(spec: SliderSpec) -> tuple[int, int]:
    """int スライダーのレンジ (min, max) を返す。"""

    lo = max(-_IMGUI_INT_LIMIT - 1, min(_IMGUI_INT_LIMIT, int(spec.minimum)))
    hi = max(-_IMGUI_INT_LIMIT - 1, min(_IMGUI_INT_LIMIT, int(spec.maximum)))
    if lo > hi:
        lo, hi = hi, lo
    return lo, hi


def float_slider_format(spec: SliderSpec) -> str:
    """float スライダーの表示フォーマット（step の桁数に合わせる）を返す。"""

    return f"%.{max(1, step_decimals(spec.step))}f"


def widget_slider(imgui: Any, spec: SliderSpec, value: float) -> tuple[bool, float]:
    """spec に応じたスライダーを描画し、(changed, value) を返す。

    返す値はまだ格子へ丸めていない。丸めは SliderStore.set_from_ui が行う。
    """

    if spec.is_integer:
        lo, hi = int_slider_range(spec)
        return imgui.slider_int("##value", int(round(float(value))), lo, hi)

    return imgui.slider_float(
        "##value",
        float(value),
        float(spec.minimum),
        float(spec.maximum),
        format=float_slider_format(spec),
        flags=imgui.SLIDER_FLAGS_ALWAYS_CLAMP,
    )
