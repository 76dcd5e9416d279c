# どこで: `src/umbra/interactive/parameter_gui/monitor_bar.py`。
# 何を: Parameter GUI 上部に表示する監視バー（テキスト 1 行）を描画する。
# なぜ: 実行中の負荷（FPS/CPU/Mem/ラスタ時間）を即座に把握できるようにするため。

from __future__ import annotations

from typing import Any


def format_monitor_text(snapshot: Any) -> str:
    """監視スナップショットを 1 行のテキストにして返す。"""

    return (
        f"FPS: {float(snapshot.fps):5.1f} | CPU: {float(snapshot.cpu_percent):5.1f}%"
        f" | MEM: {float(snapshot.rss_mb):,.0f}MB | Raster: {float(snapshot.raster_ms):5.1f}ms"
    )


def render_monitor_bar(imgui: Any, snapshot: Any) -> None:
    """監視バーを 1 行で描画する。"""

    imgui.text(format_monitor_text(snapshot))
    imgui.separator()
