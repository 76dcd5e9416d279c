# どこで: `src/umbra/interactive/parameter_gui/gui.py`。
# 何を: SliderStore を pyimgui で編集するための最小 GUI（初期化/1フレーム描画/破棄）を提供する。
# なぜ: 依存の重いライフサイクル管理を 1 箇所に閉じ込め、他モジュールを純粋に保つため。

from __future__ import annotations

import time
from typing import Any

from umbra.core.slider_store import SliderStore

from .monitor_bar import render_monitor_bar
from .pyglet_backend import _create_imgui_pyglet_renderer, _sync_imgui_io_for_window
from .store_bridge import render_slider_table


class ParameterGUI:
    """pyimgui で SliderStore を編集するための最小 GUI。

    `draw_frame()` を呼ぶことで 1 フレーム分の UI を描画する。
    """

    def __init__(
        self,
        gui_window: Any,
        *,
        store: SliderStore,
        monitor: Any | None = None,
        title: str = "Sliders",
    ) -> None:
        """GUI の初期化（ImGui コンテキスト / renderer 作成）。"""

        import imgui  # type: ignore[import-untyped]

        # imgui の pyglet backend は環境によって import 経路が揺れるため、ここで明示的に解決する。
        try:
            from imgui.integrations import (
                pyglet as imgui_pyglet,  # type: ignore[import-untyped]
            )
        except ImportError as exc:
            raise RuntimeError(f"imgui.integrations.pyglet を import できない: {exc}") from exc

        self._window = gui_window
        self._store = store
        self._monitor = monitor
        self._title = str(title)

        # ImGui は「グローバルな current context」を前提にするため、自前コンテキストを作って切り替えながら使う。
        self._imgui = imgui
        self._context = imgui.create_context()
        imgui.set_current_context(self._context)
        imgui.style_colors_dark()

        self._renderer = _create_imgui_pyglet_renderer(imgui_pyglet, gui_window)

        self._prev_time = time.monotonic()
        self._closed = False

    def draw_frame(self) -> bool:
        """1 フレーム分の GUI を描画し、変更があれば store に反映する。

        `flip()` は呼ばない。呼び出し側が担当する。
        """

        if self._closed:
            return False

        now = time.monotonic()
        dt = now - self._prev_time
        self._prev_time = now

        imgui = self._imgui
        imgui.set_current_context(self._context)

        # 注: imgui.integrations.pyglet の process_inputs() は内部で pyglet.clock.tick() を呼ぶ。
        # `pyglet.app.run()` 駆動時にこれを呼ぶと clock が二重に進むので、ここでは呼ばない。

        imgui.new_frame()
        _sync_imgui_io_for_window(imgui, self._window, dt=dt)

        imgui.set_next_window_position(0, 0)
        imgui.set_next_window_size(self._window.width, self._window.height)
        imgui.begin(
            self._title,
            flags=imgui.WINDOW_NO_RESIZE
            | imgui.WINDOW_NO_COLLAPSE
            | imgui.WINDOW_NO_TITLE_BAR,
        )
        try:
            monitor = self._monitor
            if monitor is not None:
                render_monitor_bar(imgui, monitor.snapshot())
            changed = render_slider_table(imgui, self._store)
            imgui.spacing()
            if imgui.button("Reset all (R)"):
                changed = self._store.reset() or changed
            imgui.text("S: save SVG   P: save PNG   (draw window)")
        finally:
            imgui.end()

        imgui.render()

        import pyglet

        pyglet.gl.glClearColor(0.12, 0.12, 0.12, 1.0)
        self._window.clear()
        self._renderer.render(imgui.get_draw_data())
        return changed

    def close(self) -> None:
        """GUI を終了し、コンテキストとウィンドウを破棄する。"""

        # 二重 close を許容する（呼び出し側の finally から安全に呼べるようにする）。
        if self._closed:
            return
        self._closed = True

        shutdown = getattr(self._renderer, "shutdown", None)
        if callable(shutdown):
            shutdown()
        self._imgui.destroy_context(self._context)
        self._window.close()
