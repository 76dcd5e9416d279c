# どこで: `src/umbra/interactive/runtime/draw_window_system.py`。
# 何を: SliderStore の現在値から 1 フレームを計算し、描画ウィンドウへ表示するサブシステムを提供する。
# なぜ: `src/umbra/api/runner.py` の `run()` を「配線」に寄せ、描画責務を独立させるため。

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from pyglet.window import key

from umbra.core.commands import FrameCommands, compute_frame
from umbra.core.inputs import SketchInputs
from umbra.core.slider_store import SliderStore
from umbra.core.surface import issue_frame
from umbra.export.image import default_output_path, png_output_size, rasterize_svg_to_png
from umbra.export.svg import export_svg
from umbra.interactive.draw_window import create_draw_window
from umbra.interactive.gl.presenter import FramePresenter
from umbra.interactive.raster import RasterSurface, TextItem
from umbra.interactive.render_settings import RenderSettings

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from umbra.interactive.runtime.monitor import RuntimeMonitor


def rasterize_frame(
    commands: FrameCommands,
    settings: RenderSettings,
) -> tuple[np.ndarray, tuple[TextItem, ...]]:
    """コマンド列を RasterSurface へ発行し、(RGBA8, テキスト列) を返す。"""

    surface = RasterSurface(settings.canvas_size, scale=settings.render_scale)
    issue_frame(commands, surface)
    if not surface.shadow.is_none:
        raise RuntimeError("フレーム終了時に影設定が残っている")
    return surface.to_rgba8(), tuple(surface.texts)


class DrawWindowSystem:
    """描画（メインウィンドウ）のサブシステム。"""

    def __init__(
        self,
        *,
        store: SliderStore,
        settings: RenderSettings,
        monitor: RuntimeMonitor | None = None,
    ) -> None:
        """描画用の window/presenter を初期化する。"""

        self._store = store
        self._settings = settings
        self._monitor = monitor

        self.window = create_draw_window(settings)
        self._presenter = FramePresenter(self.window, settings)

        # 入力が変わらない限りラスタライズをやり直さない（フレームは入力だけで決まる）。
        self._last_inputs: SketchInputs | None = None
        self._last_commands: FrameCommands = ()
        self._last_texts: tuple[TextItem, ...] = ()
        self._pending_png_save = False
        self._closed = False
        self.window.push_handlers(on_key_press=self._on_key_press)

    def _on_key_press(self, symbol: int, _modifiers: int) -> None:
        if symbol == key.S:
            try:
                path = self.save_svg()
            except OSError as e:
                _logger.exception("Failed to save SVG")
                print(f"Failed to save SVG: {e}")
                return
            print(f"Saved SVG: {path}")
            return
        if symbol == key.P:
            self._pending_png_save = True
            return
        if symbol == key.R:
            if self._store.reset():
                _logger.info("Sliders reset to defaults")

    def save_svg(self) -> Path:
        """最後に描画したフレームを SVG として保存し、保存先パスを返す。"""

        inputs = self._last_inputs if self._last_inputs is not None else self._store.snapshot()
        commands = self._last_commands or compute_frame(
            inputs, canvas_size=self._settings.canvas_size
        )
        return export_svg(
            commands,
            default_output_path(inputs, ext="svg"),
            canvas_size=self._settings.canvas_size,
        )

    def save_png(self) -> Path:
        """最後に描画したフレームを PNG として保存し、保存先パスを返す。"""

        inputs = self._last_inputs if self._last_inputs is not None else self._store.snapshot()
        svg_path = self.save_svg()
        return rasterize_svg_to_png(
            svg_path,
            default_output_path(inputs, ext="png"),
            output_size=png_output_size(self._settings.canvas_size),
        )

    def _framebuffer_size(self) -> tuple[int, int]:
        getter = getattr(self.window, "get_framebuffer_size", None)
        if callable(getter):
            w, h = getter()
            return int(w), int(h)
        return int(self.window.width), int(self.window.height)

    def draw_frame(self) -> None:
        """1 フレーム分の描画を行う（`flip()` は呼ばない）。"""

        presenter = self._presenter

        # --- 1) 入力の読み取り（GUI が書いた値をこのフレーム分だけ固定する）---
        inputs = self._store.snapshot()

        # --- 2) コマンド生成 + ラスタライズ（入力が変わった時だけ）---
        if inputs != self._last_inputs:
            t0 = time.perf_counter()
            commands = compute_frame(inputs, canvas_size=self._settings.canvas_size)
            rgba8, texts = rasterize_frame(commands, self._settings)
            presenter.upload(rgba8)
            self._last_inputs = inputs
            self._last_commands = commands
            self._last_texts = texts
            monitor = self._monitor
            if monitor is not None:
                monitor.set_raster_time(time.perf_counter() - t0)

        # --- 3) 表示 ---
        #
        # 注: 呼び出し側（pyglet.window.Window.draw）が self.window.switch_to() 済みである前提。
        presenter.ctx.screen.use()
        fb_w, fb_h = self._framebuffer_size()
        presenter.viewport(fb_w, fb_h)
        presenter.clear((0.0, 0.0, 0.0))
        presenter.draw_frame_texture()
        presenter.draw_texts(self._last_texts)

        if self._pending_png_save:
            self._pending_png_save = False
            try:
                png_path = self.save_png()
                print(f"Saved PNG: {png_path}")
            except (OSError, RuntimeError) as e:
                _logger.exception("Failed to save PNG")
                print(f"Failed to save PNG: {e}")

    def close(self) -> None:
        """GPU / window 資源を解放する（二重 close は無視する）。"""

        if self._closed:
            return
        self._closed = True
        self._presenter.release()
        self.window.close()
