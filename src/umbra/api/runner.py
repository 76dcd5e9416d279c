"""
どこで: `src/umbra/api/runner.py`。公開 API のランナー実装。
何を: pyglet + ModernGL の描画ウィンドウと pyimgui のスライダーウィンドウを組み立て、フレームループを回す。
なぜ: `main.py` を実行してスライダーで操作できるスケッチを表示する経路を用意するため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pyglet

from umbra.core.runtime_config import runtime_config, set_config_path
from umbra.core.slider_store import SliderStore
from umbra.interactive.render_settings import RenderSettings
from umbra.interactive.runtime.draw_window_system import DrawWindowSystem
from umbra.interactive.runtime.window_loop import MultiWindowLoop, WindowTask

_logger = logging.getLogger(__name__)


def run(
    *,
    config_path: str | Path | None = None,
    canvas_size: int | None = None,
    render_scale: float = 1.0,
    parameter_gui: bool = True,
    fps: float | None = None,
    store: SliderStore | None = None,
) -> None:
    """pyglet ウィンドウを生成し、スライダー値に応じたフレームをリアルタイム描画する。

    Parameters
    ----------
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。指定した場合は探索より優先する。
    canvas_size : int | None
        正方形キャンバスの一辺（px）。None の場合は config の `canvas.size`。
    render_scale : float
        キャンバス寸法に掛けるピクセル倍率。
    parameter_gui : bool
        True の場合、別ウィンドウでスライダー GUI を起動する。
    fps : float | None
        目標フレームレート。None の場合は config の `runtime.fps`。`<=0` はスロットリング無し。
    store : SliderStore | None
        スライダー値の入れ物。None の場合は既定値で新規作成する（値は保存しない）。

    Returns
    -------
    None
        どちらかのウィンドウを閉じると制御を返す。
    """

    set_config_path(config_path)
    cfg = runtime_config()

    # True にすると GUI のクリックやドラッグが抜けることがある。
    pyglet.options["vsync"] = False

    settings = RenderSettings(
        canvas_size=int(cfg.canvas_size if canvas_size is None else canvas_size),
        render_scale=float(render_scale),
    )
    target_fps = float(cfg.fps if fps is None else fps)

    # スライダー値は GUI が書き、描画がフレーム冒頭に読む。
    slider_store = store if store is not None else SliderStore()

    monitor = None
    if parameter_gui:
        from umbra.interactive.runtime.monitor import RuntimeMonitor

        monitor = RuntimeMonitor()

    # --- サブシステムの組み立て ---
    draw_window = DrawWindowSystem(store=slider_store, settings=settings, monitor=monitor)
    draw_window.window.set_location(*cfg.window_pos_draw)

    # `closers` は teardown 用（close 順もここで管理する）。
    closers: list[Callable[[], None]] = [draw_window.close]
    tasks = [WindowTask(window=draw_window.window, draw_frame=draw_window.draw_frame)]

    try:
        if parameter_gui:
            # GUI は依存が重い（pyimgui）ので、使うときだけ遅延 import する。
            from umbra.interactive.runtime.parameter_gui_system import ParameterGUIWindowSystem

            gui = ParameterGUIWindowSystem(store=slider_store, monitor=monitor)
            gui.window.set_location(*cfg.window_pos_parameter_gui)
            closers.append(gui.close)
            tasks.append(WindowTask(window=gui.window, draw_frame=gui.draw_frame))

        _logger.info(
            "Starting umbra: canvas=%d fps=%s gui=%s",
            settings.canvas_size,
            target_fps,
            parameter_gui,
        )
        loop = MultiWindowLoop(
            tasks,
            fps=target_fps,
            on_frame_start=None if monitor is None else monitor.tick_frame,
        )
        loop.run()
    finally:
        # 作成順の逆で閉じる。1 つの close が失敗しても残りは閉じる。
        for close in reversed(closers):
            try:
                close()
            except Exception:
                _logger.exception("Failed to close subsystem: %r", close)
