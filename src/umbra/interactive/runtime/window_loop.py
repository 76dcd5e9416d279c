# どこで: `src/umbra/interactive/runtime/window_loop.py`。
# 何を: 描画ウィンドウと Parameter GUI ウィンドウを 1 つの pyglet app loop で回すランナーを提供する。
# なぜ: フレーム駆動を pyglet の clock に一本化し、描画関数は「1 フレーム描くだけ」に保つため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import pyglet


@dataclass(frozen=True, slots=True)
class WindowTask:
    """1 つの pyglet window と、その back buffer へ描く関数の組。"""

    # 注: pyglet の Window 型はプラットフォームごとに実体が違うため Any で受ける。
    window: Any

    # `switch_to()` / `flip()` は呼ばない。pyglet の `Window.draw()` が担当する。
    draw_frame: Callable[[], None]


class MultiWindowLoop:
    """複数ウィンドウを同一の clock tick で描画する。"""

    def __init__(
        self,
        tasks: list[WindowTask],
        *,
        fps: float,
        on_frame_start: Callable[[], None] | None = None,
    ) -> None:
        """ループを初期化する。

        Parameters
        ----------
        tasks : list[WindowTask]
            毎 tick 描画するウィンドウと描画関数。
        fps : float
            目標フレームレート。`<=0` の場合は `pyglet.clock.schedule` で可能な限り回す。
        on_frame_start : Callable[[], None] | None
            各 tick の冒頭に呼ぶコールバック（FPS 計測など）。
        """

        if not tasks:
            raise ValueError("tasks は 1 つ以上必要")
        self._tasks = list(tasks)
        self._fps = float(fps)
        self._on_frame_start = on_frame_start

    @property
    def interval(self) -> float | None:
        """tick 間隔（秒）を返す。スロットリング無しなら None。"""

        if self._fps <= 0:
            return None
        return 1.0 / self._fps

    def run(self) -> None:
        """どれかのウィンドウが閉じられるまでループを実行する。"""

        tasks = list(self._tasks)

        def request_exit(*_: object) -> None:
            # on_close はバックエンドによって引数付きで呼ばれる。
            pyglet.app.exit()

        for task in tasks:
            task.window.push_handlers(on_close=request_exit)
            task.window.push_handlers(on_draw=task.draw_frame)

        def tick(dt: float) -> None:
            on_frame_start = self._on_frame_start
            if on_frame_start is not None:
                on_frame_start()

            for task in tasks:
                # 閉じ済みウィンドウへの draw は例外になるため飛ばす。
                if task.window not in pyglet.app.windows:
                    continue
                task.window.draw(dt)

        interval = self.interval
        if interval is None:
            pyglet.clock.schedule(tick)
        else:
            pyglet.clock.schedule_interval(tick, interval)

        try:
            pyglet.app.run(interval=None)
        finally:
            pyglet.clock.unschedule(tick)
