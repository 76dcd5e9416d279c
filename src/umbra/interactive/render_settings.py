# どこで: `src/umbra/interactive/render_settings.py`。
# 何を: interactive 描画設定の束を表すデータクラスを定義する。
# なぜ: `run` の引数を簡潔に保ちつつ、interactive 側の設定を一元管理するため。

from __future__ import annotations

from dataclasses import dataclass

from umbra.core.commands import DEFAULT_CANVAS_SIZE


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """リアルタイム描画に用いる設定値の集合。"""

    canvas_size: int = DEFAULT_CANVAS_SIZE
    render_scale: float = 1.0
    caption: str = "Umbra"

    @property
    def window_size(self) -> tuple[int, int]:
        """描画ウィンドウの (width, height) を返す。"""

        side = int(round(int(self.canvas_size) * float(self.render_scale)))
        return side, side
