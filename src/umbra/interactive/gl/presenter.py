# どこで: `src/umbra/interactive/gl/presenter.py`。
# 何を: RasterSurface の RGBA バッファを ModernGL テクスチャとして描画し、テキストを pyglet Label で重ねる。
# なぜ: コンテキスト生成・テクスチャ転送・オーバーレイ描画を DrawWindowSystem から分離し、責務を明確にするため。

from __future__ import annotations

from collections.abc import Sequence

import moderngl
import numpy as np
import pyglet
from pyglet.window import Window

from umbra.interactive.gl.shader import Shader
from umbra.interactive.raster import TextItem
from umbra.interactive.render_settings import RenderSettings

# pyglet の font_size は pt 指定なので、px（Canvas の textSize）から換算する。
_PX_TO_PT = 0.75
_FONT_NAME = "Arial"

# 全画面クアッド（x, y, u, v）を TRIANGLE_STRIP で描く。
_QUAD = np.array(
    [
        [-1.0, -1.0, 0.0, 0.0],
        [1.0, -1.0, 1.0, 0.0],
        [-1.0, 1.0, 0.0, 1.0],
        [1.0, 1.0, 1.0, 1.0],
    ],
    dtype="f4",
)


class FramePresenter:
    """ラスタ済みフレームを表示するシンプルなレンダラー。"""

    def __init__(self, window: Window, settings: RenderSettings) -> None:
        window.switch_to()
        self._window = window
        self._settings = settings
        self.ctx = moderngl.create_context(require=330)
        self.program = Shader.create_shader(self.ctx)
        self._vbo = self.ctx.buffer(_QUAD.tobytes())
        self._vao = self.ctx.simple_vertex_array(self.program, self._vbo, "in_pos", "in_uv")
        self._texture: moderngl.Texture | None = None
        self._labels: list[pyglet.text.Label] = []
        self._label_items: tuple[TextItem, ...] = ()

    def viewport(self, width: int, height: int) -> None:
        """ビューポートをウィンドウサイズに合わせて更新する。"""
        self.ctx.viewport = (0, 0, int(width), int(height))

    def clear(self, color: tuple[float, float, float]) -> None:
        """背景色でクリアする。"""
        self.ctx.clear(*color, 1.0)

    def upload(self, rgba8: np.ndarray) -> None:
        """RGBA（uint8, shape (H, W, 4)）をテクスチャへ転送する。"""
        h, w = int(rgba8.shape[0]), int(rgba8.shape[1])
        tex = self._texture
        if tex is None or tex.size != (w, h):
            if tex is not None:
                tex.release()
            tex = self.ctx.texture((w, h), 4)
            tex.filter = (moderngl.LINEAR, moderngl.LINEAR)
            self._texture = tex
        tex.write(np.ascontiguousarray(rgba8, dtype=np.uint8).tobytes())

    def draw_frame_texture(self) -> None:
        """転送済みテクスチャを全画面に描く。"""
        tex = self._texture
        if tex is None:
            return
        tex.use(location=0)
        self.program["frame"].value = 0
        self._vao.render(mode=moderngl.TRIANGLE_STRIP)

    def draw_texts(self, texts: Sequence[TextItem]) -> None:
        """テキストを pyglet Label で重ねる（Label はテキストが変わった時だけ作り直す）。"""
        items = tuple(texts)
        if items != self._label_items:
            self._labels = [self._make_label(item) for item in items]
            self._label_items = items
        for label in self._labels:
            label.draw()

    def _make_label(self, item: TextItem) -> pyglet.text.Label:
        scale = float(self._settings.render_scale)
        r, g, b = item.fill.rgb255()
        a = int(round(float(item.fill.a) * 255.0))
        # Canvas は左上原点・y 下向き、pyglet は左下原点・y 上向き。
        height = float(self._window.height)
        return pyglet.text.Label(
            item.content,
            font_name=_FONT_NAME,
            font_size=float(item.size) * scale * _PX_TO_PT,
            x=float(item.x) * scale,
            y=height - float(item.y) * scale,
            anchor_x="left",
            anchor_y="baseline",
            color=(r, g, b, a),
        )

    def release(self) -> None:
        """GPU リソースを解放する。"""
        self._labels.clear()
        if self._texture is not None:
            self._texture.release()
            self._texture = None
        self._vao.release()
        self._vbo.release()
        self.program.release()
        self.ctx.release()
