# どこで: `src/umbra/interactive/gl/shader.py`。
# 何を: ラスタ済みフレームを全画面クアッドとして表示する ModernGL シェーダを提供する。
# なぜ: GLSL ソースとプログラム生成を renderer から分離し、見通しを良くするため。

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
in vec2 in_pos;
in vec2 in_uv;
out vec2 v_uv;
void main() {
    v_uv = in_uv;
    gl_Position = vec4(in_pos, 0.0, 1.0);
}
"""

# テクスチャは「上が行 0」で転送するため、v を反転してサンプリングする。
FRAGMENT_SHADER = """
#version 330
uniform sampler2D frame;
in vec2 v_uv;
out vec4 f_color;
void main() {
    f_color = texture(frame, vec2(v_uv.x, 1.0 - v_uv.y));
}
"""


class Shader:
    """全画面クアッド表示用シェーダのファクトリ。"""

    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """ModernGL のシェーダープログラムを生成して返す。"""
        return ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)
