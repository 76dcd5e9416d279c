# どこで: `src/umbra/core/surface.py`。
# 何を: 描画先 surface のプロトコル、影設定のスコープ管理、コマンド列の発行（issue_frame）を提供する。
# なぜ: 影設定は surface 上のミュータブルな状態なので、設定→描画→リセットを 1 箇所に閉じ込めて漏れを防ぐため。

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

from .color import Color
from .commands import Background, Ellipse, FrameCommands, Shadow, ShadowScope, Text


class DrawingSurface(Protocol):
    """描画コマンドを受け取る 2D surface。"""

    @property
    def shadow(self) -> Shadow: ...

    def background(self, color: Color) -> None: ...

    def set_shadow(self, shadow: Shadow) -> None: ...

    def reset_shadow(self) -> None: ...

    def ellipse(self, cx: float, cy: float, width: float, height: float, fill: Color) -> None: ...

    def text(self, content: str, x: float, y: float, size: float, fill: Color) -> None: ...


@contextmanager
def shadow_scope(surface: DrawingSurface, shadow: Shadow) -> Iterator[DrawingSurface]:
    """shadow を設定し、抜けるときに必ずリセットする。

    例外で抜けた場合もリセットしてから例外を伝播する。
    """

    surface.set_shadow(shadow)
    try:
        yield surface
    finally:
        surface.reset_shadow()


def issue_frame(commands: FrameCommands, surface: DrawingSurface) -> None:
    """コマンド列を順に surface へ発行する。"""

    for command in commands:
        if isinstance(command, Background):
            surface.background(command.color)
        elif isinstance(command, ShadowScope):
            with shadow_scope(surface, command.shadow):
                for shape in command.body:
                    _draw_ellipse(surface, shape)
        elif isinstance(command, Ellipse):
            _draw_ellipse(surface, command)
        elif isinstance(command, Text):
            surface.text(command.content, command.x, command.y, command.size, command.fill)
        else:
            raise TypeError(f"未知の描画コマンド: {command!r}")


def _draw_ellipse(surface: DrawingSurface, shape: Ellipse) -> None:
    surface.ellipse(shape.cx, shape.cy, shape.width, shape.height, shape.fill)


class RecordingSurface:
    """呼び出し列を記録するだけの surface。

    `calls` には `(method, *args)` のタプルが発行順に積まれる。
    ellipse/text は、その時点の shadow と一緒に記録する。
    """

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self._shadow = Shadow.none()

    @property
    def shadow(self) -> Shadow:
        return self._shadow

    def background(self, color: Color) -> None:
        self.calls.append(("background", color))

    def set_shadow(self, shadow: Shadow) -> None:
        self._shadow = shadow
        self.calls.append(("set_shadow", shadow))

    def reset_shadow(self) -> None:
        self._shadow = Shadow.none()
        self.calls.append(("reset_shadow",))

    def ellipse(self, cx: float, cy: float, width: float, height: float, fill: Color) -> None:
        self.calls.append(("ellipse", cx, cy, width, height, fill, self._shadow))

    def text(self, content: str, x: float, y: float, size: float, fill: Color) -> None:
        self.calls.append(("text", content, x, y, size, fill, self._shadow))


__all__ = ["DrawingSurface", "RecordingSurface", "issue_frame", "shadow_scope"]
