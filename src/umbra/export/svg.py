"""
どこで: `src/umbra/export/svg.py`。
何を: 描画コマンド列を SVG として書き出す surface（SvgSurface）と保存関数を提供する。
なぜ: interactive 依存なしの headless export を用意し、PNG 化（resvg）の正（ソース）にするため。
"""

from __future__ import annotations

from html import escape
from pathlib import Path

from umbra.core.color import Color
from umbra.core.commands import DEFAULT_CANVAS_SIZE, FrameCommands, Shadow
from umbra.core.surface import issue_frame

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3
_FONT_FAMILY = "sans-serif"


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


class SvgSurface:
    """DrawingSurface を SVG 要素の列として記録する surface。

    影は Canvas 2D と同様に「設定中に描いた図形」にだけ掛かる。
    図形ごとに `feDropShadow` の filter を <defs> へ追加し、その図形の filter 属性で参照する。
    """

    def __init__(self, canvas_size: int = DEFAULT_CANVAS_SIZE) -> None:
        size = int(canvas_size)
        if size <= 0:
            raise ValueError("canvas_size は正の値である必要がある")
        self._size = size
        self._shadow = Shadow.none()
        self._defs: list[str] = []
        self._body: list[str] = []

    @property
    def shadow(self) -> Shadow:
        return self._shadow

    def background(self, color: Color) -> None:
        # 背景は以前の描画を全て覆うので、本体を捨ててから塗る。
        self._body.clear()
        self._body.append(
            f'  <rect x="0" y="0" width="{self._size}" height="{self._size}" '
            f'fill="{color.hex()}"{_opacity_attr("fill-opacity", color)} />'
        )

    def set_shadow(self, shadow: Shadow) -> None:
        self._shadow = shadow

    def reset_shadow(self) -> None:
        self._shadow = Shadow.none()

    def _filter_attr(self) -> str:
        shadow = self._shadow
        if shadow.is_none or shadow.color.a <= 0.0:
            return ""
        filter_id = f"shadow-{len(self._defs)}"
        # Canvas 2D の shadowBlur は標準偏差の 2 倍に相当する。
        std = float(shadow.blur) / 2.0
        self._defs.append(
            (
                f'    <filter id="{filter_id}" filterUnits="userSpaceOnUse" '
                f'x="0" y="0" width="{self._size}" height="{self._size}">\n'
                f'      <feDropShadow dx="{_fmt(shadow.offset_x)}" dy="{_fmt(shadow.offset_y)}" '
                f'stdDeviation="{_fmt(std)}" flood-color="{shadow.color.hex()}" '
                f'flood-opacity="{_fmt(shadow.color.a)}" />\n'
                f"    </filter>"
            )
        )
        return f' filter="url(#{filter_id})"'

    def ellipse(self, cx: float, cy: float, width: float, height: float, fill: Color) -> None:
        self._body.append(
            f'  <ellipse cx="{_fmt(cx)}" cy="{_fmt(cy)}" '
            f'rx="{_fmt(float(width) / 2.0)}" ry="{_fmt(float(height) / 2.0)}" '
            f'fill="{fill.hex()}"{_opacity_attr("fill-opacity", fill)}{self._filter_attr()} />'
        )

    def text(self, content: str, x: float, y: float, size: float, fill: Color) -> None:
        self._body.append(
            f'  <text x="{_fmt(x)}" y="{_fmt(y)}" font-family="{_FONT_FAMILY}" '
            f'font-size="{_fmt(size)}" fill="{fill.hex()}"'
            f'{_opacity_attr("fill-opacity", fill)}{self._filter_attr()}>'
            f"{escape(str(content))}</text>"
        )

    def to_svg(self) -> str:
        """記録した要素から SVG 文書を組み立てて返す。"""

        lines: list[str] = []
        lines.append('<?xml version="1.0" encoding="UTF-8"?>')
        lines.append(
            (
                f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {self._size} {self._size}" '
                f'width="{self._size}" height="{self._size}">'
            )
        )
        if self._defs:
            lines.append("  <defs>")
            lines.extend(self._defs)
            lines.append("  </defs>")
        lines.extend(self._body)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"


def _opacity_attr(name: str, color: Color) -> str:
    if float(color.a) >= 1.0:
        return ""
    return f' {name}="{_fmt(color.a)}"'


def render_svg(commands: FrameCommands, *, canvas_size: int = DEFAULT_CANVAS_SIZE) -> str:
    """コマンド列を SVG 文字列にして返す。"""

    surface = SvgSurface(canvas_size)
    issue_frame(commands, surface)
    return surface.to_svg()


def export_svg(
    commands: FrameCommands,
    path: str | Path,
    *,
    canvas_size: int = DEFAULT_CANVAS_SIZE,
) -> Path:
    """コマンド列を SVG として保存する。

    Parameters
    ----------
    commands : FrameCommands
        `compute_frame()` が返したコマンド列。
    path : str or Path
        出力先パス。親ディレクトリは作成する。
    canvas_size : int
        正方形キャンバスの一辺（px）。

    Returns
    -------
    Path
        保存先パス。
    """
    _path = Path(path)
    text = render_svg(commands, canvas_size=canvas_size)

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)

    return _path
