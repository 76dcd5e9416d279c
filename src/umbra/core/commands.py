# どこで: `src/umbra/core/commands.py`。
# 何を: 1 フレーム分の描画コマンド列（背景/影スコープ/楕円/テキスト）と、その純粋な生成関数 compute_frame を提供する。
# なぜ: 「何を描くか」の決定を surface への副作用発行から分離し、同一入力で同一コマンド列になることをテストできるようにするため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .color import Color
from .derive import derive_params
from .inputs import LIGHT_RATIO, SketchInputs

DEFAULT_CANVAS_SIZE = 600

BACKGROUND_HSB = (10.0, 0.0, 5.0)
SHADOW_HUE = 0.0
SHADOW_BRIGHTNESS = 10.0
SHADOW_ALPHA = 0.8
# 影の基本オフセット（px）。torsion 由来のずれはこれに加算する。
SHADOW_BASE_OFFSET = 5.0

DARK_SELF_HSB = (0.0, 0.0, 20.0)
DARK_SELF_EXTENT = 0.4
LIGHT_SELF_HUE = 40.0
LIGHT_SELF_SATURATION = 70.0
LIGHT_SELF_EXTENT = 0.35
# torsion 由来のずれを楕円の中心座標へ掛ける倍率。
POSITION_GAIN = 10.0

TEXT_SIZE = 14.0
TEXT_GRAY = 200.0
TEXT_X = 10.0
TEXT_Y0 = 40.0
TEXT_LINE_HEIGHT = 20.0


@dataclass(frozen=True, slots=True)
class Shadow:
    """surface の影設定（ぼかし半径 / 色 / オフセット）。"""

    blur: float
    color: Color
    offset_x: float
    offset_y: float

    @classmethod
    def none(cls) -> Shadow:
        """リセット状態（影なし）の Shadow を返す。"""

        return cls(blur=0.0, color=Color.transparent(), offset_x=0.0, offset_y=0.0)

    @property
    def is_none(self) -> bool:
        """何も描かない影なら True。"""

        return self == Shadow.none()


@dataclass(frozen=True, slots=True)
class Background:
    color: Color


@dataclass(frozen=True, slots=True)
class Ellipse:
    """中心 (cx, cy)、幅 width / 高さ height の塗り楕円。"""

    name: str
    cx: float
    cy: float
    width: float
    height: float
    fill: Color


@dataclass(frozen=True, slots=True)
class Text:
    """ベースライン左端 (x, y) に置くテキスト 1 行。"""

    content: str
    x: float
    y: float
    size: float
    fill: Color


@dataclass(frozen=True, slots=True)
class ShadowScope:
    """shadow を設定したうえで body を描き、必ずリセットして抜けるスコープ。"""

    shadow: Shadow
    body: tuple[Ellipse, ...]


DrawCommand = Union[Background, ShadowScope, Ellipse, Text]
FrameCommands = tuple[DrawCommand, ...]


def readout_lines(inputs: SketchInputs, *, shadow_blur: float) -> tuple[str, str, str]:
    """現在値の表示用テキスト 3 行を返す。"""

    light = LIGHT_RATIO.clamp(inputs.light_ratio)
    return (
        f"{LIGHT_RATIO.label}: {light}",
        f"Shadow Density (Blur): {float(shadow_blur):.2f}",
        f"Torsion (Offset): {float(inputs.torsion):.1f}",
    )


def compute_frame(
    inputs: SketchInputs,
    *,
    canvas_size: int = DEFAULT_CANVAS_SIZE,
) -> FrameCommands:
    """入力値から 1 フレーム分の描画コマンド列を生成して返す（純粋関数）。

    Parameters
    ----------
    inputs : SketchInputs
        このフレームで読むスライダー値。
    canvas_size : int
        正方形キャンバスの一辺（px）。楕円の大きさと中心はこれを基準にする。

    Returns
    -------
    FrameCommands
        背景 → 影スコープ（Dark Self）→ Light Self → テキスト 3 行 の順のコマンド列。
    """

    size = int(canvas_size)
    if size <= 0:
        raise ValueError(f"canvas_size は正の値である必要がある: got={canvas_size!r}")

    p = derive_params(inputs)
    center = size / 2.0

    shadow = Shadow(
        blur=p.shadow_blur,
        color=Color.from_hsb(SHADOW_HUE, p.shadow_saturation, SHADOW_BRIGHTNESS, SHADOW_ALPHA),
        offset_x=SHADOW_BASE_OFFSET + p.x_offset,
        offset_y=SHADOW_BASE_OFFSET + p.y_offset,
    )

    dark_extent = size * DARK_SELF_EXTENT
    dark_self = Ellipse(
        name="dark_self",
        cx=center - POSITION_GAIN * p.x_offset,
        cy=center + POSITION_GAIN * p.y_offset,
        width=dark_extent,
        height=dark_extent,
        fill=Color.from_hsb(*DARK_SELF_HSB, p.dark_alpha),
    )

    light_extent = size * LIGHT_SELF_EXTENT
    light_self = Ellipse(
        name="light_self",
        cx=center + POSITION_GAIN * p.x_offset,
        cy=center - POSITION_GAIN * p.y_offset,
        width=light_extent,
        height=light_extent,
        fill=Color.from_hsb(LIGHT_SELF_HUE, LIGHT_SELF_SATURATION, p.ego_brightness, p.ego_alpha),
    )

    text_fill = Color.gray(TEXT_GRAY)
    texts = tuple(
        Text(
            content=line,
            x=TEXT_X,
            y=TEXT_Y0 + i * TEXT_LINE_HEIGHT,
            size=TEXT_SIZE,
            fill=text_fill,
        )
        for i, line in enumerate(readout_lines(inputs, shadow_blur=p.shadow_blur))
    )

    return (
        Background(color=Color.from_hsb(*BACKGROUND_HSB)),
        ShadowScope(shadow=shadow, body=(dark_self,)),
        light_self,
        *texts,
    )


__all__ = [
    "Background",
    "DEFAULT_CANVAS_SIZE",
    "DrawCommand",
    "Ellipse",
    "FrameCommands",
    "Shadow",
    "ShadowScope",
    "Text",
    "compute_frame",
    "readout_lines",
]
