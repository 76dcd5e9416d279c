# どこで: `src/umbra/core/color.py`。
# 何を: HSB（360, 100, 100, 1）色空間の色を 0..1 RGBA へ変換する Color を提供する。
# なぜ: 描画コマンドを surface 実装から独立させ、どの surface でも同じ色を使えるようにするため。

from __future__ import annotations

import colorsys
from dataclasses import dataclass

HUE_MAX = 360.0
SATURATION_MAX = 100.0
BRIGHTNESS_MAX = 100.0
ALPHA_MAX = 1.0


def _clamp01(v: float) -> float:
    fv = float(v)
    return 0.0 if fv < 0.0 else 1.0 if fv > 1.0 else fv


def hsb_to_rgb01(h: float, s: float, b: float) -> tuple[float, float, float]:
    """HSB（h: 0..360, s/b: 0..100）を 0..1 の RGB に変換して返す。

    範囲外の成分は各最大値でクランプする。
    """

    hue = _clamp01(float(h) / HUE_MAX)
    sat = _clamp01(float(s) / SATURATION_MAX)
    val = _clamp01(float(b) / BRIGHTNESS_MAX)
    r, g, bl = colorsys.hsv_to_rgb(hue, sat, val)
    return float(r), float(g), float(bl)


@dataclass(frozen=True, slots=True)
class Color:
    """0..1 float の RGBA 色。"""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_hsb(cls, h: float, s: float, b: float, a: float = ALPHA_MAX) -> Color:
        """HSB + alpha（0..1）から Color を作って返す。"""

        r, g, bl = hsb_to_rgb01(h, s, b)
        return cls(r=r, g=g, b=bl, a=_clamp01(float(a) / ALPHA_MAX))

    @classmethod
    def gray(cls, level: float, a: float = ALPHA_MAX) -> Color:
        """グレースケール 1 値から Color を作って返す。

        level は明度（0..100）として解釈し、100 を超える値は白に飽和する。
        """

        v = _clamp01(float(level) / BRIGHTNESS_MAX)
        return cls(r=v, g=v, b=v, a=_clamp01(float(a) / ALPHA_MAX))

    @classmethod
    def transparent(cls) -> Color:
        """完全透明な黒を返す。"""

        return cls(r=0.0, g=0.0, b=0.0, a=0.0)

    @property
    def rgb(self) -> tuple[float, float, float]:
        """(r, g, b) を返す。"""

        return (self.r, self.g, self.b)

    def rgb255(self) -> tuple[int, int, int]:
        """0..255 int の RGB を返す。"""

        return (
            int(round(_clamp01(self.r) * 255.0)),
            int(round(_clamp01(self.g) * 255.0)),
            int(round(_clamp01(self.b) * 255.0)),
        )

    def hex(self) -> str:
        """#RRGGBB 形式の文字列を返す（alpha は含まない）。"""

        r, g, b = self.rgb255()
        return f"#{r:02X}{g:02X}{b:02X}"

    def css(self) -> str:
        """`rgba(r,g,b,a)` 形式の CSS 色文字列を返す。"""

        r, g, b = self.rgb255()
        return f"rgba({r},{g},{b},{_clamp01(self.a):g})"


__all__ = ["Color", "hsb_to_rgb01"]
