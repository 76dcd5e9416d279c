# どこで: `src/umbra/core/inputs.py`。
# 何を: 3 本のスライダー（レンジ/ステップ/既定値）と、1 フレーム分の入力値 SketchInputs を定義する。
# なぜ: スライダーの定義を UI 実装から切り離し、描画側は「読むだけ」の値として扱えるようにするため。

from __future__ import annotations

import math
from dataclasses import dataclass


def step_decimals(step: float) -> int:
    """step の小数桁数を返す（0.1 -> 1, 1 -> 0）。"""

    text = f"{float(step):.10f}".rstrip("0").rstrip(".")
    if "." not in text:
        return 0
    return len(text.split(".", 1)[1])


@dataclass(frozen=True, slots=True)
class SliderSpec:
    """スライダー 1 本の定義。

    値は `minimum + k * step` の格子上に乗り、[minimum, maximum] に収まる。
    """

    name: str
    label: str
    minimum: float
    maximum: float
    step: float
    default: float

    def __post_init__(self) -> None:
        if not float(self.step) > 0.0:
            raise ValueError(f"step は正の値である必要がある: {self.name}: got={self.step!r}")
        if float(self.minimum) > float(self.maximum):
            raise ValueError(
                f"minimum <= maximum である必要がある: {self.name}: "
                f"got=({self.minimum!r}, {self.maximum!r})"
            )

    @property
    def is_integer(self) -> bool:
        """整数スライダー（min/step が整数）なら True。"""

        return (
            float(self.step).is_integer()
            and float(self.minimum).is_integer()
            and float(self.maximum).is_integer()
        )

    def clamp(self, value: float) -> float | int:
        """value をステップ格子へ丸め、レンジ内へクランプして返す。

        ブラウザの range input と同じく、格子は minimum 起点で数える。
        """

        v = float(value)
        if math.isnan(v):
            v = float(self.default)
        lo = float(self.minimum)
        hi = float(self.maximum)
        step = float(self.step)

        k = round((v - lo) / step)
        # maximum が格子上に無い場合でも、格子上の最大値を上限にする。
        k_max = math.floor((hi - lo) / step + 1e-9)
        k = max(0, min(int(k_max), int(k)))
        snapped = lo + k * step

        if self.is_integer:
            return int(round(snapped))
        return round(snapped, step_decimals(step))


LIGHT_RATIO = SliderSpec(
    name="light_ratio",
    label="Light Ratio (Ego Visibility)",
    minimum=0,
    maximum=255,
    step=1,
    default=150,
)

SHADOW_DENSITY = SliderSpec(
    name="shadow_density",
    label="Shadow Density (Repression)",
    minimum=0,
    maximum=50,
    step=1,
    default=35,
)

INTEGRATION_TORSION = SliderSpec(
    name="torsion",
    label="Integration Torsion",
    minimum=-10.0,
    maximum=10.0,
    step=0.1,
    default=0.0,
)

SLIDER_SPECS: tuple[SliderSpec, ...] = (LIGHT_RATIO, SHADOW_DENSITY, INTEGRATION_TORSION)


@dataclass(frozen=True, slots=True)
class SketchInputs:
    """1 フレームの描画が読むスライダー値。"""

    light_ratio: float = LIGHT_RATIO.default
    shadow_density: float = SHADOW_DENSITY.default
    torsion: float = INTEGRATION_TORSION.default

    @classmethod
    def defaults(cls) -> SketchInputs:
        """各スライダーの既定値から SketchInputs を作って返す。"""

        return cls(
            light_ratio=LIGHT_RATIO.default,
            shadow_density=SHADOW_DENSITY.default,
            torsion=INTEGRATION_TORSION.default,
        )

    @classmethod
    def clamped(cls, *, light_ratio: float, shadow_density: float, torsion: float) -> SketchInputs:
        """各値をスライダー格子へ丸めた SketchInputs を返す。"""

        return cls(
            light_ratio=LIGHT_RATIO.clamp(light_ratio),
            shadow_density=SHADOW_DENSITY.clamp(shadow_density),
            torsion=INTEGRATION_TORSION.clamp(torsion),
        )


__all__ = [
    "INTEGRATION_TORSION",
    "LIGHT_RATIO",
    "SHADOW_DENSITY",
    "SLIDER_SPECS",
    "SketchInputs",
    "SliderSpec",
    "step_decimals",
]
