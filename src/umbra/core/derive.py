# どこで: `src/umbra/core/derive.py`。
# 何を: スライダー値（SketchInputs）から 1 フレームの描画パラメータ DerivedParams を導出する。
# なぜ: 導出式を描画コマンド生成から分離し、値の性質（単調性/範囲）を直接テストできるようにするため。

from __future__ import annotations

from dataclasses import dataclass

from .inputs import LIGHT_RATIO, SHADOW_DENSITY, SketchInputs
from .remap import remap, shadow_blur_radius

EGO_BRIGHTNESS_RANGE = (10.0, 100.0)
EGO_ALPHA_RANGE = (0.1, 1.0)
SHADOW_SATURATION_RANGE = (10.0, 80.0)
MAX_SHADOW_BLUR = 50.0

# torsion に対する y 方向のずれ（緊張の強調）。
Y_OFFSET_FACTOR = -0.5


@dataclass(frozen=True, slots=True)
class DerivedParams:
    """SketchInputs から導出した描画パラメータ。"""

    ego_brightness: float
    ego_alpha: float
    dark_alpha: float
    shadow_blur: float
    shadow_saturation: float
    x_offset: float
    y_offset: float


def derive_params(inputs: SketchInputs) -> DerivedParams:
    """入力値から DerivedParams を導出して返す（純粋関数）。"""

    light = float(inputs.light_ratio)
    density = float(inputs.shadow_density)
    torsion = float(inputs.torsion)

    ego_brightness = remap(
        light, LIGHT_RATIO.minimum, LIGHT_RATIO.maximum, *EGO_BRIGHTNESS_RANGE
    )
    ego_alpha = remap(light, LIGHT_RATIO.minimum, LIGHT_RATIO.maximum, *EGO_ALPHA_RANGE)
    shadow_blur = shadow_blur_radius(
        density, max_density=float(SHADOW_DENSITY.maximum), max_blur=MAX_SHADOW_BLUR
    )
    shadow_saturation = remap(
        density, SHADOW_DENSITY.minimum, SHADOW_DENSITY.maximum, *SHADOW_SATURATION_RANGE
    )

    return DerivedParams(
        ego_brightness=ego_brightness,
        ego_alpha=ego_alpha,
        dark_alpha=1.0 - ego_alpha,
        shadow_blur=shadow_blur,
        shadow_saturation=shadow_saturation,
        x_offset=torsion,
        y_offset=torsion * Y_OFFSET_FACTOR,
    )


__all__ = ["DerivedParams", "derive_params"]
