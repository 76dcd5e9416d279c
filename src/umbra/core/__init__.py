# どこで: `src/umbra/core/__init__.py`。
# 何を: ヘッドレスなスケッチ本体（入力/導出/コマンド生成/surface 発行）の公開名をまとめる。
# なぜ: export/interactive/api 層から最小インポートで使えるようにするため。

from .color import Color, hsb_to_rgb01
from .commands import (
    DEFAULT_CANVAS_SIZE,
    Background,
    DrawCommand,
    Ellipse,
    FrameCommands,
    Shadow,
    ShadowScope,
    Text,
    compute_frame,
)
from .derive import DerivedParams, derive_params
from .inputs import (
    INTEGRATION_TORSION,
    LIGHT_RATIO,
    SHADOW_DENSITY,
    SLIDER_SPECS,
    SketchInputs,
    SliderSpec,
)
from .remap import remap, shadow_blur_radius
from .slider_store import SliderStore
from .surface import DrawingSurface, RecordingSurface, issue_frame, shadow_scope

__all__ = [
    "Background",
    "Color",
    "DEFAULT_CANVAS_SIZE",
    "DerivedParams",
    "DrawCommand",
    "DrawingSurface",
    "Ellipse",
    "FrameCommands",
    "INTEGRATION_TORSION",
    "LIGHT_RATIO",
    "RecordingSurface",
    "SHADOW_DENSITY",
    "SLIDER_SPECS",
    "Shadow",
    "ShadowScope",
    "SketchInputs",
    "SliderSpec",
    "SliderStore",
    "Text",
    "compute_frame",
    "derive_params",
    "hsb_to_rgb01",
    "issue_frame",
    "remap",
    "shadow_blur_radius",
    "shadow_scope",
]
