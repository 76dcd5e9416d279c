"""
どこで: `src/umbra/api/export.py`。
何を: ウィンドウを開かずに 1 フレームを SVG/PNG へ書き出す公開関数を提供する。
なぜ: スライダー値を指定したバッチ出力（比較用の画像列など）をスクリプトから行えるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from umbra.core.commands import compute_frame
from umbra.core.inputs import SketchInputs
from umbra.core.runtime_config import runtime_config
from umbra.export.image import default_output_path, export_image


def export_frame(
    path: str | Path | None = None,
    *,
    inputs: SketchInputs | None = None,
    canvas_size: int | None = None,
    ext: str = "png",
) -> Path:
    """inputs の 1 フレームを画像として保存し、保存先パスを返す。

    Parameters
    ----------
    path : str | Path | None
        出力先。None の場合は `{output_root}/{ext}/umbra_L.._D.._T...{ext}`。
    inputs : SketchInputs | None
        スライダー値。None の場合は既定値。値はスライダー格子へ丸める。
    canvas_size : int | None
        正方形キャンバスの一辺。None の場合は config の `canvas.size`。
    ext : str
        path が None のときの形式（`"png"` または `"svg"`）。
    """

    raw = inputs if inputs is not None else SketchInputs.defaults()
    frame_inputs = SketchInputs.clamped(
        light_ratio=raw.light_ratio,
        shadow_density=raw.shadow_density,
        torsion=raw.torsion,
    )
    size = int(runtime_config().canvas_size if canvas_size is None else canvas_size)
    out = Path(path) if path is not None else default_output_path(frame_inputs, ext=ext)
    commands = compute_frame(frame_inputs, canvas_size=size)
    return export_image(commands, out, canvas_size=size)
