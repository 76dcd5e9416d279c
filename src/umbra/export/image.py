"""
どこで: `src/umbra/export/image.py`。
何を: フレームを SVG/PNG として保存する関数を提供する（PNG は SVG を resvg でラスタライズする）。
なぜ: SVG を正（ソース）として保存し、PNG は任意の解像度で再生成できる導線を用意するため。
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from umbra.core.color import Color
from umbra.core.commands import DEFAULT_CANVAS_SIZE, FrameCommands
from umbra.core.inputs import SketchInputs
from umbra.core.runtime_config import output_root_dir, runtime_config
from umbra.export.svg import export_svg

OUTPUT_STEM = "umbra"


def export_image(
    commands: FrameCommands,
    path: str | Path,
    *,
    canvas_size: int = DEFAULT_CANVAS_SIZE,
) -> Path:
    """コマンド列を画像として保存する。

    Notes
    -----
    拡張子で形式を決める。`.png` の場合は同名の `.svg` も残る。
    """
    _path = Path(path)
    suffix = _path.suffix.lower()

    if suffix == ".svg":
        return export_svg(commands, _path, canvas_size=canvas_size)

    if suffix == ".png":
        svg_path = _path.with_suffix(".svg")
        export_svg(commands, svg_path, canvas_size=canvas_size)
        return rasterize_svg_to_png(
            svg_path,
            _path,
            output_size=png_output_size(canvas_size),
        )

    raise ValueError(f"未対応の画像フォーマット: {suffix!r}")


def default_output_path(inputs: SketchInputs, *, ext: str) -> Path:
    """スライダー値を含む既定の保存パスを返す。

    Notes
    -----
    パスは `{output_root}/{ext}/umbra_L{light}_D{density}_T{torsion}.{ext}`。
    同じスライダー値なら同じファイルを上書きする。
    """

    _ext = str(ext).lstrip(".").lower()
    stem = (
        f"{OUTPUT_STEM}_L{int(round(float(inputs.light_ratio)))}"
        f"_D{int(round(float(inputs.shadow_density)))}"
        f"_T{float(inputs.torsion):+.1f}"
    )
    return output_root_dir() / _ext / f"{stem}.{_ext}"


def png_output_size(canvas_size: int) -> tuple[int, int]:
    """canvas_size を基準に PNG 出力ピクセルサイズを返す。"""

    size = int(canvas_size)
    if size <= 0:
        raise ValueError("canvas_size は正の値である必要がある")
    scale = float(runtime_config().png_scale)
    return int(size * scale), int(size * scale)


def _resvg_command(
    *,
    input_svg: Path,
    output_png: Path,
    output_size: tuple[int, int],
    background_color: Color | None,
) -> list[str]:
    out_w, out_h = output_size
    if int(out_w) <= 0 or int(out_h) <= 0:
        raise ValueError("output_size は正の (width, height) である必要がある")
    cmd = [
        "resvg",
        "--width",
        str(int(out_w)),
        "--height",
        str(int(out_h)),
    ]
    if background_color is not None:
        cmd += ["--background", background_color.hex()]
    cmd += [str(input_svg), str(output_png)]
    return cmd


def rasterize_svg_to_png(
    svg_path: str | Path,
    png_path: str | Path,
    *,
    output_size: tuple[int, int],
    background_color: Color | None = None,
) -> Path:
    """SVG を PNG として保存する。

    Parameters
    ----------
    svg_path : str or Path
        入力 SVG パス。
    png_path : str or Path
        出力 PNG パス。
    output_size : tuple[int, int]
        出力 PNG の (width, height) ピクセルサイズ。
    background_color : Color or None
        背景色。None の場合は SVG 側の背景（umbra は常に背景 rect を持つ）に任せる。

    Returns
    -------
    Path
        出力 PNG パス。

    Raises
    ------
    RuntimeError
        resvg が見つからない、またはラスタライズに失敗した場合。
    """

    _svg_path = Path(svg_path)
    _png_path = Path(png_path)
    _png_path.parent.mkdir(parents=True, exist_ok=True)

    cmd = _resvg_command(
        input_svg=_svg_path,
        output_png=_png_path,
        output_size=output_size,
        background_color=background_color,
    )
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        raise RuntimeError(
            "resvg が見つかりません（`resvg` をインストールして PATH を通してください）"
        ) from e

    if proc.returncode != 0:
        details = (proc.stderr or proc.stdout or "").strip()
        raise RuntimeError(f"resvg が失敗しました (code={proc.returncode}). {details}".strip())

    return _png_path
