# どこで: `src/umbra/export/__init__.py`。
# 何を: headless export（SVG / PNG）の公開関数をまとめる。
# なぜ: interactive 依存なしでフレームを書き出せる入口を 1 つにするため。

from .image import default_output_path, export_image, rasterize_svg_to_png
from .svg import SvgSurface, export_svg, render_svg

__all__ = [
    "SvgSurface",
    "default_output_path",
    "export_image",
    "export_svg",
    "rasterize_svg_to_png",
    "render_svg",
]
