# どこで: `src/umbra/interactive/raster.py`。
# 何を: DrawingSurface を numpy の RGB バッファへ合成する RasterSurface（AA 楕円 + ガウスぼかしの落ち影）を提供する。
# なぜ: Canvas 2D の shadowBlur 相当を GPU シェーダ無しで再現し、ModernGL へはテクスチャ転送だけで済ませるため。

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numba import njit  # type: ignore[import-untyped]

from umbra.core.color import Color
from umbra.core.commands import DEFAULT_CANVAS_SIZE, Shadow

# ぼかしカーネルの打ち切り（標準偏差の倍数）。
_KERNEL_SIGMA_SPAN = 3.0
# これ未満の標準偏差はぼかし無しとして扱う。
_MIN_SIGMA = 0.25


@dataclass(frozen=True, slots=True)
class TextItem:
    """ラスタ後にオーバーレイで描くテキスト 1 行。"""

    content: str
    x: float
    y: float
    size: float
    fill: Color


def ellipse_coverage(
    width_px: int,
    height_px: int,
    *,
    cx: float,
    cy: float,
    rx: float,
    ry: float,
) -> np.ndarray:
    """楕円の被覆率マスク（float32, shape (H, W), 0..1）を返す。

    ピクセル中心 (i + 0.5) で評価し、境界は約 1px 幅で線形にアンチエイリアスする。
    """

    if rx <= 0.0 or ry <= 0.0:
        return np.zeros((int(height_px), int(width_px)), dtype=np.float32)

    xs = (np.arange(int(width_px), dtype=np.float32) + 0.5 - np.float32(cx)) / np.float32(rx)
    ys = (np.arange(int(height_px), dtype=np.float32) + 0.5 - np.float32(cy)) / np.float32(ry)
    d = np.sqrt(ys[:, None] ** 2 + xs[None, :] ** 2)
    edge = np.float32(min(rx, ry))
    coverage = (1.0 - d) * edge + 0.5
    return np.clip(coverage, 0.0, 1.0).astype(np.float32, copy=False)


def gaussian_kernel(sigma: float) -> np.ndarray:
    """正規化済みの 1D ガウスカーネル（float32）を返す。"""

    s = float(sigma)
    if s < _MIN_SIGMA:
        return np.ones((1,), dtype=np.float32)
    radius = int(math.ceil(_KERNEL_SIGMA_SPAN * s))
    xs = np.arange(-radius, radius + 1, dtype=np.float64)
    k = np.exp(-(xs * xs) / (2.0 * s * s))
    k /= k.sum()
    return k.astype(np.float32)


def gaussian_blur(mask: np.ndarray, sigma: float) -> np.ndarray:
    """2D マスクを分離可能ガウスでぼかして返す（範囲外は 0 として扱う）。"""

    src = np.ascontiguousarray(mask, dtype=np.float32)
    kernel = gaussian_kernel(sigma)
    if kernel.size == 1:
        return src.copy()
    tmp = _convolve_rows_numba(src, kernel)
    out = _convolve_rows_numba(np.ascontiguousarray(tmp.T), kernel)
    return np.ascontiguousarray(out.T)


@njit(cache=True, fastmath=True)  # type: ignore[misc]
def _convolve_rows_numba(src: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """各行を kernel で畳み込む（ゼロパディング, Numba 版）。"""
    h, w = src.shape
    r = kernel.shape[0] // 2
    out = np.zeros((h, w), dtype=np.float32)
    for y in range(h):
        # 全て 0 の行は畳み込んでも 0 なので飛ばす。
        any_nonzero = False
        for x in range(w):
            if src[y, x] != 0.0:
                any_nonzero = True
                break
        if not any_nonzero:
            continue
        for x in range(w):
            acc = np.float32(0.0)
            k0 = max(0, r - x)
            k1 = min(2 * r + 1, w - x + r)
            for k in range(k0, k1):
                acc += src[y, x + k - r] * kernel[k]
            out[y, x] = acc
    return out


class RasterSurface:
    """numpy バッファに描く DrawingSurface。

    バッファは不透明 RGB（float32, 0..1, 上が y=0）。テキストはラスタせず `texts` に積む。
    """

    def __init__(self, canvas_size: int = DEFAULT_CANVAS_SIZE, *, scale: float = 1.0) -> None:
        size = int(canvas_size)
        if size <= 0:
            raise ValueError("canvas_size は正の値である必要がある")
        if float(scale) <= 0.0:
            raise ValueError(f"scale は正の値である必要がある: got={scale!r}")
        self._scale = float(scale)
        self._px = int(round(size * self._scale))
        self._rgb = np.zeros((self._px, self._px, 3), dtype=np.float32)
        self._shadow = Shadow.none()
        self.texts: list[TextItem] = []

    @property
    def shadow(self) -> Shadow:
        return self._shadow

    @property
    def size_px(self) -> int:
        """バッファの一辺（px）を返す。"""

        return self._px

    @property
    def rgb(self) -> np.ndarray:
        """RGB バッファ（float32, shape (H, W, 3)）を返す。"""

        return self._rgb

    def background(self, color: Color) -> None:
        rgb = np.array(color.rgb, dtype=np.float32)
        a = float(color.a)
        self._rgb[:] = self._rgb * (1.0 - a) + rgb * a
        self.texts.clear()

    def set_shadow(self, shadow: Shadow) -> None:
        self._shadow = shadow

    def reset_shadow(self) -> None:
        self._shadow = Shadow.none()

    def _composite(self, coverage: np.ndarray, color: Color, alpha: float) -> None:
        a = (coverage * np.float32(alpha))[:, :, None]
        rgb = np.array(color.rgb, dtype=np.float32)
        self._rgb *= 1.0 - a
        self._rgb += a * rgb

    def ellipse(self, cx: float, cy: float, width: float, height: float, fill: Color) -> None:
        s = self._scale
        rx = float(width) * 0.5 * s
        ry = float(height) * 0.5 * s

        shadow = self._shadow
        if not shadow.is_none and shadow.color.a > 0.0 and fill.a > 0.0:
            # 影は図形の形をオフセットしてぼかし、図形より先に（下に）合成する。
            shadow_mask = ellipse_coverage(
                self._px,
                self._px,
                cx=(float(cx) + float(shadow.offset_x)) * s,
                cy=(float(cy) + float(shadow.offset_y)) * s,
                rx=rx,
                ry=ry,
            )
            # Canvas 2D の shadowBlur は標準偏差の 2 倍に相当する。
            shadow_mask = gaussian_blur(shadow_mask, float(shadow.blur) * 0.5 * s)
            self._composite(shadow_mask, shadow.color, float(shadow.color.a) * float(fill.a))

        mask = ellipse_coverage(
            self._px, self._px, cx=float(cx) * s, cy=float(cy) * s, rx=rx, ry=ry
        )
        self._composite(mask, fill, float(fill.a))

    def text(self, content: str, x: float, y: float, size: float, fill: Color) -> None:
        self.texts.append(TextItem(content=str(content), x=float(x), y=float(y), size=float(size), fill=fill))

    def to_rgba8(self) -> np.ndarray:
        """バッファを uint8 RGBA（shape (H, W, 4), 上が y=0）に変換して返す。"""

        out = np.empty((self._px, self._px, 4), dtype=np.uint8)
        out[:, :, :3] = np.clip(np.rint(self._rgb * 255.0), 0, 255).astype(np.uint8)
        out[:, :, 3] = 255
        return out


__all__ = [
    "RasterSurface",
    "TextItem",
    "ellipse_coverage",
    "gaussian_blur",
    "gaussian_kernel",
]
