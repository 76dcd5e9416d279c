# どこで: `src/umbra/core/remap.py`。
# 何を: スライダー値を描画パラメータへ写す写像（線形 remap / 二乗スケール）を提供する。
# なぜ: 描画と切り離した純粋関数として置き、単体テストで性質を確認できるようにするため。

from __future__ import annotations


def remap(
    value: float,
    in_min: float,
    in_max: float,
    out_min: float,
    out_max: float,
) -> float:
    """value を [in_min, in_max] から [out_min, out_max] へ線形に写して返す。

    Notes
    -----
    クランプしない（入力はスライダー側でレンジに収まっている前提）。
    """

    span = float(in_max) - float(in_min)
    if span == 0.0:
        raise ValueError(f"入力レンジの幅が 0: in_min={in_min!r}, in_max={in_max!r}")
    ratio = (float(value) - float(in_min)) / span
    return float(out_min) + ratio * (float(out_max) - float(out_min))


def shadow_blur_radius(
    density: float,
    *,
    max_density: float = 50.0,
    max_blur: float = 50.0,
) -> float:
    """影の密度からぼかし半径を返す。

    `(density / max_density) ** 2 * max_blur`。低密度ではゆっくり、上限付近で急に増える。
    """

    if float(max_density) <= 0.0:
        raise ValueError(f"max_density は正の値である必要がある: got={max_density!r}")
    ratio = float(density) / float(max_density)
    return ratio * ratio * float(max_blur)


__all__ = ["remap", "shadow_blur_radius"]
