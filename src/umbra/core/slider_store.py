# どこで: `src/umbra/core/slider_store.py`。
# 何を: UI 側が所有するスライダー値の入れ物 SliderStore を定義する。
# なぜ: GUI は値を書き、描画ループはフレーム冒頭に snapshot を読むだけ、という一方向の関係を明示するため。

from __future__ import annotations

from .inputs import SLIDER_SPECS, SketchInputs, SliderSpec


class SliderStore:
    """スライダー名 -> 現在値を保持するストア。

    値は常に各 SliderSpec の格子上・レンジ内にある。永続化はしない。
    """

    def __init__(self, specs: tuple[SliderSpec, ...] = SLIDER_SPECS) -> None:
        self._specs: dict[str, SliderSpec] = {spec.name: spec for spec in specs}
        self._values: dict[str, float] = {spec.name: spec.clamp(spec.default) for spec in specs}

    def specs(self) -> tuple[SliderSpec, ...]:
        """登録順の SliderSpec を返す。"""

        return tuple(self._specs.values())

    def spec(self, name: str) -> SliderSpec:
        """name の SliderSpec を返す。未登録なら KeyError。"""

        try:
            return self._specs[str(name)]
        except KeyError:
            raise KeyError(f"未登録のスライダー: {name!r}") from None

    def get(self, name: str) -> float:
        """name の現在値を返す。"""

        self.spec(name)
        return self._values[str(name)]

    def set_from_ui(self, name: str, value: float) -> bool:
        """UI 入力で値を更新する。格子へ丸めた結果が変わった場合 True を返す。"""

        spec = self.spec(name)
        new_value = spec.clamp(value)
        if new_value == self._values[spec.name]:
            return False
        self._values[spec.name] = new_value
        return True

    def reset(self) -> bool:
        """全スライダーを既定値へ戻す。どれかが変わった場合 True を返す。"""

        changed = False
        for spec in self._specs.values():
            changed = self.set_from_ui(spec.name, spec.default) or changed
        return changed

    def snapshot(self) -> SketchInputs:
        """描画ループが 1 フレームで読む SketchInputs を返す。"""

        return SketchInputs(
            light_ratio=self._values["light_ratio"],
            shadow_density=self._values["shadow_density"],
            torsion=self._values["torsion"],
        )


__all__ = ["SliderStore"]
