# どこで: `src/umbra/__init__.py`。
# 何を: ルート `umbra` パッケージを定義する。
# なぜ: import 起点を `umbra` に統一するため。

from __future__ import annotations

from umbra.api import export_frame, run
from umbra.core import SketchInputs, SliderStore, compute_frame

__all__ = ["SketchInputs", "SliderStore", "compute_frame", "export_frame", "run"]
