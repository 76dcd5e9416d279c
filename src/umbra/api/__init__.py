# どこで: `src/umbra/api/__init__.py`。
# 何を: 公開 API（run / export_frame）のエントリポイント。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from .export import export_frame

__all__ = ["export_frame", "run"]


def run(*args, **kwargs):
    """公開 run API へのラッパ（遅延インポートで GUI 依存を後回しにする）。"""

    from .runner import run as _run

    return _run(*args, **kwargs)
