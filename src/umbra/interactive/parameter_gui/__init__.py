# どこで: `src/umbra/interactive/parameter_gui/__init__.py`。
# 何を: Parameter GUI（スライダーウィンドウ）の公開名をまとめる。
# なぜ: runtime 側から最小インポートで使えるようにするため。

from .gui import ParameterGUI
from .pyglet_backend import create_parameter_gui_window

__all__ = ["ParameterGUI", "create_parameter_gui_window"]
