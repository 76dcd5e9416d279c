# どこで: `src/umbra/interactive/__init__.py`。
# 何を: pyglet/ModernGL/pyimgui に依存するライブ表示層のパッケージ。
# なぜ: GUI 依存を core/export から隔離するため（import は各モジュールから直接行う）。
