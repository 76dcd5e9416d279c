# どこで: `src/umbra/interactive/runtime/__init__.py`。
# 何を: interactive 実行時サブシステム（描画ウィンドウ / GUI / ループ / 監視）のパッケージ。
# なぜ: pyglet 依存の実行時コードを 1 箇所にまとめるため。
