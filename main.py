"""
どこで: リポジトリ直下 `main.py`。
何を: Light Self / Dark Self のスケッチをスライダー GUI 付きで表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import logging

from umbra import run

CANVAS_SIZE = 600


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run(
        canvas_size=CANVAS_SIZE,
        render_scale=1.0,
        parameter_gui=True,
    )
