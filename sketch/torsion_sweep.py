"""
どこで: `sketch/torsion_sweep.py`。
何を: torsion を -10..10 で振ったフレーム列を PNG として書き出す。
なぜ: スライダー操作なしで「緊張」の変化を並べて比較するため。
"""

import logging

from umbra import SketchInputs, export_frame

STEPS = 9


def main() -> None:
    for i in range(STEPS):
        torsion = -10.0 + 20.0 * i / (STEPS - 1)
        path = export_frame(inputs=SketchInputs(light_ratio=150, shadow_density=35, torsion=torsion))
        print(f"Saved PNG: {path}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
