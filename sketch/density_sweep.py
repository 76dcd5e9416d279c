"""
どこで: `sketch/density_sweep.py`。
何を: shadow_density を 0..50 で振ったフレーム列を SVG として書き出す。
なぜ: ぼかし半径の二乗スケール（低密度では穏やか、上限付近で急増）を目で確認するため。
"""

from umbra import SketchInputs, export_frame


def main() -> None:
    for density in range(0, 51, 10):
        path = export_frame(
            inputs=SketchInputs(light_ratio=150, shadow_density=density, torsion=0.0),
            ext="svg",
        )
        print(f"Saved SVG: {path}")


if __name__ == "__main__":
    main()
