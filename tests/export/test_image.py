from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from umbra.core.commands import compute_frame
from umbra.core.inputs import SketchInputs
from umbra.core.runtime_config import runtime_config, set_config_path
from umbra.export import image


# `umbra.export.image`（SVG→PNG / resvg）をテストする。

@pytest.fixture(autouse=True)
def _reset_runtime_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    set_config_path(None)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)


def _ok_run(calls: list):
    def fake_run(cmd, *, capture_output: bool, text: bool, check: bool):
        calls.append(list(cmd))
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

    return fake_run


def test_default_output_path_encodes_slider_values():
    path = image.default_output_path(SketchInputs.defaults(), ext="svg")
    assert path == Path("data") / "output" / "svg" / "umbra_L150_D35_T+0.0.svg"

    path = image.default_output_path(SketchInputs(light_ratio=0, shadow_density=50, torsion=-2.5), ext=".PNG")
    assert path == Path("data") / "output" / "png" / "umbra_L0_D50_T-2.5.png"


def test_png_output_size_scales_canvas_by_png_scale():
    scale = float(runtime_config().png_scale)
    expected = (int(600 * scale), int(600 * scale))
    assert image.png_output_size(600) == expected


def test_rasterize_svg_to_png_invokes_resvg(tmp_path, monkeypatch: pytest.MonkeyPatch):
    src_svg = tmp_path / "in.svg"
    src_svg.write_text("<svg/>\n", encoding="utf-8")
    out_png = tmp_path / "out.png"

    def fake_run(cmd, *, capture_output: bool, text: bool, check: bool):
        assert capture_output is True
        assert text is True
        assert check is False
        assert cmd[0] == "resvg"

        assert cmd[cmd.index("--width") + 1] == "1200"
        assert cmd[cmd.index("--height") + 1] == "1200"
        assert "--background" not in cmd

        assert Path(cmd[-2]) == src_svg
        assert Path(cmd[-1]) == out_png
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

    monkeypatch.setattr(image.subprocess, "run", fake_run)

    path = image.rasterize_svg_to_png(src_svg, out_png, output_size=(1200, 1200))
    assert path == out_png


def test_rasterize_svg_to_png_raises_when_resvg_is_missing(tmp_path, monkeypatch: pytest.MonkeyPatch):
    src_svg = tmp_path / "in.svg"
    src_svg.write_text("<svg/>\n", encoding="utf-8")

    def missing(*args, **kwargs):
        raise FileNotFoundError

    monkeypatch.setattr(image.subprocess, "run", missing)

    with pytest.raises(RuntimeError, match="resvg が見つかりません"):
        image.rasterize_svg_to_png(src_svg, tmp_path / "out.png", output_size=(10, 10))


def test_rasterize_svg_to_png_raises_on_resvg_failure(tmp_path, monkeypatch: pytest.MonkeyPatch):
    src_svg = tmp_path / "in.svg"
    src_svg.write_text("<svg/>\n", encoding="utf-8")

    def failing(cmd, **kwargs):
        return subprocess.CompletedProcess(args=cmd, returncode=3, stdout="", stderr="bad svg")

    monkeypatch.setattr(image.subprocess, "run", failing)

    with pytest.raises(RuntimeError, match="code=3"):
        image.rasterize_svg_to_png(src_svg, tmp_path / "out.png", output_size=(10, 10))


def test_export_image_png_keeps_svg_source(tmp_path, monkeypatch: pytest.MonkeyPatch):
    calls: list = []
    monkeypatch.setattr(image.subprocess, "run", _ok_run(calls))

    out = tmp_path / "frame.png"
    path = image.export_image(compute_frame(SketchInputs()), out, canvas_size=600)
    assert path == out
    assert out.with_suffix(".svg").is_file()
    assert len(calls) == 1
    assert calls[0][-2] == str(out.with_suffix(".svg"))


def test_export_image_rejects_unknown_suffix(tmp_path):
    with pytest.raises(ValueError):
        image.export_image(compute_frame(SketchInputs()), tmp_path / "frame.gif")
