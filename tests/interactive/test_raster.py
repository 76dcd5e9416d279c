import numpy as np
import pytest

from umbra.core.color import Color
from umbra.core.commands import Shadow, compute_frame
from umbra.core.inputs import SketchInputs
from umbra.core.surface import issue_frame
from umbra.interactive.raster import (
    RasterSurface,
    ellipse_coverage,
    gaussian_blur,
    gaussian_kernel,
)


def test_ellipse_coverage_inside_and_outside():
    mask = ellipse_coverage(32, 32, cx=16.0, cy=16.0, rx=8.0, ry=8.0)
    assert mask.shape == (32, 32)
    assert mask.dtype == np.float32
    assert mask[16, 16] == pytest.approx(1.0)
    assert mask[0, 0] == pytest.approx(0.0)
    assert 0.0 <= float(mask.min()) and float(mask.max()) <= 1.0


def test_ellipse_coverage_degenerate_radius_is_empty():
    assert not ellipse_coverage(8, 8, cx=4.0, cy=4.0, rx=0.0, ry=3.0).any()


def test_gaussian_kernel_is_normalized_and_symmetric():
    k = gaussian_kernel(2.0)
    assert k.size == 2 * 6 + 1
    assert float(k.sum()) == pytest.approx(1.0, abs=1e-6)
    assert np.allclose(k, k[::-1])
    assert gaussian_kernel(0.1).tolist() == [1.0]


def test_gaussian_blur_spreads_and_preserves_mass():
    mask = np.zeros((41, 41), dtype=np.float32)
    mask[20, 20] = 1.0
    out = gaussian_blur(mask, 3.0)
    assert out.shape == mask.shape
    assert float(out.sum()) == pytest.approx(1.0, abs=1e-4)
    assert out[20, 20] < 1.0
    assert out[20, 23] > 0.0
    assert out[20, 23] == pytest.approx(out[23, 20], abs=1e-6)


def test_gaussian_blur_zero_sigma_is_identity():
    mask = np.eye(5, dtype=np.float32)
    assert np.array_equal(gaussian_blur(mask, 0.0), mask)


def test_shadow_is_drawn_only_while_set():
    surface = RasterSurface(64)
    surface.background(Color.gray(0))
    surface.set_shadow(Shadow(blur=0.0, color=Color(1.0, 0.0, 0.0, 1.0), offset_x=10.0, offset_y=0.0))
    surface.ellipse(20.0, 20.0, 16.0, 16.0, Color(1.0, 1.0, 1.0, 1.0))
    surface.reset_shadow()
    surface.ellipse(20.0, 48.0, 16.0, 16.0, Color(1.0, 1.0, 1.0, 1.0))

    rgb = surface.rgb
    # 影（赤）は図形の右側にはみ出し、図形自体は白のまま。
    assert rgb[20, 30] == pytest.approx([1.0, 0.0, 0.0], abs=1e-3)
    assert rgb[20, 20] == pytest.approx([1.0, 1.0, 1.0], abs=1e-3)
    # リセット後の図形には影が付かない。
    assert rgb[48, 30] == pytest.approx([0.0, 0.0, 0.0], abs=1e-3)
    assert rgb[48, 20] == pytest.approx([1.0, 1.0, 1.0], abs=1e-3)


def test_frame_raster_keeps_text_as_overlay_and_resets_shadow():
    surface = RasterSurface(120)
    issue_frame(compute_frame(SketchInputs.defaults(), canvas_size=120), surface)
    assert surface.shadow.is_none
    assert [t.content for t in surface.texts][0] == "Light Ratio (Ego Visibility): 150"

    rgba = surface.to_rgba8()
    assert rgba.shape == (120, 120, 4)
    assert rgba.dtype == np.uint8
    assert (rgba[:, :, 3] == 255).all()
    # 四隅は背景色のまま。
    assert tuple(rgba[0, 0, :3]) == (13, 13, 13)


def test_render_scale_changes_buffer_size():
    surface = RasterSurface(100, scale=1.5)
    assert surface.size_px == 150
    assert surface.rgb.shape == (150, 150, 3)


def test_raster_surface_rejects_bad_sizes():
    with pytest.raises(ValueError):
        RasterSurface(0)
    with pytest.raises(ValueError):
        RasterSurface(10, scale=0.0)
