import numpy as np
import pytest

from shapes.glyphs import HersheyRasterizer, renderable, sample_candidates
from shapes.text import TextShape


def test_rasterizer_produces_fixed_size_bitmap():
    bitmap = HersheyRasterizer()("I Love You")
    assert bitmap.shape == (128, 256, 3)
    assert bitmap.dtype == np.uint8
    assert bitmap[:, :, 2].max() > 128


def test_long_text_is_scaled_to_fit():
    bitmap = HersheyRasterizer()("A rather long sentence that would not fit")
    lit_cols = np.nonzero(bitmap[:, :, 2].max(axis=0) > 0)[0]
    assert lit_cols.min() > 0
    assert lit_cols.max() < 255


def test_candidates_use_stride_and_threshold():
    bitmap = np.zeros((8, 8, 3), dtype=np.uint8)
    bitmap[2, 4, 2] = 200      # on the stride grid, bright
    bitmap[4, 4, 2] = 128      # on the grid, not strictly above threshold
    bitmap[3, 3, 2] = 255      # off the grid
    bitmap[6, 0, 0] = 255      # bright blue only

    candidates = sample_candidates(bitmap)
    assert candidates.tolist() == [[4, 2]]


def test_text_points_map_into_world_rectangle(rng):
    points = TextShape("HI").generate(2000, rng)
    assert points.shape == (2000, 3)
    assert np.abs(points[:, 0]).max() <= 15.0
    assert np.abs(points[:, 1]).max() <= 7.5
    assert np.abs(points[:, 2]).max() <= 1.0


def test_text_coordinates_follow_pixel_mapping(rng):
    def one_pixel(_text):
        bitmap = np.zeros((128, 256, 3), dtype=np.uint8)
        bitmap[32, 64] = 255
        return bitmap

    points = TextShape("x", rasterizer=one_pixel).generate(10, rng)
    np.testing.assert_allclose(points[:, 0], (64 / 256 - 0.5) * 30)
    np.testing.assert_allclose(points[:, 1], -(32 / 128 - 0.5) * 15)


def test_blank_text_has_nothing_to_place(rng):
    assert TextShape("").generate(100, rng) is None
    assert TextShape("   ").generate(100, rng) is None


@pytest.mark.parametrize("text", ["♥♥", "愛", "\t\n"])
def test_unsupported_glyphs_have_nothing_to_place(text, rng):
    assert HersheyRasterizer()(text).max() == 0
    assert TextShape(text).generate(100, rng) is None


def test_unsupported_glyphs_are_dropped_from_mixed_text():
    assert renderable("I ♥ You") == "I  You"
    np.testing.assert_array_equal(
        HersheyRasterizer()("I ♥ You"), HersheyRasterizer()("I  You")
    )
