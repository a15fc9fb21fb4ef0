"""Tests for stroke-font text to solid conversion."""

import math

import pytest

pytest.importorskip("build123d")
pytest.importorskip("HersheyFonts")

from shapes import is_empty  # noqa: E402
from stroke_text import fatten_stroke, flat_text, stroke_paths  # noqa: E402


def _extent(paths):
    xs = [x for path in paths for x, _ in path]
    ys = [y for path in paths for _, y in path]
    return max(xs) - min(xs), max(ys) - min(ys)


class TestStrokePaths:
    @pytest.mark.parametrize("message", ["", None])
    def test_no_text_no_strokes(self, message):
        assert stroke_paths(message, 1.5) == []

    def test_polylines_of_points(self):
        paths = stroke_paths("6mm", 1.5)
        assert paths
        for path in paths:
            assert all(len(point) == 2 for point in path)
            assert all(isinstance(v, float) for point in path for v in point)

    def test_scales_with_text_height(self):
        small_w, small_h = _extent(stroke_paths("10mm", 1.5))
        large_w, large_h = _extent(stroke_paths("10mm", 3.0))
        assert large_w == pytest.approx(2 * small_w)
        assert large_h == pytest.approx(2 * small_h)


class TestFattenStroke:
    def test_single_point_is_disc(self):
        disc = fatten_stroke([(1.0, 2.0)], 0.2)
        assert disc.area == pytest.approx(math.pi * 0.2**2, rel=1e-3)

    def test_segment_is_stadium(self):
        """Hull of two discs: circle plus a 2r x length rectangle."""
        stadium = fatten_stroke([(0.0, 0.0), (2.0, 0.0)], 0.2)
        assert stadium.area == pytest.approx(math.pi * 0.2**2 + 0.4 * 2.0, rel=1e-3)
        bb = stadium.bounding_box()
        assert bb.size.X == pytest.approx(2.4, abs=1e-3)
        assert bb.size.Y == pytest.approx(0.4, abs=1e-3)

    def test_repeated_points_collapse(self):
        stadium = fatten_stroke([(0.0, 0.0), (0.0, 0.0), (2.0, 0.0), (2.0, 0.0)], 0.2)
        assert stadium.area == pytest.approx(math.pi * 0.2**2 + 0.4 * 2.0, rel=1e-3)

    def test_chain_follows_polyline(self):
        corner = fatten_stroke([(0.0, 0.0), (2.0, 0.0), (2.0, 2.0)], 0.2)
        bb = corner.bounding_box()
        assert bb.size.X == pytest.approx(2.4, abs=1e-3)
        assert bb.size.Y == pytest.approx(2.4, abs=1e-3)
        # An L, not the hull of all three discs
        assert corner.area < 2.4 * 2.4 / 2


class TestFlatText:
    @pytest.mark.parametrize("message", ["", None])
    @pytest.mark.parametrize("height,width", [(0.8, 0.4), (5.0, 1.0)])
    def test_no_text_is_empty(self, message, height, width):
        result = flat_text(message, height, width)
        assert is_empty(result)
        assert len(result.solids()) == 0

    def test_extruded_from_zero(self):
        text = flat_text("6mm", 0.8, 0.4)
        bb = text.bounding_box()
        assert text.solids()
        assert bb.min.Z == pytest.approx(0.0, abs=1e-3)
        assert bb.max.Z == pytest.approx(0.8, abs=1e-3)

    def test_centered_on_xy(self):
        center = flat_text('1/4"', 0.8, 0.4).bounding_box().center()
        assert center.X == pytest.approx(0.0, abs=1e-3)
        assert center.Y == pytest.approx(0.0, abs=1e-3)

    def test_wider_stroke_gives_wider_text(self):
        thin = flat_text("12.7", 0.8, 0.4).bounding_box()
        thick = flat_text("12.7", 0.8, 0.8).bounding_box()
        assert thick.size.X == pytest.approx(thin.size.X + 0.4, abs=0.05)

    def test_colored(self):
        assert flat_text("+0", 0.8, 0.4, color=(0.0, 0.0, 1.0)).color is not None
