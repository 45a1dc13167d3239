"""Tests for swatchroll/selection.py - distinct selection and interpolation."""

from __future__ import annotations

import pytest
from swatchroll.constants import BASE_COLORS, PASTEL_COLORS
from swatchroll.exceptions import SwatchRollError
from swatchroll.hsl import color_numbers, hsl_distance
from swatchroll.selection import interpolate_colors, mix_hsl, most_distinct_colors

BLACK = "hsl(0, 0%, 0%)"  # (0, 0, 0)
WHITE = "hsl(255, 255%, 255%)"  # (0, 0, 100)
GRAY = "hsl(128, 128%, 128%)"  # (0, 0, 50)
RED = "hsl(255, 0%, 0%)"  # (0, 100, 50)


class TestMostDistinctColors:
    """Tests for most_distinct_colors function."""

    def test_single_color_is_first_entry(self):
        """Asking for one color always yields the first catalog entry."""
        assert most_distinct_colors(PASTEL_COLORS, 1) == [PASTEL_COLORS[0]]
        assert most_distinct_colors(BASE_COLORS, 1) == [BASE_COLORS[0]]

    def test_farthest_point_order(self):
        """Each step picks the color farthest from its nearest selected color."""
        colors = [BLACK, GRAY, WHITE, RED]
        # from black: gray 50, white 100, red ~111.8 -> red
        # then: gray min(50, 100) = 50, white min(100, ~111.8) = 100 -> white
        assert most_distinct_colors(colors, 3) == [BLACK, RED, WHITE]
        assert most_distinct_colors(colors, 4) == [BLACK, RED, WHITE, GRAY]

    def test_ties_go_to_first_candidate(self):
        """Equal scores are resolved by catalog order."""
        # black and white are both 50 away from gray
        assert most_distinct_colors([GRAY, BLACK, WHITE], 2) == [GRAY, BLACK]
        assert most_distinct_colors([GRAY, WHITE, BLACK], 2) == [GRAY, WHITE]

    @pytest.mark.parametrize("colors", [BASE_COLORS, PASTEL_COLORS])
    def test_full_count_is_permutation(self, colors: tuple[str, ...]):
        """Requesting the catalog size returns every color exactly once."""
        result = most_distinct_colors(colors, len(colors))
        assert len(result) == len(colors)
        assert sorted(result) == sorted(colors)
        assert result[0] == colors[0]

    @pytest.mark.parametrize("colors", [BASE_COLORS, PASTEL_COLORS])
    def test_each_step_is_greedy_optimal(self, colors: tuple[str, ...]):
        """No unselected color would have been farther from the selected set."""
        result = most_distinct_colors(colors, len(colors) - 1)
        for step in range(1, len(result)):
            chosen = result[:step]
            score = min(hsl_distance(c, result[step]) for c in chosen)
            for candidate in colors:
                if candidate in chosen:
                    continue
                assert score >= min(hsl_distance(c, candidate) for c in chosen)

    def test_selection_depends_on_half_boundary_hues(self):
        """Custom catalogs pick by the exact metric, including rounding at .5."""
        colors = [
            "hsl(50, 58%, 63%)",
            "hsl(52, 31%, 5%)",
            "hsl(245, 74%, 29%)",
            "hsl(171, 11%, 74%)",
            "hsl(186, 91%, 81%)",
            "hsl(16, 34%, 62%)",
        ]
        result = most_distinct_colors(colors, 4)
        assert len(result) == 4
        assert result[0] == colors[0]
        assert result[3] == "hsl(186, 91%, 81%)"

    def test_deterministic(self):
        """Repeated calls give the same answer."""
        assert most_distinct_colors(BASE_COLORS, 6) == most_distinct_colors(BASE_COLORS, 6)

    def test_duplicate_entries_still_fill_count(self):
        """Candidates are tracked by position, so duplicates can be picked."""
        result = most_distinct_colors([BLACK, WHITE, BLACK], 3)
        assert result == [BLACK, WHITE, BLACK]

    def test_more_than_catalog_uses_raw_order(self):
        """Beyond the catalog size, the catalog feeds interpolation in order."""
        result = most_distinct_colors(BASE_COLORS, 20)
        assert len(result) == 20
        assert result == interpolate_colors(BASE_COLORS, 20)
        # 13 pairs, two entries per pair: every other entry is a catalog color
        assert result[::2] == list(BASE_COLORS[:10])

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count_rejected(self, count: int):
        """Counts below one are precondition violations."""
        with pytest.raises(SwatchRollError, match="must be positive"):
            most_distinct_colors(BASE_COLORS, count)

    def test_empty_catalog_rejected(self):
        """An empty color list is a precondition violation."""
        with pytest.raises(SwatchRollError, match="empty catalog"):
            most_distinct_colors([], 2)


class TestMixHsl:
    """Tests for mix_hsl function."""

    def test_midpoint(self):
        """Mixing halfway moves every component halfway."""
        assert mix_hsl("hsl(0, 40%, 40%)", "hsl(100, 60%, 60%)", 0.5) == "hsl(50, 50%, 50%)"

    def test_shorter_hue_arc(self):
        """Hue crosses 0 degrees when that is the shorter way round."""
        assert mix_hsl("hsl(350, 50%, 50%)", "hsl(10, 50%, 50%)", 0.5) == "hsl(0, 50%, 50%)"

    def test_endpoints(self):
        """Ratios 0 and 1 return the endpoints."""
        a, b = "hsl(0, 50%, 50%)", "hsl(100, 50%, 50%)"
        assert mix_hsl(a, b, 0) == a
        assert mix_hsl(a, b, 1) == b


class TestInterpolateColors:
    """Tests for interpolate_colors function."""

    def test_enough_colors_returned_unchanged(self):
        """No interpolation when the input already has enough colors."""
        assert interpolate_colors(PASTEL_COLORS, 10) == list(PASTEL_COLORS)
        assert interpolate_colors(PASTEL_COLORS, 3) == list(PASTEL_COLORS)

    @pytest.mark.parametrize("target", [0, 1, 7])
    def test_empty_input(self, target: int):
        """Empty input always yields an empty list."""
        assert interpolate_colors([], target) == []

    def test_single_color_repeated(self):
        """A single color is copied to fill the target."""
        color = "hsl(140, 37%, 75%)"
        assert interpolate_colors([color], 5) == [color] * 5

    def test_two_colors(self):
        """Each pair yields its first endpoint and evenly spaced mixes."""
        result = interpolate_colors(["hsl(0, 50%, 50%)", "hsl(100, 50%, 50%)"], 5)
        assert result == [
            "hsl(0, 50%, 50%)",
            "hsl(20, 50%, 50%)",
            "hsl(40, 50%, 50%)",
            "hsl(60, 50%, 50%)",
            "hsl(80, 50%, 50%)",
        ]

    def test_three_colors(self):
        """Output stops as soon as the target is reached."""
        colors = ["hsl(0, 50%, 50%)", "hsl(100, 50%, 50%)", "hsl(200, 50%, 50%)"]
        assert interpolate_colors(colors, 5) == [
            "hsl(0, 50%, 50%)",
            "hsl(33, 50%, 50%)",
            "hsl(67, 50%, 50%)",
            "hsl(100, 50%, 50%)",
            "hsl(133, 50%, 50%)",
        ]

    def test_hue_wraps(self):
        """Interpolated hues stay within [0, 360)."""
        result = interpolate_colors(["hsl(350, 50%, 50%)", "hsl(10, 50%, 50%)"], 3)
        assert result == ["hsl(350, 50%, 50%)", "hsl(357, 50%, 50%)", "hsl(3, 50%, 50%)"]

    def test_low_saturation_endpoints(self):
        """Endpoints are mixed as given, without rounding through 8-bit RGB."""
        result = interpolate_colors(["hsl(70, 4%, 63%)", "hsl(204, 3%, 56%)"], 3)
        assert result == ["hsl(70, 4%, 63%)", "hsl(115, 4%, 61%)", "hsl(159, 3%, 58%)"]

    @pytest.mark.parametrize("target", [11, 15, 20, 37, 100])
    def test_exact_length(self, target: int):
        """Output length always matches the target."""
        result = interpolate_colors(PASTEL_COLORS, target)
        assert len(result) == target
        assert result[0] == PASTEL_COLORS[0]

    def test_output_format(self):
        """Synthesized colors use the catalog storage format."""
        for color in interpolate_colors(BASE_COLORS, 30):
            assert color.startswith("hsl(")
            h, s, l = color_numbers(color)
            assert 0 <= h < 360
            assert 0 <= s <= 100
            assert 0 <= l <= 100
