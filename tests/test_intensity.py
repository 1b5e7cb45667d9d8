"""
Tests for commit-count intensity levels.
"""

import pytest

from git_heatmap.intensity import (
    LEGEND_LABELS,
    LEVEL_COLORS,
    IntensityLevel,
    bucket,
    color_for,
)


class TestBucket:
    """Tests for the bucket function."""

    def test_level_0_for_no_commits(self):
        assert bucket(0) == IntensityLevel.L0

    def test_boundaries(self):
        """Upper bounds are inclusive."""
        counts = [0, 1, 5, 6, 10, 11, 15, 16, 20, 21, 1000]
        expected = [
            IntensityLevel.L0,
            IntensityLevel.L1,
            IntensityLevel.L1,
            IntensityLevel.L2,
            IntensityLevel.L2,
            IntensityLevel.L3,
            IntensityLevel.L3,
            IntensityLevel.L4,
            IntensityLevel.L4,
            IntensityLevel.L5,
            IntensityLevel.L5,
        ]
        assert [bucket(n) for n in counts] == expected

    def test_same_result_on_repeated_calls(self):
        assert bucket(12) == bucket(12) == IntensityLevel.L3

    def test_negative_count_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            bucket(-1)


class TestColors:
    """Tests for the color and legend tables."""

    def test_every_level_has_color_and_label(self):
        for level in IntensityLevel:
            assert level in LEVEL_COLORS
            assert level in LEGEND_LABELS

    def test_color_for_uses_bucket(self):
        assert color_for(0) == (178, 215, 155)
        assert color_for(3) == (139, 195, 74)
        assert color_for(25) == (0, 64, 0)

    def test_legend_labels_have_equal_width(self):
        widths = {len(label) for label in LEGEND_LABELS.values()}
        assert widths == {7}
