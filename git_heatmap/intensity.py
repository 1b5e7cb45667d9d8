"""
Commit-count intensity levels for heatmap coloring.
"""

from enum import IntEnum


class IntensityLevel(IntEnum):
    """Discrete color tier for a day's commit count."""

    L0 = 0
    L1 = 1
    L2 = 2
    L3 = 3
    L4 = 4
    L5 = 5


# Background color per level as an (r, g, b) triple
LEVEL_COLORS: dict[IntensityLevel, tuple[int, int, int]] = {
    IntensityLevel.L0: (178, 215, 155),  # #B2D79B light green
    IntensityLevel.L1: (139, 195, 74),  # #8BC34A medium green
    IntensityLevel.L2: (34, 139, 34),  # #228B22 forest green
    IntensityLevel.L3: (0, 100, 0),  # #006400 dark green
    IntensityLevel.L4: (0, 128, 128),  # #008080 teal
    IntensityLevel.L5: (0, 64, 0),  # #004000 darkest green
}

LEGEND_LABELS: dict[IntensityLevel, str] = {
    IntensityLevel.L0: "  .0.  ",
    IntensityLevel.L1: " *1-5* ",
    IntensityLevel.L2: "*06-10*",
    IntensityLevel.L3: "*11-15*",
    IntensityLevel.L4: "*16-20*",
    IntensityLevel.L5: " *20<* ",
}


def bucket(count: int) -> IntensityLevel:
    """
    Map a commit count to its intensity level.

    Args:
        count: Number of commits for the day (must be >= 0)

    Returns:
        Level from L0-L5:
            L0: No commits
            L1: 1-5 commits
            L2: 6-10 commits
            L3: 11-15 commits
            L4: 16-20 commits
            L5: 21+ commits

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Commit count must be non-negative, got {count}")

    if count == 0:
        return IntensityLevel.L0
    elif count <= 5:
        return IntensityLevel.L1
    elif count <= 10:
        return IntensityLevel.L2
    elif count <= 15:
        return IntensityLevel.L3
    elif count <= 20:
        return IntensityLevel.L4
    else:
        return IntensityLevel.L5


def color_for(count: int) -> tuple[int, int, int]:
    """Return the RGB background color for a commit count."""
    return LEVEL_COLORS[bucket(count)]
