"""Bracketed terminal bar rendering with eighth-block precision.

Renders ``value`` out of ``max_value`` into a fixed number of columns:
full blocks, at most one partial block, then empty cells, framed by
brackets and wrapped in color sequences supplied by a formatter.
"""

from __future__ import annotations

from dataclasses import dataclass

from eighth_bar.display.buckets import Distribution, Region, distribute
from eighth_bar.display.colors import AnsiFormatter, ColorFormatter

EMPTY_CHAR = " "
FILLED_CHAR = "█"
# Ordered from emptiest to fullest; the last glyph is the full block
PARTIAL_CHARS = ("▏", "▎", "▍", "▌", "▋", "▊", "▉", FILLED_CHAR)

# Columns taken by the surrounding brackets
BRACKET_WIDTH = 2


def resolution_multiplier(max_value: int, bar_width: int) -> int:
    """Get the factor that scales ``max_value`` past the number of cells.

    When there are fewer ticks than cells some cells would hold no ticks
    at all, so both value and max are scaled until every cell holds at
    least one.

    Args:
        max_value: Maximum of the bar (positive).
        bar_width: Number of content cells.

    Returns:
        1 if ``max_value >= bar_width``, else the smallest integer that
        makes ``max_value * multiplier > bar_width``.
    """
    if max_value >= bar_width:
        return 1
    return bar_width // max_value + 1


def partial_glyph(leftover: int, cell_capacity: int) -> str:
    """Pick the eighth-block glyph for ``leftover`` ticks of one cell."""
    sub = distribute(cell_capacity, leftover, len(PARTIAL_CHARS))
    if sub.region is Region.LARGER:
        index = sub.remainder // sub.larger.size
    else:
        index = sub.larger.count + sub.remainder // sub.smaller.size
    return PARTIAL_CHARS[index]


def render_partial_region(ticks: int, cell_count: int, cell_capacity: int) -> str:
    """Render ``ticks`` over ``cell_count`` cells of ``cell_capacity`` ticks each.

    Returns:
        Exactly ``cell_count`` characters.
    """
    filled_cells, leftover = divmod(ticks, cell_capacity)
    if leftover == 0:
        return FILLED_CHAR * filled_cells + EMPTY_CHAR * (cell_count - filled_cells)

    return (
        FILLED_CHAR * filled_cells
        + partial_glyph(leftover, cell_capacity)
        + EMPTY_CHAR * (cell_count - filled_cells - 1)
    )


def layout(value: int, max_value: int, bar_width: int) -> tuple[Distribution, int]:
    """Distribute the (rescaled) bar over ``bar_width`` cells.

    Returns:
        Tuple of (distribution, multiplier applied to value and max).
    """
    multiplier = resolution_multiplier(max_value, bar_width)
    buckets = distribute(max_value * multiplier, value * multiplier, bar_width)
    return buckets, multiplier


def bar_content(value: int, max_value: int, bar_width: int) -> str:
    """Render the glyphs between the brackets, without color sequences."""
    assert 0 <= value <= max_value, f"value ({value}) must be within 0..{max_value}"
    if bar_width <= 0:
        return ""
    if max_value == 0:
        return EMPTY_CHAR * bar_width

    buckets, _ = layout(value, max_value, bar_width)
    if buckets.region is Region.LARGER:
        return render_partial_region(
            buckets.remainder, buckets.larger.count, buckets.larger.size
        ) + EMPTY_CHAR * buckets.smaller.count

    return FILLED_CHAR * buckets.larger.count + render_partial_region(
        buckets.remainder, buckets.smaller.count, buckets.smaller.size
    )


def render_bar(
    value: int,
    max_value: int,
    available_width: int,
    color: str,
    formatter: ColorFormatter | None = None,
) -> str:
    """Render a bracketed, colored bar that is ``available_width`` columns wide.

    Args:
        value: Current amount (0 <= value <= max_value).
        max_value: Capacity of the bar.
        available_width: Columns for the whole bar, brackets included.
        color: Color token understood by ``formatter``.
        formatter: Color collaborator. Defaults to ANSI escape sequences.

    Returns:
        The bar, or an empty string if there is no room for any cell.
    """
    if available_width <= BRACKET_WIDTH:
        return ""

    if formatter is None:
        formatter = AnsiFormatter()

    content = bar_content(value, max_value, available_width - BRACKET_WIDTH)
    return f"[{formatter.start(color)}{content}{formatter.reset()}]"


@dataclass(frozen=True)
class BarSpec:
    """Inputs of a single bar render."""

    value: int
    max_value: int
    available_width: int
    color: str

    @property
    def bar_width(self) -> int:
        return max(self.available_width - BRACKET_WIDTH, 0)

    def render(self, formatter: ColorFormatter | None = None) -> str:
        return render_bar(
            self.value, self.max_value, self.available_width, self.color, formatter
        )


__all__ = [
    "EMPTY_CHAR",
    "FILLED_CHAR",
    "PARTIAL_CHARS",
    "BRACKET_WIDTH",
    "BarSpec",
    "bar_content",
    "layout",
    "partial_glyph",
    "render_bar",
    "render_partial_region",
    "resolution_multiplier",
]
