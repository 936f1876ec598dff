"""Display components for terminal output.

Modules:
    buckets: Even distribution of ticks over cells
    bar: Bracketed bar rendering with eighth-block precision
    colors: Color formatters and terminal color detection
"""

from eighth_bar.display.bar import BarSpec, bar_content, render_bar, render_partial_region
from eighth_bar.display.buckets import BucketShare, Distribution, Region, distribute
from eighth_bar.display.colors import (
    AnsiFormatter,
    ColorFormatter,
    Colors,
    PlainFormatter,
    TmuxFormatter,
    get_fill_color,
    get_formatter,
    init_colors,
    supports_color,
)

__all__ = [
    "BarSpec",
    "bar_content",
    "render_bar",
    "render_partial_region",
    "BucketShare",
    "Distribution",
    "Region",
    "distribute",
    "Colors",
    "ColorFormatter",
    "AnsiFormatter",
    "TmuxFormatter",
    "PlainFormatter",
    "get_formatter",
    "get_fill_color",
    "init_colors",
    "supports_color",
]
