"""eighth-bar - fixed-width terminal bars with eighth-block precision.

This package renders a value out of a maximum as a bracketed bar of
Unicode block characters, resolving the partially filled cell to one
eighth of a column.
"""

from eighth_bar._version import __version__
from eighth_bar.display.bar import BarSpec, render_bar
from eighth_bar.display.buckets import distribute

__all__ = [
    "__version__",
    "BarSpec",
    "render_bar",
    "distribute",
]
