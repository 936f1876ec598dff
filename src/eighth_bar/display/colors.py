"""Terminal color handling and detection.

Provides the color formatters that wrap a bar's content (ANSI escape
sequences, tmux status-line codes, or nothing), ANSI codes for the
tool's own messages, and detection of color support.
"""

import os
import platform
import re
import sys

from eighth_bar.errors import InvalidColorError


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# SGR foreground codes by color name
FOREGROUND_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "gray": 90,
    "bright_red": 91,
    "bright_green": 92,
    "bright_yellow": 93,
    "bright_blue": 94,
    "bright_magenta": 95,
    "bright_cyan": 96,
    "bright_white": 97,
}

HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

AUTO_COLOR = "auto"


def is_valid_color(color: str) -> bool:
    """Check whether a color token is a known name or a ``#rrggbb`` value."""
    return color in FOREGROUND_CODES or bool(HEX_COLOR.match(color))


class ColorFormatter:
    """Produces the text that switches the foreground color on and off.

    The base formatter emits nothing, which gives an uncolored bar.
    """

    name = "plain"

    def start(self, color: str) -> str:
        return ""

    def reset(self) -> str:
        return ""


class PlainFormatter(ColorFormatter):
    """No color sequences at all."""


class AnsiFormatter(ColorFormatter):
    """ANSI SGR escape sequences."""

    name = "ansi"

    def start(self, color: str) -> str:
        if color in FOREGROUND_CODES:
            return f"\033[{FOREGROUND_CODES[color]}m"
        match = HEX_COLOR.match(color)
        if match:
            r, g, b = (int(part, 16) for part in match.groups())
            return f"\033[38;2;{r};{g};{b}m"
        raise InvalidColorError(f"Unknown color: {color!r}")

    def reset(self) -> str:
        return "\033[0m"


class TmuxFormatter(ColorFormatter):
    """Tmux status-line style codes (``#[fg=color]``)."""

    name = "tmux"

    def start(self, color: str) -> str:
        if not is_valid_color(color):
            raise InvalidColorError(f"Unknown color: {color!r}")
        # tmux spells the bright variants without the underscore
        return f"#[fg={color.replace('_', '')}]"

    def reset(self) -> str:
        return "#[default]"


FORMATTERS = {
    "ansi": AnsiFormatter,
    "tmux": TmuxFormatter,
    "plain": PlainFormatter,
}


def get_formatter(name: str) -> ColorFormatter:
    """Create the formatter registered under ``name``.

    Raises:
        InvalidColorError: If no formatter has that name.
    """
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise InvalidColorError(
            f"Unknown output format: {name!r}",
            suggestion=f"Use one of: {', '.join(sorted(FORMATTERS))}.",
        ) from None


def get_fill_color(value: int, max_value: int) -> str:
    """Get the bar color for a fill level.

    Args:
        value: Current amount.
        max_value: Capacity.

    Returns:
        Color name: green below 50%, yellow from 50%, red from 80%.
    """
    if max_value <= 0:
        return "green"
    percentage = value * 100 / max_value
    if percentage >= 80:
        return "red"
    elif percentage >= 50:
        return "yellow"
    return "green"


def resolve_color(color: str, value: int, max_value: int) -> str:
    """Replace the ``auto`` token with a fill-level color."""
    if color == AUTO_COLOR:
        return get_fill_color(value, max_value)
    return color


def supports_color() -> bool:
    """Check if the terminal supports color output.

    Returns:
        True if colors should be displayed, False otherwise.
    """
    # Any non-empty value disables color
    if os.environ.get("EIGHTH_BAR_NO_COLOR") or os.environ.get("NO_COLOR"):
        return False
    if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
        return False
    if platform.system() == "Windows":
        return bool(os.environ.get("TERM") or os.environ.get("WT_SESSION"))
    return True


def disable_colors() -> None:
    """Blank every message color code."""
    for attr in dir(Colors):
        if not attr.startswith("_"):
            setattr(Colors, attr, "")


def init_colors() -> None:
    """Initialize message colors based on terminal support."""
    if not supports_color():
        disable_colors()


# Auto-initialize on import
init_colors()

__all__ = [
    "AUTO_COLOR",
    "Colors",
    "FOREGROUND_CODES",
    "FORMATTERS",
    "ColorFormatter",
    "PlainFormatter",
    "AnsiFormatter",
    "TmuxFormatter",
    "get_formatter",
    "get_fill_color",
    "resolve_color",
    "is_valid_color",
    "supports_color",
    "disable_colors",
    "init_colors",
]
