"""Command-line interface for eighth-bar.

This module provides the main entry point and argument parsing for the
eighth-bar CLI tool.
"""

import argparse
import json
import platform
import shutil
import sys

from eighth_bar._version import __version__
from eighth_bar.display.colors import Colors, disable_colors
from eighth_bar.errors import (
    ConfigError,
    EighthBarError,
    InvalidColorError,
    InvalidValueError,
    InvalidWidthError,
    format_error_for_user,
    get_exit_code,
)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="eighth-bar",
        description="Render a value out of a maximum as a terminal bar with eighth-block precision",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  eighth-bar 50 100             Bar across the full terminal width
  eighth-bar 3 7 --width 12     12-column bar (10 cells plus brackets)
  eighth-bar 80 100 -c red      Fixed color instead of the fill-level color
  eighth-bar 4 10 --tmux        Output with tmux status-line color codes
  eighth-bar 4 10 --json        Show the computed layout as JSON
  eighth-bar --config           Show current configuration
  eighth-bar --config set width 30
""",
    )

    parser.add_argument("value", nargs="?", type=int, help="Current amount")
    parser.add_argument("max", nargs="?", type=int, help="Capacity of the bar")
    parser.add_argument(
        "--width",
        "-w",
        type=int,
        metavar="COLUMNS",
        help="Total width including brackets (default: config, else terminal width)",
    )
    parser.add_argument(
        "--color",
        "-c",
        metavar="COLOR",
        help="Color name, #rrggbb, or 'auto' for a fill-level color",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--tmux",
        action="store_true",
        help="Use tmux status-line color codes instead of ANSI escapes",
    )
    output.add_argument("--plain", action="store_true", help="Render without color codes")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--json", "-j", action="store_true", help="Output the computed layout as JSON"
    )
    parser.add_argument(
        "--config",
        nargs="*",
        metavar="COMMAND",
        help="Configuration commands: show (default), reset, set KEY VALUE",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and system information",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show the bucket layout on stderr and full error suggestions",
    )

    return parser


def print_version() -> None:
    """Print version and system information."""
    print(
        f"eighth-bar {__version__} "
        f"(Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}, "
        f"{platform.system()} {platform.machine()})"
    )


def handle_config_command(
    config_args: list,
    show_config_func,
    reset_config_func,
    set_config_func,
    default_config: dict,
) -> None:
    """Handle configuration subcommands.

    Args:
        config_args: List of config command arguments.
        show_config_func: Function to display current configuration.
        reset_config_func: Function to reset configuration.
        set_config_func: Function to set a configuration value.
        default_config: Dictionary of default configuration values.
    """
    if len(config_args) == 0 or config_args[0] == "show":
        show_config_func()
    elif config_args[0] == "reset":
        reset_config_func()
    elif config_args[0] == "set":
        if len(config_args) != 3:
            print(f"{Colors.RED}Error: 'set' requires KEY and VALUE arguments{Colors.RESET}")
            print("Usage: eighth-bar --config set KEY VALUE")
            print(f"\nValid keys: {', '.join(sorted(default_config.keys()))}")
            sys.exit(1)
        set_config_func(config_args[1], config_args[2])
    else:
        print(f"{Colors.RED}Error: Unknown config command '{config_args[0]}'{Colors.RESET}")
        print("Available commands: show, reset, set KEY VALUE")
        sys.exit(1)


def validate_bar_args(value, max_value, width: int) -> None:
    """Check user input before it reaches the renderer.

    Raises:
        InvalidValueError: If value or max is missing, negative, or value > max.
        InvalidWidthError: If width is negative.
    """
    if value is None or max_value is None:
        raise InvalidValueError("Both VALUE and MAX are required")
    if value < 0 or max_value < 0:
        raise InvalidValueError(f"Negative input: value={value}, max={max_value}")
    if value > max_value:
        raise InvalidValueError(f"Value {value} is greater than max {max_value}")
    if width < 0:
        raise InvalidWidthError(f"Invalid width: {width}")


def resolve_width(args_width, config: dict) -> int:
    """Pick the bar width from the flag, the config, or the terminal."""
    if args_width is not None:
        return args_width
    if config.get("width") is not None:
        return config["width"]
    return shutil.get_terminal_size().columns


def describe_layout(value: int, max_value: int, width: int) -> dict:
    """Build the JSON/verbose view of how a bar is laid out."""
    from eighth_bar.display.bar import BRACKET_WIDTH, bar_content, layout

    bar_width = max(width - BRACKET_WIDTH, 0)
    info = {
        "value": value,
        "max": max_value,
        "width": width,
        "bar_width": bar_width,
        "multiplier": None,
        "content": bar_content(value, max_value, bar_width),
        "distribution": None,
    }
    if bar_width > 0 and max_value > 0:
        buckets, multiplier = layout(value, max_value, bar_width)
        info["multiplier"] = multiplier
        info["distribution"] = buckets.to_dict()
    return info


def main() -> None:
    """Main entry point for eighth-bar CLI.

    It parses arguments and dispatches to the appropriate handler.
    """
    from eighth_bar.config.settings import (
        CONFIG_VERSION,
        DEFAULT_CONFIG,
        load_config,
        parse_config_value,
        reset_config,
        save_config,
        validate_config,
    )
    from eighth_bar.display.bar import render_bar
    from eighth_bar.display.colors import (
        get_formatter,
        is_valid_color,
        resolve_color,
        supports_color,
    )

    parser = create_parser()
    args = parser.parse_args()

    if args.no_color:
        disable_colors()

    if args.version:
        print_version()
        return

    config = load_config()

    try:
        if args.config is not None:

            def _show_config():
                print(f"{Colors.BOLD}Configuration{Colors.RESET}")
                for key in sorted(DEFAULT_CONFIG):
                    print(f"  {key}: {config.get(key)!r}")

            def _reset_config():
                reset_config()
                print(f"{Colors.GREEN}Configuration reset to defaults{Colors.RESET}")

            def _set_config(key: str, value: str):
                try:
                    parsed = parse_config_value(key, value)
                except ValueError as e:
                    raise ConfigError(f"Invalid value for '{key}': {e}") from e
                updated = {**config, key: parsed, "_config_version": CONFIG_VERSION}
                errors = validate_config(updated)
                if errors:
                    raise ConfigError(f"Cannot set '{key}'", details="; ".join(errors))
                save_config(updated)
                print(f"{Colors.GREEN}Set {key} = {parsed!r}{Colors.RESET}")

            handle_config_command(
                args.config, _show_config, _reset_config, _set_config, DEFAULT_CONFIG
            )
            return

        errors = validate_config(config)
        if errors:
            raise ConfigError("Invalid configuration", details="; ".join(errors))

        width = resolve_width(args.width, config)
        validate_bar_args(args.value, args.max, width)

        if args.json:
            print(json.dumps(describe_layout(args.value, args.max, width), indent=2))
            return

        # --no-color wins over every format choice
        if args.plain or args.no_color:
            formatter = get_formatter("plain")
        elif args.tmux:
            formatter = get_formatter("tmux")
        else:
            formatter = get_formatter(config.get("format", "ansi"))
            if formatter.name == "ansi" and not supports_color():
                formatter = get_formatter("plain")

        color = resolve_color(args.color or config.get("color", "auto"), args.value, args.max)
        if not is_valid_color(color):
            raise InvalidColorError(f"Unknown color: {color!r}")

        if args.verbose:
            info = describe_layout(args.value, args.max, width)
            print(
                f"{Colors.DIM}width={info['width']} bar_width={info['bar_width']} "
                f"multiplier={info['multiplier']} distribution={info['distribution']}"
                f"{Colors.RESET}",
                file=sys.stderr,
            )

        print(render_bar(args.value, args.max, width, color, formatter))
    except EighthBarError as e:
        print(format_error_for_user(e, verbose=args.verbose), file=sys.stderr)
        sys.exit(get_exit_code(e))


__all__ = [
    "create_parser",
    "main",
    "print_version",
    "handle_config_command",
    "validate_bar_args",
    "resolve_width",
    "describe_layout",
]
