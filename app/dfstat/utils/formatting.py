"""Formatting utilities for report values and Rich console output.

Provides byte humanization, JSON string escaping and the shared
consoles used for CLI output.
"""

import sys

from rich.console import Console
from rich.markup import escape

from dfstat.core.theme import get_theme

# Binary prefixes, index 1 = K (1024) through 8 = Y (1024**8)
SIZE_SUFFIXES = "KMGTPEZY"


def format_size(count: int, unit_size: int = 1) -> str:
    """Format a count of units as a human-readable binary size.

    Values below 1024 are returned as plain integers. Larger values are
    scaled by powers of 1024 and always carry exactly two fractional
    digits and a suffix letter, rounded half-up.

    Args:
        count: Number of units (non-negative).
        unit_size: Size of one unit in bytes (1 for raw counts).

    Returns:
        Formatted string, e.g. "0", "512", "6.50M".

    Example:
        >>> format_size(6_815_744)
        '6.50M'
        >>> format_size(3, 4096)
        '12.00K'
    """
    value = count * unit_size
    if value == 0:
        return "0"

    suffix_index = 0
    divisor = 1
    while value >= divisor * 1024 and suffix_index < len(SIZE_SUFFIXES):
        divisor *= 1024
        suffix_index += 1

    if suffix_index == 0:
        return str(value)

    # Fixed-point with two decimals: hundredths of the scaled value
    hundredths = (value * 200 + divisor) // (divisor * 2)
    whole, fraction = divmod(hundredths, 100)
    return f"{whole}.{fraction:02d}{SIZE_SUFFIXES[suffix_index - 1]}"


def format_percent(used: int, total: int) -> str:
    """Format used/total as a percentage with two decimals.

    Args:
        used: Used units.
        total: Total units. Must be non-zero.

    Returns:
        Percentage string without the % sign, e.g. "50.00".

    Raises:
        ValueError: If total is zero.
    """
    if total == 0:
        msg = "Cannot compute a percentage of zero total"
        raise ValueError(msg)
    return f"{used * 100.0 / total:.2f}"


def escape_json(text: str) -> str:
    """Escape a string for use inside a JSON string literal.

    Only double quotes and backslashes are escaped.
    """
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared stderr console (theme loaded once at import)
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_report_console(color: bool = False) -> Console:
    """Create the console a report is rendered to.

    Renderers write to the console file directly and use the console
    for its theme and color system. Color is forced on (256 colors) when
    requested, even when stdout is not a terminal, and fully disabled
    otherwise.

    Args:
        color: Whether styled fields are emitted with ANSI color codes.

    Returns:
        Rich Console writing to stdout.
    """
    return Console(
        theme=get_theme(),
        color_system="256" if color else None,
        force_terminal=color,
        no_color=not color,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
    )


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}", soft_wrap=True)
