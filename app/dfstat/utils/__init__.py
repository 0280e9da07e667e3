"""Utility modules for dfstat.

This module exports commonly used utility functions.
"""

from dfstat.utils.formatting import (
    create_report_console,
    err_console,
    escape_json,
    format_percent,
    format_size,
    print_error,
)

__all__ = [
    "create_report_console",
    "err_console",
    "escape_json",
    "format_percent",
    "format_size",
    "print_error",
]
