"""Utility modules for pathtrack."""

from pathtrack.utils.formatting import (
    console,
    err_console,
    print_added,
    print_error,
    print_line,
    print_removed,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_added",
    "print_error",
    "print_line",
    "print_removed",
    "print_success",
    "print_warning",
]
