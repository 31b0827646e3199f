"""Utility modules for scrub.

This module exports commonly used utility functions.
"""

from scrub.utils.formatting import (
    console,
    create_removal_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_removal_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
