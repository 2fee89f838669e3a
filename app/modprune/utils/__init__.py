"""Utility modules for modprune.

This module exports commonly used console helpers.
"""

from modprune.utils.formatting import (
    configure_logging,
    console,
    err_console,
    format_duration,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "format_duration",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
