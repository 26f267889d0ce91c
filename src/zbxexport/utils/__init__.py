"""Utility functions and helpers."""

from .helpers import async_to_sync
from .log import configure_logging
from .output import (
    console,
    create_table,
    err_console,
    format_host_status,
    get_availability_color,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "async_to_sync",
    "configure_logging",
    "console",
    "create_table",
    "err_console",
    "format_host_status",
    "get_availability_color",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
