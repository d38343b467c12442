"""Standardized terminal output utilities.

All user-facing CLI messages should use these functions for consistent
formatting across the application. Diagnostics go to standard output
unless another file is passed, so a lint run can be captured with a
single redirect.

Basic Usage:
    from appstream_lint.output import success, info, warn, error, detail

    success("Validation complete: org.example.App.metainfo.xml")
    info("Checking org.example.App.metainfo.xml")
    warn("metadata_license: Metadata license is not allowed")
    error("component_type: Type must be 'desktop-application'")
    detail("Expected: desktop-application, desktop")
"""

from __future__ import annotations

from typing import TextIO

import click

# ANSI color codes via click's style system
_STYLES = {
    "success": {"fg": "green"},
    "info": {"fg": "blue"},
    "warn": {"fg": "yellow"},
    "error": {"fg": "red"},
    "detail": {"fg": "bright_black"},  # Dimmed/gray
}

_PREFIXES = {
    "success": "✓",  # checkmark
    "info": "→",  # arrow
    "warn": "⚠",  # warning
    "error": "✗",  # X
    "detail": " ",  # space (no prefix, just indent)
}


def _output(message: str, style: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Internal helper for styled output.

    Args:
        message: The message to display.
        style: The style name (success, error, info, warn, detail).
        file: File to write to (default: stdout).
        nl: Whether to print a newline after the message.
    """
    prefix = _PREFIXES[style]
    fg_color = _STYLES[style]["fg"]
    styled_prefix = click.style(prefix, fg=fg_color)
    styled_message = click.style(message, fg=fg_color)
    click.echo(f"{styled_prefix} {styled_message}", file=file, nl=nl)


def success(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print a success message with green checkmark.

    Example:
        >>> success("Validation complete: org.example.App.metainfo.xml")
        ✓ Validation complete: org.example.App.metainfo.xml
    """
    _output(message, "success", file=file, nl=nl)


def info(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print an info message with blue arrow."""
    _output(message, "info", file=file, nl=nl)


def warn(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print a warning message with yellow warning symbol.

    Example:
        >>> warn("screenshots_present: No screenshots found")
        ⚠ screenshots_present: No screenshots found
    """
    _output(message, "warn", file=file, nl=nl)


def error(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print an error message with red X.

    Example:
        >>> error("name_length: Name must be at least 2 characters long")
        ✗ name_length: Name must be at least 2 characters long
    """
    _output(message, "error", file=file, nl=nl)


def detail(message: str, *, file: TextIO | None = None, nl: bool = True) -> None:
    """Print a detail message in dimmed text."""
    _output(message, "detail", file=file, nl=nl)
