"""Output helpers for the command line."""

from __future__ import annotations

import sys


def print_list(items: list[str]) -> None:
    """Print one item per line, indented, or a placeholder if empty."""
    if not items:
        print("  (none)")
        return
    for item in items:
        print(f"  {item}")


def error(message: str) -> None:
    """Print an error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


def info(message: str) -> None:
    """Print an info message."""
    print(message)
