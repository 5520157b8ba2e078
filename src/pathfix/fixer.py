"""Merge the login shell's PATH into the current process's PATH."""

from __future__ import annotations

import os
import sys

from pathfix.env import Environment, ProcessEnvironment
from pathfix.shell import login_shell_path

# GUI-launched processes on Windows already inherit the user's PATH.
SKIPPED_PLATFORMS = ("win32",)


def split_path(value: str) -> list[str]:
    """Split a PATH-style string into unique, non-empty segments.

    Order of first appearance is kept.
    """
    return list(dict.fromkeys(seg for seg in value.split(os.pathsep) if seg))


def missing_segments(current: str, discovered: str) -> list[str]:
    """Return the discovered segments that are not already in current."""
    existing = set(current.split(os.pathsep))
    return [seg for seg in split_path(discovered) if seg not in existing]


def merge_paths(current: str, discovered: str) -> str:
    """Append the new segments of discovered to current.

    If current is blank the result is just the discovered segments.
    """
    if not current.strip():
        return os.pathsep.join(split_path(discovered))

    new = missing_segments(current, discovered)
    if not new:
        return current
    return os.pathsep.join([current, *new])


def fix(environ: Environment | None = None, platform: str | None = None) -> bool:
    """Append the login shell's PATH entries to the PATH of *environ*.

    Defaults to the running process's environment and platform. Returns
    True if PATH was rewritten, False if there was nothing to do.

    Raises:
        ConfigurationError: SHELL is not set.
        ShellExecutionError: the shell could not be run or exited non-zero.

    """
    if (platform or sys.platform) in SKIPPED_PLATFORMS:
        return False
    if environ is None:
        environ = ProcessEnvironment()

    discovered = login_shell_path(environ)
    if discovered is None:
        return False

    current = environ.get("PATH") or ""
    merged = merge_paths(current, discovered)
    if merged == current:
        return False

    environ.set("PATH", merged)
    return True
