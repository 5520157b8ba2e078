"""CLI entry point: argparse setup and command dispatch."""

from __future__ import annotations

import argparse
import sys

from pathfix import __version__
from pathfix.env import ProcessEnvironment
from pathfix.errors import PathFixError
from pathfix.fixer import fix, missing_segments
from pathfix.shell import login_shell_path
from pathfix.utils import error, info, print_list


def cmd_fix(args: argparse.Namespace) -> int:
    """Show PATH before and after merging in the login shell's PATH."""
    environ = ProcessEnvironment()
    info(f"Before fixing: {environ.get('PATH', '')}\n")
    try:
        changed = fix(environ)
    except PathFixError as err:
        error(str(err))
        return 1
    info(f"After fixing: {environ.get('PATH', '')}")
    if not changed:
        info("\nPATH unchanged.")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print the PATH reported by the login shell."""
    try:
        value = login_shell_path(ProcessEnvironment())
    except PathFixError as err:
        error(str(err))
        return 1
    if value is None:
        info("Login shell reported no PATH.")
    else:
        info(value)
    return 0


def cmd_missing(args: argparse.Namespace) -> int:
    """List login shell PATH entries missing from the current PATH."""
    environ = ProcessEnvironment()
    try:
        value = login_shell_path(environ)
    except PathFixError as err:
        error(str(err))
        return 1
    new = missing_segments(environ.get("PATH") or "", value or "")
    info("Entries `pathfix fix` would append:")
    print_list(new)
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="pathfix",
        description="Merge your login shell's PATH into the current process",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("fix", help="Fix PATH and show it before and after")
    subparsers.add_parser("show", help="Print the PATH your login shell reports")
    subparsers.add_parser("missing", help="List entries fix would append")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    dispatch = {
        "fix": cmd_fix,
        "show": cmd_show,
        "missing": cmd_missing,
    }

    handler = dispatch.get(args.command)
    if handler:
        sys.exit(handler(args))
    else:
        parser.print_help()
        sys.exit(1)
