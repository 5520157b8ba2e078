"""pathfix: merge the login shell's PATH into the current process."""

from pathfix.errors import ConfigurationError, PathFixError, ShellExecutionError
from pathfix.fixer import fix, merge_paths, missing_segments, split_path

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "PathFixError",
    "ShellExecutionError",
    "fix",
    "merge_paths",
    "missing_segments",
    "split_path",
]
