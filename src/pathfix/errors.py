"""Exceptions raised while repairing PATH."""

from __future__ import annotations


class PathFixError(Exception):
    """Base class for every pathfix failure."""


class ConfigurationError(PathFixError):
    """The environment does not say which shell to run."""


class ShellExecutionError(PathFixError):
    """The login shell could not be started or exited with a failure.

    returncode is None when the process never started.
    """

    def __init__(
        self,
        shell: str,
        message: str,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(f"{shell}: {message}")
        self.shell = shell
        self.returncode = returncode
        self.stderr = stderr
