"""Login shell probing: find the user's shell, run it, parse its env dump."""

from __future__ import annotations

import subprocess
import sys

from pathfix.env import Environment
from pathfix.errors import ConfigurationError, ShellExecutionError

# Interactive + login so both profile and rc files are sourced, then run env.
SHELL_FLAGS = "-ilc"
ENV_COMMAND = "env"


def default_shell(environ: Environment) -> str:
    """Return the shell named by $SHELL.

    Raises ConfigurationError if it is unset or blank.
    """
    shell = environ.get("SHELL") or ""
    if not shell.strip():
        raise ConfigurationError("no default shell configured: SHELL is not set")
    return shell


def read_login_environment(shell: str) -> str:
    """Run the shell as an interactive login shell and return the output of env.

    subprocess.run drains stdout while waiting, so a large environment
    cannot fill the pipe and deadlock. There is no timeout.

    Output is decoded the way os.environ decodes, so undecodable bytes in a
    directory name survive the round trip back into the environment.
    """
    try:
        result = subprocess.run(
            [shell, SHELL_FLAGS, ENV_COMMAND],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            encoding=sys.getfilesystemencoding(),
            errors=sys.getfilesystemencodeerrors(),
            check=True,
        )
    except OSError as err:
        raise ShellExecutionError(shell, f"failed to start shell: {err}") from err
    except subprocess.CalledProcessError as err:
        message = f"shell exited with status {err.returncode}"
        stderr = (err.stderr or "").strip()
        if stderr:
            message += f": {stderr.splitlines()[-1]}"
        raise ShellExecutionError(
            shell, message, returncode=err.returncode, stderr=err.stderr or ""
        ) from err
    return result.stdout


def _split_line(line: str) -> tuple[str, str] | None:
    # Only the first '=' separates key from value; values may contain '='.
    key, sep, value = line.partition("=")
    if not sep or not key:
        return None
    return key, value


def parse_env_output(text: str) -> dict[str, str]:
    """Parse KEY=VALUE lines into a dict. The first occurrence of a key wins.

    Lines without '=' are skipped. Values spanning several lines are not
    supported: only the first line is kept.
    """
    snapshot: dict[str, str] = {}
    for line in text.splitlines():
        parsed = _split_line(line)
        if parsed is None:
            continue
        key, value = parsed
        snapshot.setdefault(key, value)
    return snapshot


def login_shell_path(environ: Environment) -> str | None:
    """Return the PATH the user's login shell reports, or None if it reports none."""
    shell = default_shell(environ)
    value = parse_env_output(read_login_environment(shell)).get("PATH")
    return value or None
