"""Shared fixtures: stand-in login shells written as /bin/sh scripts."""

import stat
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def fake_shell(tmp_path: Path) -> Callable[..., str]:
    """Return a factory that writes an executable shell printing *output*.

    The script ignores its arguments (``-ilc env``) and exits with *status*.
    It only uses shell builtins, so it works whatever PATH the test sets.
    """

    def make(output: str | bytes, status: int = 0, stderr: str = "") -> str:
        body = tmp_path / "output.txt"
        if isinstance(output, bytes):
            body.write_bytes(output)
        else:
            body.write_text(output)
        script = tmp_path / "fakesh"
        lines = [
            "#!/bin/sh",
            f"while IFS= read -r line; do printf '%s\\n' \"$line\"; done < '{body}'",
        ]
        if stderr:
            lines.append(f"echo '{stderr}' >&2")
        lines.append(f"exit {status}")
        script.write_text("\n".join(lines) + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script)

    return make
