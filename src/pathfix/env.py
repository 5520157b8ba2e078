"""Environment accessors: explicit get/set over a KEY=VALUE store.

Everything that reads or writes ``PATH`` and ``SHELL`` goes through one of
these instead of touching ``os.environ`` directly:

- **Environment** wraps a private dict.  Tests and embedding code use it to
  run a fix without mutating the real process.
- **ProcessEnvironment** is backed by ``os.environ``, so writes are seen by
  any subprocess spawned afterwards (but never by the parent process).
"""

from __future__ import annotations

import os
from collections.abc import MutableMapping


class Environment:
    """A key-value store for environment variables.

    Each instance owns its own copy of the initial values, so modifying
    one does not affect any other.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._vars: MutableMapping[str, str] = dict(initial) if initial else {}

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value


class ProcessEnvironment(Environment):
    """The environment of the running process (``os.environ``)."""

    def __init__(self) -> None:
        self._vars = os.environ
