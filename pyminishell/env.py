"""The shell's ordered environment."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping


class Environment:
    """Ordered variables; a variable may exist without a value."""

    def __init__(self) -> None:
        self._vars: dict[str, str | None] = {}
        self.running = True

    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or None when unset or valueless."""
        return self._vars.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Create or update ``key``; order of first definition is kept."""
        self._vars[key] = value

    def unset(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._vars.pop(key, None)

    def to_list(self) -> list[str]:
        """Return ``KEY=VALUE`` strings for every variable that has a value."""
        return [f"{k}={v}" for k, v in self._vars.items() if v is not None]

    def items(self) -> Iterator[tuple[str, str | None]]:
        return iter(self._vars.items())

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)


def fill_env_list(env: Iterable[str] | Mapping[str, str] | None = None) -> Environment:
    """Build an Environment from ``KEY=VALUE`` strings or a mapping.

    With no argument the process environment is used.
    """
    if env is None:
        env = os.environ
    result = Environment()
    if isinstance(env, Mapping):
        for key, value in env.items():
            result.set(key, value)
        return result
    for entry in env:
        key, sep, value = entry.partition("=")
        result.set(key, value if sep else None)
    return result