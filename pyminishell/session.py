"""Shell state that lives for the whole run and per-line session state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pyminishell.env import Environment
from pyminishell.tokens import Token


@dataclass
class Shell:
    """Long-lived state: environment, last exit status, saved stdin/stdout."""

    env: Environment
    status: int = 0
    saved_fds: tuple[int, int] | None = None


@dataclass
class Session:
    """State for processing one input line."""

    shell: Shell
    tokens: list[Token] = field(default_factory=list)
    ast: Any = None
    line: str | None = None
    prompt: str | None = None
    heredoc_count: int = 0

    def reset(self) -> None:
        """Drop the prompt, tokens and line, and restart heredoc numbering."""
        self.prompt = None
        self.tokens = []
        self.line = None
        self.heredoc_count = 0