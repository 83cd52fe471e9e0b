"""Error codes, error reporting and the exception used across the shell."""

from __future__ import annotations

import errno
import os
import sys
from enum import Enum, IntEnum

PROGRAM_NAME = "minishell"


class ErrorCode(IntEnum):
    """Shell-specific error codes; numbers below 200 are plain errno values."""

    SYNTAX_ERR = 200
    TOKEN_ERR = 201
    SUBS_ERR = 202
    EXECUTE_ERR = 250
    REDIRECT_FAIL = 251
    CMD_NOT_FOUND = 252
    CD_ERR = 253
    IS_DIR = 254
    EXPORT_ERR = 255
    ENV_ERR = 256


class ErrorContext(Enum):
    """Where an error happened, which decides the resulting exit status."""

    GENERAL = 0
    EXEC = 1


def _describe(code: int, context: str | None) -> str:
    prefix = f"{context}: " if context else ""
    if code == ErrorCode.SYNTAX_ERR:
        return f"syntax error {context}" if context else "syntax error"
    if code == ErrorCode.TOKEN_ERR:
        return f"syntax error near unexpected token `{context or 'newline'}'"
    if code == ErrorCode.SUBS_ERR:
        return f"{prefix}bad substitution"
    if code == ErrorCode.EXECUTE_ERR:
        return f"{prefix}cannot execute"
    if code == ErrorCode.REDIRECT_FAIL:
        return f"{prefix}redirection failed"
    if code == ErrorCode.CMD_NOT_FOUND:
        return f"{prefix}command not found"
    if code == ErrorCode.CD_ERR:
        return f"cd: {context}" if context else "cd: error"
    if code == ErrorCode.IS_DIR:
        return f"{prefix}Is a directory"
    if code == ErrorCode.EXPORT_ERR:
        return f"export: `{context}': not a valid identifier"
    if code == ErrorCode.ENV_ERR:
        return f"env: {prefix}No such file or directory"
    return f"{prefix}{os.strerror(code)}"


def _status(code: int, ctx: ErrorContext) -> int:
    if code in (ErrorCode.SYNTAX_ERR, ErrorCode.TOKEN_ERR):
        return 2
    if code in (ErrorCode.CMD_NOT_FOUND, ErrorCode.ENV_ERR):
        return 127
    if code in (ErrorCode.IS_DIR, ErrorCode.EXECUTE_ERR):
        return 126
    if ctx is ErrorContext.EXEC:
        if code == errno.ENOENT:
            return 127
        if code == errno.EACCES:
            return 126
    return 1


class ShellError(Exception):
    """An error the shell reports to the user and turns into an exit status."""

    def __init__(
        self,
        code: int,
        context: str | None = None,
        ctx: ErrorContext = ErrorContext.GENERAL,
    ) -> None:
        self.code = int(code)
        self.context = context
        self.ctx = ctx
        super().__init__(_describe(self.code, context))

    @property
    def status(self) -> int:
        """Exit status this error leaves behind."""
        return _status(self.code, self.ctx)

    @property
    def message(self) -> str:
        """Human-readable message, without the program prefix."""
        return _describe(self.code, self.context)


def check_error(err_code: int, context: str | None, ctx: ErrorContext) -> int:
    """Print the message for ``err_code`` to stderr and return the exit status."""
    code = int(err_code)
    print(f"{PROGRAM_NAME}: {_describe(code, context)}", file=sys.stderr)
    return _status(code, ctx)