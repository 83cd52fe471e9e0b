"""Variable expansion of word segments: ``$NAME``, ``$?`` and ``$<digit>``."""

from __future__ import annotations

from collections.abc import Iterable

from pyminishell.env import Environment
from pyminishell.errors import ErrorCode, ShellError
from pyminishell.tokens import QuoteType, Segment, Token, TokenType, is_whitespace

_NAME_STOP = "'\"$"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def check_expand_case(c: str) -> bool:
    """True when a ``$`` followed by ``c`` starts an expansion."""
    return _is_alpha(c) or c == "_" or c == "?" or _is_digit(c)


def is_valid_var(var: str) -> bool:
    """True when ``var`` starts like a variable name (letter or underscore)."""
    return bool(var) and (_is_alpha(var[0]) or var[0] == "_")


def has_bad_substitution(raw: str) -> bool:
    """True when an opening brace is followed later by another one."""
    return raw.count("{") >= 2


def _extract_var(raw: str, pos: int) -> tuple[str, int]:
    """Return the variable text starting at ``pos`` and how many characters it spans."""
    rest = raw[pos:]
    if rest.startswith("{") and "}" in rest:
        close = rest.index("}")
        return rest[1:close], close + 1
    if rest.startswith("?"):
        return "?", 1
    end = 0
    while end < len(rest) and not is_whitespace(rest[end]) and rest[end] not in _NAME_STOP:
        end += 1
    return rest[:end], end


def _lookup(var: str, env: Environment, status: int) -> str:
    if is_valid_var(var):
        return env.get(var) or ""
    if var and _is_digit(var[0]):
        return var[1:]
    if var.startswith("?"):
        return str(status)
    return ""


def expand_value(raw: str, env: Environment, status: int) -> str:
    """Replace every expandable ``$`` reference in ``raw``.

    A name runs up to whitespace, a quote or the next ``$``; unknown or
    valueless variables become empty, ``$?`` becomes ``status`` and a
    digit drops itself, keeping what follows it.
    """
    parts: list[str] = []
    i = 0
    length = len(raw)
    while i < length:
        if raw[i] == "$" and i + 1 < length and check_expand_case(raw[i + 1]):
            var, span = _extract_var(raw, i + 1)
            parts.append(_lookup(var, env, status))
            i += 1 + span
        else:
            parts.append(raw[i])
            i += 1
    return "".join(parts)


def expand_segment_value(segment: Segment, env: Environment, status: int) -> str:
    """Return the expanded value of ``segment``; single-quoted text stays as is.

    Raises ShellError with SUBS_ERR for a bad substitution.
    """
    value = segment.value
    if "$" in value and segment.q_type is not QuoteType.SINGLE:
        if has_bad_substitution(value):
            raise ShellError(ErrorCode.SUBS_ERR, value)
        return expand_value(value, env, status)
    return value


def expand_tokens(tokens: Iterable[Token], env: Environment, status: int) -> None:
    """Expand the segments of every token in place, except heredoc delimiters."""
    previous: Token | None = None
    for token in tokens:
        if previous is None or previous.type is not TokenType.HEREDOC:
            for segment in token.segments:
                segment.value = expand_segment_value(segment, env, status)
        previous = token