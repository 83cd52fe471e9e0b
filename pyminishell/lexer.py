"""Split an input line into tokens, with quote-aware word segments."""

from __future__ import annotations

from collections.abc import Iterable

from pyminishell.errors import ErrorCode, ShellError
from pyminishell.tokens import (
    QuoteType,
    Segment,
    Token,
    TokenType,
    is_special_char,
    is_whitespace,
)

_QUOTES = {'"': QuoteType.DOUBLE, "'": QuoteType.SINGLE}
_WORD_STOP = "|<>"


def _quoted_segment(line: str, pos: int) -> tuple[Segment, int]:
    quote = line[pos]
    end = line.find(quote, pos + 1)
    if end < 0:
        raise ShellError(ErrorCode.SYNTAX_ERR, "no matching quotes")
    return Segment(line[pos + 1:end], _QUOTES[quote]), end + 1


def _unquoted_segment(line: str, pos: int) -> tuple[Segment, int]:
    start = pos
    while (
        pos < len(line)
        and not is_whitespace(line[pos])
        and not is_special_char(line[pos])
    ):
        pos += 1
    return Segment(line[start:pos], QuoteType.NONE), pos


def build_segments(line: str, pos: int) -> tuple[list[Segment], int]:
    """Read one word starting at ``pos``; return its segments and the end position.

    Raises ShellError with SYNTAX_ERR when a quote is never closed.
    """
    segments: list[Segment] = []
    while (
        pos < len(line)
        and not is_whitespace(line[pos])
        and line[pos] not in _WORD_STOP
    ):
        if line[pos] in _QUOTES:
            segment, pos = _quoted_segment(line, pos)
        else:
            segment, pos = _unquoted_segment(line, pos)
        segments.append(segment)
    return segments, pos


def _redirect_token(line: str, pos: int) -> tuple[Token | None, int]:
    pair = line[pos:pos + 2]
    if pair == ">>":
        return Token(TokenType.APPEND, ">>"), pos + 2
    if pair == "<<":
        return Token(TokenType.HEREDOC, "<<"), pos + 2
    if line[pos] == ">":
        return Token(TokenType.OUT, ">"), pos + 1
    if line[pos] == "<":
        return Token(TokenType.IN, "<"), pos + 1
    return None, pos + 1


def tokenize(line: str) -> list[Token]:
    """Turn ``line`` into tokens, ending with an EOF token.

    Word tokens carry segments and have no expanded text yet.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(line):
        char = line[pos]
        if is_whitespace(char):
            pos += 1
        elif char == "|":
            tokens.append(Token(TokenType.PIPE, "|"))
            pos += 1
        elif char in "<>":
            token, pos = _redirect_token(line, pos)
            if token is not None:
                tokens.append(token)
        else:
            segments, pos = build_segments(line, pos)
            tokens.append(Token(TokenType.WORD, segments=segments))
    tokens.append(Token(TokenType.EOF, "EOF"))
    return tokens


def join_segments(segments: list[Segment]) -> tuple[str | None, bool]:
    """Concatenate segment values; return the text and whether any part was quoted.

    An empty result is None unless the first segment is quoted, and an
    empty result never counts as quoted.
    """
    if not segments:
        return None, False
    text = "".join(seg.value for seg in segments)
    if not text:
        if segments[0].q_type is QuoteType.NONE:
            return None, False
        return "", False
    quoted = any(seg.q_type is not QuoteType.NONE for seg in segments)
    return text, quoted


def assign_expanded(tokens: Iterable[Token]) -> None:
    """Fill in the expanded text of every token that does not have one yet."""
    for token in tokens:
        if token.expanded is None:
            token.expanded, token.quoted = join_segments(token.segments)