"""Token and segment types produced by the lexer, plus character classes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class TokenType(Enum):
    WORD = 0
    PIPE = 1
    IN = 2
    OUT = 3
    APPEND = 4
    HEREDOC = 5
    EOF = 6


class QuoteType(Enum):
    NONE = 0
    SINGLE = 1
    DOUBLE = 2


@dataclass
class Segment:
    """A run of a word written with one kind of quoting."""

    value: str
    q_type: QuoteType = QuoteType.NONE


@dataclass
class Token:
    """A lexical token; word tokens carry their segments."""

    type: TokenType
    expanded: str | None = None
    quoted: bool = False
    segments: list[Segment] = field(default_factory=list)


def is_whitespace(c: str) -> bool:
    """True for space and the characters from tab to carriage return."""
    return c == " " or "\t" <= c <= "\r"


def is_special_char(c: str) -> bool:
    """True for characters that end an unquoted segment."""
    return c in ("|", "<", ">", "'", '"')


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens and their segments in a readable debug form."""
    tokens = list(tokens)
    if not tokens:
        return "No tokens to print.\n"
    lines = []
    for token in tokens:
        expanded = "(null)" if token.expanded is None else token.expanded
        segments = "".join(f"{seg.value} " for seg in token.segments)
        lines.append(f"[T_{token.type.name}] {expanded}\n  {segments}\n")
    return "".join(lines)