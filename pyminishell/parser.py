"""Build the pipeline syntax tree from a token list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from pyminishell.errors import ErrorCode, ShellError
from pyminishell.tokens import Token, TokenType


class AstType(Enum):
    PIPE = 0
    COMMAND = 1


class RedirType(Enum):
    IN = 0
    OUT = 1
    APPEND = 2
    HEREDOC = 3

    @property
    def symbol(self) -> str:
        """The operator as written on the command line."""
        return _REDIR_SYMBOLS[self]


_REDIR_SYMBOLS = {
    RedirType.IN: "<",
    RedirType.OUT: ">",
    RedirType.APPEND: ">>",
    RedirType.HEREDOC: "<<",
}

_TOKEN_TO_REDIR = {
    TokenType.IN: RedirType.IN,
    TokenType.OUT: RedirType.OUT,
    TokenType.APPEND: RedirType.APPEND,
    TokenType.HEREDOC: RedirType.HEREDOC,
}

_AST_LABELS = {
    AstType.PIPE: "AST_PIPE:    ",
    AstType.COMMAND: "AST_COMMAND: ",
}


@dataclass
class Redirect:
    """One redirection of a command; ``connection`` is the file or delimiter."""

    type: RedirType
    connection: str
    quoted: bool = False


@dataclass
class AstNode:
    """A pipe with two children, or a command with arguments and redirects."""

    type: AstType
    argv: list[str] = field(default_factory=list)
    redirects: list[Redirect] = field(default_factory=list)
    left: AstNode | None = None
    right: AstNode | None = None


def redirect_type(token_type: TokenType) -> RedirType:
    """Map a redirection token type to its redirect type.

    Raises ValueError for token types that are not redirections.
    """
    try:
        return _TOKEN_TO_REDIR[token_type]
    except KeyError:
        raise ValueError(f"{token_type} is not a redirection") from None


def _until_eof(tokens: Iterable[Token]) -> list[Token]:
    span: list[Token] = []
    for token in tokens:
        if token.type is TokenType.EOF:
            break
        span.append(token)
    return span


def parse_command(tokens: Iterable[Token]) -> AstNode:
    """Build a command node from the tokens of one simple command.

    Each redirection takes the word after it as its target; raises
    ShellError with SYNTAX_ERR when that word is missing.
    """
    node = AstNode(AstType.COMMAND)
    collecting = True
    stream = iter(_until_eof(tokens))
    for token in stream:
        if token.type in _TOKEN_TO_REDIR:
            target = next(stream, None)
            if target is None or target.type is not TokenType.WORD:
                raise ShellError(
                    ErrorCode.SYNTAX_ERR, "near unexpected token `newline'"
                )
            node.redirects.append(
                Redirect(
                    redirect_type(token.type),
                    target.expanded if target.expanded is not None else "",
                    target.quoted,
                )
            )
        elif token.type is not TokenType.WORD:
            collecting = False
        elif collecting and token.expanded is not None:
            node.argv.append(token.expanded)
    return node


def parse_pipeline(tokens: Iterable[Token]) -> AstNode:
    """Build the syntax tree for a token list, splitting at the last pipe.

    Pipes associate to the left; tokens after an EOF token are ignored.
    """
    span = _until_eof(tokens)
    pipes = [index for index, token in enumerate(span) if token.type is TokenType.PIPE]
    if not pipes:
        return parse_command(span)
    last = pipes[-1]
    return AstNode(
        AstType.PIPE,
        left=parse_pipeline(span[:last]),
        right=parse_command(span[last + 1:]),
    )


def format_ast(node: AstNode | None, depth: int = 0) -> str:
    """Render the tree one node per line, children indented by one space."""
    if node is None:
        return ""
    args = "".join(f"[{arg}] " for arg in node.argv)
    redirects = "".join(f"{r.type.symbol}'{r.connection}' " for r in node.redirects)
    line = f"{' ' * depth}{_AST_LABELS[node.type]}{args}{redirects}\n"
    return line + format_ast(node.left, depth + 1) + format_ast(node.right, depth + 1)