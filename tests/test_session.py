from pyminishell.env import fill_env_list
from pyminishell.session import Session, Shell
from pyminishell.tokens import Token, TokenType


def make_session():
    shell = Shell(fill_env_list(["A=1"]))
    return Session(shell)


def test_new_session_is_empty():
    session = make_session()
    assert session.tokens == []
    assert session.line is None
    assert session.heredoc_count == 0
    assert session.shell.status == 0


def test_reset_clears_line_state():
    session = make_session()
    session.line = "echo hi"
    session.prompt = "prompt> "
    session.tokens = [Token(TokenType.EOF, "EOF")]
    session.heredoc_count = 3
    session.reset()
    assert session.line is None
    assert session.prompt is None
    assert session.tokens == []
    assert session.heredoc_count == 0


def test_reset_keeps_ast_and_shell():
    session = make_session()
    marker = object()
    session.ast = marker
    session.shell.status = 42
    session.reset()
    assert session.ast is marker
    assert session.shell.status == 42
    assert session.shell.env.get("A") == "1"


def test_sessions_do_not_share_token_lists():
    first = make_session()
    second = make_session()
    first.tokens.append(Token(TokenType.PIPE, "|"))
    assert second.tokens == []