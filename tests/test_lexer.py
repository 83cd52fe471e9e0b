import pytest

from pyminishell.errors import ErrorCode, ShellError
from pyminishell.lexer import (
    assign_expanded,
    build_segments,
    join_segments,
    tokenize,
)
from pyminishell.tokens import QuoteType, Segment, TokenType


def _types(tokens):
    return [t.type for t in tokens]


def test_tokenize_empty_line_gives_only_eof():
    tokens = tokenize("")
    assert _types(tokens) == [TokenType.EOF]
    assert tokens[0].expanded == "EOF"


def test_tokenize_pipeline():
    tokens = tokenize("ls -l | wc")
    assert _types(tokens) == [
        TokenType.WORD,
        TokenType.WORD,
        TokenType.PIPE,
        TokenType.WORD,
        TokenType.EOF,
    ]
    assert tokens[2].expanded == "|"
    assert [s.value for s in tokens[0].segments] == ["ls"]
    assert tokens[0].expanded is None


def test_tokenize_redirections():
    tokens = tokenize("cat < in >> out << end > f")
    kinds = [t.type for t in tokens if t.type is not TokenType.WORD]
    assert kinds == [
        TokenType.IN,
        TokenType.APPEND,
        TokenType.HEREDOC,
        TokenType.OUT,
        TokenType.EOF,
    ]
    symbols = [t.expanded for t in tokens if t.type is not TokenType.WORD]
    assert symbols == ["<", ">>", "<<", ">", "EOF"]


def test_mixed_angle_brackets_are_separate():
    assert _types(tokenize("<>")) == [TokenType.IN, TokenType.OUT, TokenType.EOF]


def test_operators_split_words_without_spaces():
    tokens = tokenize("a|b>c")
    assert _types(tokens) == [
        TokenType.WORD,
        TokenType.PIPE,
        TokenType.WORD,
        TokenType.OUT,
        TokenType.WORD,
        TokenType.EOF,
    ]
    assert [t.segments[0].value for t in tokens if t.type is TokenType.WORD] == [
        "a",
        "b",
        "c",
    ]


def test_quoted_segments_keep_kind():
    segments, pos = build_segments("a\"b c\"'d' rest", 0)
    assert segments == [
        Segment("a", QuoteType.NONE),
        Segment("b c", QuoteType.DOUBLE),
        Segment("d", QuoteType.SINGLE),
    ]
    assert pos == len("a\"b c\"'d'")


def test_quoted_operators_stay_in_word():
    tokens = tokenize("echo '|' \"<>\"")
    assert _types(tokens) == [TokenType.WORD] * 3 + [TokenType.EOF]
    assert tokens[1].segments == [Segment("|", QuoteType.SINGLE)]


def test_unmatched_quote_raises_syntax_error():
    with pytest.raises(ShellError) as info:
        tokenize("echo \"abc")
    assert info.value.code == ErrorCode.SYNTAX_ERR
    assert info.value.status == 2


def test_join_segments_marks_quoted():
    segments, _ = build_segments("a\"b c\"'d'", 0)
    assert join_segments(segments) == ("ab cd", True)


def test_join_segments_unquoted():
    assert join_segments([Segment("abc")]) == ("abc", False)


def test_join_empty_quoted_is_empty_string():
    assert join_segments([Segment("", QuoteType.DOUBLE)]) == ("", False)


def test_join_empty_unquoted_is_none():
    assert join_segments([Segment(""), Segment("", QuoteType.SINGLE)]) == (None, False)
    assert join_segments([]) == (None, False)


def test_assign_expanded_fills_words_only():
    tokens = tokenize("echo 'hi there' | cat")
    assign_expanded(tokens)
    assert [t.expanded for t in tokens] == ["echo", "hi there", "|", "cat", "EOF"]
    assert [t.quoted for t in tokens] == [False, True, False, False, False]


def test_assign_expanded_keeps_existing_text():
    tokens = tokenize("x")
    tokens[0].expanded = "kept"
    assign_expanded(tokens)
    assert tokens[0].expanded == "kept"


@pytest.mark.parametrize("line", ["a b c", "  spaced\tout  ", "one 'two' \"three\""])
def test_word_count_matches_split(line):
    tokens = tokenize(line)
    assign_expanded(tokens)
    words = [t.expanded for t in tokens if t.type is TokenType.WORD]
    assert words == [w.strip("'\"") for w in line.split()]