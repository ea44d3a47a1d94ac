import pytest

from cee.tokens import (
    ParseError,
    Token,
    TokenType,
    before,
    before_circle_scoped,
    before_figure_scoped,
    expect_type,
    extract_ident,
    get_circle_scope,
    get_figure_scope,
    get_scope,
    try_get,
)

T = TokenType


def _t(*types):
    return [Token(t) for t in types]


def test_expect_type_reports_names():
    with pytest.raises(ParseError, match="expected IDENT, found SEMICOLON"):
        expect_type(Token(T.SEMICOLON), T.IDENT)


def test_try_get_returns_token():
    tokens = _t(T.COMMA, T.COLON, T.PLUS)
    assert try_get(tokens, 1) == tokens[1]


@pytest.mark.parametrize("idx", [3, 10, -1])
def test_try_get_out_of_range(idx):
    with pytest.raises(ParseError):
        try_get(_t(T.COMMA, T.COLON, T.PLUS), idx)


def test_circle_scope_nested():
    tokens = _t(
        T.OPENING_CIRCLE_BRACE,
        T.IDENT,
        T.OPENING_CIRCLE_BRACE,
        T.UINT,
        T.CLOSING_CIRCLE_BRACE,
        T.CLOSING_CIRCLE_BRACE,
        T.SEMICOLON,
    )
    assert get_circle_scope(tokens, 0) == tokens[1:5]
    assert get_circle_scope(tokens, 2) == tokens[3:4]


def test_figure_scope_with_offset():
    tokens = _t(
        T.IF,
        T.OPENING_FIGURE_BRACE,
        T.RETURN,
        T.SEMICOLON,
        T.CLOSING_FIGURE_BRACE,
    )
    assert get_figure_scope(tokens, 1) == tokens[2:4]


def test_empty_scope():
    tokens = _t(T.OPENING_CIRCLE_BRACE, T.CLOSING_CIRCLE_BRACE)
    assert get_circle_scope(tokens, 0) == []


def test_unclosed_scope_raises():
    tokens = _t(T.OPENING_FIGURE_BRACE, T.OPENING_FIGURE_BRACE, T.CLOSING_FIGURE_BRACE)
    with pytest.raises(ParseError, match="scope was not closed"):
        get_figure_scope(tokens, 0)


def test_scope_must_start_with_opening():
    tokens = _t(T.IDENT, T.OPENING_CIRCLE_BRACE, T.CLOSING_CIRCLE_BRACE)
    with pytest.raises(ParseError):
        get_scope(tokens, 0, T.OPENING_CIRCLE_BRACE, T.CLOSING_CIRCLE_BRACE)


def test_before_stops_at_first_match():
    tokens = _t(T.IDENT, T.SET, T.UINT, T.SEMICOLON, T.IDENT, T.SEMICOLON)
    assert before(tokens, T.SEMICOLON) == tokens[:3]


def test_before_without_match_returns_all():
    tokens = _t(T.IDENT, T.SET, T.UINT)
    assert before(tokens, T.SEMICOLON) == tokens


def test_before_figure_scoped_ignores_nesting():
    tokens = _t(
        T.OPENING_FIGURE_BRACE, T.IDENT, T.SEMICOLON, T.CLOSING_FIGURE_BRACE, T.SEMICOLON
    )
    assert before_figure_scoped(tokens, T.SEMICOLON) == before(tokens, T.SEMICOLON)
    assert before_figure_scoped(tokens, T.SEMICOLON) == tokens[:2]


def test_before_circle_scoped_skips_nested():
    tokens = _t(
        T.IDENT,
        T.OPENING_CIRCLE_BRACE,
        T.UINT,
        T.COMMA,
        T.UINT,
        T.CLOSING_CIRCLE_BRACE,
        T.COMMA,
        T.IDENT,
    )
    assert before_circle_scoped(tokens, T.COMMA) == tokens[:6]
    assert before_circle_scoped(tokens, T.COMMA, True) == tokens[:7]


def test_before_circle_scoped_include_closing():
    tokens = _t(
        T.IDENT,
        T.OPENING_CIRCLE_BRACE,
        T.OPENING_CIRCLE_BRACE,
        T.CLOSING_CIRCLE_BRACE,
        T.CLOSING_CIRCLE_BRACE,
        T.PLUS,
        T.UINT,
    )
    assert before_circle_scoped(tokens, T.CLOSING_CIRCLE_BRACE, True) == tokens[:5]


def test_before_circle_scoped_without_match():
    tokens = _t(T.IDENT, T.PLUS, T.UINT)
    assert before_circle_scoped(tokens, T.COMMA) == tokens
    assert before_circle_scoped(tokens, T.COMMA, True) == tokens


def test_extract_ident():
    assert extract_ident(Token(T.IDENT, "main")) == "main"


def test_extract_ident_rejects_keyword():
    with pytest.raises(ParseError, match="expected IDENT, found CONST"):
        extract_ident(Token(T.CONST, "const"))