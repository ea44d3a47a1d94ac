import pytest

from cee.nodes import (
    Binop,
    BinopType,
    Define,
    DefineKind,
    Funcall,
    FuncallStat,
    Ident,
    If,
    Return,
    UIntConst,
)
from cee.stats import parse_stat, parse_stats
from cee.tokenize import tokenize_text
from cee.tokens import ParseError


def test_const_without_value():
    tokens = tokenize_text("const x: int;")
    assert parse_stat(tokens) == (Define(DefineKind.CONST, "x", "int"), len(tokens))


def test_var_with_value():
    tokens = tokenize_text("var y: int = a + 1;")
    stat, consumed = parse_stat(tokens)
    assert stat == Define(
        DefineKind.VAR, "y", "int", Binop(BinopType.PLUS, Ident("a"), UIntConst(1))
    )
    assert consumed == len(tokens)


def test_funcall_statement():
    tokens = tokenize_text("print(x, 2);")
    assert parse_stat(tokens) == (
        FuncallStat(Funcall("print", [Ident("x"), UIntConst(2)])),
        len(tokens),
    )


def test_return_without_value():
    tokens = tokenize_text("return;")
    assert parse_stat(tokens) == (Return(), len(tokens))


def test_return_with_value():
    tokens = tokenize_text("return a * b;")
    assert parse_stat(tokens) == (
        Return(Binop(BinopType.MULTIPLY, Ident("a"), Ident("b"))),
        len(tokens),
    )


def test_if_statement():
    tokens = tokenize_text("if a == 1 { return; }")
    stat, consumed = parse_stat(tokens)
    assert stat == If(Binop(BinopType.EQUALS, Ident("a"), UIntConst(1)), [Return()])
    assert stat.else_stats is None
    assert consumed == len(tokens)


def test_nested_if():
    tokens = tokenize_text("if a { if b { f(); } return c; }")
    stat, consumed = parse_stat(tokens)
    assert stat == If(
        Ident("a"),
        [If(Ident("b"), [FuncallStat(Funcall("f", []))]), Return(Ident("c"))],
    )
    assert consumed == len(tokens)


def test_parse_stat_stops_after_first_statement():
    tokens = tokenize_text("return; return 1;")
    stat, consumed = parse_stat(tokens)
    assert stat == Return()
    assert consumed == len(tokenize_text("return;"))


def test_parse_stats_sequence():
    tokens = tokenize_text("var x: int = 1;\nprint(x);\nreturn x;")
    assert parse_stats(tokens) == [
        Define(DefineKind.VAR, "x", "int", UIntConst(1)),
        FuncallStat(Funcall("print", [Ident("x")])),
        Return(Ident("x")),
    ]


def test_parse_stats_empty():
    assert parse_stats([]) == []


def test_empty_tokens_rejected():
    with pytest.raises(ParseError):
        parse_stat([])


def test_ident_without_call_rejected():
    with pytest.raises(ParseError):
        parse_stat(tokenize_text("x = 1;"))


def test_unknown_statement_rejected():
    with pytest.raises(ParseError):
        parse_stat(tokenize_text("+ 1;"))


def test_define_missing_colon_rejected():
    with pytest.raises(ParseError):
        parse_stat(tokenize_text("var x int;"))


def test_define_without_set_rejected():
    with pytest.raises(ParseError):
        parse_stat(tokenize_text("var x: int 1;"))


def test_define_too_short_rejected():
    with pytest.raises(ParseError):
        parse_stat(tokenize_text("var x"))


def test_if_without_brace_rejected():
    with pytest.raises(ParseError):
        parse_stat(tokenize_text("if a return;"))


def test_unclosed_if_rejected():
    with pytest.raises(ParseError):
        parse_stat(tokenize_text("if a { return;"))