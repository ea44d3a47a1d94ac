"""Parsing of function body statements from tokens."""

from __future__ import annotations

from collections.abc import Sequence
from typing import List, Tuple

from .exprs import parse_expr, parse_funcall
from .nodes import Define, DefineKind, FuncallStat, If, Return, Stat
from .tokens import (
    ParseError,
    Token,
    TokenType,
    before,
    expect_type,
    extract_ident,
    get_figure_scope,
    try_get,
)


def _parse_define(tokens: Sequence[Token]) -> Tuple[Define, int]:
    if len(tokens) <= 2:
        raise ParseError("too few tokens for a definition")
    body = before(tokens, TokenType.SEMICOLON)
    kind_token = try_get(body, 0)
    if kind_token.type not in (TokenType.CONST, TokenType.VAR):
        raise ParseError(f"expected CONST or VAR, found {kind_token.type.name}")
    kind = DefineKind.CONST if kind_token.type == TokenType.CONST else DefineKind.VAR
    name = extract_ident(try_get(body, 1))
    expect_type(try_get(body, 2), TokenType.COLON)
    type_name = extract_ident(try_get(body, 3))
    expr = None
    if len(body) > 4:
        expect_type(try_get(body, 4), TokenType.SET)
        expr = parse_expr(body[5:])
    return Define(kind, name, type_name, expr), len(body) + 1


def _parse_funcall_stat(tokens: Sequence[Token]) -> Tuple[FuncallStat, int]:
    body = before(tokens, TokenType.SEMICOLON)
    return FuncallStat(parse_funcall(body)), len(body) + 1


def _parse_if(tokens: Sequence[Token]) -> Tuple[If, int]:
    cond_tokens = before(tokens[1:], TokenType.OPENING_FIGURE_BRACE)
    if_tokens = get_figure_scope(tokens, len(cond_tokens) + 1)
    cond = parse_expr(cond_tokens)
    if_stats = parse_stats(if_tokens)
    return If(cond, if_stats), 1 + len(cond_tokens) + len(if_tokens) + 2


def _parse_return(tokens: Sequence[Token]) -> Tuple[Return, int]:
    expect_type(try_get(tokens, 0), TokenType.RETURN)
    body = before(tokens[1:], TokenType.SEMICOLON)
    expr = parse_expr(body) if body else None
    return Return(expr), len(body) + 2


def parse_stat(tokens: Sequence[Token]) -> Tuple[Stat, int]:
    """Parse the statement at the start of tokens.

    Returns the statement and the number of tokens it took up.
    """
    first = try_get(tokens, 0)
    if first.type in (TokenType.CONST, TokenType.VAR):
        return _parse_define(tokens)
    if first.type == TokenType.IDENT:
        second = try_get(tokens, 1)
        if second.type != TokenType.OPENING_CIRCLE_BRACE:
            raise ParseError(
                f"unknown token after ident(funcall expected): {second.type.name}!"
            )
        return _parse_funcall_stat(tokens)
    if first.type == TokenType.IF:
        return _parse_if(tokens)
    if first.type == TokenType.RETURN:
        return _parse_return(tokens)
    names = "; ".join(token.type.name for token in tokens)
    raise ParseError(f"unknown stat: {names}")


def parse_stats(tokens: Sequence[Token]) -> List[Stat]:
    """Parse a sequence of statements filling all of tokens."""
    stats: List[Stat] = []
    position = 0
    while position < len(tokens):
        stat, consumed = parse_stat(tokens[position:])
        stats.append(stat)
        position += consumed
    return stats