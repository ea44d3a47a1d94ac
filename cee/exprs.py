"""Parsing of expressions and function calls from tokens."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import List, Union

from .nodes import Binop, BinopType, Expr, Funcall, Ident, StrConst, UIntConst
from .tokens import (
    ParseError,
    Token,
    TokenType,
    before_circle_scoped,
    extract_ident,
    get_circle_scope,
    try_get,
)

_OPERATORS = {
    TokenType.PLUS: BinopType.PLUS,
    TokenType.MINUS: BinopType.MINUS,
    TokenType.MULTIPLY: BinopType.MULTIPLY,
    TokenType.DIVIDE: BinopType.DIVIDE,
    TokenType.EQUALS: BinopType.EQUALS,
    TokenType.NOT_EQUALS: BinopType.NOT_EQUALS,
}

# Operators are folded tier by tier, tightest binding first.
_PRECEDENCE = (
    frozenset({BinopType.DIVIDE, BinopType.MULTIPLY}),
    frozenset({BinopType.MINUS, BinopType.PLUS}),
    frozenset({BinopType.EQUALS, BinopType.NOT_EQUALS}),
)


@dataclass
class _Operator:
    type: BinopType


@dataclass
class _Group:
    elements: List["_Element"]


_Element = Union[Ident, UIntConst, StrConst, Funcall, Binop, _Operator, _Group]


def _to_int32(value: int) -> int:
    """Integer literals are held as signed 32-bit values."""
    return (value + 2**31) % 2**32 - 2**31


def _raw_parse(tokens: Sequence[Token]) -> List[_Element]:
    elements: List[_Element] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.type in _OPERATORS:
            elements.append(_Operator(_OPERATORS[token.type]))
        elif token.type == TokenType.OPENING_CIRCLE_BRACE:
            inner = get_circle_scope(tokens, i)
            i += len(inner) + 1
            elements.append(_Group(_raw_parse(inner)))
        elif token.type == TokenType.IDENT:
            if (
                i + 1 < len(tokens)
                and tokens[i + 1].type == TokenType.OPENING_CIRCLE_BRACE
            ):
                call_tokens = before_circle_scoped(
                    tokens[i:], TokenType.CLOSING_CIRCLE_BRACE, include=True
                )
                i += len(call_tokens) - 1
                elements.append(parse_funcall(call_tokens))
            else:
                elements.append(Ident(str(token.value)))
        elif token.type == TokenType.UINT:
            elements.append(UIntConst(_to_int32(int(token.value))))  # type: ignore[arg-type]
        elif token.type == TokenType.STR:
            elements.append(StrConst(str(token.value)))
        else:
            raise ParseError(f"unknown token in expr: {token.type.name}")
        i += 1
    return elements


def _to_expr(element: _Element) -> Expr:
    if isinstance(element, _Operator):
        raise ParseError("invalid expr type. Must be ready or scope expr")
    if isinstance(element, _Group):
        return _parse_group(element.elements)
    return element


def _collect_binops(elements: List[_Element], kinds: frozenset) -> None:
    i = 1
    while i + 1 < len(elements):
        element = elements[i]
        if isinstance(element, _Operator) and element.type in kinds:
            left = _to_expr(elements[i - 1])
            right = _to_expr(elements[i + 1])
            elements[i - 1 : i + 2] = [Binop(element.type, left, right)]
        else:
            i += 1


def _parse_group(elements: List[_Element]) -> Expr:
    if not elements:
        raise ParseError("empty expr")
    elements = list(elements)
    for kinds in _PRECEDENCE:
        _collect_binops(elements, kinds)
    if len(elements) != 1:
        raise ParseError(f"missing binop in expr(len = {len(elements)})!")
    (only,) = elements
    if isinstance(only, _Operator):
        raise ParseError("only operator in expr")
    return _to_expr(only)


def parse_expr(tokens: Sequence[Token]) -> Expr:
    """Parse a complete expression from a token sequence."""
    return _parse_group(_raw_parse(tokens))


def parse_funcall(tokens: Sequence[Token]) -> Funcall:
    """Parse `name(arg, ...)`; tokens after the closing parenthesis are ignored."""
    ident = extract_ident(try_get(tokens, 0))
    scope = get_circle_scope(tokens, 1)
    args: List[Expr] = []
    while scope:
        arg_tokens = before_circle_scoped(scope, TokenType.COMMA)
        args.append(parse_expr(arg_tokens))
        if len(arg_tokens) == len(scope):
            break
        scope = scope[len(arg_tokens) + 1 :]
    return Funcall(ident, args)