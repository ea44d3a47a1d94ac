"""Token types and helpers for walking token sequences."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class ParseError(Exception):
    """Raised when source text or tokens do not form a valid program."""


class TokenType(IntEnum):
    """Kinds of token, in their canonical order."""

    SEMICOLON = 0
    CONST = 1
    VAR = 2
    RETURN = 3
    FUN = 4
    IF = 5
    ELSE = 6
    OPENING_FIGURE_BRACE = 7
    CLOSING_FIGURE_BRACE = 8
    OPENING_CIRCLE_BRACE = 9
    CLOSING_CIRCLE_BRACE = 10
    COMMA = 11
    COLON = 12
    EQUALS = 13
    NOT_EQUALS = 14
    GE = 15
    LE = 16
    GREATER = 17
    LESS = 18
    SET = 19
    MOD = 20
    DIVIDE = 21
    MULTIPLY = 22
    MINUS = 23
    PLUS = 24
    IDENT = 25
    UINT = 26
    STR = 27


@dataclass(frozen=True)
class Token:
    """A token; keywords and identifiers carry their text, numbers their value."""

    type: TokenType
    value: Union[str, int, None] = None


def expect_type(token: Token, token_type: TokenType) -> None:
    """Raise ParseError unless the token has the given type."""
    if token.type != token_type:
        raise ParseError(f"expected {token_type.name}, found {token.type.name}")


def try_get(tokens: Sequence[Token], idx: int) -> Token:
    """Return the token at idx, raising ParseError when out of range."""
    if not 0 <= idx < len(tokens):
        raise ParseError(
            f"trying to get {idx} token when its {len(tokens)} tokens total"
        )
    return tokens[idx]


def get_scope(
    tokens: Sequence[Token],
    start: int,
    opening: TokenType,
    closing: TokenType,
) -> Sequence[Token]:
    """Return the tokens strictly inside the bracket pair opened at start."""
    if start >= len(tokens) or tokens[start].type != opening:
        raise ParseError(f"expected {opening.name} to open a scope")
    level = 0
    for index, token in enumerate(tokens[start:], start=start):
        if token.type == opening:
            level += 1
        elif token.type == closing:
            level -= 1
            if level == 0:
                return tokens[start + 1 : index]
    raise ParseError("scope was not closed!")


def get_circle_scope(tokens: Sequence[Token], start: int) -> Sequence[Token]:
    """Return the tokens inside the parentheses opened at start."""
    return get_scope(
        tokens, start, TokenType.OPENING_CIRCLE_BRACE, TokenType.CLOSING_CIRCLE_BRACE
    )


def get_figure_scope(tokens: Sequence[Token], start: int) -> Sequence[Token]:
    """Return the tokens inside the braces opened at start."""
    return get_scope(
        tokens, start, TokenType.OPENING_FIGURE_BRACE, TokenType.CLOSING_FIGURE_BRACE
    )


def before(tokens: Sequence[Token], token_type: TokenType) -> Sequence[Token]:
    """Return the tokens preceding the first token of the given type."""
    for index, token in enumerate(tokens):
        if token.type == token_type:
            return tokens[:index]
    return tokens[:]


def before_figure_scoped(
    tokens: Sequence[Token], token_type: TokenType
) -> Sequence[Token]:
    """Return the tokens preceding the first token of the given type.

    Brace nesting does not stop the search: the first match at any depth ends it.
    """
    return before(tokens, token_type)


def before_circle_scoped(
    tokens: Sequence[Token], token_type: TokenType, include: bool = False
) -> Sequence[Token]:
    """Return the tokens up to the first match outside parentheses.

    With include set, the matching token is part of the result.
    """
    level = 0
    for index, token in enumerate(tokens):
        if token.type == TokenType.OPENING_CIRCLE_BRACE:
            level += 1
        elif token.type == TokenType.CLOSING_CIRCLE_BRACE:
            level -= 1
        if level == 0 and token.type == token_type:
            return tokens[: index + 1 if include else index]
    return tokens[:]


def extract_ident(token: Token) -> str:
    """Return the text of an identifier token."""
    expect_type(token, TokenType.IDENT)
    return token.value  # type: ignore[return-value]