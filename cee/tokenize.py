"""Splitting source text into tokens."""

from __future__ import annotations

from collections.abc import Callable
from itertools import takewhile
from typing import Optional, TextIO, Tuple

from .chars import is_digit, is_ident, is_start_ident
from .tokens import ParseError, Token, TokenType

_Built = Optional[Tuple[Token, int]]
_Builder = Callable[[str], _Built]

_UINT_MODULUS = 2**64
_COMMENT_START = "#"
_WHITESPACE = " \t"


def _keyword(word: str, token_type: TokenType) -> _Builder:
    def build(text: str) -> _Built:
        if not text.startswith(word):
            return None
        if len(text) > len(word) and is_ident(text[len(word)]):
            return None
        return Token(token_type, word), len(word)

    return build


def _operator(symbol: str, token_type: TokenType) -> _Builder:
    def build(text: str) -> _Built:
        if not text.startswith(symbol):
            return None
        return Token(token_type), len(symbol)

    return build


def _ident(text: str) -> _Built:
    if not is_start_ident(text[0]):
        return None
    name = "".join(takewhile(is_ident, text))
    return Token(TokenType.IDENT, name), len(name)


def _uint(text: str) -> _Built:
    digits = "".join(takewhile(is_digit, text))
    if not digits:
        return None
    return Token(TokenType.UINT, int(digits) % _UINT_MODULUS), len(digits)


def _string(text: str) -> _Built:
    if not text.startswith('"'):
        return None
    close = text.find('"', 1)
    if close == -1:
        return None
    return Token(TokenType.STR, text[1:close]), close + 1


_BUILDERS: tuple[_Builder, ...] = (
    _keyword("const", TokenType.CONST),
    _keyword("var", TokenType.VAR),
    _keyword("return", TokenType.RETURN),
    _keyword("fun", TokenType.FUN),
    _keyword("if", TokenType.IF),
    _keyword("else", TokenType.ELSE),
    _operator("{", TokenType.OPENING_FIGURE_BRACE),
    _operator("}", TokenType.CLOSING_FIGURE_BRACE),
    _operator("(", TokenType.OPENING_CIRCLE_BRACE),
    _operator(")", TokenType.CLOSING_CIRCLE_BRACE),
    _operator(",", TokenType.COMMA),
    _operator(":", TokenType.COLON),
    _operator("==", TokenType.EQUALS),
    _operator("!=", TokenType.NOT_EQUALS),
    _operator("=", TokenType.SET),
    _operator(">=", TokenType.GE),
    _operator(">", TokenType.GREATER),
    _operator("<=", TokenType.LE),
    _operator("<", TokenType.LESS),
    _operator("%", TokenType.MOD),
    _operator("/", TokenType.DIVIDE),
    _operator("*", TokenType.MULTIPLY),
    _operator("-", TokenType.MINUS),
    _operator("+", TokenType.PLUS),
    _ident,
    _uint,
    _string,
    _operator(";", TokenType.SEMICOLON),
)


def tokenize_line(line: str) -> list[Token]:
    """Tokenize a single line; text after '#' is a comment."""
    tokens: list[Token] = []
    rest = line
    while rest := rest.lstrip(_WHITESPACE):
        if rest.startswith(_COMMENT_START):
            break
        for builder in _BUILDERS:
            built = builder(rest)
            if built is not None:
                token, length = built
                tokens.append(token)
                rest = rest[length:]
                break
        else:
            raise ParseError(
                f"cannot recognize token at line `{line}` with len {len(line)}"
            )
    return tokens


def tokenize_text(text: str) -> list[Token]:
    """Tokenize a whole source text, line by line."""
    return [token for line in text.split("\n") for token in tokenize_line(line)]


def tokenize(stream: TextIO) -> list[Token]:
    """Tokenize everything readable from a text stream."""
    return tokenize_text(stream.read())