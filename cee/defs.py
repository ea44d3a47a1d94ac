"""Parsing of top-level definitions and loading of source files."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import List, Optional, Tuple, Union

from .nodes import Def, Func, FuncArg, Scope
from .stats import parse_stats
from .tokenize import tokenize
from .tokens import (
    ParseError,
    Token,
    TokenType,
    extract_ident,
    get_figure_scope,
    try_get,
)


def parse_func_content(tokens: Sequence[Token]) -> Tuple[Func, int]:
    """Parse `(args)[: type] { body }`.

    Returns the function and the number of tokens it took up.
    """
    if try_get(tokens, 0).type != TokenType.OPENING_CIRCLE_BRACE:
        raise ParseError("expected fun args start")
    args: List[FuncArg] = []
    i = 1
    while i < len(tokens):
        token = try_get(tokens, i)
        i += 1
        if token.type == TokenType.CLOSING_CIRCLE_BRACE:
            break
        if i + 2 >= len(tokens):
            raise ParseError("too few tokens for arg")
        if token.type == TokenType.COMMA:
            if not args:
                raise ParseError("starting fun in comma args")
            token = try_get(tokens, i)
            i += 1
        colon_token = try_get(tokens, i)
        type_token = try_get(tokens, i + 1)
        i += 2
        if token.type != TokenType.IDENT:
            raise ParseError("name token is not ident")
        if colon_token.type != TokenType.COLON:
            raise ParseError("second token is not colon")
        if type_token.type != TokenType.IDENT:
            raise ParseError("type token is not ident")
        args.append(FuncArg(str(token.value), str(type_token.value)))
    if i >= len(tokens):
        raise ParseError("fun unexpected end")
    return_type: Optional[str] = None
    if try_get(tokens, i).type == TokenType.COLON:
        i += 1
        return_type = extract_ident(try_get(tokens, i))
        i += 1
    body = get_figure_scope(tokens, i)
    stats = parse_stats(body)
    i += len(body) + 1
    return Func(args, stats, return_type), i + 1


def parse_def(tokens: Sequence[Token]) -> Tuple[Def, int]:
    """Parse one `fun name ...` definition.

    Returns the definition and the number of tokens it took up.
    """
    if len(tokens) < 2:
        raise ParseError("invalid def tokens len < 2")
    first, second = tokens[0], tokens[1]
    if first.type != TokenType.FUN:
        raise ParseError(f"invalid first def token: {first.type.name}")
    if second.type != TokenType.IDENT:
        raise ParseError(
            f"invalid def tokens: second token is not ident({second.type.name})"
        )
    rest = tokens[2:]
    if not rest:
        raise ParseError("invalid def tokens: nothing after the name")
    content, consumed = parse_func_content(rest)
    return Def(str(second.value), content), consumed + 2


def parse_defs(tokens: Sequence[Token]) -> List[Def]:
    """Parse all definitions in tokens."""
    defs: List[Def] = []
    while tokens:
        definition, consumed = parse_def(tokens)
        defs.append(definition)
        tokens = tokens[consumed:]
    return defs


def _scope_name(path: str) -> str:
    # The name keeps the final separator, as in "/main.cee".
    return path[max(path.rfind("/"), 0) :]


def load_scope(path: Union[str, "os.PathLike[str]"]) -> Scope:
    """Read, tokenize and parse a source file into a scope."""
    path_text = os.fspath(path)
    with open(path_text, encoding="utf-8") as stream:
        tokens = tokenize(stream)
    return Scope(_scope_name(path_text), parse_defs(tokens))