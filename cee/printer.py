"""Rendering of tokens and syntax trees as readable text."""

from __future__ import annotations

from collections.abc import Iterable

from .nodes import (
    Binop,
    BinopType,
    ConstContent,
    Def,
    Define,
    DefineKind,
    Expr,
    Func,
    Funcall,
    FuncallStat,
    Ident,
    If,
    Return,
    Scope,
    Stat,
    StrConst,
    UIntConst,
)
from .tokens import Token, TokenType

_BINOP_SYMBOLS = {
    BinopType.DIVIDE: "/",
    BinopType.MULTIPLY: "*",
    BinopType.PLUS: "+",
    BinopType.MINUS: "-",
    BinopType.EQUALS: "==",
    BinopType.NOT_EQUALS: "!=",
}

_TOKEN_TEXT = {
    TokenType.SEMICOLON: ";\n",
    TokenType.CONST: "const",
    TokenType.VAR: "var",
    TokenType.RETURN: "return",
    TokenType.FUN: "fun",
    TokenType.IF: "if",
    TokenType.ELSE: "else",
    TokenType.OPENING_FIGURE_BRACE: "{\n",
    TokenType.CLOSING_FIGURE_BRACE: "}\n",
    TokenType.OPENING_CIRCLE_BRACE: "(",
    TokenType.CLOSING_CIRCLE_BRACE: ")",
    TokenType.COMMA: ",",
    TokenType.COLON: ":",
    TokenType.EQUALS: "==",
    TokenType.NOT_EQUALS: "!=",
    TokenType.GE: ">=",
    TokenType.LE: "<=",
    TokenType.GREATER: ">",
    TokenType.LESS: "<",
    TokenType.SET: "=",
    TokenType.MOD: "%",
    TokenType.DIVIDE: "/",
    TokenType.MULTIPLY: "*",
    TokenType.MINUS: "-",
    TokenType.PLUS: "+",
}

# These tokens already end their line, so no separating space follows them.
_NO_SPACE_AFTER = frozenset(
    {
        TokenType.SEMICOLON,
        TokenType.OPENING_FIGURE_BRACE,
        TokenType.CLOSING_FIGURE_BRACE,
    }
)


def _int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def format_expr(expr: Expr, top: bool = True) -> str:
    """Render an expression; nested binary operations are parenthesised."""
    if isinstance(expr, Binop):
        symbol = _BINOP_SYMBOLS.get(expr.type, "???")
        text = (
            f"{format_expr(expr.left, False)} {symbol} "
            f"{format_expr(expr.right, False)}"
        )
        return text if top else f"({text})"
    if isinstance(expr, UIntConst):
        return str(_int32(expr.value))
    if isinstance(expr, StrConst):
        return f'"{expr.value}"'
    if isinstance(expr, Funcall):
        return format_funcall(expr)
    if isinstance(expr, Ident):
        return expr.name
    return "???"


def format_funcall(funcall: Funcall) -> str:
    """Render `name(arg, ...)`."""
    args = ", ".join(format_expr(arg, True) for arg in funcall.args)
    return f"{funcall.ident}({args})"


def format_stat(stat: Stat) -> str:
    """Render one statement as a tab-indented line (or block)."""
    if isinstance(stat, Define):
        keyword = "const" if stat.kind == DefineKind.CONST else "var"
        text = f"\t{keyword} {stat.name}: {stat.type}"
        if stat.expr is not None:
            text += f" = {format_expr(stat.expr, True)}"
        return text + ";\n"
    if isinstance(stat, FuncallStat):
        return f"\t{format_funcall(stat.funcall)};\n"
    if isinstance(stat, If):
        body = "".join(f"\t{format_stat(inner)}" for inner in stat.if_stats)
        return f"\tif {format_expr(stat.cond, True)} {{\n{body}\t}}\n"
    if isinstance(stat, Return):
        text = "\treturn"
        if stat.expr is not None:
            text += f" {format_expr(stat.expr, True)}"
        return text + ";\n"
    return "???\n"


def format_def(definition: Def) -> str:
    """Render a top-level definition."""
    content = definition.content
    if isinstance(content, Func):
        args = ", ".join(f"{arg.name}: {arg.type}" for arg in content.args)
        text = f"fun {definition.name}({args})"
        if content.return_type is not None:
            text += f": {content.return_type}"
        text += " {"
        if content.stats:
            text += "\n" + "".join(format_stat(stat) for stat in content.stats)
        return text + "}\n"
    if isinstance(content, ConstContent):
        return f"const {definition.name}\n"
    return ""


def format_scope(scope: Scope) -> str:
    """Render every definition of a scope in order."""
    return "".join(format_def(definition) for definition in scope.defs)


def _format_token(token: Token) -> str:
    if token.type == TokenType.IDENT:
        return f"{token.value} "
    if token.type == TokenType.UINT:
        return f"{_int32(int(token.value))} "  # type: ignore[arg-type]
    if token.type == TokenType.STR:
        return f'"{token.value}" '
    text = _TOKEN_TEXT[token.type]
    return text if token.type in _NO_SPACE_AFTER else text + " "


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render a token stream as space-separated source-like text."""
    text = "".join(_format_token(token) for token in tokens)
    return text if text else "no tokens available\n"