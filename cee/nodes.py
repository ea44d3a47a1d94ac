"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Union


class BinopType(Enum):
    """Binary operators understood inside expressions."""

    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    EQUALS = auto()
    NOT_EQUALS = auto()


@dataclass
class Ident:
    """A reference to a name."""

    name: str


@dataclass
class UIntConst:
    """An integer literal."""

    value: int


@dataclass
class StrConst:
    """A string literal, without its quotes."""

    value: str


@dataclass
class Funcall:
    """A call of a named function with argument expressions."""

    ident: str
    args: List["Expr"] = field(default_factory=list)


@dataclass
class Binop:
    """A binary operation on two expressions."""

    type: BinopType
    left: "Expr"
    right: "Expr"


Expr = Union[Ident, UIntConst, StrConst, Funcall, Binop]


class DefineKind(Enum):
    """Whether a definition introduces a constant or a variable."""

    CONST = auto()
    VAR = auto()


@dataclass
class Define:
    """A `const` or `var` statement with an optional initial value."""

    kind: DefineKind
    name: str
    type: str
    expr: Optional[Expr] = None


@dataclass
class FuncallStat:
    """A function call used as a statement."""

    funcall: Funcall


@dataclass
class If:
    """A conditional statement with an optional else branch."""

    cond: Expr
    if_stats: List["Stat"] = field(default_factory=list)
    else_stats: Optional[List["Stat"]] = None


@dataclass
class Return:
    """A return statement with an optional value."""

    expr: Optional[Expr] = None


Stat = Union[Define, FuncallStat, If, Return]


@dataclass
class FuncArg:
    """A named, typed function parameter."""

    name: str
    type: str


@dataclass
class Func:
    """The body of a function definition."""

    args: List[FuncArg] = field(default_factory=list)
    stats: List[Stat] = field(default_factory=list)
    return_type: Optional[str] = None


@dataclass
class ConstContent:
    """The content of a top-level constant definition."""


DefContent = Union[Func, ConstContent]


@dataclass
class Def:
    """A named top-level definition."""

    name: str
    content: DefContent


@dataclass
class Scope:
    """The definitions loaded from one source file."""

    name: str
    defs: List[Def] = field(default_factory=list)


@dataclass
class Module:
    """A named collection of scopes."""

    name: str
    scopes: List[Scope] = field(default_factory=list)


@dataclass
class Project:
    """A named collection of modules."""

    name: str
    modules: List[Module] = field(default_factory=list)