"""Surface syntax tree produced by the parser.

Mirrors the concrete grammar one node per production. The lowering step in
peano.compiler.lowering turns these into the evaluator's Exp form.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from peano import Identifier


@dataclass(frozen=True)
class Zero:
    pass


@dataclass(frozen=True)
class Succ:
    arg: Expression


@dataclass(frozen=True)
class Var:
    ident: Identifier


@dataclass(frozen=True)
class FuncCall:
    ident: Identifier
    args: tuple[Expression, ...]


@dataclass(frozen=True)
class EqCond:
    arg1: Expression
    arg2: Expression


@dataclass(frozen=True)
class Cond:
    cond: EqCond
    then_exp: Expression
    else_exp: Expression


Expression = Union[Zero, Succ, Var, FuncCall, Cond]


@dataclass(frozen=True)
class VarDef:
    ident: Identifier
    value: Expression


@dataclass(frozen=True)
class FuncDef:
    ident: Identifier
    params: tuple[Identifier, ...]
    body: Expression


Definition = Union[VarDef, FuncDef]


@dataclass(frozen=True)
class Ast:
    definitions: tuple[Definition, ...] = field(default_factory=tuple)
    expression: Optional[Expression] = None
