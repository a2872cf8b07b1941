"""Intermediate expression form consumed by the evaluator.

Structurally isomorphic to the surface syntax in peano.reader.syntax, but
independent of it: the evaluator never sees parser types.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Union

from peano import Identifier


@dataclass(frozen=True)
class ZTerm:
    pass


@dataclass(frozen=True)
class STerm:
    arg: Exp


@dataclass(frozen=True)
class Var:
    sym: Identifier


@dataclass(frozen=True)
class Term:
    """Function application."""
    sym: Identifier
    args: tuple[Exp, ...]


@dataclass(frozen=True)
class EqExp:
    arg1: Exp
    arg2: Exp


@dataclass(frozen=True)
class Cond:
    cond: EqExp
    if_exp: Exp
    else_exp: Exp


Exp = Union[ZTerm, STerm, Var, Term, Cond]


class Lambda:
    """A user function: ordered parameter names plus a body.

    There is no captured environment. A body sees only its own parameters and
    the global function table.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: tuple[Identifier, ...], body: Exp):
        self.params: tuple[Identifier, ...] = tuple(params)
        self.body: Exp = body

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Lambda) and self.params == other.params and self.body == other.body

    def __hash__(self) -> int:
        return hash((self.params, self.body))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(", ".join(self.params))
            buffer.write(") ")
            buffer.write(repr(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
