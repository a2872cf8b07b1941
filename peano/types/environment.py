"""Runtime environments for Peano.

Two flat, read-only tables replace a chain of nested scopes:

- FuncEnv maps function names to Lambdas. It is built once per program and
  shared by every call.
- VarEnv maps names to evaluated Nats. Lowering grows it one definition at a
  time with `bind`, which returns a new snapshot; each function call gets a
  fresh VarEnv holding only that call's parameters.

Missing names are not an error here: `lookup` returns the default-zero value
unless the caller asks for strict resolution.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from io import StringIO
from typing import Optional

from peano import Identifier
from peano.errors import PeanoUnboundSymbol, PeanoUnknownFunction
from peano.types.exp import Lambda
from peano.types.nat import Nat, Zero


class VarEnv(Mapping):
    """Immutable mapping from variable names to Nat values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[Mapping[Identifier, Nat]] = None):
        self.vars: dict[Identifier, Nat] = dict(bindings) if bindings else {}

    def __getitem__(self, name: Identifier) -> Nat:
        return self.vars[name]

    def __iter__(self) -> Iterator[Identifier]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def bind(self, name: Identifier, value: Nat) -> VarEnv:
        """Return a new environment with `name` bound to `value`."""
        env = VarEnv(self.vars)
        env.vars[name] = value
        return env

    def lookup(self, name: Identifier, strict: bool = False) -> Nat:
        """Value bound to `name`; zero when unbound (PeanoUnboundSymbol if strict)."""
        value = self.vars.get(name)
        if value is not None:
            return value
        if strict:
            raise PeanoUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return Zero

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {int(v)}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<VarEnv {self}>"


class FuncEnv(Mapping):
    """Immutable mapping from function names to Lambdas."""

    __slots__ = ("funcs",)

    def __init__(self, bindings: Optional[Mapping[Identifier, Lambda]] = None):
        self.funcs: dict[Identifier, Lambda] = dict(bindings) if bindings else {}

    def __getitem__(self, name: Identifier) -> Lambda:
        return self.funcs[name]

    def __iter__(self) -> Iterator[Identifier]:
        return iter(self.funcs)

    def __len__(self) -> int:
        return len(self.funcs)

    def lookup(self, name: Identifier, strict: bool = False) -> Optional[Lambda]:
        """Lambda bound to `name`, or None (PeanoUnknownFunction if strict)."""
        fn = self.funcs.get(name)
        if fn is None and strict:
            raise PeanoUnknownFunction(f"Cannot call undefined function {name}")
        return fn

    def __repr__(self) -> str:
        return f"<FuncEnv {', '.join(self.funcs)}>"
