"""Unary natural numbers.

A Nat is either the `Zero` singleton or a `Succ` wrapping another Nat. Values
are immutable and compared structurally. Every helper here walks chains with
a loop, never with recursion, so magnitudes are not limited by the host stack.
"""

from __future__ import annotations


class Nat:
    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nat):
            return NotImplemented
        return eq(self, other)

    def __hash__(self) -> int:
        return hash(("Nat", nat_to_num(self)))

    def __int__(self) -> int:
        return nat_to_num(self)

    def __repr__(self) -> str:
        n = nat_to_num(self)
        return "s(" * n + "z" + ")" * n


class ZeroType(Nat):
    __slots__ = ()

    def __bool__(self) -> bool:
        return False


class Succ(Nat):
    __slots__ = ("pred",)

    def __init__(self, pred: Nat):
        self.pred = pred


Zero = ZeroType()


def zero() -> Nat:
    return Zero


def succ(n: Nat) -> Nat:
    return Succ(n)


def eq(a: Nat, b: Nat) -> bool:
    """Structural equality: stops at the first differing constructor."""
    while True:
        if a is b:
            return True
        if isinstance(a, ZeroType):
            return isinstance(b, ZeroType)
        if not isinstance(b, Succ):
            return False
        a, b = a.pred, b.pred


def num_to_nat(n: int) -> Nat:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"only natural numbers supported, got {n!r}")
    nat: Nat = Zero
    for _ in range(n):
        nat = Succ(nat)
    return nat


def nat_to_num(nat: Nat) -> int:
    n = 0
    while isinstance(nat, Succ):
        nat = nat.pred
        n += 1
    return n
