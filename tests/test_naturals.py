import pytest
from hypothesis import given, strategies as st

from peano.types.nat import Nat, Succ, Zero, eq, nat_to_num, num_to_nat, succ, zero


nat_strat = st.integers(min_value=0, max_value=300)


@given(nat_strat)
def test_round_trip(n):
    assert nat_to_num(num_to_nat(n)) == n


@given(nat_strat)
def test_eq_reflexive(n):
    a = num_to_nat(n)
    assert eq(a, a)
    assert eq(a, num_to_nat(n))


@given(nat_strat, nat_strat)
def test_eq_symmetric_and_matches_ints(m, n):
    a, b = num_to_nat(m), num_to_nat(n)
    assert eq(a, b) == eq(b, a) == (m == n)


def test_zero_and_succ():
    assert eq(zero(), zero())
    assert not eq(zero(), succ(zero()))
    assert not eq(succ(zero()), zero())
    assert zero() is Zero
    assert isinstance(succ(Zero), Succ)
    assert succ(Zero).pred is Zero


def test_python_equality_is_structural():
    assert Succ(Succ(Zero)) == num_to_nat(2)
    assert Succ(Zero) != Zero
    assert num_to_nat(3) != 3
    assert hash(num_to_nat(4)) == hash(Succ(num_to_nat(3)))


def test_conversions_and_repr():
    assert int(num_to_nat(5)) == 5
    assert repr(Zero) == "z"
    assert repr(num_to_nat(2)) == "s(s(z))"
    assert not Zero
    assert num_to_nat(1)


def test_large_values_do_not_recurse():
    n = 100_000
    big = num_to_nat(n)
    assert nat_to_num(big) == n
    assert eq(big, num_to_nat(n))
    assert not eq(big, num_to_nat(n - 1))


@pytest.mark.parametrize("bad", [-1, -20, 0.5, 3.0, "3", True])
def test_num_to_nat_rejects_non_naturals(bad):
    with pytest.raises(ValueError):
        num_to_nat(bad)


def test_nat_is_base_type():
    assert isinstance(Zero, Nat)
    assert isinstance(num_to_nat(7), Nat)
