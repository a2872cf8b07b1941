import sys

import pytest

from peano.compiler import Program, lower, transform
from peano.errors import PeanoUnboundSymbol
from peano.evaluation.evaluator import evaluate
from peano.reader.parser import parse
from peano.reader import syntax
from peano.types import exp
from peano.types.environment import FuncEnv, VarEnv
from peano.types.nat import Zero, nat_to_num, num_to_nat


def test_lowering_is_structure_preserving():
    program = lower(parse("def f(a, b) = if(eq(a, z)) then s(b) else f(a, g(b))\nf(z, x)"))
    assert program.funcs["f"] == exp.Lambda(
        ("a", "b"),
        exp.Cond(
            exp.EqExp(exp.Var("a"), exp.ZTerm()),
            exp.STerm(exp.Var("b")),
            exp.Term("f", (exp.Var("a"), exp.Term("g", (exp.Var("b"),)))),
        ),
    )
    assert program.expression == exp.Term("f", (exp.ZTerm(), exp.Var("x")))


def test_variables_are_evaluated_eagerly_in_order(add_program):
    program = lower(parse(add_program))
    assert isinstance(program, Program)
    assert list(program.vars) == ["x1", "x2", "x3"]
    assert nat_to_num(program.vars["x1"]) == 2
    assert nat_to_num(program.vars["x3"]) == 3
    assert set(program.funcs) == {"predIt", "pred", "add"}
    # the final expression is translated, not evaluated
    assert program.expression == exp.Var("x3")


def test_forward_variable_reference_is_zero():
    program = lower(parse("def a = s(b)\ndef b = s(s(z))"))
    assert program.vars["a"] == num_to_nat(1)
    assert program.vars["b"] == num_to_nat(2)


def test_variable_may_call_function_defined_later():
    program = lower(parse("def a = inc(s(z))\ndef inc(x) = s(x)"))
    assert program.vars["a"] == num_to_nat(2)


def test_later_definition_replaces_earlier():
    program = lower(parse("def f(x) = z\ndef f(x) = s(x)\ndef v = s(z)\ndef v = f(v)"))
    assert program.funcs["f"].body == exp.STerm(exp.Var("x"))
    # the second v sees the first one
    assert program.vars["v"] == num_to_nat(2)


def test_definitions_only_program_has_no_expression():
    program = lower(parse("def a = z"))
    assert program.expression is None
    assert program.vars["a"] is Zero


def test_empty_ast():
    program = lower(parse(""))
    assert program == Program(FuncEnv(), VarEnv(), None)


def test_strict_lowering_rejects_forward_reference():
    with pytest.raises(PeanoUnboundSymbol):
        lower(parse("def a = b\ndef b = z"), strict=True)


def test_transform_alias():
    assert transform is lower


def test_lowering_deep_successor_chain():
    n = sys.getrecursionlimit() * 20
    node = syntax.Zero()
    for _ in range(n):
        node = syntax.Succ(node)
    program = lower(syntax.Ast((), node))
    assert nat_to_num(evaluate(program.expression, program.vars, program.funcs)) == n


def test_lowering_deep_call_nesting():
    depth = sys.getrecursionlimit() * 5
    node = syntax.Var("x")
    for i in range(depth):
        node = syntax.FuncCall("f", (node, syntax.Zero()) if i % 2 else (node,))
    lowered = lower(syntax.Ast((), node)).expression
    seen = 0
    while isinstance(lowered, exp.Term):
        assert lowered.sym == "f"
        assert len(lowered.args) == (2 if (depth - 1 - seen) % 2 else 1)
        lowered = lowered.args[0]
        seen += 1
    assert seen == depth
    assert lowered == exp.Var("x")
