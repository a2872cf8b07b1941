"""Lowering: surface AST -> Program.

Translates every surface expression node-for-node into the evaluator's Exp
form and assembles the two global tables:

1. FuncEnv from every FuncDef (a later definition of a name replaces an
   earlier one).
2. VarEnv by walking the VarDefs in source order, evaluating each against the
   variables defined before it and the complete FuncEnv. A reference to a
   variable defined later evaluates as an unbound name (zero by default).

The trailing program expression is translated but not evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from peano.evaluation.evaluator import evaluate
from peano.reader import syntax
from peano.types import exp
from peano.types.environment import FuncEnv, VarEnv


@dataclass(frozen=True)
class Program:
    funcs: FuncEnv = field(default_factory=FuncEnv)
    vars: VarEnv = field(default_factory=VarEnv)
    expression: Optional[exp.Exp] = None


_VISIT = 0
_BUILD = 1


def lower_expression(node: syntax.Expression) -> exp.Exp:
    """Lower a surface expression without recursing over its nesting."""
    work: list[tuple[int, syntax.Expression]] = [(_VISIT, node)]
    values: list[exp.Exp] = []

    while work:
        tag, item = work.pop()

        if tag == _VISIT:
            match item:
                case syntax.Zero():
                    values.append(exp.ZTerm())
                case syntax.Var(ident=ident):
                    values.append(exp.Var(ident))
                case syntax.Succ(arg=arg):
                    work.append((_BUILD, item))
                    work.append((_VISIT, arg))
                case syntax.FuncCall(args=args):
                    work.append((_BUILD, item))
                    work.extend((_VISIT, a) for a in reversed(args))
                case syntax.Cond(cond=cond, then_exp=then_exp, else_exp=else_exp):
                    work.append((_BUILD, item))
                    work.extend(
                        (_VISIT, e) for e in (else_exp, then_exp, cond.arg2, cond.arg1)
                    )
                case _:
                    raise TypeError(f"Cannot lower {item!r}")
            continue

        # _BUILD: children are on top of `values`, in source order
        match item:
            case syntax.Succ():
                values[-1] = exp.STerm(values[-1])
            case syntax.FuncCall(ident=ident, args=args):
                start = len(values) - len(args)
                lowered = tuple(values[start:])
                del values[start:]
                values.append(exp.Term(ident, lowered))
            case syntax.Cond():
                arg1, arg2, then_exp, else_exp = values[-4:]
                del values[-4:]
                values.append(exp.Cond(exp.EqExp(arg1, arg2), then_exp, else_exp))

    return values.pop()


def lower_function(definition: syntax.FuncDef) -> exp.Lambda:
    return exp.Lambda(definition.params, lower_expression(definition.body))


def lower(ast: syntax.Ast, *, strict: bool = False) -> Program:
    """Build a Program from `ast`, evaluating variable definitions eagerly."""
    func_env = FuncEnv(
        {
            d.ident: lower_function(d)
            for d in ast.definitions
            if isinstance(d, syntax.FuncDef)
        }
    )

    var_env = VarEnv()
    for d in ast.definitions:
        if isinstance(d, syntax.VarDef):
            value = evaluate(lower_expression(d.value), var_env, func_env, strict=strict)
            var_env = var_env.bind(d.ident, value)

    expression = None
    if ast.expression is not None:
        expression = lower_expression(ast.expression)

    return Program(func_env, var_env, expression)


# Name used by the command line front end
transform = lower
