"""Core evaluator for the Peano interpreter.

Reduces an Exp to a Nat given a VarEnv and the global FuncEnv. Evaluation
runs on two explicit stacks instead of Python recursion:

- `work` holds pending frames: expressions to evaluate and continuations
  (wrap in successor, pick a branch, apply a function).
- `values` holds finished Nats waiting to be consumed by a continuation.

A call pops its APPLY frame and pushes the callee body in its place, so tail
calls run in constant work-stack space, and successor chains cost heap
memory rather than host stack depth.

Default policy: unbound variables and unknown functions evaluate to zero, and
missing trailing arguments are bound to zero. With `strict=True` those cases
raise instead (see peano.errors).
"""

from __future__ import annotations

from peano.errors import PeanoArityError
from peano.types.environment import FuncEnv, VarEnv
from peano.types.exp import Cond, EqExp, Exp, Lambda, STerm, Term, Var, ZTerm
from peano.types.nat import Nat, Succ, Zero, eq

# Frame tags
_EVAL = 0
_SUCC = 1
_BRANCH = 2
_APPLY = 3


def evaluate(
    exp: Exp, var_env: VarEnv, func_env: FuncEnv, *, strict: bool = False
) -> Nat:
    """Evaluate `exp` to a Nat. Neither environment is modified."""
    work: list[tuple] = [(_EVAL, exp, var_env)]
    values: list[Nat] = []

    while work:
        frame = work.pop()
        tag = frame[0]

        if tag == _EVAL:
            _, exp, env = frame
            match exp:
                case ZTerm():
                    values.append(Zero)
                case STerm(arg=arg):
                    work.append((_SUCC,))
                    work.append((_EVAL, arg, env))
                case Var(sym=sym):
                    values.append(env.lookup(sym, strict))
                case Cond(cond=EqExp(arg1=arg1, arg2=arg2)):
                    # arg1 is evaluated first, then arg2, then the branch
                    work.append((_BRANCH, exp, env))
                    work.append((_EVAL, arg2, env))
                    work.append((_EVAL, arg1, env))
                case Term(sym=sym, args=args):
                    fn = func_env.lookup(sym, strict)
                    if fn is None:
                        # unknown function: zero, arguments never evaluated
                        values.append(Zero)
                        continue
                    if strict and len(args) != fn.arity:
                        raise PeanoArityError(
                            f"{sym} expects {fn.arity} argument(s), got {len(args)}"
                        )
                    # surplus arguments have no parameter and are not evaluated
                    supplied = args[: fn.arity]
                    work.append((_APPLY, fn, len(supplied)))
                    for arg in reversed(supplied):
                        work.append((_EVAL, arg, env))
                case _:
                    raise TypeError(f"Cannot evaluate {exp!r}")

        elif tag == _SUCC:
            values[-1] = Succ(values[-1])

        elif tag == _BRANCH:
            _, cond, env = frame
            right = values.pop()
            left = values.pop()
            chosen = cond.if_exp if eq(left, right) else cond.else_exp
            work.append((_EVAL, chosen, env))

        else:  # _APPLY
            _, fn, count = frame
            work.append((_EVAL, fn.body, _bind_arguments(fn, values, count)))

    return values.pop()


def _bind_arguments(fn: Lambda, values: list[Nat], count: int) -> VarEnv:
    """Pop `count` argument values and bind them to `fn`'s parameters.

    Parameters without a supplied argument are bound to zero.
    """
    if count:
        args = values[-count:]
        del values[-count:]
    else:
        args = []
    # Left to right, so a repeated parameter takes its last position's value
    bindings = {}
    for i, param in enumerate(fn.params):
        bindings[param] = args[i] if i < len(args) else Zero
    return VarEnv(bindings)


def apply(fn: Lambda, args: list[Nat], func_env: FuncEnv, *, strict: bool = False) -> Nat:
    """Call `fn` with already-evaluated arguments (missing ones bound to zero)."""
    if strict and len(args) != fn.arity:
        raise PeanoArityError(f"expected {fn.arity} argument(s), got {len(args)}")
    values = list(args[: fn.arity])
    env = _bind_arguments(fn, values, len(values))
    return evaluate(fn.body, env, func_env, strict=strict)
