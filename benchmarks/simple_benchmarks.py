from timeit import timeit

from peano.compiler import lower
from peano.evaluation.evaluator import evaluate
from peano.interpreter import Interpreter
from peano.modules.prelude_loader import read_prelude
from peano.reader.parser import parse
from peano.reader.scanner import lex
from peano.types.nat import eq, num_to_nat


def time_parse(code: str, rounds: int) -> float:
    """Time the front end only: scanning plus recursive-descent parsing."""
    parse(code)
    return timeit(lambda: parse(code), number=rounds)


def time_evaluate(code: str, rounds: int) -> float:
    """Time evaluation only: parse and lower once, then repeatedly evaluate
    the same final expression against the same environments.
    """
    itp = Interpreter(prelude="auto")
    program = itp.compile(code)
    # Warmup
    evaluate(program.expression, program.vars, program.funcs)
    # Timed
    return timeit(lambda: evaluate(program.expression, program.vars, program.funcs), number=rounds)


# Micro-benchmark on the value model alone (no parsing or evaluation)

def bench_structural_eq(n: int = 5000, rounds: int = 200) -> float:
    a, b = num_to_nat(n), num_to_nat(n)
    eq(a, b)
    return timeit(lambda: eq(a, b), number=rounds)


ADD_CODE = "add(s(s(s(s(s(s(s(s(s(s(z)))))))))), s(s(s(z))))"

MUL_CODE = "mul(s(s(s(s(s(s(z)))))), s(s(s(s(s(s(s(z))))))))"

# Tail recursive counter, the host stack stays flat
COUNT_CODE = r"""
def count(a, b) = if(eq(a, b)) then a else count(s(a), b)
def target = mul(s(s(s(s(s(s(s(s(s(s(z)))))))))), s(s(s(s(s(s(s(s(s(s(z)))))))))))
count(z, target)
"""


def _print_timing(name: str, code: str, rounds: int) -> None:
    tparse = time_parse(code, rounds)
    teval = time_evaluate(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  parse: {tparse:.6f}s  |  evaluate: {teval:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: structural equality on Nat(5000)")
    print(f"  time: {bench_structural_eq():.6f}s")

    prelude = read_prelude()
    print("Benchmark: scanning the prelude")
    print(f"  time: {timeit(lambda: list(lex(prelude)), number=1000):.6f}s  [rounds=1000]")
    print("Benchmark: lowering the prelude")
    ast = parse(prelude)
    print(f"  time: {timeit(lambda: lower(ast), number=1000):.6f}s  [rounds=1000]")

    _print_timing("add 10 + 3", ADD_CODE, rounds=200)
    _print_timing("mul 6 * 7", MUL_CODE, rounds=20)
    _print_timing("tail recursive count to 100", COUNT_CODE, rounds=20)
