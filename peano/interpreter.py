from __future__ import annotations
from pathlib import Path
from typing import Literal

from peano import Identifier
from peano.compiler.lowering import Program, lower
from peano.config import get_strict_mode
from peano.evaluation.evaluator import apply, evaluate
from peano.modules.prelude_loader import load_prelude
from peano.reader.parser import parse
from peano.reader.syntax import Ast, Definition
from peano.types.nat import Nat, Zero, num_to_nat


class Interpreter:
    """
    Orchestrates parsing, lowering and evaluating Peano programs.
    Keeps the definitions of every successfully evaluated source, so later
    sources can call functions and read variables defined earlier.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = None,
        *,
        strict: bool | None = None,
    ):
        self.strict: bool = get_strict_mode() if strict is None else strict
        self.definitions: tuple[Definition, ...] = ()
        self.program: Program = Program()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.definitions = load_prelude().definitions
        else:
            self.definitions = load_prelude(prelude).definitions
        if self.definitions:
            self.program = lower(Ast(self.definitions), strict=self.strict)

    def compile(self, code: str) -> Program:
        """Parse `code` and lower it together with the session's definitions."""
        ast = parse(code)
        return lower(Ast(self.definitions + ast.definitions, ast.expression), strict=self.strict)

    def eval(self, code: str) -> Nat | None:
        """Evaluate `code`; returns None when it has no final expression.

        The session only keeps the new definitions if lowering and evaluation
        both succeed.
        """
        ast = parse(code)
        definitions = self.definitions + ast.definitions
        program = lower(Ast(definitions, ast.expression), strict=self.strict)
        result = None
        if program.expression is not None:
            result = evaluate(program.expression, program.vars, program.funcs, strict=self.strict)
        self.definitions = definitions
        self.program = program
        return result

    def run_file(self, path: str | Path) -> Nat | None:
        return self.eval(Path(path).read_text(encoding='utf-8'))

    def call(self, name: Identifier, *args: Nat | int) -> Nat:
        """Call a defined function with Nat (or int) arguments."""
        fn = self.program.funcs.lookup(name, self.strict)
        if fn is None:
            return Zero
        nats = [a if isinstance(a, Nat) else num_to_nat(a) for a in args]
        return apply(fn, nats, self.program.funcs, strict=self.strict)
