"""Render Peano trees back to program text.

Works on both the surface AST (peano.reader.syntax) and the lowered form
(peano.types.exp / Program). Output parses back to an equal tree. Keywords can
optionally be colored for terminal display.
"""

from __future__ import annotations

from termcolor import colored

from peano.compiler.lowering import Program
from peano.reader import syntax
from peano.types import exp
from peano.types.nat import Nat

# ----------------- Colors -----------------
COLOR_KEYWORD = "light_blue"
COLOR_CONSTRUCTOR = "light_green"
COLOR_NAME = "light_magenta"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "color_keywords": False,
    "color_constructors": False,
    "color_names": False,
}


def _paint(text: str, color: str, enabled: bool) -> str:
    # colors were asked for explicitly, so skip the tty check
    return colored(text, color, force_color=True) if enabled else text


class _Renderer:
    def __init__(self, options: dict):
        self.options = {**DEFAULT_OPTIONS, **options}

    def kw(self, text: str) -> str:
        return _paint(text, COLOR_KEYWORD, self.options["color_keywords"])

    def ctor(self, text: str) -> str:
        return _paint(text, COLOR_CONSTRUCTOR, self.options["color_constructors"])

    def name(self, text: str) -> str:
        return _paint(text, COLOR_NAME, self.options["color_names"])

    def cond(self, arg1: str, arg2: str, then_text: str, else_text: str) -> str:
        return (
            f"{self.kw('if')}({self.kw('eq')}({arg1}, {arg2})) "
            f"{self.kw('then')} {then_text} {self.kw('else')} {else_text}"
        )

    def call(self, ident: str, args: list[str]) -> str:
        return f"{self.name(ident)}({', '.join(args)})"

    # --- surface syntax ---
    def expression(self, node: syntax.Expression) -> str:
        match node:
            case syntax.Zero():
                return self.ctor("z")
            case syntax.Succ(arg=arg):
                return f"{self.ctor('s')}({self.expression(arg)})"
            case syntax.Var(ident=ident):
                return self.name(ident)
            case syntax.FuncCall(ident=ident, args=args):
                return self.call(ident, [self.expression(a) for a in args])
            case syntax.Cond(cond=c, then_exp=t, else_exp=e):
                return self.cond(
                    self.expression(c.arg1), self.expression(c.arg2),
                    self.expression(t), self.expression(e),
                )
        raise TypeError(f"Cannot format {node!r}")

    def definition(self, node: syntax.Definition) -> str:
        if isinstance(node, syntax.FuncDef):
            head = self.call(node.ident, [self.name(p) for p in node.params])
            return f"{self.kw('def')} {head} = {self.expression(node.body)}"
        return f"{self.kw('def')} {self.name(node.ident)} = {self.expression(node.value)}"

    # --- lowered form ---
    def lowered(self, node: exp.Exp) -> str:
        match node:
            case exp.ZTerm():
                return self.ctor("z")
            case exp.STerm(arg=arg):
                return f"{self.ctor('s')}({self.lowered(arg)})"
            case exp.Var(sym=sym):
                return self.name(sym)
            case exp.Term(sym=sym, args=args):
                return self.call(sym, [self.lowered(a) for a in args])
            case exp.Cond(cond=c, if_exp=t, else_exp=e):
                return self.cond(self.lowered(c.arg1), self.lowered(c.arg2), self.lowered(t), self.lowered(e))
        raise TypeError(f"Cannot format {node!r}")

    def nat(self, value: Nat) -> str:
        n = int(value)
        return (self.ctor("s") + "(") * n + self.ctor("z") + ")" * n


def format_expression(node: syntax.Expression, options: dict = DEFAULT_OPTIONS) -> str:
    return _Renderer(options).expression(node)


def format_definition(node: syntax.Definition, options: dict = DEFAULT_OPTIONS) -> str:
    return _Renderer(options).definition(node)


def format_ast(ast: syntax.Ast, options: dict = DEFAULT_OPTIONS) -> str:
    r = _Renderer(options)
    lines = [r.definition(d) for d in ast.definitions]
    if ast.expression is not None:
        lines.append(r.expression(ast.expression))
    return "\n".join(lines)


def format_exp(node: exp.Exp, options: dict = DEFAULT_OPTIONS) -> str:
    return _Renderer(options).lowered(node)


def format_program(program: Program, options: dict = DEFAULT_OPTIONS) -> str:
    """Functions first, then variables (already evaluated), then the expression."""
    r = _Renderer(options)
    lines = []
    for name, fn in program.funcs.items():
        head = r.call(name, [r.name(p) for p in fn.params])
        lines.append(f"{r.kw('def')} {head} = {r.lowered(fn.body)}")
    for name, value in program.vars.items():
        lines.append(f"{r.kw('def')} {r.name(name)} = {r.nat(value)}")
    if program.expression is not None:
        lines.append(r.lowered(program.expression))
    return "\n".join(lines)
