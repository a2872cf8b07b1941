"""
  Peano recursive-descent parser

Grammar (one token of lookahead, no backtracking):

    Program    := Definition* [Expression]
    Definition := 'def' Ident ['(' Ident (',' Ident)* ')'] '=' Expression
    Expression := 'z'
                | 's' '(' Expression ')'
                | 'if' '(' 'eq' '(' Expression ',' Expression ')' ')'
                       'then' Expression 'else' Expression
                | Ident ['(' Expression (',' Expression)* ')']

The final expression, when present, must be the last thing in the program.
An identifier is a call only when '(' follows it with no whitespace in
between. The first error aborts the parse; no partial tree is returned.
"""

from __future__ import annotations

from peano import Offset
from peano.errors import PeanoSyntaxError, PeanoTrailingInputError
from peano.reader.scanner import END, Token, line_col, next_token, skip_whitespace
from peano.reader.syntax import (
    Ast,
    Cond,
    Definition,
    EqCond,
    Expression,
    FuncCall,
    FuncDef,
    Succ,
    Var,
    VarDef,
    Zero,
)

EXPRESSION_START = frozenset({"ident", "zero", "succ", "if"})


def _describe(token: Token) -> str:
    if token.type == END:
        return "end of program"
    return repr(token.value)


class Parser:
    """Pulls tokens from the scanner on demand, one offset at a time."""

    def __init__(self, source: str):
        self.source = source
        self.pos: Offset = 0

    # ------------------------
    # Token access
    # ------------------------
    def peek(self) -> Token:
        token, _ = next_token(self.source, self.pos)
        return token

    def advance(self) -> Token:
        token, self.pos = next_token(self.source, self.pos)
        return token

    def error(self, message: str, offset: Offset | None = None,
              cls: type[PeanoSyntaxError] = PeanoSyntaxError) -> PeanoSyntaxError:
        if offset is None:
            offset = skip_whitespace(self.source, self.pos)
        line, column = line_col(self.source, offset)
        return cls(f"{message} at line {line}, column {column}", offset)

    def expect(self, tok_type: str, what: str) -> Token:
        start = skip_whitespace(self.source, self.pos)
        token = self.advance()
        if token.type != tok_type:
            raise self.error(f"Expected {what}, found {_describe(token)}", start)
        return token

    # ------------------------
    # Program
    # ------------------------
    def parse_program(self) -> Ast:
        definitions: list[Definition] = []
        while True:
            token = self.peek()
            if token.type == "def":
                self.advance()
                definitions.append(self.parse_definition())
                continue

            if token.type in EXPRESSION_START:
                expression = self.parse_expression()
                trailing = self.peek()
                if trailing.type != END:
                    raise self.error(
                        f"Program must end after its final expression, found {_describe(trailing)}",
                        cls=PeanoTrailingInputError,
                    )
                return Ast(tuple(definitions), expression)

            if token.type == END:
                return Ast(tuple(definitions))

            raise self.error(f"Expected 'def' or an expression, found {_describe(token)}")

    # ------------------------
    # Definitions
    # ------------------------
    def parse_definition(self) -> Definition:
        ident = self.expect("ident", "a name after 'def'").value
        params = None
        if self.peek().type == "lparen":
            self.advance()
            params = self.parse_params()
        self.expect("equals", "'='")
        body = self.parse_expression()
        if params is None:
            return VarDef(ident, body)
        return FuncDef(ident, params, body)

    def parse_params(self) -> tuple[str, ...]:
        params: list[str] = []
        while True:
            params.append(self.expect("ident", "a parameter name").value)
            start = skip_whitespace(self.source, self.pos)
            token = self.advance()
            if token.type == "comma":
                continue
            if token.type == "rparen":
                return tuple(params)
            raise self.error(f"Expected ',' or ')' in parameter list, found {_describe(token)}", start)

    # ------------------------
    # Expressions
    # ------------------------
    def parse_expression(self) -> Expression:
        start = skip_whitespace(self.source, self.pos)
        token = self.advance()

        if token.type == "if":
            return self.parse_cond()

        if token.type == "succ":
            # A run of s( is read in a loop so numerals don't grow the host stack
            self.expect("lparen", "'(' after 's'")
            depth = 1
            while self.peek().type == "succ":
                self.advance()
                self.expect("lparen", "'(' after 's'")
                depth += 1
            node = self.parse_expression()
            for _ in range(depth):
                self.expect("rparen", "')' closing 's('")
                node = Succ(node)
            return node

        if token.type == "zero":
            return Zero()

        if token.type == "ident":
            if self.source.startswith("(", self.pos):
                self.pos += 1
                return FuncCall(token.value, self.parse_call_args())
            return Var(token.value)

        raise self.error(f"Expected an expression, found {_describe(token)}", start)

    def parse_cond(self) -> Cond:
        self.expect("lparen", "'(' after 'if'")
        self.expect("eq", "'eq'")
        self.expect("lparen", "'(' after 'eq'")
        arg1 = self.parse_expression()
        self.expect("comma", "',' between the operands of 'eq'")
        arg2 = self.parse_expression()
        self.expect("rparen", "')' closing 'eq('")
        self.expect("rparen", "')' closing 'if('")
        self.expect("then", "'then'")
        then_exp = self.parse_expression()
        self.expect("else", "'else'")
        else_exp = self.parse_expression()
        return Cond(EqCond(arg1, arg2), then_exp, else_exp)

    def parse_call_args(self) -> tuple[Expression, ...]:
        args: list[Expression] = []
        while True:
            args.append(self.parse_expression())
            start = skip_whitespace(self.source, self.pos)
            token = self.advance()
            if token.type == "rparen":
                return tuple(args)
            if token.type == "comma":
                continue
            raise self.error(f"Expected ',' or ')' in argument list, found {_describe(token)}", start)


def parse(source: str) -> Ast:
    """Parse a whole program. Raises PeanoSyntaxError (or a subclass) on failure."""
    return Parser(source).parse_program()
