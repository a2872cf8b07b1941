from __future__ import annotations

# Public surface for the compiler package
from .lowering import Program, lower, lower_expression, lower_function, transform

__all__ = [
    "Program",
    "lower",
    "lower_expression",
    "lower_function",
    "transform",
]
