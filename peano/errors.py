from __future__ import annotations

from peano import Offset


class PeanoError(Exception):
    """ Base class for all Peano errors"""
    pass


class PeanoSyntaxError(PeanoError):
    """ Raised when program text does not match the grammar"""

    def __init__(self, message: str, offset: Offset | None = None):
        super().__init__(message)
        self.offset = offset


class PeanoLexError(PeanoSyntaxError):
    """ Raised when no token matches at the current offset"""


class PeanoTrailingInputError(PeanoSyntaxError):
    """ Raised when anything follows the final program expression"""


class PeanoUnboundSymbol(PeanoError):
    """ Raised (strict mode only) when a variable is used before it is bound"""


class PeanoUnknownFunction(PeanoError):
    """ Raised (strict mode only) when calling a function that was never defined"""


class PeanoArityError(PeanoError):
    """ Raised (strict mode only) when a call's argument count differs from the parameter count"""
