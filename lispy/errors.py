from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a language-level Error value."""

    ARITY = "arity"
    TYPE = "type"
    UNBOUND_SYMBOL = "unbound-symbol"
    DIVIDE_BY_ZERO = "divide-by-zero"
    BAD_NUMBER = "bad-number"
    BAD_FUNCTION = "bad-function"
    INTERNAL = "internal"


class LispyError(Exception):
    """ Base class for all host-level Lispy errors"""
    pass


class LispySyntaxError(LispyError):
    """ Raised when source text or a parse tree cannot be read"""

    def __init__(self, message: str, filename: str = "<stdin>", line: int = 1, column: int = 1):
        super().__init__(message)
        self.message = message
        self.filename = filename
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}: error: {self.message}"
