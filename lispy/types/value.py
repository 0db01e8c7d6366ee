"""Runtime values for Lispy.

Every piece of runtime data is one of six variants:

    Number   signed 64-bit integer
    Error    a failed computation, carried as data
    Symbol   a name, resolved through the Environment when evaluated
    Builtin  a reference to one library operation, by Op id
    SExpr    a list evaluated as a function call
    QExpr    a quoted list, never evaluated automatically

SExpr and QExpr share their representation (Expr); a list is retagged by
moving its cells into a new wrapper, which then owns them. A Value never
shares a child with another live Value: use clone() whenever a copy must
outlive the original.
"""

from __future__ import annotations

import sys
from typing import Iterator

from lispy.builtin.ops import Op
from lispy.errors import ErrorKind

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def wrap_int64(n: int) -> int:
    """Reduce `n` to the signed 64-bit range (two's complement wrap-around)."""
    n &= (1 << 64) - 1
    return n - (1 << 64) if n > INT64_MAX else n


class Value:
    __slots__ = ()

    type_name = "Unknown"

    def clone(self) -> Value:
        raise NotImplementedError


class Number(Value):
    __slots__ = ("value",)

    type_name = "Number"

    def __init__(self, value: int):
        self.value = wrap_int64(value)

    def clone(self) -> Number:
        return Number(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __repr__(self):
        return f"Number({self.value})"


class Error(Value):
    __slots__ = ("message", "kind")

    type_name = "Error"

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INTERNAL):
        self.message = message
        self.kind = kind

    def clone(self) -> Error:
        return Error(self.message, self.kind)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Error)
            and self.kind == other.kind
            and self.message == other.message
        )

    def __repr__(self):
        return f"Error({self.message!r}, {self.kind.name})"


class Symbol(Value):
    __slots__ = ("name",)

    type_name = "Symbol"

    def __init__(self, name: str):
        # Interned: symbols are compared and looked up constantly
        self.name = sys.intern(name)

    def clone(self) -> Symbol:
        return Symbol(self.name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class Builtin(Value):
    __slots__ = ("op",)

    type_name = "Function"

    def __init__(self, op: Op):
        self.op = op

    def clone(self) -> Builtin:
        return Builtin(self.op)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.op is other.op

    def __repr__(self):
        return f"Builtin({self.op.name})"


class Expr(Value):
    """An ordered list of exclusively owned child values."""

    __slots__ = ("cells",)

    def __init__(self, cells: list[Value] | None = None):
        self.cells: list[Value] = cells if cells is not None else []

    def clone(self) -> Expr:
        return type(self)([cell.clone() for cell in self.cells])

    def add(self, value: Value) -> Expr:
        """Append `value`, taking ownership of it."""
        self.cells.append(value)
        return self

    def pop(self, i: int) -> Value:
        """Remove and return the child at index `i`."""
        if not 0 <= i < len(self.cells):
            return Error("pop index out of bounds!", ErrorKind.INTERNAL)
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Return the child at index `i`, discarding the rest of the list."""
        if not 0 <= i < len(self.cells):
            self.cells = []
            return Error("take index out of bounds!", ErrorKind.INTERNAL)
        value = self.cells[i]
        self.cells = []
        return value

    def join(self, other: Expr) -> Expr:
        """Move every child of `other` onto the end of this list."""
        self.cells.extend(other.cells)
        other.cells = []
        return self

    def to_sexpr(self) -> SExpr:
        cells, self.cells = self.cells, []
        return SExpr(cells)

    def to_qexpr(self) -> QExpr:
        cells, self.cells = self.cells, []
        return QExpr(cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        return self.cells[i]

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    def __repr__(self):
        return f"{type(self).__name__}({self.cells!r})"


class SExpr(Expr):
    __slots__ = ()

    type_name = "S-Expression"


class QExpr(Expr):
    __slots__ = ()

    type_name = "Q-Expression"


def clone(value: Value) -> Value:
    """Deep copy of `value`; the result shares nothing with the original."""
    return value.clone()
