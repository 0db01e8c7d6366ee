"""Runtime environment for Lispy.

The Environment is a single flat table of name -> Value bindings. Insertion
order is kept (printenv lists names in that order) and rebinding a name
replaces its value in place. Values cross the boundary by deep clone only:
`put` stores a copy of what it is given and `get` hands out a copy of what it
holds, so no caller can mutate a stored binding.

The environment also carries the `run` flag polled by the read loop; the
`exit` builtin clears it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from lispy.errors import ErrorKind
from lispy.types.value import Builtin, Error, Value


class Environment:
    """Ordered mapping from names to owned Lisp values."""

    __slots__ = ("vars", "run")

    def __init__(self):
        self.vars: dict[str, Value] = {}
        self.run: bool = True

    def get(self, name: str) -> Value:
        """Return a copy of the value bound to `name`, or an unbound-symbol Error."""
        value = self.vars.get(name)
        if value is None:
            return Error(f"Unbound symbol '{name}'", ErrorKind.UNBOUND_SYMBOL)
        return value.clone()

    def put(self, name: str, value: Value) -> None:
        """Bind `name` to a copy of `value`, replacing any previous binding in place."""
        self.vars[name] = value.clone()

    def update(self, mapping: dict[str, Value]) -> None:
        """Bulk-bind a mapping of name -> value, in mapping order."""
        for k, v in mapping.items():
            self.put(k, v)

    def enumerate(self) -> list[str]:
        """Bound names in slot order."""
        return list(self.vars)

    def name_of(self, builtin: Builtin) -> str | None:
        """First name bound to a builtin with the same operation id."""
        for name, value in self.vars.items():
            if isinstance(value, Builtin) and value.op is builtin.op:
                return name
        return None

    def stop(self) -> None:
        self.run = False

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            if not self.run:
                buffer.write(" stopped")
            buffer.write(">")
            return buffer.getvalue()
