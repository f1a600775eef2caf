"""Runtime environment for lispc.

A single flat table binding symbol names to values. The environment owns a
deep copy of every bound value and hands out deep copies on lookup, so no
value is ever shared between the table and an expression being evaluated.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from lispc.types.value import Error, Value


class Environment:
    """Ordered mapping from names to owned values."""

    __slots__ = ("vars",)

    def __init__(self):
        # dict keeps insertion order; rebinding a name keeps its position
        self.vars: dict[str, Value] = {}

    def get(self, name: str) -> Value:
        """Return a copy of the value bound to `name`, or an Error value."""
        value = self.vars.get(name)
        if value is None:
            return Error(f"Unbound symbol '{name}'")
        return value.copy()

    def put(self, name: str, value: Value) -> None:
        """Bind `name` to a copy of `value`, replacing any previous binding."""
        old = self.vars.get(name)
        if old is not None:
            old.release()
        self.vars[name] = value.copy()

    def release(self) -> None:
        """Release every bound value and empty the table."""
        bound, self.vars = self.vars, {}
        for value in bound.values():
            value.release()

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
