"""Tagged value model for lispc.

A value is exactly one of Number, Symbol, Error, Function, SExpr or QExpr.
The two composite forms own an ordered list of child values ("cells").

Ownership is tree-exclusive: a child belongs to exactly one container.
Moving a value between containers goes through `pop`/`take`, which excise it
from its old parent; putting a value in a second place requires `copy`.
`release` tears a value down recursively, after which a composite is empty.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from lispc.builtin.catalog import Builtin


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def wrap_int64(n: int) -> int:
    """Reduce `n` to a signed 64-bit integer with two's complement wrap-around."""
    return ((n - INT64_MIN) % 2 ** 64) + INT64_MIN


class Value:
    """Common base of every lispc value."""

    __slots__ = ()

    TYPE_NAME = "Value"

    @property
    def type_name(self) -> str:
        """Human readable tag name, used inside error messages."""
        return self.TYPE_NAME

    def copy(self) -> Value:
        raise NotImplementedError

    def release(self) -> None:
        """Leaves own no children; nothing to tear down."""

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class Number(Value):
    __slots__ = ("num",)
    __match_args__ = ("num",)

    TYPE_NAME = "Number"

    def __init__(self, num: int):
        self.num: int = wrap_int64(num)

    def copy(self) -> Number:
        return Number(self.num)

    def render(self) -> str:
        return str(self.num)

    def __eq__(self, other) -> bool:
        return isinstance(other, Number) and self.num == other.num

    def __repr__(self) -> str:
        return f"Number({self.num})"


class Symbol(Value):
    __slots__ = ("name",)
    __match_args__ = ("name",)

    TYPE_NAME = "Symbol"

    def __init__(self, name: str):
        self.name: str = name

    def copy(self) -> Symbol:
        return Symbol(self.name)

    def render(self) -> str:
        return self.name

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"


class Error(Value):
    """A diagnostic carried as an ordinary value."""

    __slots__ = ("message",)
    __match_args__ = ("message",)

    TYPE_NAME = "Error"

    def __init__(self, message: str):
        self.message: str = message

    def copy(self) -> Error:
        return Error(self.message)

    def render(self) -> str:
        return f"Error: {self.message}"

    def __eq__(self, other) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __repr__(self) -> str:
        return f"Error({self.message!r})"


class Function(Value):
    """Reference to one entry of the builtin catalog."""

    __slots__ = ("builtin",)
    __match_args__ = ("builtin",)

    TYPE_NAME = "Function"

    def __init__(self, builtin: Builtin):
        self.builtin: Builtin = builtin

    def copy(self) -> Function:
        # The catalog entry is shared, not owned
        return Function(self.builtin)

    def render(self) -> str:
        return "<function>"

    def __eq__(self, other) -> bool:
        return isinstance(other, Function) and self.builtin is other.builtin

    def __repr__(self) -> str:
        return f"Function({self.builtin.value!r})"


class Expr(Value):
    """Ordered composite of owned child values."""

    __slots__ = ("cells",)
    __match_args__ = ("cells",)

    OPEN = ""
    CLOSE = ""

    def __init__(self, cells: list[Value] | None = None):
        self.cells: list[Value] = [] if cells is None else cells

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        return self.cells[i]

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cells!r})"

    def copy(self) -> Expr:
        return type(self)([cell.copy() for cell in self.cells])

    def release(self) -> None:
        cells, self.cells = self.cells, []
        for cell in cells:
            cell.release()

    def render(self) -> str:
        with StringIO() as buffer:
            buffer.write(self.OPEN)
            buffer.write(" ".join(cell.render() for cell in self.cells))
            buffer.write(self.CLOSE)
            return buffer.getvalue()

    # --- Structural editing ---
    def add(self, x: Value) -> Expr:
        """Append `x` as the last child; `x` is now owned by this container."""
        self.cells.append(x)
        return self

    def pop(self, i: int) -> Value:
        """Excise and return child `i`; remaining children shift down."""
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Pop child `i` and release everything else in this container."""
        x = self.pop(i)
        self.release()
        return x

    def join(self, other: Expr) -> Expr:
        """Move every child of `other` onto the end of this container."""
        while other.cells:
            self.add(other.pop(0))
        other.release()
        return self

    def relabel(self, cls: type[Expr]) -> Expr:
        """Return the same children under a different composite tag."""
        if type(self) is cls:
            return self
        cells, self.cells = self.cells, []
        return cls(cells)


class SExpr(Expr):
    __slots__ = ()

    TYPE_NAME = "S-Expression"
    OPEN = "("
    CLOSE = ")"


class QExpr(Expr):
    __slots__ = ()

    TYPE_NAME = "Q-Expression"
    OPEN = "{"
    CLOSE = "}"
