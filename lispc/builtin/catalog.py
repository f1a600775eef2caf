from __future__ import annotations

from enum import Enum
from typing import Optional


class Builtin(Enum):
    """The fixed vocabulary of builtin operations, keyed by their Lisp name."""

    LIST = "list"
    HEAD = "head"
    TAIL = "tail"
    JOIN = "join"
    EVAL = "eval"
    DEF = "def"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @classmethod
    def lookup(cls, name: str) -> Optional[Builtin]:
        try:
            return cls(name)
        except ValueError:
            return None
