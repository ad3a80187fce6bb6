"""Weak head normal forms of Zap expressions.

A Value is what forcing an Expr produces: an integer, nil, a pair of two
unforced Exprs, or a single-argument function. Constructing a Value never
forces anything it refers to.
"""

from __future__ import annotations

from zap import Callback
from zap.errors import ZapNotANumber, ZapNotAPair


class Value:
    """Base class of the four value variants."""

    __slots__ = ()

    kind: str = "value"

    def as_num(self, op: str = "num") -> int:
        raise ZapNotANumber(f"{op}: not a number: {self.kind}")

    def car(self):
        raise ZapNotAPair(f"car: not a pair: {self.kind}")

    def cdr(self):
        raise ZapNotAPair(f"cdr: not a pair: {self.kind}")


class Num(Value):
    __slots__ = ("n",)

    kind = "number"

    def __init__(self, n: int):
        self.n: int = n

    def as_num(self, op: str = "num") -> int:
        return self.n

    def __eq__(self, other) -> bool:
        return isinstance(other, Num) and self.n == other.n

    def __hash__(self) -> int:
        return hash(self.n)

    def __repr__(self):
        return f"Num({self.n})"


class NilType(Value):
    __slots__ = ()

    kind = "nil"

    def __repr__(self): return "nil"
    def __bool__(self): return False


Nil = NilType()


class Cons(Value):
    """A pair of two unforced expressions."""

    __slots__ = ("head", "tail")

    kind = "cons"

    def __init__(self, head, tail):
        self.head = head
        self.tail = tail

    def car(self):
        return self.head

    def cdr(self):
        return self.tail

    def __repr__(self):
        return f"Cons({self.head!r}, {self.tail!r})"


class Func(Value):
    """A single-argument function from Expr to Expr."""

    __slots__ = ("fn", "name")

    kind = "func"

    def __init__(self, fn: Callback, name: str | None = None):
        self.fn: Callback = fn
        self.name = name

    def __repr__(self):
        if self.name:
            return f"<func {self.name}>"
        return "<func>"
