"""Expr: the shared, memoizing cell every Zap program is built from.

An Expr holds either a forced Value or a Thunk. Only the Evaluator forces a
Thunk; once it does, the cell keeps the Value forever and every holder of the
same Expr sees it. Application, car and cdr are resolved on the spot when the
receiver is already a Value, and deferred behind a new Thunk otherwise.
"""

from __future__ import annotations

from typing import Callable

from zap import Thunk
from zap.errors import ZapNotApplicable
from zap.types.value import Value, Num, NilType, Cons, Func


class Expr:
    """Shared mutable cell over a Value or an unforced Thunk."""

    __slots__ = ("value", "thunk")

    def __init__(self, value: Value | None = None, thunk: Thunk | None = None):
        self.value: Value | None = value
        self.thunk: Thunk | None = thunk

    @classmethod
    def new_value(cls, value: Value) -> Expr:
        return cls(value=value)

    @classmethod
    def new_thunk(cls, thunk: Thunk) -> Expr:
        return cls(thunk=thunk)

    @property
    def is_value(self) -> bool:
        return self.thunk is None

    def apply(self, arg: Expr) -> Expr:
        """Apply this expression to `arg` without forcing `arg`."""
        if self.thunk is None:
            return apply_value(self.value, arg)
        lhs = self
        return Expr.new_thunk(lambda ev: ev.to_value(apply_value(ev.to_value(lhs), arg)))

    def car(self) -> Expr:
        if self.thunk is None:
            return self.value.car()
        cons = self
        return Expr.new_thunk(lambda ev: ev.to_value(ev.to_value(cons).car()))

    def cdr(self) -> Expr:
        if self.thunk is None:
            return self.value.cdr()
        cons = self
        return Expr.new_thunk(lambda ev: ev.to_value(ev.to_value(cons).cdr()))

    def __repr__(self):
        if self.thunk is None:
            return f"Expr({self.value!r})"
        return "Expr(<thunk>)"


def apply_value(value: Value, arg: Expr) -> Expr:
    """Application rule for a forced head.

    - numbers cannot be applied
    - functions are called with the unforced argument
    - nil applied to anything is the true selector
    - a pair hands its two halves to the argument: (arg car) cdr
    """
    match value:
        case Func():
            return value.fn(arg)
        case Cons():
            return arg.apply(value.head).apply(value.tail)
        case NilType():
            return Expr.new_value(TRUE)
        case Num():
            raise ZapNotApplicable(f"apply: not a function: {value.n}")
    raise ZapNotApplicable(f"apply: not a function: {value!r}")


# --- Curried constructors ---
def func(f: Callable[[Expr], Expr], name: str | None = None) -> Func:
    return Func(f, name)


def func2(f: Callable[[Expr, Expr], Expr], name: str | None = None) -> Func:
    """A two-argument primitive: a function returning a function."""
    return Func(lambda a: Expr.new_value(Func(lambda b: f(a, b), name)), name)


def func3(f: Callable[[Expr, Expr, Expr], Expr], name: str | None = None) -> Func:
    """A three-argument primitive: a function returning a two-argument one."""
    return Func(lambda a: Expr.new_value(func2(lambda b, c: f(a, b, c), name)), name)


# Church booleans: select the first or the second argument, forcing neither.
TRUE = func2(lambda a, b: a, "t")
FALSE = func2(lambda a, b: b, "f")


def boolean(flag: bool) -> Func:
    return TRUE if flag else FALSE
