from __future__ import annotations

from dataclasses import dataclass

from zap.types.value import Num, Cons
from zap.types.expr import Expr


@dataclass(frozen=True)
class Point:
    """A 2-D coordinate, fed to programs as a pair of two integers."""
    x: int
    y: int

    def to_expr(self) -> Expr:
        return Expr.new_value(Cons(Expr.new_value(Num(self.x)), Expr.new_value(Num(self.y))))
