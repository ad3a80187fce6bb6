"""Application helpers for Zap.

`Expr.apply` handles exactly one argument. Hosts feeding several arguments to
a program (a state, then a point) fold over them here.
"""

from zap.types.expr import Expr


def apply(head: Expr, *args: Expr) -> Expr:
    """Apply `head` to each of `args` in turn, left to right, forcing nothing."""
    result = head
    for arg in args:
        result = result.apply(arg)
    return result
