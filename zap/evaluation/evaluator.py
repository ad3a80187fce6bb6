"""Forcing evaluator for Zap.

The Evaluator is the only place a Thunk is run. Forcing replaces the thunk in
its cell with the computed Value, so a shared Expr is computed at most once
no matter how many holders ask for it. The evaluator also walks forced
structure: list spines (`to_list`), whole display trees (`to_modulatable`)
and their canonical text (`to_string`).
"""

from __future__ import annotations

import logging
import sys

from zap.config import get_recursion_limit
from zap.errors import ZapNotAList
from zap.types.expr import Expr
from zap.types.value import Value, Num, NilType, Cons
from zap.evaluation.modulatable import Modulatable, ModNum, ModList, ModCons

logger = logging.getLogger(__name__)


def ensure_recursion_limit(limit: int) -> None:
    """Raise the host recursion limit to at least `limit`; never lower it."""
    current = sys.getrecursionlimit()
    if current < limit:
        logger.debug("raising recursion limit from %d to %d", current, limit)
        sys.setrecursionlimit(limit)


class Evaluator:
    """Forces Exprs to Values and counts how many thunks it has forced."""

    def __init__(self, recursion_limit: int | None = None):
        # Diagnostic only: number of thunks forced by this evaluator.
        self.count: int = 0
        ensure_recursion_limit(recursion_limit or get_recursion_limit())

    def to_value(self, expr: Expr) -> Value:
        """Force `expr` to weak head normal form, memoizing in place."""
        thunk = expr.thunk
        if thunk is None:
            return expr.value
        value = thunk(self)
        self.count += 1
        expr.value = value
        expr.thunk = None
        return value

    def to_list(self, expr: Expr) -> list[Expr]:
        """Walk a nil-terminated spine, returning its elements unforced."""
        elems: list[Expr] = []
        cur = expr
        while True:
            value = self.to_value(cur)
            match value:
                case NilType():
                    return elems
                case Cons():
                    elems.append(value.head)
                    cur = value.tail
                case Num():
                    raise ZapNotAList(f"Not a list: reached number {value.n}")
                case _:
                    raise ZapNotAList(f"Not a list: reached {value.kind}")

    def to_modulatable(self, expr: Expr) -> Modulatable:
        """Force spine and elements into a display tree.

        A spine ending in nil becomes a ModList. A spine ending in a number
        becomes right-nested ModCons cells terminated by that number.
        """
        elems: list[Modulatable] = []
        cur = expr
        while True:
            value = self.to_value(cur)
            match value:
                case Num(n=n):
                    result: Modulatable = ModNum(n)
                    for head in reversed(elems):
                        result = ModCons(head, result)
                    return result
                case NilType():
                    return ModList(tuple(elems))
                case Cons():
                    elems.append(self.to_modulatable(value.head))
                    cur = value.tail
                case _:
                    raise ZapNotAList(f"Cannot materialize a {value.kind}")

    def to_string(self, expr: Expr) -> str:
        return str(self.to_modulatable(expr))
