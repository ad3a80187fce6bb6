"""Primitive combinators and operators for the Zap runtime environment.

Each primitive declares an evaluation strategy:

- LAZY primitives build a thunk at application time. Their operands are only
  forced when that thunk is. All arithmetic, comparison and `isnil` are lazy,
  and so is `s`: reducing `s a b c` eagerly would expand self-applying chains
  such as `s i i (s i i)` without bound before any selector can discard them.
- EAGER primitives reduce as soon as their last argument arrives, without
  forcing anything. `c` and `b` are eager so that loops written as `c`/`b`
  chains around a self reference stay shallow; neither duplicates its third
  argument, so reducing them early cannot diverge.

The strategy is fixed per primitive. Changing it trades termination of
`s`-based programs against stack depth of `c`/`b`-based ones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from zap.errors import ZapError, ZapDivisionByZero, ZapNotAPair
from zap.evaluation.apply import apply
from zap.types.environment import Environment
from zap.types.expr import Expr, func, func2, func3, boolean, TRUE, FALSE
from zap.types.value import Value, Num, Nil, NilType, Cons, Func

logger = logging.getLogger(__name__)


class Strategy(Enum):
    EAGER = "eager"
    LAZY = "lazy"


@dataclass(frozen=True)
class Primitive:
    """A builtin of fixed arity.

    LAZY bodies receive the forcing Evaluator first and return a Value.
    EAGER bodies receive only the argument Exprs and return an Expr.
    """
    name: str
    arity: int
    strategy: Strategy
    body: Callable[..., Value | Expr]

    def to_value(self) -> Func:
        if self.strategy is Strategy.LAZY:
            curried_body = _DEFER[self.arity](self.body)
        else:
            curried_body = self.body
        return _CURRY[self.arity](curried_body, self.name)


# Fixed-arity wrappers keep forcing on plain calls (no *args) all the way down.
def _defer1(body):
    return lambda a: Expr.new_thunk(lambda ev: body(ev, a))

def _defer2(body):
    return lambda a, b: Expr.new_thunk(lambda ev: body(ev, a, b))

def _defer3(body):
    return lambda a, b, c: Expr.new_thunk(lambda ev: body(ev, a, b, c))


_DEFER = {1: _defer1, 2: _defer2, 3: _defer3}
_CURRY = {1: func, 2: func2, 3: func3}


# -------------------------------
# Helpers
# -------------------------------
def _num(ev, expr: Expr, op: str) -> int:
    return ev.to_value(expr).as_num(op)


def truncating_div(x: int, y: int) -> int:
    """Integer quotient rounded toward zero."""
    if y == 0:
        raise ZapDivisionByZero("div: division by zero")
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


# Answers false whatever it is given; used to probe function-encoded pairs.
_ALWAYS_FALSE = func2(lambda a, b: Expr.new_value(FALSE))
_PROBE_NIL = 123
_PROBE_PAIR = 456


def is_nil(ev, expr: Expr) -> bool:
    """True for nil, False for a pair.

    A function is probed as a Church pair: applied to a selector that always
    answers false, nil-like functions still pick the first of two sentinels.
    """
    value = ev.to_value(expr)
    match value:
        case NilType():
            return True
        case Cons():
            return False
        case Func():
            probe = apply(
                Expr.new_value(value),
                Expr.new_value(_ALWAYS_FALSE),
                Expr.new_value(Num(_PROBE_NIL)),
                Expr.new_value(Num(_PROBE_PAIR)),
            )
            try:
                answer = ev.to_value(probe)
            except ZapError as err:
                raise ZapNotAPair(f"isnil: not a nil/cons: {value!r}") from err
            match answer:
                case Num(n=n) if n == _PROBE_NIL:
                    return True
                case Num(n=n) if n == _PROBE_PAIR:
                    return False
            raise ZapNotAPair(f"isnil: not a nil/cons: {value!r}")
    raise ZapNotAPair(f"isnil: not a nil/cons: {value.kind}")


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def inc(ev, a: Expr) -> Value:
    return Num(_num(ev, a, "inc") + 1)

def dec(ev, a: Expr) -> Value:
    return Num(_num(ev, a, "dec") - 1)

def neg(ev, a: Expr) -> Value:
    return Num(-_num(ev, a, "neg"))

def add(ev, a: Expr, b: Expr) -> Value:
    return Num(_num(ev, a, "add") + _num(ev, b, "add"))

def mul(ev, a: Expr, b: Expr) -> Value:
    return Num(_num(ev, a, "mul") * _num(ev, b, "mul"))

def div(ev, a: Expr, b: Expr) -> Value:
    return Num(truncating_div(_num(ev, a, "div"), _num(ev, b, "div")))

def eq(ev, a: Expr, b: Expr) -> Value:
    return boolean(_num(ev, a, "eq") == _num(ev, b, "eq"))

def lt(ev, a: Expr, b: Expr) -> Value:
    return boolean(_num(ev, a, "lt") < _num(ev, b, "lt"))

def isnil(ev, a: Expr) -> Value:
    return boolean(is_nil(ev, a))


# -------------------------------
# Combinators
# -------------------------------
def s(ev, a: Expr, b: Expr, c: Expr) -> Value:
    return ev.to_value(a.apply(c).apply(b.apply(c)))

def c(a: Expr, b: Expr, x: Expr) -> Expr:
    return a.apply(x).apply(b)

def b(a: Expr, g: Expr, x: Expr) -> Expr:
    return a.apply(g.apply(x))

def i(a: Expr) -> Expr:
    return a


# -------------------------------
# Pairs
# -------------------------------
def cons(a: Expr, d: Expr) -> Expr:
    return Expr.new_value(Cons(a, d))

def car(a: Expr) -> Expr:
    return a.car()

def cdr(a: Expr) -> Expr:
    return a.cdr()


PRIMITIVES: dict[str, Primitive] = {
    p.name: p
    for p in (
        Primitive("inc", 1, Strategy.LAZY, inc),
        Primitive("dec", 1, Strategy.LAZY, dec),
        Primitive("neg", 1, Strategy.LAZY, neg),
        Primitive("add", 2, Strategy.LAZY, add),
        Primitive("mul", 2, Strategy.LAZY, mul),
        Primitive("div", 2, Strategy.LAZY, div),
        Primitive("eq", 2, Strategy.LAZY, eq),
        Primitive("lt", 2, Strategy.LAZY, lt),
        Primitive("isnil", 1, Strategy.LAZY, isnil),
        Primitive("s", 3, Strategy.LAZY, s),
        Primitive("c", 3, Strategy.EAGER, c),
        Primitive("b", 3, Strategy.EAGER, b),
        Primitive("i", 1, Strategy.EAGER, i),
        Primitive("cons", 2, Strategy.EAGER, cons),
        Primitive("car", 1, Strategy.EAGER, car),
        Primitive("cdr", 1, Strategy.EAGER, cdr),
    )
}

CONSTANTS: dict[str, Value] = {
    "t": TRUE,
    "f": FALSE,
    "nil": Nil,
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    for name, prim in PRIMITIVES.items():
        env.define(name, Expr.new_value(prim.to_value()))
    for name, value in CONSTANTS.items():
        env.define(name, Expr.new_value(value))
    logger.debug("registered %d builtins", len(PRIMITIVES) + len(CONSTANTS))
