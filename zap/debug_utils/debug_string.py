"""Render forced values back into `ap`-prefix source.

The output parses again with `Environment.parse_expr` against a builtin
environment and yields a structurally equal value, which makes it handy for
logging interaction states or pasting them into a definitions file.
"""

from zap.errors import ZapNotAList
from zap.types.expr import Expr
from zap.types.value import Num, NilType, Cons


def debug_string(ev, expr: Expr) -> str:
    value = ev.to_value(expr)
    match value:
        case Num(n=n):
            return str(n)
        case NilType():
            return "nil"
        case Cons():
            return f"ap ap cons {debug_string(ev, value.head)} {debug_string(ev, value.tail)}"
    raise ZapNotAList(f"Cannot render a {value.kind} as source")
