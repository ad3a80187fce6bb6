# Core type aliases for Zap's data model.
#
# Programs are graphs of Expr cells (zap.types.expr). A cell is either already
# a Value (zap.types.value) or a Thunk waiting to be forced by an Evaluator.
#
# Naming guidance:
# - Thunk:    the deferred computation stored in an unforced Expr. It receives
#             the forcing Evaluator and returns a Value.
# - Callback: the single-argument callable stored in a Func value. It receives
#             an unforced Expr and returns an Expr.
# Both aliases resolve to plain Callables; they document intent at call sites.

from typing import Any, Callable

# Deferred computation: Evaluator -> Value
Thunk = Callable[[Any], Any]

# Function body: Expr -> Expr
Callback = Callable[[Any], Any]
