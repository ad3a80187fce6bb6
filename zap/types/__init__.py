from zap.types.value import Value, Num, Nil, NilType, Cons, Func
from zap.types.expr import Expr, apply_value, func, func2, func3, boolean, TRUE, FALSE
from zap.types.environment import Environment
from zap.types.point import Point
