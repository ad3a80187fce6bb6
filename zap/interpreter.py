from __future__ import annotations

from zap.evaluation.apply import apply
from zap.evaluation.evaluator import Evaluator
from zap.evaluation.modulatable import Modulatable
from zap.types.environment import Environment
from zap.types.expr import Expr
from zap.types.point import Point


class Interpreter:
    """
    Bundles an Environment holding the builtins with the Evaluator that forces
    everything parsed against it. Definitions accumulate across calls and
    every forced Expr stays memoized for later calls.
    """

    def __init__(self, env: Environment | None = None, evaluator: Evaluator | None = None):
        self.env: Environment = env if env is not None else Environment.with_builtins()
        self.evaluator: Evaluator = evaluator if evaluator is not None else Evaluator()

    @property
    def count(self) -> int:
        """Number of thunks forced so far."""
        return self.evaluator.count

    def define(self, code: str) -> int:
        return self.env.parse_defs(code)

    def parse(self, code: str) -> Expr:
        return self.env.parse_expr(code)

    def eval(self, code: str) -> str:
        """Parse one expression, force it completely and render it."""
        return self.evaluator.to_string(self.parse(code))

    def materialize(self, code: str) -> Modulatable:
        return self.evaluator.to_modulatable(self.parse(code))

    def interact(self, program: Expr, state: Expr, point: Point) -> Expr:
        """Apply `program` to an interaction state and then to a point.

        The result is left unforced; callers decide how much of it to force.
        """
        return apply(program, state, point.to_expr())
