"""Runtime environment for Zap.

The Environment maps symbol names to Exprs in a single table. Definitions are
write-once, and names may be mentioned before they are defined: the parser
turns an unbound name into a deferred lookup against this same Environment,
so every holder of the environment observes later definitions. Clones share
the underlying table rather than copying it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from zap.errors import ZapDuplicateSymbol
from zap.types.expr import Expr


class Environment:
    """Write-once mapping from names to Exprs."""

    __slots__ = ("vars",)

    def __init__(self, vars: Optional[dict[str, Expr]] = None):
        self.vars: dict[str, Expr] = vars if vars is not None else {}

    @classmethod
    def with_builtins(cls) -> Environment:
        """Fresh environment holding the primitive combinator table."""
        # Lazy import to avoid circular imports
        from zap.builtins import register
        env = cls()
        register(env)
        return env

    new_with_builtins = with_builtins

    def clone(self) -> Environment:
        """A second handle on the same table; definitions show through both."""
        return Environment(self.vars)

    def define(self, name: str, expr: Expr) -> None:
        """Bind `name` to `expr`.

        Raises ZapDuplicateSymbol if `name` is already bound, builtins included.
        """
        if name in self.vars:
            raise ZapDuplicateSymbol(f"Duplicated symbol: {name}")
        self.vars[name] = expr

    def define_all(self, mapping: dict[str, Expr]) -> None:
        """Bulk-define a mapping of name -> Expr."""
        for name, expr in mapping.items():
            self.define(name, expr)

    def lookup(self, name: str) -> Optional[Expr]:
        """Return the Expr bound to `name`, or None when it is unbound."""
        return self.vars.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    # --- Parsing entry points ---
    def parse_expr(self, code: str) -> Expr:
        """Parse a single prefix expression against this environment."""
        from zap.reader import parser
        return parser.parse_expr(self, code)

    def parse_defs(self, code: str) -> int:
        """Parse `name = expression` lines and define each name in order."""
        from zap.reader import parser
        return parser.parse_defs(self, code)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bound names into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment: ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
