"""
  Zap Reader, Lexer and Parser

Programs are whitespace separated tokens in prefix notation:

    <expr> ::= "ap" <expr> <expr>     ; application, built as soon as both sides are read
             | <integer>              ; -?[0-9]+
             | <name>                 ; anything else

Names bound in the environment at parse time are resolved immediately. Unbound
names become deferred lookups that consult the environment again only when
forced, which is what lets definitions refer to themselves and to names
defined later.

Definition batches are lines of the form `<name> = <expr>`.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional, TYPE_CHECKING

from zap.errors import ZapSyntaxError, ZapUndefinedSymbol
from zap.types.expr import Expr
from zap.types.value import Num

if TYPE_CHECKING:
    from zap.types.environment import Environment

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r"-?[0-9]+")

DEF_SEPARATOR = " = "


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    for token in source.split():
        if token == "ap":
            yield "ap", token
        elif NUMBER_RE.fullmatch(token):
            yield "number", token
        else:
            yield "symbol", token


def reference(env: Environment, name: str) -> Expr:
    """Resolve `name` now if it is bound, else defer the lookup until forced."""
    resolved = env.lookup(name)
    if resolved is not None:
        return resolved

    def deferred(ev):
        target = env.lookup(name)
        if target is None:
            raise ZapUndefinedSymbol(f"Undefined symbol {name}")
        return ev.to_value(target)

    return Expr.new_thunk(deferred)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_atom(self, tok_type: str, tok_val: str, env: Environment) -> Expr:
        if tok_type == "number":
            return Expr.new_value(Num(int(tok_val)))
        return reference(env, tok_val)

    def parse_expr(self, env: Environment) -> Expr:
        """Read one complete expression.

        Iterative over the token stream: each pending `ap` waits on a frame
        until both operands have been read, so deeply nested applications do
        not recurse in the parser.
        """
        pending: list[list[Expr]] = []
        while True:
            tok_type, tok_val = self.advance()
            if tok_type is None:
                raise ZapSyntaxError("Unexpected end of input")
            if tok_type == "ap":
                pending.append([])
                continue

            expr = self.parse_atom(tok_type, tok_val, env)
            while pending:
                operands = pending[-1]
                operands.append(expr)
                if len(operands) < 2:
                    break
                pending.pop()
                expr = operands[0].apply(operands[1])
            else:
                return expr

    def expect_end(self) -> None:
        tok_type, tok_val = self.peek()
        if tok_type is not None:
            raise ZapSyntaxError(f"Excessive token {tok_val}")


def parse_expr(env: Environment, code: str) -> Expr:
    """Parse exactly one expression from `code` against `env`."""
    stream = TokenStream(lex(code))
    expr = stream.parse_expr(env)
    stream.expect_end()
    return expr


def parse_defs(env: Environment, code: str) -> int:
    """Parse and define every `name = expression` line of `code`.

    Lines are handled in order, so earlier definitions are resolved directly
    by later ones and everything else goes through deferred lookups. Blank
    lines are skipped. Returns the number of names defined.
    """
    count = 0
    for line_num, line in enumerate(code.splitlines(), start=1):
        if not line.strip():
            continue
        parts = line.split(DEF_SEPARATOR)
        if len(parts) != 2:
            raise ZapSyntaxError(f"line {line_num}: expected '<name> = <expr>': {line!r}")
        name, body = parts[0].strip(), parts[1]
        if not name or len(name.split()) != 1:
            raise ZapSyntaxError(f"line {line_num}: invalid name {parts[0]!r}")
        env.define(name, parse_expr(env, body))
        count += 1
    logger.debug("parsed %d definitions", count)
    return count
