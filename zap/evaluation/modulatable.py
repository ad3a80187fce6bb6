"""Fully forced display trees.

A Modulatable is what remains of an expression once its spine and every
element have been forced: integers, nil-terminated lists, and pairs. It is
built only for display and comparison; evaluation never consumes it.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class Modulatable:
    __slots__ = ()


@dataclass(frozen=True)
class ModNum(Modulatable):
    n: int

    def __str__(self) -> str:
        return str(self.n)


@dataclass(frozen=True)
class ModList(Modulatable):
    elems: tuple[Modulatable, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self.elems) + "]"


@dataclass(frozen=True)
class ModCons(Modulatable):
    car: Modulatable
    cdr: Modulatable

    def __str__(self) -> str:
        return f"({self.car} . {self.cdr})"
