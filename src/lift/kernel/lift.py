"""Lift - the callable value every combinator returns."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from lift.kernel.arity import Arity

R = TypeVar("R")


@dataclass(frozen=True)
class Lift(Generic[R]):
    """A callable built by a combinator from the callables given to it.

    Lifts are immutable. The callables they capture are held by reference,
    so a stateful callable keeps its state and the caller can observe it.

    Predicate lifts compose with operators:
        a & b  ->  when_all(a, b)
        a | b  ->  when_any(a, b)
        ~a     ->  negate(a)
    """

    _call: Callable[..., R] = field(repr=False)
    arity: Arity = field(default_factory=Arity.any)
    name: str = "lift"

    def __call__(self, *args: Any) -> R:
        return self._call(*args)

    def __repr__(self) -> str:
        return f"<Lift {self.name} arity={self.arity}>"

    def __and__(self, other: Callable[..., Any]) -> Lift[bool]:
        if not callable(other):
            return NotImplemented
        from lift.combinators.ops import when_all

        return when_all(self, other)

    def __or__(self, other: Callable[..., Any]) -> Lift[bool]:
        if not callable(other):
            return NotImplemented
        from lift.combinators.ops import when_any

        return when_any(self, other)

    def __invert__(self) -> Lift[bool]:
        from lift.combinators.ops import negate

        return negate(self)


def describe(fn: Callable[..., Any]) -> str:
    """Short name for a callable, used in lift names and log records."""
    if isinstance(fn, Lift):
        return fn.name
    return getattr(fn, "__qualname__", None) or type(fn).__name__
