"""Arity algebra - which positional argument counts a callable accepts."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from lift.kernel.config import DEFAULT_CONFIG, LiftConfig
from lift.kernel.errors import SignatureError


@dataclass(frozen=True)
class Arity:
    """Set of accepted positional argument counts.

    Attributes:
        fixed: Individually accepted counts.
        at_least: If set, every count >= at_least is also accepted.
        known: False when derived from a callable whose signature could
            not be introspected. Combining with an unknown arity yields an
            unknown arity.
    """

    fixed: frozenset[int] = field(default_factory=frozenset)
    at_least: int | None = None
    known: bool = True

    @staticmethod
    def exactly(n: int) -> Arity:
        return Arity(fixed=frozenset({n}))

    @staticmethod
    def between(low: int, high: int | None) -> Arity:
        """Counts from low to high inclusive; high=None means unbounded."""
        if high is None:
            return Arity(at_least=low)
        return Arity(fixed=frozenset(range(low, high + 1)))

    @staticmethod
    def any() -> Arity:
        return Arity(at_least=0)

    @staticmethod
    def none() -> Arity:
        return Arity()

    @staticmethod
    def unknown() -> Arity:
        """Any count, assumed for a signature that cannot be read."""
        return Arity(at_least=0, known=False)

    def accepts(self, n: int) -> bool:
        return n in self.fixed or (self.at_least is not None and n >= self.at_least)

    def is_empty(self) -> bool:
        return not self.fixed and self.at_least is None

    def restricted(self, n: int) -> Arity:
        """Restrict to counts >= n."""
        return self & Arity(at_least=n)

    def __and__(self, other: Arity) -> Arity:
        fixed = frozenset(n for n in self.fixed | other.fixed if self.accepts(n) and other.accepts(n))
        if self.at_least is None or other.at_least is None:
            at_least = None
        else:
            at_least = max(self.at_least, other.at_least)
        return Arity(fixed=fixed, at_least=at_least, known=self.known and other.known)._normalized()

    def __or__(self, other: Arity) -> Arity:
        bounds = [b for b in (self.at_least, other.at_least) if b is not None]
        return Arity(
            fixed=self.fixed | other.fixed,
            at_least=min(bounds) if bounds else None,
            known=self.known and other.known,
        )._normalized()

    def _normalized(self) -> Arity:
        # Fold fixed counts covered by the open bound, then absorb a
        # contiguous run directly below it.
        if self.at_least is None:
            return self
        at_least = self.at_least
        fixed = {n for n in self.fixed if n < at_least}
        while at_least - 1 in fixed:
            at_least -= 1
            fixed.discard(at_least)
        return Arity(fixed=frozenset(fixed), at_least=at_least, known=self.known)

    def __str__(self) -> str:
        parts = [str(n) for n in sorted(self.fixed)]
        if self.at_least is not None:
            parts.append(f"{self.at_least}+")
        return "{" + ", ".join(parts) + "}"


def _signature_arity(sig: inspect.Signature) -> Arity:
    required = 0
    optional = 0
    variadic = False
    for param in sig.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            if param.default is param.empty:
                required += 1
            else:
                optional += 1
        elif param.kind is param.VAR_POSITIONAL:
            variadic = True
        elif param.kind is param.KEYWORD_ONLY and param.default is param.empty:
            # Cannot be satisfied by a positional call.
            return Arity.none()
    return Arity.between(required, None if variadic else required + optional)


def arity_of(fn: Callable[..., Any], config: LiftConfig = DEFAULT_CONFIG) -> Arity:
    """Return the positional argument counts fn accepts.

    Lifts report their own arity. Other callables are introspected with
    inspect.signature.

    Raises:
        SignatureError: fn has no introspectable signature and
            config.unknown_arity is "error".
    """
    own = getattr(fn, "arity", None)
    if isinstance(own, Arity):
        return own
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        if config.unknown_arity == "error":
            raise SignatureError(f"cannot introspect signature of {fn!r}", (fn,)) from exc
        return Arity.unknown()
    return _signature_arity(sig)
