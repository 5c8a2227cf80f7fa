"""Combinator primitives: compose, negate, when_*, if_then*, do_all."""

# Combinators satisfy the following laws:
#
# 1. Identity: compose(f) is f
#
# 2. Chaining: compose(f, g, h)(x) == f(g(h(x)))
#
# 3. Multitail: compose(f, g)(x, y) == f(g(x), g(y)) when g is unary
#
# 4. Double negation: negate(negate(p))(x) == bool(p(x))
#
# 5. None is not-any: when_none(p, q)(x) == negate(when_any(p, q))(x)
#
# 6. Empty folds: when_all()() is True, when_any()() is False

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Any, TypeVar

from lift.kernel import (
    DEFAULT_CONFIG,
    AmbiguousCompositionError,
    Arity,
    ArityMismatchError,
    Lift,
    LiftConfig,
    arity_of,
    describe,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _name(kind: str, fs: tuple[Callable[..., Any], ...]) -> str:
    return f"{kind}({', '.join(describe(fn) for fn in fs)})"


def _shared_arity(kind: str, fs: tuple[Callable[..., Any], ...]) -> Arity:
    """Intersect the arities of callables that all receive the same arguments."""
    arity = Arity.any()
    for fn in fs:
        arity = arity & arity_of(fn)
    if arity.is_empty():
        raise ArityMismatchError(
            f"{_name(kind, fs)}: no argument count is accepted by every callable",
            fs,
        )
    return arity


def compose(
    f: Callable[..., R],
    *fs: Callable[..., Any],
    config: LiftConfig = DEFAULT_CONFIG,
) -> Callable[..., R]:
    """Compose callables right to left.

    Semantics:
        - compose(f) returns f itself
        - compose(f, g, ...) calls the tail compose(g, ...) first and
          feeds its result(s) into f
        - The tail is called either once with all arguments (unitail), or
          once per argument with f receiving every result (multitail)
        - The shape is decided from the callables' arities when the lift
          is built; a shape conflict never resolves silently

    Args:
        f: The outermost callable, called last.
        *fs: The tail, applied right to left.
        config: Signature introspection and logging settings.

    Returns:
        f when no tail is given, else a Lift chaining the tail into f.

    Raises:
        ArityMismatchError: Neither shape can chain f with the tail.
        AmbiguousCompositionError: Both shapes accept a call with two or
            more arguments. Raised when the lift is built, or, if either
            signature could not be introspected, when such a call is made.
        SignatureError: A signature cannot be introspected and
            config.unknown_arity is "error".
    """
    if not fs:
        return f
    tail = compose(*fs, config=config)
    name = _name("compose", (f, *fs))
    functions = (f, tail)

    f_arity = arity_of(f, config)
    tail_arity = arity_of(tail, config)
    unitail = tail_arity if f_arity.accepts(1) else Arity.none()
    multitail = f_arity.restricted(1) if tail_arity.accepts(1) else Arity.none()

    if unitail.is_empty() and multitail.is_empty():
        raise ArityMismatchError(
            f"{name}: cannot feed {describe(tail)} (arity {tail_arity}) "
            f"into {describe(f)} (arity {f_arity})",
            functions,
        )
    overlap = (unitail & multitail).restricted(2)
    if not overlap.is_empty() and f_arity.known and tail_arity.known:
        raise AmbiguousCompositionError(
            f"{name}: both unitail and multitail accept {overlap} arguments",
            functions,
            counts=overlap,
        )
    logger.debug("%s: unitail=%s multitail=%s", name, unitail, multitail)

    def _run(*args: Any) -> R:
        n = len(args)
        # Only reachable when a signature could not be introspected.
        if overlap.accepts(n):
            raise AmbiguousCompositionError(
                f"{name}: both unitail and multitail accept {n} arguments",
                functions,
                counts=overlap,
            )
        if unitail.accepts(n):
            if config.log_resolution:
                logger.debug("%s: unitail call with %d argument(s)", name, n)
            return f(tail(*args))
        if multitail.accepts(n):
            if config.log_resolution:
                logger.debug("%s: multitail call with %d argument(s)", name, n)
            return f(*[tail(arg) for arg in args])
        raise ArityMismatchError(
            f"{name}: accepts {unitail | multitail} arguments, got {n}",
            functions,
            arity=n,
        )

    return Lift(_run, arity=unitail | multitail, name=name)


def negate(f: Callable[..., Any]) -> Lift[bool]:
    """Logically invert the result of f."""
    def _run(*args: Any) -> bool:
        return not f(*args)

    return Lift(_run, arity=_shared_arity("negate", (f,)), name=_name("negate", (f,)))


def when_all(*fs: Callable[..., Any]) -> Lift[bool]:
    """True when every predicate holds.

    Predicates run left to right with the same arguments and evaluation
    stops at the first falsy result. With no predicates the result is True.
    """
    predicates = tuple(fs)
    arity = _shared_arity("when_all", predicates)

    def _run(*args: Any) -> bool:
        return all(predicate(*args) for predicate in predicates)

    return Lift(_run, arity=arity, name=_name("when_all", predicates))


def when_any(*fs: Callable[..., Any]) -> Lift[bool]:
    """True when some predicate holds.

    Predicates run left to right with the same arguments and evaluation
    stops at the first truthy result. With no predicates the result is False.
    """
    predicates = tuple(fs)
    arity = _shared_arity("when_any", predicates)

    def _run(*args: Any) -> bool:
        return any(predicate(*args) for predicate in predicates)

    return Lift(_run, arity=arity, name=_name("when_any", predicates))


def when_none(*fs: Callable[..., Any]) -> Lift[bool]:
    """True when no predicate holds; short-circuits like when_any."""
    return replace(negate(when_any(*fs)), name=_name("when_none", tuple(fs)))


def if_then(predicate: Callable[..., Any], action: Callable[..., Any]) -> Lift[None]:
    """Run action with the arguments when predicate holds for them.

    The predicate is evaluated exactly once per call. The action's result
    is discarded.
    """
    functions = (predicate, action)
    arity = _shared_arity("if_then", functions)

    def _run(*args: Any) -> None:
        if predicate(*args):
            action(*args)

    return Lift(_run, arity=arity, name=_name("if_then", functions))


def if_then_else(
    predicate: Callable[..., Any],
    t_action: Callable[..., Any],
    f_action: Callable[..., Any],
) -> Lift[Any]:
    """Run t_action or f_action depending on predicate, returning its result.

    Exactly one action runs per call, and its result is returned unchanged.
    """
    functions = (predicate, t_action, f_action)
    arity = _shared_arity("if_then_else", functions)

    def _run(*args: Any) -> Any:
        if predicate(*args):
            return t_action(*args)
        return f_action(*args)

    return Lift(_run, arity=arity, name=_name("if_then_else", functions))


def do_all(*fs: Callable[..., Any]) -> Lift[None]:
    """Run every action in order with the same arguments, discarding results.

    An exception from an action propagates at once; later actions do not run.
    """
    actions = tuple(fs)
    arity = _shared_arity("do_all", actions)

    def _run(*args: Any) -> None:
        for action in actions:
            action(*args)

    return Lift(_run, arity=arity, name=_name("do_all", actions))
