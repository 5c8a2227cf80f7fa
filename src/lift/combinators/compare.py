"""Comparison predicate builders."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from lift.kernel import Arity, Lift


def _comparison(kind: str, op: Callable[[Any, Any], Any], value: Any) -> Lift[Any]:
    def _run(obj: Any) -> Any:
        return op(obj, value)

    return Lift(_run, arity=Arity.exactly(1), name=f"{kind}({value!r})")


def equal(value: Any) -> Lift[Any]:
    """Predicate obj == value."""
    return _comparison("equal", operator.eq, value)


def not_equal(value: Any) -> Lift[Any]:
    """Predicate obj != value."""
    return _comparison("not_equal", operator.ne, value)


def less_than(value: Any) -> Lift[Any]:
    """Predicate obj < value."""
    return _comparison("less_than", operator.lt, value)


def less_equal(value: Any) -> Lift[Any]:
    """Predicate obj <= value."""
    return _comparison("less_equal", operator.le, value)


def greater_than(value: Any) -> Lift[Any]:
    """Predicate obj > value."""
    return _comparison("greater_than", operator.gt, value)


def greater_equal(value: Any) -> Lift[Any]:
    """Predicate obj >= value."""
    return _comparison("greater_equal", operator.ge, value)
