"""Combinators - higher-order function composition primitives."""

from .compare import (
    equal,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
    not_equal,
)
from .ops import (
    compose,
    do_all,
    if_then,
    if_then_else,
    negate,
    when_all,
    when_any,
    when_none,
)

__all__ = [
    "compose",
    "negate",
    # Comparisons
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    # Predicate sets
    "when_all",
    "when_any",
    "when_none",
    # Control
    "if_then",
    "if_then_else",
    "do_all",
]
