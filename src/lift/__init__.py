from .combinators import (
    compose,
    do_all,
    equal,
    greater_equal,
    greater_than,
    if_then,
    if_then_else,
    less_equal,
    less_than,
    negate,
    not_equal,
    when_all,
    when_any,
    when_none,
)
from .kernel import (
    DEFAULT_CONFIG,
    AmbiguousCompositionError,
    Arity,
    ArityMismatchError,
    CompositionError,
    Lift,
    LiftConfig,
    SignatureError,
    arity_of,
)

__all__ = [
    # Combinators
    "compose",
    "negate",
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "when_all",
    "when_any",
    "when_none",
    "if_then",
    "if_then_else",
    "do_all",
    # Primitives
    "Lift",
    "Arity",
    "arity_of",
    # Config
    "LiftConfig",
    "DEFAULT_CONFIG",
    # Errors
    "CompositionError",
    "ArityMismatchError",
    "AmbiguousCompositionError",
    "SignatureError",
]
