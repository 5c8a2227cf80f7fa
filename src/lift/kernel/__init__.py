"""Kernel layer - pure abstractions for lift."""

from lift.kernel.arity import Arity, arity_of
from lift.kernel.config import DEFAULT_CONFIG, LiftConfig
from lift.kernel.errors import (
    AmbiguousCompositionError,
    ArityMismatchError,
    CompositionError,
    SignatureError,
)
from lift.kernel.lift import Lift, describe

__all__ = [
    "Lift",
    "describe",
    # Arity
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
