"""Error types raised when lifts cannot be built or called."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lift.kernel.arity import Arity


class CompositionError(TypeError):
    """Error raised when callables cannot be combined into a lift.

    This error preserves the callables involved for debugging purposes.
    """

    def __init__(self, message: str, functions: tuple[Callable[..., Any], ...] = ()) -> None:
        self.functions = functions
        super().__init__(message)

    def __repr__(self) -> str:
        # lift.py imports this module through arity.py
        from lift.kernel.lift import describe

        names = ", ".join(describe(fn) for fn in self.functions)
        return f"{type(self).__name__}({super().__str__()!r}, functions=[{names}])"


class ArityMismatchError(CompositionError):
    """No call shape accepts the given argument count.

    ``arity`` is the argument count of the offending call, or None when the
    mismatch was detected at construction time.
    """

    def __init__(
        self,
        message: str,
        functions: tuple[Callable[..., Any], ...] = (),
        arity: int | None = None,
    ) -> None:
        self.arity = arity
        super().__init__(message, functions)


class AmbiguousCompositionError(CompositionError):
    """Both unitail and multitail shapes accept the same argument counts."""

    def __init__(
        self,
        message: str,
        functions: tuple[Callable[..., Any], ...] = (),
        counts: Arity | None = None,
    ) -> None:
        self.counts = counts
        super().__init__(message, functions)


class SignatureError(CompositionError):
    """A callable's signature could not be introspected."""
