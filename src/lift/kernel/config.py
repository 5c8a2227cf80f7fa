"""Settings for signature introspection and resolution logging."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class LiftConfig(BaseModel):
    """Configuration for building lifts.

    Attributes:
        unknown_arity: How to treat a callable whose signature cannot be
            introspected. "variadic" assumes it accepts any positional
            argument count; "error" refuses to build with SignatureError.
        log_resolution: Emit a debug record each time compose selects a
            call shape. Construction-time records are always emitted.
    """
    model_config = ConfigDict(frozen=True)

    unknown_arity: Literal["variadic", "error"] = "variadic"
    log_resolution: bool = False


DEFAULT_CONFIG = LiftConfig()
