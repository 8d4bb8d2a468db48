"""
Recoverable error taxonomy for Wayfarer.

None of these are fatal: they are reported back to the caller
as part of a result value and leave game state unchanged.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class GameErrorKind(str, Enum):
    """Why an action was rejected."""

    NOT_INITIALIZED = "not_initialized"
    ALREADY_INITIALIZED = "already_initialized"
    INSUFFICIENT_RESOURCE = "insufficient_resource"
    INVALID_TARGET = "invalid_target"
    INVALID_TRANSITION = "invalid_transition"


class ActionResult(BaseModel):
    """Success flag plus the reason an action was rejected."""

    success: bool
    error: GameErrorKind | None = Field(default=None, description="Set when success is False")
    reason: str = Field(default="", description="Player-facing explanation")

    @classmethod
    def ok(cls, reason: str = "") -> ActionResult:
        return cls(success=True, reason=reason)

    @classmethod
    def fail(cls, error: GameErrorKind, reason: str) -> ActionResult:
        return cls(success=False, error=error, reason=reason)
