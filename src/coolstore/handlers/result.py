"""Outcome and Result — the tagged return types of every handler.

INVARIANT: Handlers report domain failures by returning ``Failure``, never
by raising. A failure message is an opaque string that callers may display
but must not parse.

``Outcome`` is what a command handler returns (no payload on success).
``Result[T]`` is what a request handler returns (a typed value on success).
Each variant carries a ``Literal`` ``ok`` discriminator, so a value is
always exactly one variant.
"""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Success(BaseModel):
    """Successful outcome with no payload."""

    model_config = {"frozen": True, "extra": "forbid"}

    ok: Literal[True] = True

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


class Failure(BaseModel):
    """Failed outcome or result, carrying a human-readable message."""

    model_config = {"frozen": True, "extra": "forbid"}

    ok: Literal[False] = False
    message: str

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True


class Ok(BaseModel, Generic[T]):
    """Successful result carrying the value produced by a request handler."""

    model_config = {"frozen": True, "extra": "forbid"}

    ok: Literal[True] = True
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


type Outcome = Success | Failure
type Result[V] = Ok[V] | Failure


def success_if(condition: bool, message: str) -> Outcome:
    """Return ``Success`` when *condition* holds, otherwise ``Failure(message)``."""
    if condition:
        return Success()
    return Failure(message=message)
