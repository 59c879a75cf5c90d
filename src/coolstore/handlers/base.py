"""Abstract handler contracts: the two seams of the pipeline.

A request handler receives loosely-typed caller input, coerces it into a
command, and delegates to a command handler injected at construction time.
Both contracts are single-method and asynchronous so a richer command
handler can await I/O without changing its callers.

Usage::

    class AddToCartRequestHandler(RequestHandler[AddToCartRequest, int]):
        def __init__(self, command_handler: CommandHandler[AddToCartCommand]) -> None:
            self._command_handler = command_handler

        async def handle(self, request, cancellation) -> Result[int]:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from coolstore.handlers.cancellation import CancellationToken
    from coolstore.handlers.result import Outcome, Result


class Command(BaseModel):
    """Strongly-typed, validated instruction consumed by a command handler."""

    model_config = {"frozen": True}


class Request(BaseModel):
    """Loosely-typed external input consumed by a request handler."""

    model_config = {"frozen": True}


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Request)
T = TypeVar("T")


class CommandHandler(ABC, Generic[C]):
    """Validate a command and report success or failure without a payload."""

    @abstractmethod
    async def handle(self, command: C, cancellation: CancellationToken) -> Outcome:
        """Handle *command*, honoring *cancellation* if the work can be aborted."""


class RequestHandler(ABC, Generic[R, T]):
    """Coerce a request into a command and map the outcome into a ``Result[T]``."""

    @abstractmethod
    async def handle(self, request: R, cancellation: CancellationToken) -> Result[T]:
        """Handle *request*, passing *cancellation* through to delegated handlers."""
