"""AddToCartRequest and its handler: coercion in front of the command layer.

INVARIANT: A request whose SKU does not parse never reaches the command
handler, and a command handler failure message is returned verbatim.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from coolstore.cart.commands import AddToCartCommand
from coolstore.handlers.base import Request, RequestHandler
from coolstore.handlers.result import Failure, Ok

if TYPE_CHECKING:
    from coolstore.handlers.base import CommandHandler
    from coolstore.handlers.cancellation import CancellationToken
    from coolstore.handlers.result import Result

logger = logging.getLogger(__name__)

# Signed 32-bit range.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def parse_int32(raw: str) -> int | None:
    """Parse *raw* as a signed 32-bit integer, or return None.

    Surrounding whitespace and a single leading sign are accepted.
    Underscores, decimal points, non-ASCII digits and out-of-range values
    are rejected, unlike the builtin ``int()``.
    """
    if not _INTEGER_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


class AddToCartRequest(Request):
    """Raw add-to-cart input as typed by the user."""

    sku_id: str


class AddToCartRequestHandler(RequestHandler[AddToCartRequest, int]):
    """Turn an :class:`AddToCartRequest` into an :class:`AddToCartCommand`.

    The command handler is injected so tests can substitute a fake.
    """

    def __init__(self, command_handler: CommandHandler[AddToCartCommand]) -> None:
        self._command_handler = command_handler

    async def handle(
        self, request: AddToCartRequest, cancellation: CancellationToken
    ) -> Result[int]:
        sku_id = parse_int32(request.sku_id)
        if sku_id is None:
            logger.debug("Rejected SKU %r: not a valid integer", request.sku_id)
            return Failure(message=f"{request.sku_id} is not a valid integer.")

        outcome = await self._command_handler.handle(
            AddToCartCommand(sku_id=sku_id), cancellation
        )
        if isinstance(outcome, Failure):
            return Failure(message=outcome.message)

        return Ok(value=sku_id)
