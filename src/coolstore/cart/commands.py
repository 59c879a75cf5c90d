"""AddToCartCommand and its handler: the business rule for cart additions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from coolstore.handlers.base import Command, CommandHandler
from coolstore.handlers.result import success_if

if TYPE_CHECKING:
    from coolstore.handlers.cancellation import CancellationToken
    from coolstore.handlers.result import Outcome

logger = logging.getLogger(__name__)

SKU_NOT_POSITIVE = "SkuId must be a positive integer."


class AddToCartCommand(Command):
    """Validated request to add one SKU to the cart."""

    sku_id: int


class AddToCartCommandHandler(CommandHandler[AddToCartCommand]):
    """Accept a command only when its SKU identifier is positive.

    Pure validation: the outcome depends on ``sku_id`` alone and the
    cancellation token is never consulted.
    """

    async def handle(
        self, command: AddToCartCommand, cancellation: CancellationToken
    ) -> Outcome:
        outcome = success_if(command.sku_id > 0, SKU_NOT_POSITIVE)
        if outcome.is_failure:
            logger.debug("Rejected SKU %d: not positive", command.sku_id)
        else:
            logger.debug("Accepted SKU %d", command.sku_id)
        return outcome
