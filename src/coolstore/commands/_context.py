"""AppContext: composition root shared by all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Wires a fresh request handler for every request,
drives it to completion, and owns result emission (stdout/stderr routing
and exit codes).  Results are rendered with color; ``click.echo`` strips it
when the target stream is not a terminal.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import click

from coolstore.cart.commands import AddToCartCommandHandler
from coolstore.cart.requests import AddToCartRequest, AddToCartRequestHandler
from coolstore.config.logging import configure_logging, request_context
from coolstore.handlers.cancellation import CancellationToken
from coolstore.handlers.result import Failure
from coolstore.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from coolstore.config.logging import Mode
    from coolstore.config.settings import CoolstoreSettings
    from coolstore.handlers.result import Result

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CoolstoreSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def build_request_handler(self) -> AddToCartRequestHandler:
        """Wire a new request handler around the cart's command handler."""
        return AddToCartRequestHandler(AddToCartCommandHandler())

    def add_to_cart(
        self,
        raw_sku_id: str,
        *,
        mode: Mode = "add",
        cancellation: CancellationToken | None = None,
    ) -> Result[int]:
        """Handle one add-to-cart request and wait for its result.

        Log lines emitted while the request runs carry *raw_sku_id* and *mode*.
        """
        handler = self.build_request_handler()
        request = AddToCartRequest(sku_id=raw_sku_id)
        with request_context(raw_sku_id, mode=mode):
            result = asyncio.run(
                handler.handle(request, cancellation or CancellationToken.none())
            )
            logger.debug("Handled request: ok=%s", result.ok)
        return result

    def format(self, result: Result[int]) -> str:
        return format_result(
            result,
            settings=OutputSettings(
                json_output=self.settings.json_output,
                quiet=self.settings.quiet,
                color=True,
                success_template=self.settings.output.success_template,
            ),
        )

    def emit(self, result: Result[int]) -> None:
        """Output a result with one-shot exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = self.format(result)
        if isinstance(result, Failure):
            click.echo(output, err=True)
            raise SystemExit(1)
        click.echo(output)
