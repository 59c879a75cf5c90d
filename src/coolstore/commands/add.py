"""Command: add a single SKU to the cart."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from coolstore.commands._base import CoolCommand

if TYPE_CHECKING:
    from coolstore.commands._context import AppContext


@click.command(
    cls=CoolCommand,
    examples="""\
  coolstore add 3
  coolstore --json add 42
  coolstore -q add 7""",
)
@click.argument("sku_id")
@click.pass_obj
def add(app: AppContext, sku_id: str) -> None:
    """Add SKU_ID to the cart. Exits 1 if the SKU is rejected."""
    app.emit(app.add_to_cart(sku_id))
