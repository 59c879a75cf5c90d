"""Command: interactive add-to-cart loop."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from coolstore.commands._base import CoolCommand

if TYPE_CHECKING:
    from coolstore.commands._context import AppContext


@click.command(
    cls=CoolCommand,
    examples="""\
  coolstore shell
  printf '3\\nJoe\\nq\\n' | coolstore shell
  COOLSTORE_SHELL__QUIT_TOKEN=exit coolstore shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Read SKUs line by line and add each one to the cart.

    Rejected SKUs print their message and the loop continues.  The loop
    ends on the quit token or at end of input.
    """
    shell_config = app.settings.shell
    prompt = shell_config.render_prompt()
    # Undecodable bytes become U+FFFD and fail coercion like any other junk.
    stdin = click.get_text_stream("stdin", errors="replace")

    while True:
        click.echo(prompt)
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip("\r\n")
        if line == shell_config.quit_token:
            break
        click.echo(app.format(app.add_to_cart(line, mode="shell")))
