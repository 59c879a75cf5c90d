"""Human, quiet, and JSON rendering of request handler results.

Human mode prints the configured success line or the bare failure message,
styled through Rich.  JSON mode dumps the result model as-is, so the
``ok`` discriminator tells machines which variant they received.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from coolstore.handlers.result import Failure

if TYPE_CHECKING:
    from coolstore.handlers.result import Result

CART_THEME = Theme({"cart.ok": "bold green", "cart.error": "bold red"})


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    color: bool = False
    success_template: str = "Successfully added {value} to cart."


def format_result(result: Result[int], *, settings: OutputSettings | None = None) -> str:
    """Format a request handler result for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json()
    if isinstance(result, Failure):
        line = Text(result.message, style="cart.error")
    elif settings.quiet:
        return str(result.value)
    else:
        line = Text(settings.success_template.format(value=result.value), style="cart.ok")
    return _render(line, color=settings.color)


def _render(line: Text, *, color: bool) -> str:
    # Text is never parsed as markup, so messages print verbatim.
    buffer = StringIO()
    Console(
        file=buffer,
        theme=CART_THEME,
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
        soft_wrap=True,
    ).print(line)
    return buffer.getvalue().rstrip("\n")
