"""structlog configuration and per-request log context for coolstore.

Every log line goes to stderr so results on stdout stay pipeable.  While a
request is in flight, :func:`request_context` binds the raw ``sku_id`` and
the CLI ``mode`` (``add`` or ``shell``) as context variables; the shared
processor chain merges them into structlog events and into records from
plain ``logging`` loggers alike.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Literal

import structlog

Mode = Literal["add", "shell"]

_PACKAGE_LOGGER = "coolstore"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(*, log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        verbose: Show DEBUG output from ``coolstore`` loggers; WARNING otherwise.
        log_json: Emit one JSON object per line instead of console output.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [_stderr_handler(log_json=log_json)]
    root_logger.setLevel(logging.WARNING)
    logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


@contextmanager
def request_context(sku_id: str, *, mode: Mode) -> Iterator[None]:
    """Bind *sku_id* and *mode* to every log line emitted inside the block.

    Context variables are copied into the task ``asyncio.run`` creates, so
    handler coroutines see the binding too.
    """
    with structlog.contextvars.bound_contextvars(sku_id=sku_id, mode=mode):
        yield
