"""Shared pytest fixtures and test helpers for coolstore tests."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Coroutine, Generator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest
from click.testing import CliRunner

from coolstore.handlers.base import CommandHandler
from coolstore.handlers.result import Failure, Success


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by the CLI under test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    coolstore_logger = logging.getLogger("coolstore")
    coolstore_level = coolstore_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    coolstore_logger.setLevel(coolstore_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp directory with no config or env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes.
    """
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("COOLSTORE_"):
            monkeypatch.delenv(name)
    return tmp_path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def run[T](coro: Coroutine[Any, Any, T]) -> T:
    """Drive a handler coroutine to completion."""
    return asyncio.run(coro)


def fake_command_handler(outcome: Success | Failure | None = None) -> AsyncMock:
    """A substitutable command handler returning *outcome* (default Success)."""
    handler = AsyncMock(spec=CommandHandler)
    handler.handle.return_value = outcome if outcome is not None else Success()
    return handler
