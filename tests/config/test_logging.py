"""Tests for structlog configuration."""

from __future__ import annotations

import asyncio
import json
import logging

import pytest
import structlog

from coolstore.config.logging import configure_logging, request_context


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("coolstore").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("coolstore").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("coolstore.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "coolstore.test"
        assert "timestamp" in parsed

    def test_stdlib_handler_logs_are_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("coolstore.cart.requests").debug("Rejected SKU %r", "Joe")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Rejected SKU 'Joe'"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "coolstore.cart.requests"

    def test_debug_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("coolstore.cart.commands").debug("Accepted SKU %d", 3)
        assert capfd.readouterr().err == ""

    def test_logs_never_reach_stdout(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        logging.getLogger("coolstore.test").warning("to stderr")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert "to stderr" in captured.err

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=False)
        assert len(logging.getLogger().handlers) == 1


class TestRequestContext:
    def test_binds_sku_and_mode(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with request_context("42", mode="shell"):
            logging.getLogger("coolstore.cart.commands").debug("Accepted SKU %d", 42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["sku_id"] == "42"
        assert parsed["mode"] == "shell"

    def test_unbinds_on_exit(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with request_context("42", mode="add"):
            pass
        logging.getLogger("coolstore.test").debug("after")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "sku_id" not in parsed
        assert "mode" not in parsed

    def test_visible_inside_asyncio_run(self, capfd: pytest.CaptureFixture[str]) -> None:
        async def log_from_task() -> None:
            structlog.get_logger("coolstore.test").debug("in task")

        configure_logging(verbose=True, log_json=True)
        with request_context("Joe", mode="add"):
            asyncio.run(log_from_task())
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "in task"
        assert parsed["sku_id"] == "Joe"
