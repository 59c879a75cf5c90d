"""Tests for AddToCartCommand and AddToCartCommandHandler."""

import pytest
from pydantic import ValidationError

from coolstore.cart.commands import SKU_NOT_POSITIVE, AddToCartCommand, AddToCartCommandHandler
from coolstore.handlers.cancellation import CancellationToken
from coolstore.handlers.result import Failure, Success
from tests.conftest import run


def _handle(sku_id: int, token: CancellationToken | None = None) -> Success | Failure:
    command = AddToCartCommand(sku_id=sku_id)
    return run(AddToCartCommandHandler().handle(command, token or CancellationToken.none()))


class TestAddToCartCommand:
    def test_holds_integer(self) -> None:
        assert AddToCartCommand(sku_id=3).sku_id == 3

    def test_frozen(self) -> None:
        command = AddToCartCommand(sku_id=3)
        with pytest.raises(ValidationError):
            command.sku_id = 4  # type: ignore[misc]

    def test_rejects_non_integer(self) -> None:
        with pytest.raises(ValidationError):
            AddToCartCommand(sku_id="Joe")  # type: ignore[arg-type]


class TestAddToCartCommandHandler:
    @pytest.mark.parametrize("sku_id", [1, 3, 2_147_483_647])
    def test_positive_succeeds(self, sku_id: int) -> None:
        assert _handle(sku_id) == Success()

    @pytest.mark.parametrize("sku_id", [0, -1, -2_147_483_648])
    def test_non_positive_fails(self, sku_id: int) -> None:
        assert _handle(sku_id) == Failure(message="SkuId must be a positive integer.")

    def test_message_constant(self) -> None:
        assert SKU_NOT_POSITIVE == "SkuId must be a positive integer."

    def test_ignores_cancellation(self) -> None:
        token = CancellationToken()
        token.cancel()
        assert _handle(5, token) == Success()

    def test_deterministic(self) -> None:
        assert _handle(0) == _handle(0)
        assert _handle(9) == _handle(9)
