"""Unit tests for TransferFundsUseCase."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from fixity.application.usecase.transfer import (
    TransferFundsRequest,
    TransferFundsUseCase,
)
from fixity.domain.error import InsufficientFundsError
from fixity.domain.value import Currency, Money
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestTransferFundsUseCase:
    """Tests for TransferFundsUseCase."""

    @pytest.mark.asyncio
    async def test_transfer_returns_new_balances(self, unit_env):
        """Executing a transfer should report both new balances."""
        # Arrange
        use_case = await unit_env.get(TransferFundsUseCase)
        source = make_account(balance=100)
        target = make_account(balance=0)
        request = TransferFundsRequest(
            source=source,
            target=target,
            amount=Decimal("30"),
            currency=Currency.USD,
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.transfer_id
        assert response.source_balance == "70.00 USD"
        assert response.target_balance == "30.00 USD"
        assert response.source.balance == Money(70)
        assert response.target.balance == Money(30)

        # Request accounts are untouched
        assert request.source.balance == Money(100)
        assert request.target.balance == Money(0)

    @pytest.mark.asyncio
    async def test_insufficient_funds_propagates(self, unit_env):
        use_case = await unit_env.get(TransferFundsUseCase)
        request = TransferFundsRequest(
            source=make_account(balance=10),
            target=make_account(balance=0),
            amount=Decimal("10.01"),
        )

        with pytest.raises(InsufficientFundsError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_unknown_currency_rejected(self, unit_env):
        use_case = await unit_env.get(TransferFundsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                TransferFundsRequest(
                    source=make_account(balance=10),
                    target=make_account(balance=0),
                    amount=Decimal("1"),
                    currency="XYZ",
                )
            )
