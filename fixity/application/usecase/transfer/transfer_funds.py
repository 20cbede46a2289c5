"""Transfer funds use case."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from fixity.application.usecase.base import BaseUseCase
from fixity.domain.model import Account
from fixity.domain.service import TransferService
from fixity.domain.value import Currency, Money


class TransferFundsRequest(BaseModel):
    """Transfer funds request."""

    source: Account
    target: Account
    amount: Decimal
    currency: Currency = Currency.USD


class TransferFundsResponse(BaseModel):
    """Transfer funds response."""

    transfer_id: str
    source: Account  # Source account after the transfer
    target: Account  # Target account after the transfer
    source_balance: str
    target_balance: str
    executed_at: datetime


class TransferFundsUseCase(BaseUseCase):
    """Use case for moving money between two accounts."""

    def __init__(self, transfer_service: TransferService) -> None:
        """Initialize transfer funds use case.

        Args:
            transfer_service: Transfer domain service
        """
        self.transfer_service = transfer_service

    async def execute(self, request: TransferFundsRequest) -> TransferFundsResponse:
        """Execute transfer flow.

        Args:
            request: Transfer funds request

        Returns:
            Transfer funds response with the new balances

        Raises:
            pydantic.ValidationError: If the amount is not a valid Money amount
            BusinessRuleViolationError: If the transfer breaks a business rule
        """
        amount = Money(request.amount, request.currency)
        transfer = self.transfer_service.transfer(
            request.source, request.target, amount
        )

        return TransferFundsResponse(
            transfer_id=str(transfer.id),
            source=transfer.source,
            target=transfer.target,
            source_balance=transfer.source.balance.format(),
            target_balance=transfer.target.balance.format(),
            executed_at=transfer.executed_at,
        )
