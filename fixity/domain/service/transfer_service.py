"""Transfer domain service."""

from uuid import uuid4

import logfire

from fixity.config import TransferSettings
from fixity.domain.error import (
    BusinessRuleViolationError,
    CurrencyMismatchError,
    InsufficientFundsError,
)
from fixity.domain.model import Account, Transfer
from fixity.domain.value import Money, TransferId

from .base import Service


class TransferService(Service):
    """Domain service for moving money between accounts.

    Accounts are immutable: every operation returns new Account snapshots
    and leaves its arguments untouched.
    """

    def __init__(self, transfer_settings: TransferSettings) -> None:
        """Initialize transfer service.

        Args:
            transfer_settings: Transfer configuration
        """
        self.transfer_settings = transfer_settings

    def deposit(self, account: Account, amount: Money) -> Account:
        """Credit an account.

        Args:
            account: Account to credit
            amount: Positive amount in the account's currency

        Returns:
            New account snapshot with the increased balance

        Raises:
            BusinessRuleViolationError: If amount is not positive
            CurrencyMismatchError: If currencies don't match
        """
        with logfire.span(
            "transfer_service.deposit", account_id=str(account.id), amount=str(amount)
        ):
            self._check_amount(account, amount)
            updated = account.model_copy(update={"balance": account.balance.add(amount)})
            logfire.info(
                "Account credited",
                account_id=str(account.id),
                balance=str(updated.balance),
            )
            return updated

    def withdraw(self, account: Account, amount: Money) -> Account:
        """Debit an account.

        Args:
            account: Account to debit
            amount: Positive amount in the account's currency

        Returns:
            New account snapshot with the decreased balance

        Raises:
            BusinessRuleViolationError: If amount is not positive
            CurrencyMismatchError: If currencies don't match
            InsufficientFundsError: If the balance would go negative and
                overdrafts are not allowed
        """
        with logfire.span(
            "transfer_service.withdraw", account_id=str(account.id), amount=str(amount)
        ):
            self._check_amount(account, amount)
            balance = account.balance.subtract(amount)
            if balance.is_negative() and not self.transfer_settings.allow_overdraft:
                logfire.warn(
                    "Withdrawal refused",
                    account_id=str(account.id),
                    balance=str(account.balance),
                    requested=str(amount),
                )
                raise InsufficientFundsError(
                    str(account.id), str(account.balance), str(amount)
                )
            updated = account.model_copy(update={"balance": balance})
            logfire.info(
                "Account debited",
                account_id=str(account.id),
                balance=str(updated.balance),
            )
            return updated

    def transfer(self, source: Account, target: Account, amount: Money) -> Transfer:
        """Move money from one account to another.

        Args:
            source: Account to debit
            target: Account to credit
            amount: Positive amount in both accounts' currency

        Returns:
            Transfer holding the new snapshots of both accounts

        Raises:
            BusinessRuleViolationError: If source and target are the same account
                or amount is not positive
            CurrencyMismatchError: If currencies don't match
            InsufficientFundsError: If the source cannot cover the amount
        """
        with logfire.span(
            "transfer_service.transfer",
            source_id=str(source.id),
            target_id=str(target.id),
            amount=str(amount),
        ):
            if source.id == target.id:
                raise BusinessRuleViolationError("Cannot transfer to the same account")

            transfer = Transfer(
                id=TransferId(uuid4()),
                source=self.withdraw(source, amount),
                target=self.deposit(target, amount),
                amount=amount,
            )
            logfire.info(
                "Transfer executed",
                transfer_id=str(transfer.id),
                source_id=str(source.id),
                target_id=str(target.id),
            )
            return transfer

    @staticmethod
    def _check_amount(account: Account, amount: Money) -> None:
        if amount.currency != account.balance.currency:
            raise CurrencyMismatchError(
                account.balance.currency.value, amount.currency.value
            )
        if not amount.is_positive():
            raise BusinessRuleViolationError(
                f"Amount must be positive, got {amount}"
            )
