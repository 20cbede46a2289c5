"""Test configuration and fixtures."""

from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from fixity.domain.model import Account
from fixity.domain.value import AccountId, Address, Currency, Money


def make_account(
    balance: Decimal | int | str = 100,
    currency: Currency = Currency.USD,
    owner: str = "Ada Lovelace",
    address: Address | None = None,
) -> Account:
    """Helper function to build accounts for tests.

    Args:
        balance: Opening balance amount
        currency: Balance currency
        owner: Account owner name
        address: Optional postal address

    Returns:
        Account with a fresh id
    """
    return Account(
        id=AccountId(uuid4()),
        owner=owner,
        balance=Money(balance, currency),
        address=address,
        opened_at=datetime(2024, 1, 1, 9, 0, 0),
    )
