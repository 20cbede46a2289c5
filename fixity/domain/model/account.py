"""Account entity.

Accounts hold a Money balance. Balance changes never touch an existing
Account; the transfer service derives a new snapshot instead.
"""

from datetime import datetime
from typing import Optional, final

from pydantic import Field

from fixity.domain.model.common import DomainModel
from fixity.domain.value import AccountId, Address, Money


@final
class Account(DomainModel, sealed=True):
    """Account entity.

    The address is a nested value object, so handing it out through the
    accessor is safe.
    """

    id: AccountId
    owner: str = Field(min_length=1, max_length=200)
    balance: Money
    address: Optional[Address] = None
    opened_at: datetime = Field(default_factory=datetime.now)
