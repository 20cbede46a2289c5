"""Transfer record."""

from datetime import datetime
from typing import final

from pydantic import Field

from fixity.domain.model.account import Account
from fixity.domain.model.common import DomainModel
from fixity.domain.value import Money, TransferId


@final
class Transfer(DomainModel, sealed=True):
    """Outcome of moving money between two accounts.

    ``source`` and ``target`` are the account snapshots after the transfer;
    the snapshots passed in by the caller are left as they were.
    """

    id: TransferId
    source: Account
    target: Account
    amount: Money
    executed_at: datetime = Field(default_factory=datetime.now)
