"""Domain model entities for fixity."""

from fixity.domain.model.account import Account
from fixity.domain.model.common import DomainModel
from fixity.domain.model.transfer import Transfer

__all__ = [
    "DomainModel",
    "Account",
    "Transfer",
]
