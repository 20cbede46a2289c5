"""Domain value objects for fixity."""

from fixity.domain.value.collection import ImmutableList
from fixity.domain.value.common import RootValueObject, ValueObject
from fixity.domain.value.identifiers import AccountId, TransferId
from fixity.domain.value.immutability import (
    find_mutable_paths,
    is_deeply_immutable,
    is_sealed,
)
from fixity.domain.value.money import Amount, Money
from fixity.domain.value.types import Address, Currency

__all__ = [
    # Bases
    "ValueObject",
    "RootValueObject",
    # Identifiers
    "AccountId",
    "TransferId",
    # Types
    "Address",
    "Currency",
    "Amount",
    "Money",
    "ImmutableList",
    # Immutability checks
    "find_mutable_paths",
    "is_deeply_immutable",
    "is_sealed",
]
