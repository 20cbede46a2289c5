"""Strongly typed identifiers for fixity domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
TransferId = NewType("TransferId", UUID)
