"""Domain value objects for fixity.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalise their inputs.
"""

from enum import Enum
from typing import Any, final

from pydantic import field_validator

from fixity.domain.value.common import ValueObject


class Currency(str, Enum):
    """ISO 4217 currency codes supported by Money."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CHF = "CHF"
    CAD = "CAD"
    AUD = "AUD"

    @property
    def minor_units(self) -> int:
        """Number of decimal places used by the currency."""
        return 0 if self is Currency.JPY else 2


@final
class Address(ValueObject, sealed=True):
    """Postal address.

    Every component is stored as a stripped string. Integers are accepted
    and converted, so ``Address("Paris", 12, 3)`` equals
    ``Address("Paris", "12", "3")``.
    """

    city: str
    street: str
    house: str

    def __init__(self, city: Any, street: Any, house: Any) -> None:
        super().__init__(city=city, street=street, house=house)

    @field_validator("city", "street", "house", mode="before")
    @classmethod
    def normalize_component(cls, v: Any) -> str:
        """Coerce an address component to its canonical string form."""
        # bool is an int subclass but never a meaningful address part
        if isinstance(v, bool) or not isinstance(v, (str, int)):
            raise ValueError(
                f"Address components must be strings or integers, got {type(v).__name__}"
            )
        text = str(v).strip()
        if not text:
            raise ValueError("Address components must not be blank")
        return text

    def with_city(self, city: Any) -> "Address":
        """Return a copy of this address in another city."""
        return self.derive(city=city)

    def with_street(self, street: Any) -> "Address":
        """Return a copy of this address on another street."""
        return self.derive(street=street)

    def with_house(self, house: Any) -> "Address":
        """Return a copy of this address with another house number."""
        return self.derive(house=house)

    def __str__(self) -> str:
        return f"{self.street} {self.house}, {self.city}"
