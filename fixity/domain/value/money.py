"""Money value object for representing monetary values with currency."""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, final

from pydantic import GetCoreSchemaHandler, field_validator
from pydantic_core import core_schema

from fixity.domain.error import CurrencyMismatchError
from fixity.domain.value.common import ValueObject
from fixity.domain.value.types import Currency

Numeric = Decimal | int | float | str


def to_decimal(value: Any) -> Decimal:
    """Convert a numeric input to a finite Decimal.

    Floats go through ``str`` so ``0.06`` becomes ``Decimal("0.06")``
    rather than its binary expansion.

    Raises:
        TypeError: If ``value`` is not numeric
        ValueError: If ``value`` does not parse or is not finite
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise TypeError(f"Expected a numeric amount, got {type(value).__name__}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return amount


class Amount(Decimal):
    """Decimal amount that also compares equal to the float it was written as.

    ``Amount("2.06") == 2.06`` holds because finite floats are compared
    through ``str``, the same conversion ``to_decimal`` applies.
    """

    def __eq__(self, other: object) -> bool:
        if isinstance(other, float) and math.isfinite(other):
            other = Decimal(str(other))
        return Decimal.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = Decimal.__hash__

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls._from_decimal, core_schema.decimal_schema(allow_inf_nan=False)
        )

    @classmethod
    def _from_decimal(cls, value: Decimal) -> "Amount":
        if isinstance(value, cls):
            return value
        return cls(value)


@final
class Money(ValueObject, sealed=True):
    """Immutable amount of money in a single currency.

    Arithmetic never touches the receiver; it returns a new Money::

        m = Money(2, Currency.USD)
        m2 = m.add(0.06)
        assert m.amount == 2 and m2.amount == 2.06
    """

    amount: Amount
    currency: Currency = Currency.USD

    def __init__(self, amount: Any, currency: Any = Currency.USD) -> None:
        super().__init__(amount=amount, currency=currency)

    @field_validator("amount", mode="before")
    @classmethod
    def normalize_amount(cls, v: Any) -> Decimal:
        """Coerce the amount to a finite Decimal."""
        try:
            return to_decimal(v)
        except TypeError as e:
            # pydantic only reports ValueError and AssertionError
            raise ValueError(str(e)) from e

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, v: Any) -> Any:
        """Accept currency codes in any case."""
        if isinstance(v, str) and not isinstance(v, Currency):
            return v.strip().upper()
        return v

    def _delta(self, other: "Money | Numeric") -> Decimal:
        """Amount of ``other`` expressed in this currency."""
        if isinstance(other, Money):
            if other.currency != self.currency:
                raise CurrencyMismatchError(self.currency.value, other.currency.value)
            return other.amount
        return to_decimal(other)

    def add(self, other: "Money | Numeric") -> "Money":
        """Add money or a plain amount in the same currency.

        Args:
            other: Money instance or numeric amount

        Returns:
            New Money instance with the sum

        Raises:
            CurrencyMismatchError: If currencies don't match
        """
        return Money(self.amount + self._delta(other), self.currency)

    def subtract(self, other: "Money | Numeric") -> "Money":
        """Subtract money or a plain amount in the same currency.

        Raises:
            CurrencyMismatchError: If currencies don't match
        """
        return Money(self.amount - self._delta(other), self.currency)

    def multiply(self, factor: Numeric) -> "Money":
        """Multiply the amount by a factor."""
        return Money(self.amount * to_decimal(factor), self.currency)

    def negate(self) -> "Money":
        return Money(-self.amount, self.currency)

    def round(self, places: int | None = None) -> "Money":
        """Round half up to ``places`` decimals, by default the currency's minor units."""
        if places is None:
            places = self.currency.minor_units
        quantizer = Decimal(10) ** -places
        return Money(self.amount.quantize(quantizer, rounding=ROUND_HALF_UP), self.currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def format(self, include_currency: bool = True) -> str:
        """Format for display, e.g. ``2,000.06 USD``."""
        places = self.currency.minor_units
        formatted = f"{self.round(places).amount:,.{places}f}"
        if include_currency:
            return f"{formatted} {self.currency.value}"
        return formatted

    def __add__(self, other: "Money | Numeric") -> "Money":
        if not isinstance(other, (Money, Decimal, int, float)) or isinstance(other, bool):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Numeric) -> "Money":
        return self.__add__(other)

    def __sub__(self, other: "Money | Numeric") -> "Money":
        if not isinstance(other, (Money, Decimal, int, float)) or isinstance(other, bool):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Money":
        return self.negate()

    def __abs__(self) -> "Money":
        return Money(abs(self.amount), self.currency)

    def _compare_amount(self, other: "Money") -> int:
        if other.currency != self.currency:
            raise CurrencyMismatchError(self.currency.value, other.currency.value)
        return (self.amount > other.amount) - (self.amount < other.amount)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._compare_amount(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._compare_amount(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._compare_amount(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._compare_amount(other) >= 0

    def __str__(self) -> str:
        return self.format()
