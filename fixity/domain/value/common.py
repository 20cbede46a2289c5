"""Base class for value objects."""

from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, model_validator

from fixity.domain.value.immutability import (
    ensure_transitively_immutable,
    seal_subclass,
)


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    Every field must hold a deeply immutable value, so no accessor can hand
    out a mutable reference. Declare concrete types with ``sealed=True``
    to close them to extension::

        class Address(ValueObject, sealed=True):
            city: str
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )

    def __init_subclass__(cls, sealed: bool = False, **kwargs: Any) -> None:
        seal_subclass(cls, sealed)
        super().__init_subclass__(**kwargs)

    @model_validator(mode="after")
    def validate_transitively_immutable(self) -> Self:
        """Reject fields holding mutable values."""
        ensure_transitively_immutable(self)
        return self

    def derive(self, **changes: Any) -> Self:
        """Build a new instance from this one's fields plus ``changes``.

        Unlike ``model_copy(update=...)`` the result is validated again.
        The receiver is left untouched.

        Args:
            **changes: Field values to replace

        Returns:
            New instance of the same type
        """
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        return type(self).model_validate({**fields, **changes})


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    RootValueObject uses Pydantic's RootModel, which means:
    - The model wraps a single value (accessed via .root)
    - model_dump() automatically returns the primitive value, not a dict
    - The wrapped value must be deeply immutable, like any value object field
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    def __init_subclass__(cls, sealed: bool = False, **kwargs: Any) -> None:
        seal_subclass(cls, sealed)
        super().__init_subclass__(**kwargs)

    @model_validator(mode="after")
    def validate_transitively_immutable(self) -> Self:
        """Reject a mutable root value."""
        ensure_transitively_immutable(self)
        return self

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
