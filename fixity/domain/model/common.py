"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, model_validator

from fixity.domain.value.immutability import (
    ensure_transitively_immutable,
    seal_subclass,
)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    Entities follow the same rules as value objects: frozen, only deeply
    immutable field values, and optionally sealed with ``sealed=True``.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def __init_subclass__(cls, sealed: bool = False, **kwargs: Any) -> None:
        seal_subclass(cls, sealed)
        super().__init_subclass__(**kwargs)

    @model_validator(mode="after")
    def validate_transitively_immutable(self) -> Self:
        """Reject fields holding mutable values."""
        ensure_transitively_immutable(self)
        return self
