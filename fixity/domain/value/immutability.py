"""Transitive immutability checks and sealing helpers.

A value is deeply immutable when it is an immutable scalar, or a tuple,
frozenset, frozen pydantic model or frozen dataclass whose contents are
themselves deeply immutable. Anything that exposes in-place mutation
(lists, dicts, sets, unfrozen models, plain objects) is not.
"""

import dataclasses
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from fixity.domain.error import SealedTypeError

SEALED_ATTR = "__sealed__"

_SCALAR_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
    UUID,
    date,
    datetime,
    time,
    timedelta,
    range,
    Enum,
)


def find_mutable_paths(value: Any, path: str = "value") -> list[str]:
    """Collect the paths of every mutable value reachable from ``value``.

    Args:
        value: Value to inspect
        path: Name used as the root of the reported paths

    Returns:
        Paths such as ``value.items[1]``; empty when ``value`` is deeply immutable
    """
    if isinstance(value, _SCALAR_TYPES):
        return []

    if isinstance(value, tuple):
        return [
            found
            for index, item in enumerate(value)
            for found in find_mutable_paths(item, f"{path}[{index}]")
        ]

    if isinstance(value, frozenset):
        # Unordered, so elements are reported by repr
        return [
            found
            for item in value
            for found in find_mutable_paths(item, f"{path}{{{item!r}}}")
        ]

    if isinstance(value, BaseModel):
        if not value.model_config.get("frozen", False):
            return [path]
        return [
            found
            for name in type(value).model_fields
            for found in find_mutable_paths(getattr(value, name), f"{path}.{name}")
        ]

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        if not value.__dataclass_params__.frozen:  # type: ignore[attr-defined]
            return [path]
        return [
            found
            for field in dataclasses.fields(value)
            for found in find_mutable_paths(
                getattr(value, field.name), f"{path}.{field.name}"
            )
        ]

    return [path]


def is_deeply_immutable(value: Any) -> bool:
    """Check whether ``value`` and everything reachable from it is immutable."""
    return not find_mutable_paths(value)


def ensure_transitively_immutable(model: BaseModel) -> None:
    """Reject a model holding any mutable field value.

    Raises:
        ValueError: If a field, or anything reachable from it, is mutable
    """
    paths = [
        found
        for name in type(model).model_fields
        for found in find_mutable_paths(getattr(model, name), name)
    ]
    if paths:
        raise ValueError(
            f"{type(model).__name__} fields must be deeply immutable, "
            f"mutable values found at: {', '.join(paths)}"
        )


def is_sealed(cls: type) -> bool:
    """Check whether ``cls`` was declared with ``sealed=True``."""
    return bool(cls.__dict__.get(SEALED_ATTR, False))


def seal_subclass(cls: type, sealed: bool) -> None:
    """Register a new subclass, refusing it if any ancestor is sealed.

    Called from ``__init_subclass__`` of the value object bases.

    Raises:
        SealedTypeError: If one of the ancestors of ``cls`` is sealed
    """
    for ancestor in cls.__mro__[1:]:
        if is_sealed(ancestor):
            raise SealedTypeError(ancestor, cls.__name__)
    setattr(cls, SEALED_ATTR, sealed)
