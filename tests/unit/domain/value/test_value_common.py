"""Unit tests for the value object bases."""

from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import ValidationError

from fixity.domain.error import SealedTypeError
from fixity.domain.value import (
    Address,
    ImmutableList,
    Money,
    RootValueObject,
    ValueObject,
    is_sealed,
)
from tests.pitfalls import Counter


class Point(ValueObject):
    x: int
    y: int


class SealedPoint(ValueObject, sealed=True):
    x: int
    y: int


class Label(RootValueObject[str], sealed=True):
    pass


@dataclass(frozen=True)
class FrozenPair:
    left: int
    right: int


@dataclass
class LoosePair:
    left: int
    right: int


class TestTransitiveImmutability:
    """Fields must hold deeply immutable values."""

    def test_mutable_object_field_rejected(self):
        """Storing a mutable object would leak it through the accessor."""

        class Holder(ValueObject):
            x: Counter

        with pytest.raises(ValidationError, match="x"):
            Holder(x=Counter(1))

    def test_list_field_rejected(self):
        class Tagged(ValueObject):
            tags: list[str]

        with pytest.raises(ValidationError, match="tags"):
            Tagged(tags=["a", "b"])

    def test_tuple_field_accepted(self):
        class Tagged(ValueObject):
            tags: tuple[str, ...]

        assert Tagged(tags=["a", "b"]).tags == ("a", "b")

    def test_nested_value_objects_accepted(self):
        class Shipment(ValueObject):
            destination: Address
            price: Money
            parcels: ImmutableList

        shipment = Shipment(
            destination=Address("Paris", "12", "3"),
            price=Money(2),
            parcels=ImmutableList(["box", "crate"]),
        )

        assert shipment.destination.city == "Paris"

    def test_frozen_dataclass_accepted_and_loose_rejected(self):
        class Pairs(ValueObject):
            pair: Any

        assert Pairs(pair=FrozenPair(1, 2)).pair == FrozenPair(1, 2)
        with pytest.raises(ValidationError):
            Pairs(pair=LoosePair(1, 2))

    def test_root_value_must_be_immutable(self):
        class Bag(RootValueObject[list[int]]):
            pass

        with pytest.raises(ValidationError):
            Bag([1, 2])

    def test_root_value_str(self):
        assert str(Label("hello")) == "hello"


class TestDerive:
    """Tests for ValueObject.derive."""

    def test_derive_returns_new_instance(self):
        point = Point(x=1, y=2)

        moved = point.derive(x=5)

        assert moved == Point(x=5, y=2)
        assert point == Point(x=1, y=2)

    def test_derive_validates(self):
        with pytest.raises(ValidationError):
            Point(x=1, y=2).derive(x="not a number")


class TestSealing:
    """Tests for the sealed class keyword."""

    def test_open_value_object_can_be_extended(self):
        class Point3D(Point):
            z: int = 0

        assert Point3D(x=1, y=2).z == 0
        assert not is_sealed(Point)
        assert not is_sealed(Point3D)

    def test_sealed_value_object_cannot_be_extended(self):
        assert is_sealed(SealedPoint)

        with pytest.raises(SealedTypeError, match="SealedPoint is sealed"):

            class MutantPoint(SealedPoint):
                pass

    def test_sealed_root_value_object_cannot_be_extended(self):
        with pytest.raises(SealedTypeError):

            class LoudLabel(Label):
                pass

    def test_sealed_type_error_is_type_error(self):
        with pytest.raises(TypeError):

            class MutantList(ImmutableList):  # type: ignore[misc]
                pass

    def test_bases_are_not_sealed(self):
        assert not is_sealed(ValueObject)
        assert not is_sealed(RootValueObject)
