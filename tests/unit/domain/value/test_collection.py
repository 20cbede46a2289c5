"""Unit tests for ImmutableList."""

import pytest
from pydantic import ValidationError

from fixity.domain.error import SealedTypeError
from fixity.domain.value import Address, ImmutableList, Money


class TestImmutableListConstruction:
    """Tests for building immutable lists."""

    def test_source_list_is_copied(self):
        """Changing the source list after construction should not leak in."""
        source = [1, 2]
        items = ImmutableList(source)

        source.append(3)

        assert list(items) == [1, 2]
        assert len(items) == 2

    def test_any_iterable_accepted(self):
        assert ImmutableList(x * 2 for x in range(3)) == ImmutableList([0, 2, 4])
        assert ImmutableList() == ImmutableList([])

    def test_value_object_elements_accepted(self):
        items = ImmutableList([Money(1), Address("Paris", "12", "3")])

        assert items.get(1).city == "Paris"

    def test_mutable_element_rejected(self):
        """Elements must be deeply immutable themselves."""
        with pytest.raises(ValidationError, match=r"root\[1\]"):
            ImmutableList([1, [2, 3]])

    def test_nested_mutable_element_rejected(self):
        with pytest.raises(ValidationError):
            ImmutableList([(1, {"a": 1})])

    @pytest.mark.parametrize("bad", ["ab", b"ab", {"a": 1}, 42])
    def test_non_sequence_input_rejected(self, bad):
        with pytest.raises(ValidationError):
            ImmutableList(bad)


class TestImmutableListReads:
    """Tests for read-only access."""

    def test_get_returns_element(self):
        items = ImmutableList([1, 2])

        assert items.get(0) == 1
        assert items.get(1) == 2

    @pytest.mark.parametrize("index", [2, 100, -1])
    def test_get_absent_position_returns_none(self, index):
        assert ImmutableList([1, 2]).get(index) is None

    def test_indexing_and_slicing(self):
        items = ImmutableList([1, 2, 3])

        assert items[0] == 1
        assert items[-1] == 3
        assert items[1:] == ImmutableList([2, 3])
        assert isinstance(items[1:], ImmutableList)
        with pytest.raises(IndexError):
            items[3]  # noqa: B018

    def test_membership_and_iteration(self):
        items = ImmutableList([1, 2])

        assert 2 in items
        assert 3 not in items
        assert [x for x in items] == [1, 2]

    def test_reads_do_not_change_later_reads(self):
        """Any number of reads should leave every later read the same."""
        items = ImmutableList([1, 2])

        for _ in range(50):
            items.get(0)
            items.get(5)
            list(items)
            items[0:1]

        assert items.get(0) == 1
        assert items.get(1) == 2
        assert len(items) == 2

    def test_equal_by_value(self):
        assert ImmutableList([1, 2]) == ImmutableList((1, 2))
        assert len({ImmutableList([1, 2]), ImmutableList((1, 2))}) == 1

    def test_repr(self):
        assert repr(ImmutableList([1, 2])) == "ImmutableList([1, 2])"


class TestImmutableListHasNoMutation:
    """No operation changes the sequence after construction."""

    @pytest.mark.parametrize(
        "name", ["append", "extend", "insert", "remove", "pop", "clear", "sort"]
    )
    def test_no_in_place_operation(self, name):
        assert not hasattr(ImmutableList([1, 2]), name)

    def test_item_assignment_rejected(self):
        items = ImmutableList([1, 2])

        with pytest.raises(TypeError):
            items[0] = 5

        with pytest.raises(TypeError):
            del items[0]

        assert list(items) == [1, 2]

    def test_root_reassignment_rejected(self):
        items = ImmutableList([1, 2])

        with pytest.raises(ValidationError):
            items.root = (3,)

        assert list(items) == [1, 2]

    def test_stored_sequence_is_a_tuple(self):
        assert isinstance(ImmutableList([1, 2]).root, tuple)


class TestImmutableListDerivations:
    """Persistent derivations return new lists."""

    def test_appended(self):
        items = ImmutableList([1, 2])

        longer = items.appended(3)

        assert longer == ImmutableList([1, 2, 3])
        assert items == ImmutableList([1, 2])

    def test_extended(self):
        items = ImmutableList([1])

        assert items.extended([2, 3]) == ImmutableList([1, 2, 3])
        assert len(items) == 1

    def test_replaced(self):
        items = ImmutableList([1, 2])

        assert items.replaced(0, 9) == ImmutableList([9, 2])
        assert items == ImmutableList([1, 2])

    def test_removed(self):
        items = ImmutableList([1, 2, 3])

        assert items.removed(1) == ImmutableList([1, 3])
        assert items == ImmutableList([1, 2, 3])

    @pytest.mark.parametrize("index", [2, -1])
    def test_invalid_position_raises(self, index):
        items = ImmutableList([1, 2])

        with pytest.raises(IndexError):
            items.replaced(index, 0)
        with pytest.raises(IndexError):
            items.removed(index)

    def test_derived_elements_are_validated(self):
        with pytest.raises(ValidationError):
            ImmutableList([1]).appended([2])


class TestImmutableListSealing:
    def test_subclass_rejected(self):
        with pytest.raises(SealedTypeError):

            class GrowableList(ImmutableList):  # type: ignore[misc]
                def append(self, item):
                    pass
