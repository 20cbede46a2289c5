"""Persistent, read-only sequence value object."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, final, overload

from pydantic import field_validator

from fixity.domain.value.common import RootValueObject


@final
class ImmutableList(RootValueObject[tuple[Any, ...]], sealed=True):
    """Ordered sequence fixed at construction.

    The input is copied into a tuple, so later changes to the source list
    are not observed, and every element must itself be deeply immutable.
    There is no in-place append, remove or update. ``appended``,
    ``replaced`` and friends return a new list and leave the receiver as is.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__(root=items)

    @field_validator("root", mode="before")
    @classmethod
    def copy_items(cls, v: Any) -> tuple[Any, ...]:
        """Take a tuple snapshot of any non-string, non-mapping iterable."""
        if isinstance(v, (str, bytes, Mapping)) or not isinstance(v, Iterable):
            raise ValueError(
                f"ImmutableList needs an iterable of items, got {type(v).__name__}"
            )
        return tuple(v)

    def get(self, index: int) -> Any | None:
        """Return the element at ``index``, or None when there is none.

        Positions are counted from zero; negative positions are absent.
        """
        if 0 <= index < len(self.root):
            return self.root[index]
        return None

    def appended(self, item: Any) -> "ImmutableList":
        """Return a new list with ``item`` added at the end."""
        return ImmutableList((*self.root, item))

    def extended(self, items: Iterable[Any]) -> "ImmutableList":
        """Return a new list with ``items`` added at the end."""
        return ImmutableList((*self.root, *items))

    def replaced(self, index: int, item: Any) -> "ImmutableList":
        """Return a new list with the element at ``index`` replaced.

        Raises:
            IndexError: If there is no element at ``index``
        """
        self._check_position(index)
        return ImmutableList((*self.root[:index], item, *self.root[index + 1 :]))

    def removed(self, index: int) -> "ImmutableList":
        """Return a new list without the element at ``index``.

        Raises:
            IndexError: If there is no element at ``index``
        """
        self._check_position(index)
        return ImmutableList((*self.root[:index], *self.root[index + 1 :]))

    def _check_position(self, index: int) -> None:
        if not 0 <= index < len(self.root):
            raise IndexError(
                f"ImmutableList position {index} out of range for length {len(self.root)}"
            )

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> "ImmutableList": ...

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return ImmutableList(self.root[index])
        return self.root[index]

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, item: object) -> bool:
        return item in self.root

    def __repr__(self) -> str:
        return f"ImmutableList({list(self.root)!r})"
