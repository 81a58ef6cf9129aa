"""A fixed-size array with element-wise ordering."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Array(Generic[T]):
    """A mutable sequence of exactly ``size`` elements.

    Ordering is element-wise: ``a < b`` holds only when every element of
    ``a`` is less than the matching element of ``b``, and ``a <= b`` only
    when no element of ``a`` is greater. ``a > b`` is ``not a <= b`` and
    ``a >= b`` is ``not a < b``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int, values: Optional[Iterable[T]] = None) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        if values is None:
            self._items: list = [None] * size
        else:
            self._items = list(values)
            if len(self._items) != size:
                raise ValueError(f"expected {size} values, got {len(self._items)}")

    def _check(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"index {pos} out of range for size {len(self._items)}")

    def at(self, pos: int) -> T:
        """The element at ``pos``; raises IndexError if ``pos`` is out of range."""
        self._check(pos)
        return self._items[pos]

    def __getitem__(self, pos: int) -> T:
        return self._items[pos]

    def __setitem__(self, pos: int, value: T) -> None:
        self._items[pos] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def front(self) -> T:
        """The first element."""
        return self.at(0)

    def back(self) -> T:
        """The last element."""
        return self.at(len(self._items) - 1)

    def max_size(self) -> int:
        """The largest number of elements possible; equal to the length."""
        return len(self._items)

    def fill(self, value: T) -> None:
        """Set every element to ``value``."""
        self._items = [value] * len(self._items)

    def swap(self, other: "Array[T]") -> None:
        """Exchange contents with ``other``, which must have the same size."""
        self._same_size(other)
        self._items, other._items = other._items, self._items

    def _same_size(self, other: "Array") -> None:
        if len(self._items) != len(other._items):
            raise ValueError(
                f"arrays differ in size: {len(self._items)} and {len(other._items)}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: "Array[T]") -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        self._same_size(other)
        return all(a < b for a, b in zip(self._items, other._items))

    def __le__(self, other: "Array[T]") -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        self._same_size(other)
        return all(not a > b for a, b in zip(self._items, other._items))

    def __gt__(self, other: "Array[T]") -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: "Array[T]") -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return not self < other

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._items)}, {self._items!r})"


def get(array: Array[T], index: int) -> T:
    """The element at ``index``; raises IndexError unless ``0 <= index < len(array)``."""
    if not 0 <= index < len(array):
        raise IndexError(f"index {index} must be below {len(array)}")
    return array[index]


def to_array(values: Iterable[T]) -> Array[T]:
    """An array holding a copy of ``values``."""
    items = list(values)
    return Array(len(items), items)