"""A sequence whose length is fixed when it is created."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, MutableSequence, Optional, TypeVar

T = TypeVar("T")


class FixedLengthVector(Generic[T]):
    """A mutable sequence of a fixed number of elements.

    Elements may be replaced but none can be added or removed.
    """

    def __init__(self, size: int, factory: Optional[Callable[[], T]] = None) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        if factory is None:
            self._data: MutableSequence = [None] * size
        else:
            self._data = [factory() for _ in range(size)]
        self._size = size

    @classmethod
    def from_buffer(cls, buffer: MutableSequence[T]) -> "FixedLengthVector[T]":
        """Wrap an existing sequence without copying it; writes go to ``buffer``."""
        vector = cls.__new__(cls)
        vector._data = buffer
        vector._size = len(buffer)
        return vector

    def _check(self, pos: int) -> None:
        if not 0 <= pos < self._size:
            raise IndexError(f"index {pos} out of range for length {self._size}")

    def at(self, pos: int) -> T:
        """The element at ``pos``; raises IndexError if out of range."""
        self._check(pos)
        return self._data[pos]

    def __getitem__(self, pos: int) -> T:
        self._check(pos)
        return self._data[pos]

    def __setitem__(self, pos: int, value: T) -> None:
        self._check(pos)
        self._data[pos] = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for pos in range(self._size):
            yield self._data[pos]

    def front(self) -> T:
        """The first element."""
        return self.at(0)

    def back(self) -> T:
        """The last element."""
        return self.at(self._size - 1)

    def capacity(self) -> int:
        """The number of elements held; equal to the length."""
        return self._size

    def max_size(self) -> int:
        """The largest number of elements possible; equal to the length."""
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"