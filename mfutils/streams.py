"""Lazy, re-iterable streams with filter and map stages."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Optional, Sized, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Stream(Generic[T]):
    """A lazy pipeline over a source; every traversal reads the source afresh."""

    def __init__(self, source: Callable[[], Iterable[T]], sized: Optional[Sized] = None) -> None:
        self._source = source
        self._sized = sized

    def filter(self, predicate: Callable[[T], bool]) -> "Stream[T]":
        """A stream of the elements for which ``predicate`` is true."""
        return Stream(lambda: (item for item in self if predicate(item)))

    def map(self, mapper: Callable[[T], U]) -> "Stream[U]":
        """A stream of ``mapper`` applied to each element."""
        return Stream(lambda: (mapper(item) for item in self))

    def to_list(self) -> list[T]:
        """Collect the elements into a new list."""
        return list(self)

    def for_each(self, processor: Callable[[T], object]) -> None:
        """Call ``processor`` on every element in order."""
        for item in self:
            processor(item)

    def __iter__(self) -> Iterator[T]:
        return iter(self._source())

    def __len__(self) -> int:
        if self._sized is not None:
            return len(self._sized)
        return sum(1 for _ in self)


def from_collection(collection: Iterable[T]) -> Stream[T]:
    """A stream over ``collection``; later changes to it are seen by the stream."""
    sized = collection if isinstance(collection, Sized) else None
    return Stream(lambda: collection, sized)