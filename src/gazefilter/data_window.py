"""Fixed-size window over the most recent samples."""

from __future__ import annotations

import operator
from typing import Any, Generic, Iterable, Iterator, TypeVar

from .errors import IndexOutOfRange, InvalidCapacity

T = TypeVar("T")


class DataWindow(Generic[T]):
    """A list-like buffer that wraps around to keep at most ``window_size`` items.

    Once full, each push overwrites the oldest entry. Reads are always in
    chronological order: ``get(0)`` is the oldest retained entry.
    """

    def __init__(self, window_size: int, data: Iterable[T] | None = None) -> None:
        if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size < 1:
            raise InvalidCapacity(f"window_size must be a positive integer, got {window_size!r}")
        self._window_size = window_size
        self._data: list[T] = []
        self._index = 0
        if data is not None:
            self._data = list(data)[-window_size:]

    @property
    def window_size(self) -> int:
        """Return the maximum number of retained entries."""
        return self._window_size

    @property
    def is_full(self) -> bool:
        """Return True once the window has wrapped or reached capacity."""
        return len(self._data) == self._window_size

    def push(self, entry: T) -> DataWindow[T]:
        """Insert an entry, replacing the oldest one when full."""
        if len(self._data) < self._window_size:
            self._data.append(entry)
            return self

        self._data[self._index] = entry
        self._index = (self._index + 1) % self._window_size
        return self

    def get(self, ind: int) -> T:
        """Return the ``ind``-th oldest entry."""
        try:
            ind = operator.index(ind)
        except TypeError as e:
            raise IndexOutOfRange(f"window index must be an integer, got {ind!r}") from e
        if not 0 <= ind < len(self._data):
            raise IndexOutOfRange(
                f"index {ind} out of range for window holding {len(self._data)} entries"
            )
        return self._data[self._true_index(ind)]

    def add_all(self, data: Iterable[T]) -> DataWindow[T]:
        """Push every entry of ``data`` in order."""
        for entry in data:
            self.push(entry)
        return self

    def to_list(self) -> list[T]:
        """Return the retained entries oldest-first."""
        return list(self)

    def _true_index(self, ind: int) -> int:
        if len(self._data) < self._window_size:
            return ind
        return (ind + self._index) % self._window_size

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        for ind in range(len(self._data)):
            yield self._data[self._true_index(ind)]

    def __getitem__(self, ind: int) -> T:
        return self.get(ind)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DataWindow):
            return NotImplemented
        return self._window_size == other._window_size and self.to_list() == other.to_list()

    def __repr__(self) -> str:
        return f"DataWindow(window_size={self._window_size}, data={self.to_list()!r})"
