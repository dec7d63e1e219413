from collections.abc import Iterable, Set
from typing import TYPE_CHECKING, Any

from .entry import Entry
from .shared import NotFound, objects_equal

if TYPE_CHECKING:
    from .table import HashTableChain


class NoSuchElement(StopIteration):
    pass


class IllegalStateError(RuntimeError):
    pass


# live view, iterator removal changes the table
class EntrySet(Set):
    def __init__(self, table: "HashTableChain") -> None:
        self._table = table

    # set operators give a plain set of (key, value) pairs
    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> set[Any]:
        return {tuple(item) if isinstance(item, Entry) else item for item in it}

    def __sub__(self, other: object) -> Any:
        if not isinstance(other, Iterable):
            return NotImplemented
        return self._from_iterable(self) - self._from_iterable(other)

    def __xor__(self, other: object) -> Any:
        if not isinstance(other, Iterable):
            return NotImplemented
        return self._from_iterable(self) ^ self._from_iterable(other)

    __rxor__ = __xor__

    def __len__(self) -> int:
        return self._table.size()

    def __iter__(self) -> "EntrySetIterator":
        return EntrySetIterator(self._table)

    def __contains__(self, item: object) -> bool:
        try:
            key, value = item  # type: ignore[misc]
        except (TypeError, ValueError):
            return False

        found = self._table.get(key)
        if isinstance(found, NotFound):
            return False
        return objects_equal(found, value)

    def __str__(self) -> str:
        return "[" + ", ".join(str(entry) for entry in self) + "]"


# bucket order, then chain order
class EntrySetIterator:
    def __init__(self, table: "HashTableChain") -> None:
        self._table = table
        self._index = -1
        self._chain: list[Entry] | None = None
        self._position = 0

        self._last_returned: Entry | None = None
        self._last_chain: list[Entry] | None = None
        self._last_position = 0

    def __iter__(self) -> "EntrySetIterator":
        return self

    def has_next(self) -> bool:
        if self._chain is not None and self._position < len(self._chain):
            return True

        buckets = self._table.buckets
        self._chain = None
        for index in range(self._index + 1, len(buckets)):
            chain = buckets[index]
            if chain:
                self._index = index
                self._chain = chain
                self._position = 0
                return True

        # exhausted
        self._index = len(buckets)
        return False

    def __next__(self) -> Entry:
        if not self.has_next():
            raise NoSuchElement()

        assert self._chain is not None
        entry = self._chain[self._position]
        self._last_returned = entry
        self._last_chain = self._chain
        self._last_position = self._position
        self._position += 1
        return entry

    def next(self) -> Entry:
        return self.__next__()

    def remove(self):
        if self._last_returned is None or self._last_chain is None:
            raise IllegalStateError("remove() called without a preceding next()")

        del self._last_chain[self._last_position]
        if self._last_chain is self._chain:
            self._position -= 1

        self._last_returned = None
        self._last_chain = None
        self._table.num_keys -= 1
