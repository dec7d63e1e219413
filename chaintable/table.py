from collections.abc import ItemsView, Mapping, MutableMapping
from typing import Any, Iterator

from .debug import print_bucket
from .entry import Entry
from .shared import NotFound, hash_code, objects_equal, printf
from .views import EntrySet


CAPACITY = 101
LOAD_THRESHOLD = 1.5


Chain = list[Entry]


class UnsupportedOperation(NotImplementedError):
    pass


_debug_trace_table = False


def set_debug_trace_table(b: bool):
    global _debug_trace_table
    _debug_trace_table = b


def index(key: Any, capacity: int) -> int:
    # a positive modulus keeps the result in [0, capacity)
    return hash_code(key) % capacity


# get/put/remove return NotFound() for a missing key, subscripts raise KeyError
class HashTableChain(MutableMapping):
    buckets: list[Chain | None]
    num_keys: int

    def __init__(self, capacity: int = CAPACITY) -> None:
        if not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive int, got {capacity!r}")

        self.buckets = [None] * capacity
        self.num_keys = 0

    @property
    def capacity(self) -> int:
        return len(self.buckets)

    def load_factor(self) -> float:
        return self.num_keys / self.capacity

    def index(self, key: Any) -> int:
        return index(key, self.capacity)

    def size(self) -> int:
        return self.num_keys

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains_key(self, key: Any) -> bool:
        return self._find_entry(key) is not None

    def contains_value(self, value: Any) -> bool:
        if value is None:
            raise TypeError("contains_value() argument must not be None")

        for chain in self.buckets:
            if chain is None:
                continue
            for entry in chain:
                if value == entry.value:
                    return True
        return False

    def get(self, key: Any, default: Any = NotFound()) -> Any:
        entry = self._find_entry(key)
        if entry is None:
            return default
        return entry.value

    def put(self, key: Any, value: Any) -> Any:
        i = self.index(key)
        if _debug_trace_table:
            printf("put    {0} -> bucket {1:04d}\n", repr(key), i)

        entry = self._find_entry(key)
        if entry is not None:
            return entry.set_value(value)

        chain = self.buckets[i]
        if chain is None:
            chain = self.buckets[i] = []
        chain.append(Entry(key, value))
        self.num_keys += 1

        if self.num_keys > self.capacity * LOAD_THRESHOLD:
            self._rehash()
        return NotFound()

    def remove(self, key: Any) -> Any:
        i = self.index(key)
        chain = self.buckets[i]
        if chain is None:
            return NotFound()

        for position, entry in enumerate(chain):
            if objects_equal(key, entry.key):
                del chain[position]
                self.num_keys -= 1
                if _debug_trace_table:
                    printf("remove {0} <- bucket {1:04d}\n", repr(key), i)
                return entry.value
        return NotFound()

    def put_all(self, other: Mapping) -> None:
        raise UnsupportedOperation("put_all() is not supported")

    def update(self, *args: Any, **kwargs: Any) -> None:
        raise UnsupportedOperation("update() is not supported")

    def clear(self) -> None:
        self.buckets = [None] * self.capacity
        self.num_keys = 0

    def key_set(self) -> set[Any]:
        # detached from the table
        keys = set()
        for chain in self.buckets:
            if chain is None:
                continue
            for entry in chain:
                keys.add(entry.key)
        return keys

    def keys(self) -> set[Any]:  # type: ignore[override]
        return self.key_set()

    def values(self):
        raise UnsupportedOperation("values() is not supported")

    def entry_set(self) -> EntrySet:
        return EntrySet(self)

    def items(self) -> EntrySet:  # type: ignore[override]
        return self.entry_set()

    def hash_code(self) -> int:
        return sum(entry.hash_code() for entry in self.entry_set())

    # mutable, so not usable as a dict key; see hash_code()
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.entry_set() == ItemsView(other)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: Any) -> Any:
        entry = self._find_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: Any) -> None:
        if isinstance(self.remove(key), NotFound):
            raise KeyError(key)

    def __iter__(self) -> Iterator[Any]:
        for entry in self.entry_set():
            yield entry.key

    def __str__(self) -> str:
        return " ".join(str(entry) for entry in self.entry_set())

    def __repr__(self) -> str:
        return f"HashTableChain({self})"

    def _find_entry(self, key: Any) -> Entry | None:
        chain = self.buckets[self.index(key)]
        if chain is None:
            return None

        for entry in chain:
            if objects_equal(key, entry.key):
                return entry
        return None

    def _rehash(self):
        old_buckets = self.buckets
        capacity = 2 * len(old_buckets) + 1
        if _debug_trace_table:
            printf("rehash {0:d} -> {1:d}\n", len(old_buckets), capacity)

        self.buckets = [None] * capacity
        for chain in old_buckets:
            if chain is None:
                continue
            for entry in chain:
                i = self.index(entry.key)
                new_chain = self.buckets[i]
                if new_chain is None:
                    new_chain = self.buckets[i] = []
                new_chain.append(entry)

        if _debug_trace_table:
            for i in range(capacity):
                print_bucket(self, i)
