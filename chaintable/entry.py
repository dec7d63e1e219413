from dataclasses import dataclass
from typing import Any, Iterator

from .shared import hash_code, objects_equal


# the key is never reassigned, the table keeps the entry in the bucket of its key
@dataclass
class Entry:
    key: Any
    value: Any

    def set_value(self, value: Any) -> Any:
        old = self.value
        self.value = value
        return old

    def hash_code(self) -> int:
        return hash_code(self.key) ^ hash_code(self.value)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Entry):
            return NotImplemented
        return objects_equal(self.key, other.key) and objects_equal(
            self.value, other.value
        )

    # CPython turns -1 into -2 here, hash_code() keeps the plain xor
    def __hash__(self) -> int:
        return self.hash_code()

    # unpacks as a (key, value) pair
    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value

    def __str__(self) -> str:
        return f"{self.key}={self.value}"
