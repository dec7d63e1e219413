from dataclasses import dataclass
from typing import Any


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


@dataclass(frozen=True)
class NotFound:
    pass


def hash_code(obj: Any) -> int:
    if obj is None:
        return 0
    return hash(obj)


def objects_equal(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    return a == b
