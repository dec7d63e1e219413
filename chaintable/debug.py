from typing import TYPE_CHECKING

from .shared import printf

if TYPE_CHECKING:
    from .table import HashTableChain


def dump_table(table: "HashTableChain", name: str):
    printf("== {0:s} ==\n", name)

    for index in range(len(table.buckets)):
        print_bucket(table, index)


def print_bucket(table: "HashTableChain", index: int) -> int:
    chain = table.buckets[index]
    if not chain:
        return 0

    printf("{0:04d} ", index)
    printf("{0:s}\n", " -> ".join(str(entry) for entry in chain))
    return len(chain)
