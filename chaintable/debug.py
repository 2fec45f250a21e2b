from typing import Any

from .shared import printf
from .table import INITIAL_CAPACITY, Entry, HashTable, bucket_index_of, keys_equal


def dump_table(table: HashTable, name: str):
    printf("== {0:s} ==\n", name)
    printf("capacity {0:d}, size {1:d}\n", table.capacity(), table.size())

    for index, head in enumerate(table.buckets):
        if head is None:
            continue
        printf("{0:04d} ", index)
        dump_chain(head)
        printf("\n")


def dump_chain(head: Entry):
    entry: Entry | None = head
    while entry is not None:
        printf("{0!r}={1!r}", entry.key, entry.value)
        entry = entry.next
        if entry is not None:
            printf(" -> ")


def chain_lengths(table: HashTable) -> list[int]:
    lengths = []
    for head in table.buckets:
        n = 0
        entry = head
        while entry is not None:
            n += 1
            entry = entry.next
        lengths.append(n)
    return lengths


def check_table(table: HashTable):
    capacity = table.capacity()
    if capacity < INITIAL_CAPACITY or capacity & (capacity - 1) != 0:
        raise Exception("capacity is not a power of two >= 16", capacity)

    seen = 0
    for index, head in enumerate(table.buckets):
        keys: list[Any] = []
        entry = head
        while entry is not None:
            if bucket_index_of(entry.key, capacity) != index:
                raise Exception("entry in wrong bucket", entry.key, index)
            for key in keys:
                if keys_equal(key, entry.key):
                    raise Exception("duplicate key", entry.key)
            keys.append(entry.key)
            seen += 1
            entry = entry.next

    if seen != table.size():
        raise Exception("size does not match entry count", table.size(), seen)
