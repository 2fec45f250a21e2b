from dataclasses import dataclass
from typing import Generic, TypeVar

from .shared import printf_err


K = TypeVar("K")
V = TypeVar("V")


INITIAL_CAPACITY = 16
LOAD_FACTOR = 0.75


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass
class Entry(Generic[K, V]):
    key: K | None
    value: V
    next: "Entry[K, V] | None"


def bucket_index_of(key: object, capacity: int) -> int:
    # None always lives in bucket 0
    if key is None:
        return 0

    # unsigned 32-bit word, so >> is a logical shift
    h = hash(key) & 0xFFFFFFFF
    h ^= h >> 16
    return h & (capacity - 1)


def keys_equal(a: object, b: object) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return a == b


@dataclass(eq=False)
class HashTable(Generic[K, V]):
    """Separate-chaining hash table; missing keys give back NotFound()."""

    buckets: list[Entry[K, V] | None]
    count: int

    def __init__(self) -> None:
        self.buckets = [None] * INITIAL_CAPACITY
        self.count = 0

    def put(self, key: K | None, value: V) -> None:
        if self.count >= len(self.buckets) * LOAD_FACTOR:
            self._resize()

        index = bucket_index_of(key, len(self.buckets))

        entry = self.buckets[index]
        while entry is not None:
            if keys_equal(key, entry.key):
                entry.value = value
                return
            entry = entry.next

        self.buckets[index] = Entry(key, value, self.buckets[index])
        self.count += 1

    def get(self, key: K | None) -> V | NotFound:
        entry = self.buckets[bucket_index_of(key, len(self.buckets))]
        while entry is not None:
            if keys_equal(key, entry.key):
                return entry.value
            entry = entry.next

        return NotFound()

    def remove(self, key: K | None) -> V | NotFound:
        index = bucket_index_of(key, len(self.buckets))

        previous: Entry[K, V] | None = None
        entry = self.buckets[index]
        while entry is not None:
            if keys_equal(key, entry.key):
                if previous is None:
                    self.buckets[index] = entry.next
                else:
                    previous.next = entry.next
                self.count -= 1
                return entry.value

            previous = entry
            entry = entry.next

        return NotFound()

    def contains_key(self, key: K | None) -> bool:
        # a key stored with a NotFound() value reads as absent
        return not isinstance(self.get(key), NotFound)

    def size(self) -> int:
        return self.count

    def is_empty(self) -> bool:
        return self.count == 0

    def clear(self) -> None:
        for i in range(len(self.buckets)):
            self.buckets[i] = None
        self.count = 0

    def capacity(self) -> int:
        return len(self.buckets)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def _resize(self):
        old_buckets = self.buckets
        capacity = len(old_buckets) * 2
        new_buckets: list[Entry[K, V] | None] = [None] * capacity

        # relink the existing entries; no copies and no key comparisons
        for head in old_buckets:
            entry = head
            while entry is not None:
                next_entry = entry.next
                index = bucket_index_of(entry.key, capacity)
                entry.next = new_buckets[index]
                new_buckets[index] = entry
                entry = next_entry

        self.buckets = new_buckets

        if _debug_trace_resize:
            printf_err(
                "resize {0:d} -> {1:d} ({2:d} entries)\n",
                len(old_buckets),
                capacity,
                self.count,
            )
