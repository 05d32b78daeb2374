# ==================================================
# chained_table/store.py
# ==================================================
import logging
from typing import Any, Callable, List, NamedTuple

import numpy as np

from .const  import EMPTY, INDEX_DTYPE
from .errors import TableError

logger = logging.getLogger(__name__)


class Slot(NamedTuple):
    hash:  int
    next:  int
    key:   Any
    value: Any


class SlotStore:
    """Fixed-capacity slot records kept column-wise: int32 hash/next, object key/value."""
    def __init__(self, capacity: int):
        self.hashes = np.zeros(capacity, dtype=INDEX_DTYPE)
        self.nexts  = np.full(capacity, EMPTY, dtype=INDEX_DTYPE)
        self.keys   = [None] * capacity
        self.values = [None] * capacity

    def __len__(self) -> int:
        return len(self.keys)

    def __getitem__(self, index: int) -> Slot:
        return Slot(int(self.hashes[index]), int(self.nexts[index]),
                    self.keys[index], self.values[index])

    def write(self, index: int, key_hash: int, next_index: int, key, value):
        self.hashes[index] = key_hash
        self.nexts[index]  = next_index
        self.keys[index]   = key
        self.values[index] = value

    def copy_into(self, other: "SlotStore", count: int):
        # links are not copied; the receiver relinks every slot itself
        other.hashes[:count] = self.hashes[:count]
        other.keys[:count]   = self.keys[:count]
        other.values[:count] = self.values[:count]


class BucketIndex:
    """Chain head per bucket; EMPTY marks a bucket with no slots."""
    def __init__(self, capacity: int):
        self.heads = np.full(capacity, EMPTY, dtype=INDEX_DTYPE)

    def __len__(self) -> int:
        return len(self.heads)

    def bucket_of(self, key_hash: int) -> int:
        return key_hash % len(self.heads)

    def head(self, bucket: int) -> int:
        return int(self.heads[bucket])


class ChainStore:
    """Slot store + bucket index, chained through each slot's ``next`` field.

    Slots are append-only and addressed by index; a bucket's head is always the
    most recently inserted slot that hashes to it.
    """
    def __init__(self, capacity: int):
        self.slots   = SlotStore(capacity)
        self.buckets = BucketIndex(capacity)
        self.count   = 0

    @property
    def capacity(self) -> int:
        return len(self.buckets)

    # ------------------------------------------------------------------
    def insert(self, key_hash: int, key, value) -> int:
        """Prepend a new slot to its bucket's chain; duplicates are not checked."""
        if self.count == self.capacity:
            raise TableError(f"slot store full ({self.count}/{self.capacity}); rebuild first")

        bucket = self.buckets.bucket_of(key_hash)
        index  = self.count
        self.slots.write(index, key_hash, self.buckets.head(bucket), key, value)
        self.buckets.heads[bucket] = index
        self.count += 1

        logger.debug("insert %r: hash=%d bucket=%d slot=%d", key, key_hash, bucket, index)
        return index

    # ------------------------------------------------------------------
    def rebuild(self, new_capacity: int):
        if new_capacity < self.count:
            raise TableError(f"cannot rebuild {self.count} slots into capacity {new_capacity}")

        buckets = BucketIndex(new_capacity)
        slots   = SlotStore(new_capacity)
        self.slots.copy_into(slots, self.count)

        # ascending + prepend: the newest slot of each bucket ends up as head again
        for index in range(self.count):
            bucket = buckets.bucket_of(int(slots.hashes[index]))
            slots.nexts[index]    = buckets.heads[bucket]
            buckets.heads[bucket] = index

        self.slots, self.buckets = slots, buckets
        logger.debug("rebuilt %d slots into capacity %d", self.count, new_capacity)

    # ------------------------------------------------------------------
    def lookup(self, key_hash: int, key, equals: Callable[[Any, Any], bool]) -> int:
        bucket = self.buckets.bucket_of(key_hash)
        index  = self.buckets.head(bucket)
        while index != EMPTY:
            if self.slots.hashes[index] == key_hash and equals(self.slots.keys[index], key):
                logger.debug("lookup %r: bucket=%d hit slot=%d", key, bucket, index)
                return index
            logger.debug("lookup %r: bucket=%d slot=%d differs, next=%d",
                         key, bucket, index, self.slots.nexts[index])
            index = int(self.slots.nexts[index])
        logger.debug("lookup %r: bucket=%d chain exhausted", key, bucket)
        return EMPTY

    def chain(self, bucket: int) -> List[int]:
        out   = []
        index = self.buckets.head(bucket)
        while index != EMPTY:
            out.append(index)
            index = int(self.slots.nexts[index])
        return out

    def slot(self, index: int) -> Slot:
        if not 0 <= index < self.count:
            raise IndexError(f"slot {index} is not occupied (count={self.count})")
        return self.slots[index]

    # ------------------------------------------------------------------
    def describe(self, preface: str) -> str:
        lines = [f"{preface}, state:", "",
                 f"buckets: [{', '.join(str(int(h)) for h in self.buckets.heads)}]",
                 "entries:"]
        for index in range(self.capacity):
            if index < self.count:
                s = self.slots[index]
                lines.append(f" [{index}] = {s.key!r} - {s.value!r} (hash = {s.hash}, next = {s.next})")
            else:
                lines.append(f" [{index}] = <free>")
        lines.append(f"count: {self.count}")
        return "\n".join(lines) + "\n"
