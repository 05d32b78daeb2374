"""Unit tests for the slot store / bucket index pair."""

import operator

import pytest

from chained_table.const import EMPTY
from chained_table.errors import TableError
from chained_table.store import ChainStore


class TestInsert:
    def test_empty_store(self) -> None:
        store = ChainStore(3)
        assert store.capacity == 3
        assert len(store.slots) == 3
        assert store.count == 0
        assert [store.buckets.head(b) for b in range(3)] == [EMPTY] * 3

    def test_insert_prepends_to_bucket(self) -> None:
        store = ChainStore(3)
        assert store.insert(4, "a", 1) == 0
        assert store.insert(7, "b", 2) == 1     # same bucket as hash 4
        assert store.buckets.head(1) == 1
        assert store.chain(1) == [1, 0]
        assert store.slot(1).next == 0
        assert store.slot(0).next == EMPTY

    def test_insert_into_full_store_raises(self) -> None:
        store = ChainStore(3)
        for i in range(3):
            store.insert(i, i, i)
        with pytest.raises(TableError, match="full"):
            store.insert(3, 3, 3)


class TestRebuild:
    def test_rebuild_keeps_slots_and_relinks(self) -> None:
        store = ChainStore(3)
        for i, h in enumerate([5, 12, 19]):
            store.insert(h, f"k{i}", i)

        store.rebuild(7)

        assert store.capacity == 7
        assert len(store.slots) == store.capacity
        assert store.count == 3
        # 5, 12 and 19 all land in bucket 5 of 7; newest slot heads the chain
        assert store.chain(5) == [2, 1, 0]
        assert [store.slot(i).key for i in range(3)] == ["k0", "k1", "k2"]
        assert [store.slot(i).hash for i in range(3)] == [5, 12, 19]

    def test_rebuild_splits_chains(self) -> None:
        store = ChainStore(3)
        store.insert(0, "x", 0)
        store.insert(3, "y", 1)
        assert store.chain(0) == [1, 0]

        store.rebuild(7)
        assert store.chain(0) == [0]
        assert store.chain(3) == [1]

    def test_rebuild_below_count_raises(self) -> None:
        store = ChainStore(3)
        store.insert(1, "a", 1)
        store.insert(2, "b", 2)
        with pytest.raises(TableError):
            store.rebuild(1)


class TestLookup:
    def test_lookup_requires_hash_and_key_match(self) -> None:
        store = ChainStore(7)
        store.insert(1, "a", 1)
        store.insert(8, "b", 2)
        assert store.lookup(1, "a", operator.eq) == 0
        assert store.lookup(8, "b", operator.eq) == 1
        assert store.lookup(8, "a", operator.eq) == EMPTY
        assert store.lookup(2, "zzz", operator.eq) == EMPTY

    def test_newest_duplicate_wins(self) -> None:
        store = ChainStore(7)
        store.insert(1, "a", "old")
        store.insert(1, "a", "new")
        assert store.lookup(1, "a", operator.eq) == 1

    def test_slot_outside_count_raises(self) -> None:
        store = ChainStore(3)
        with pytest.raises(IndexError):
            store.slot(0)


def test_describe_lists_every_slot() -> None:
    store = ChainStore(3)
    store.insert(4, "a", 1)
    text = store.describe("Add")
    assert text.startswith("Add, state:")
    assert "buckets: [-1, 0, -1]" in text
    assert " [0] = 'a' - 1 (hash = 4, next = -1)" in text
    assert " [2] = <free>" in text
    assert text.rstrip().endswith("count: 1")
