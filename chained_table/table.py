# ==================================================
# chained_table/table.py
# ==================================================
import logging
from typing import Any, Iterator, Tuple

from .comparer import DEFAULT_COMPARER, KeyComparer
from .const    import EMPTY, HASH_MASK, TRACE_STATE
from .errors   import NullKeyError
from .primes   import initial_capacity, next_capacity
from .store    import ChainStore

logger = logging.getLogger(__name__)


class _Missing:
    """Absence marker returned by ``Table.get``; falsy, one instance only."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "<missing>"


MISSING = _Missing()


class Table:
    """Append-only hash map: separate chaining over a flat slot array, prime capacities.

    Keys are never deduplicated. ``add`` of an existing key shadows the older
    slot, so ``get`` always answers with the most recent value.
    """
    def __init__(self, comparer: KeyComparer = DEFAULT_COMPARER):
        self.comparer = comparer
        self._store   = ChainStore(initial_capacity())
        self._trace("Initialized")

    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return self._store.capacity

    @property
    def count(self) -> int:
        return self._store.count

    def __len__(self) -> int:
        return self._store.count

    def __repr__(self):
        return f"Table(count={self.count}, capacity={self.capacity})"

    # ------------------------------------------------------------------
    def _hash(self, key, operation: str) -> int:
        if key is None:
            raise NullKeyError(operation)
        return self.comparer.hash(key) & HASH_MASK

    def _trace(self, preface: str):
        if TRACE_STATE and logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s", self.describe(preface))

    def _grow(self):
        old = self._store.capacity
        new = next_capacity(old)
        self._store.rebuild(new)
        logger.info("table grew %d → %d (%d slots relinked)", old, new, self._store.count)
        self._trace("Resize")

    # ------------------------------------------------------------------
    def add(self, key, value) -> None:
        key_hash = self._hash(key, "add")
        if self._store.count == self._store.capacity:
            self._grow()
        index = self._store.insert(key_hash, key, value)
        self._trace(f"Add: {key!r} - {value!r}. hash = {key_hash}, slot = {index}")

    def _find(self, key, operation: str) -> int:
        key_hash = self._hash(key, operation)
        return self._store.lookup(key_hash, key, self.comparer.equals)

    def find_slot(self, key) -> int:
        """Slot index of the newest entry for ``key``; -1 when absent."""
        return self._find(key, "find_slot")

    def get(self, key, default: Any = MISSING) -> Any:
        index = self._find(key, "get")
        if index == EMPTY:
            return default
        return self._store.slots.values[index]

    def __contains__(self, key) -> bool:
        return self._find(key, "contains") != EMPTY

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Every stored pair in insertion slot order, shadowed duplicates included."""
        slots = self._store.slots
        for index in range(self._store.count):
            yield slots.keys[index], slots.values[index]

    # ------------------------------------------------------------------
    def chain(self, bucket: int):
        return self._store.chain(bucket)

    def slot(self, index: int):
        return self._store.slot(index)

    def describe(self, preface: str = "Table") -> str:
        return self._store.describe(preface)
