# chained_table/kv.py   – thin key/value helper around Table
from __future__ import annotations
from typing import Any

from .comparer import XXHASH_COMPARER
from .table    import MISSING, Table

_table = Table(XXHASH_COMPARER)          # stable xxhash keys, str or bytes

# ── public api ───────────────────────────────────────────────
def put(selector: str | bytes, value: Any):
    """Store `value` for `selector`; a later put for the same selector shadows it."""
    _table.add(selector, value)

def get(selector: str | bytes) -> Any | None:
    """Return the newest value stored for `selector`; None if absent."""
    value = _table.get(selector)
    return None if value is MISSING else value

def contains(selector: str | bytes) -> bool:
    return selector in _table

def table() -> Table:
    return _table

def reset():
    """Drop everything by starting over with an empty table."""
    global _table
    _table = Table(XXHASH_COMPARER)
