# ==================================================
# chained_table/comparer.py
# ==================================================
from __future__ import annotations

import operator
from typing import Any, Callable, NamedTuple

import xxhash


class KeyComparer(NamedTuple):
    """Hash function + equality predicate the table is parameterised over."""
    hash:   Callable[[Any], int]
    equals: Callable[[Any, Any], bool]


def _stable_bytes(key: str | bytes) -> bytes:      # str → utf‑8
    if isinstance(key, bytes):
        return key
    if isinstance(key, str):
        return key.encode("utf-8")
    # mutable buffers are refused: a stored key must keep matching its hash
    raise TypeError(f"xxhash keys must be str or bytes, not {type(key).__name__}")


def xxhash_key(key: str | bytes) -> int:
    """32‑bit xxhash of the key; unlike ``hash(str)`` it is stable across processes."""
    return xxhash.xxh32_intdigest(_stable_bytes(key))


def xxhash_equals(stored: str | bytes, key: str | bytes) -> bool:
    """``"abc"`` and ``b"abc"`` name the same key, as they do for ``xxhash_key``."""
    return _stable_bytes(stored) == _stable_bytes(key)


DEFAULT_COMPARER = KeyComparer(hash, operator.eq)
XXHASH_COMPARER  = KeyComparer(xxhash_key, xxhash_equals)
