from .comparer import DEFAULT_COMPARER, XXHASH_COMPARER, KeyComparer
from .errors   import CapacityOverflowWarning, NullKeyError, TableError
from .primes   import initial_capacity, next_capacity, smallest_prime_at_least
from .table    import MISSING, Table

__all__ = [
    "Table", "MISSING",
    "KeyComparer", "DEFAULT_COMPARER", "XXHASH_COMPARER",
    "TableError", "NullKeyError", "CapacityOverflowWarning",
    "smallest_prime_at_least", "next_capacity", "initial_capacity",
]
