# ==================================================
# chained_table/primes.py
# ==================================================
"""Capacity policy: every capacity number the table uses is decided here."""
import logging
import warnings

from .const import PRIMES
from .errors import CapacityOverflowWarning

logger = logging.getLogger(__name__)


def smallest_prime_at_least(minimum: int) -> int:
    for prime in PRIMES:
        if prime >= minimum:
            return prime

    # beyond the table: hand back the request itself, primality not checked
    logger.warning("capacity %d exceeds prime table (max %d); using it unverified",
                   minimum, PRIMES[-1])
    warnings.warn(f"capacity {minimum} is beyond the prime table and may not be prime",
                  CapacityOverflowWarning, stacklevel=2)
    return minimum


def next_capacity(current: int) -> int:
    return smallest_prime_at_least(2 * current)


def initial_capacity() -> int:
    return smallest_prime_at_least(0)
