# ==================================================
# chained_table/errors.py
# ==================================================


class TableError(Exception):
    """Base class for container failures."""


class NullKeyError(TableError, ValueError):
    """Raised when a ``None`` key reaches hashing or comparison."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}: key must not be None")
        self.operation = operation


class CapacityOverflowWarning(RuntimeWarning):
    """Requested capacity lies beyond the prime table; the raw minimum is used unverified."""
