"""
Error taxonomy.

Every error here is fatal for a benchmark run: the CLI reports it and
exits non-zero.
"""

from typing import Any


class BenchmarkError(Exception):
    """Base class for all harness errors."""


class ConfigurationError(BenchmarkError):
    """Raised for invalid run configuration (missing target, unknown backend)."""


class StorageSetupError(BenchmarkError):
    """Raised when a backend fails to execute setup, insert or query statements."""

    def __init__(self, message: str, statement: str | None = None):
        super().__init__(message)
        self.statement = statement


class BenchmarkAssertionError(BenchmarkError):
    """Raised when a query result does not match what the generator produced."""

    def __init__(
        self,
        message: str,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
