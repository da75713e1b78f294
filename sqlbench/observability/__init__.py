"""
Observability Module.

Structured logging for the benchmark harness.
"""

from sqlbench.observability.logging import (
    configure_logging,
    LogContext,
)

__all__ = [
    "configure_logging",
    "LogContext",
]
