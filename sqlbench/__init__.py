"""
SQL storage benchmark harness.

Runs a fixed set of workloads (bulk insert, ordered query, join query,
repeated small reads, large rows, concurrent reads) against any backend
that implements the storage contract in ``sqlbench.storage.base``.
"""

__version__ = "0.1.0"
