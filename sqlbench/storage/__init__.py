"""
Storage Module.

The storage contract, the fixed relational schema and the bundled backends.
"""

from sqlbench.storage.base import Db, DbFactory, init_schema
from sqlbench.storage.files import db_size, remove_db_files
from sqlbench.storage.flatten import JoinAccumulator
from sqlbench.storage.registry import BACKENDS, get_backend

__all__ = [
    "Db",
    "DbFactory",
    "init_schema",
    "db_size",
    "remove_db_files",
    "JoinAccumulator",
    "BACKENDS",
    "get_backend",
]
