"""
Backend registry.

Maps backend names accepted on the command line to connection factories.
"""

from sqlbench.errors import ConfigurationError
from sqlbench.storage.base import DbFactory
from sqlbench.storage.sqlalchemy_backend import make_sqlalchemy_db
from sqlbench.storage.sqlite_backend import make_sqlite_db

BACKENDS: dict[str, DbFactory] = {
    "sqlite3": make_sqlite_db,
    "sqlalchemy": make_sqlalchemy_db,
}


def get_backend(name: str) -> DbFactory:
    """Look up a backend factory by name."""
    try:
        return BACKENDS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"unknown backend {name!r}, expected one of: {', '.join(sorted(BACKENDS))}"
        ) from None
