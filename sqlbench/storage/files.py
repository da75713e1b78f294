"""
Storage file helpers.

A database target is a file path plus the companion files a SQLite engine
may create next to it.
"""

from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

COMPANION_SUFFIXES = ("", "-journal", "-wal", "-shm")


def db_files(dbfile: str | Path) -> list[Path]:
    """All paths that belong to a database target, existing or not."""
    base = str(dbfile)
    return [Path(base + suffix) for suffix in COMPANION_SUFFIXES]


def remove_db_files(dbfile: str | Path) -> None:
    """Delete the database file and its companions so a scenario starts fresh."""
    for path in db_files(dbfile):
        if path.exists():
            path.unlink()
            logger.debug("Removed database file", path=str(path))


def db_size(dbfile: str | Path) -> int:
    """Total size in bytes of the database file and its companions."""
    return sum(path.stat().st_size for path in db_files(dbfile) if path.exists())
