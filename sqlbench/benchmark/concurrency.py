"""
Concurrent Read Harness.

Fans out N independent readers after the seed phase has finished and
released its connection. Each reader runs in its own worker thread with its
own connection and result copy. ``asyncio.gather`` is the barrier, so the
measured time runs from launch until the last reader completes.
"""

import asyncio
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

import structlog

from sqlbench.benchmark.runner import millis_since
from sqlbench.models import User
from sqlbench.storage.base import DbFactory
from sqlbench.storage.schema import DEFAULT_BUSY_TIMEOUT_MS, connection_statements

logger = structlog.get_logger(__name__)

UsersValidator = Callable[[list[User]], None]


def read_and_validate(
    make_db: DbFactory,
    dbfile: str,
    sql: str,
    validate: UsersValidator,
    busy_timeout_ms: int = DEFAULT_BUSY_TIMEOUT_MS,
    reader: int = 0,
) -> int:
    """
    One reader: open, query, validate, close.

    Returns:
        Number of rows the reader observed
    """
    db = make_db(dbfile)
    try:
        db.exec(*connection_statements(busy_timeout_ms))
        users = db.find_users(sql)
        validate(users)
    finally:
        db.close()
    logger.debug("Reader finished", reader=reader, rows=len(users))
    return len(users)


async def fan_out_reads(
    make_db: DbFactory,
    dbfile: str,
    nreaders: int,
    sql: str,
    validate: UsersValidator,
    busy_timeout_ms: int = DEFAULT_BUSY_TIMEOUT_MS,
) -> tuple[int, list[int]]:
    """
    Run ``nreaders`` readers in parallel and wait for all of them.

    Args:
        make_db: Backend factory, called once per reader
        dbfile: Shared storage file, already seeded
        nreaders: Number of parallel readers
        sql: Ordered full-table query every reader runs
        validate: Check applied by each reader to its own result
        busy_timeout_ms: Lock wait ceiling for each reader connection

    Returns:
        Tuple of (elapsed whole milliseconds, rows observed per reader)
    """
    if nreaders <= 0:
        raise ValueError("nreaders must be positive")

    logger.debug("Launching readers", count=nreaders)
    loop = asyncio.get_running_loop()
    # One thread per reader so all of them run at once
    with ThreadPoolExecutor(max_workers=nreaders, thread_name_prefix="reader") as executor:
        t0 = time.perf_counter()
        counts = await asyncio.gather(
            *(
                loop.run_in_executor(
                    executor,
                    read_and_validate,
                    make_db,
                    dbfile,
                    sql,
                    validate,
                    busy_timeout_ms,
                    reader,
                )
                for reader in range(nreaders)
            )
        )
        elapsed_millis = millis_since(t0)
    return elapsed_millis, list(counts)
