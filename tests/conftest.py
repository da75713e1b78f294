"""
Pytest Configuration and Shared Fixtures.

This module provides shared fixtures for testing the benchmark harness.
"""

import io
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from sqlbench.benchmark.runner import HarnessConfig
from sqlbench.config.settings import BenchSettings, get_settings
from sqlbench.storage.base import Db, DbFactory, init_schema
from sqlbench.storage.registry import BACKENDS


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Generator[BenchSettings, None, None]:
    """Provide settings loaded from a controlled environment."""
    with patch.dict(
        "os.environ",
        {
            "SQLBENCH_BACKEND": "sqlite3",
            "SQLBENCH_LOG_LEVEL": "DEBUG",
            "SQLBENCH_SCENARIOS": "simple,many",
        },
    ):
        # Clear cache and get fresh settings
        get_settings.cache_clear()
        yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def small_settings() -> BenchSettings:
    """Settings with every workload scaled down to run in milliseconds."""
    return BenchSettings(
        simple_users=500,
        complex_users=4,
        complex_articles_per_user=5,
        complex_comments_per_article=3,
        many_users=[10, 25],
        many_query_repeats=20,
        large_sizes=[500, 1_000],
        large_users=50,
        concurrent_readers=[2, 4],
        concurrent_users=300,
    )


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def dbfile(tmp_path: Path) -> str:
    """Path to a database file that does not exist yet."""
    return str(tmp_path / "bench.db")


@pytest.fixture(params=sorted(BACKENDS))
def backend_name(request: pytest.FixtureRequest) -> str:
    """Every bundled backend name."""
    return request.param


@pytest.fixture
def make_db(backend_name: str) -> DbFactory:
    """Factory of the backend under test."""
    return BACKENDS[backend_name]


@pytest.fixture
def db(make_db: DbFactory, dbfile: str) -> Generator[Db, None, None]:
    """Open connection with the schema applied."""
    connection = make_db(dbfile)
    init_schema(connection)
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture
def harness_config(
    make_db: DbFactory,
    dbfile: str,
    small_settings: BenchSettings,
) -> HarnessConfig:
    """Run configuration writing its report into a buffer."""
    return HarnessConfig(
        dbfile=dbfile,
        make_db=make_db,
        settings=small_settings,
        program="sqlbench-test",
        stream=io.StringIO(),
    )
