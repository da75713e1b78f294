"""
Integration Tests for the benchmark scenarios.

Runs every scenario end to end, at reduced size, against each bundled
backend on a temporary database file.
"""

import pytest

from sqlbench.benchmark.concurrency import fan_out_reads
from sqlbench.benchmark.generator import generate_concurrent_users
from sqlbench.benchmark.runner import BenchmarkRunner, HarnessConfig
from sqlbench.benchmark.scenarios import (
    ComplexScenario,
    ConcurrentScenario,
    LargeScenario,
    ManyScenario,
    SimpleScenario,
)
from sqlbench.benchmark.suite import run_benchmarks
from sqlbench.benchmark.validation import validate_users
from sqlbench.errors import BenchmarkAssertionError
from sqlbench.storage.base import init_schema
from sqlbench.storage.files import db_size
from sqlbench.storage.schema import INSERT_USER_SQL, SELECT_USERS_SQL


class TestScenarios:
    """Test cases for each scenario on a real backend."""

    @pytest.mark.asyncio
    async def test_simple(self, harness_config: HarnessConfig) -> None:
        result = await BenchmarkRunner(harness_config).run_scenario(SimpleScenario(500))

        assert result.label == "simple"
        assert result.insert_millis is not None and result.insert_millis >= 0
        assert result.query_millis >= 0
        assert result.db_size == db_size(harness_config.dbfile) > 0

    @pytest.mark.asyncio
    async def test_complex(self, harness_config: HarnessConfig) -> None:
        result = await BenchmarkRunner(harness_config).run_scenario(ComplexScenario(4, 5, 3))

        assert result.label == "complex/4/5/3"
        assert result.insert_millis is not None

    @pytest.mark.asyncio
    async def test_many_ten_users(self, harness_config: HarnessConfig) -> None:
        """Test the ten-user repeated read leaves users 1..10 in place."""
        result = await BenchmarkRunner(harness_config).run_scenario(ManyScenario(10, repeats=1_000))

        assert result.label == "many/N=10"
        assert result.insert_millis is None

        db = harness_config.make_db(harness_config.dbfile)
        try:
            users = db.find_users(SELECT_USERS_SQL)
        finally:
            db.close()
        assert len(users) == 10
        assert users[0].id == 1
        assert users[9].id == 10
        assert [u.email for u in users] == [f"user{i:08d}@example.com" for i in range(1, 11)]

    @pytest.mark.asyncio
    async def test_many_users_crossing_year_end(self, harness_config: HarnessConfig) -> None:
        """Test users generated past 2023 still validate."""
        result = await BenchmarkRunner(harness_config).run_scenario(
            ManyScenario(140_000, repeats=1)
        )

        assert result.label == "many/N=140000"

        db = harness_config.make_db(harness_config.dbfile)
        try:
            users = db.find_users(SELECT_USERS_SQL)
        finally:
            db.close()
        assert users[0].created.year == 2023
        assert users[-1].created.year == 2024

    @pytest.mark.asyncio
    @pytest.mark.parametrize("nsize", [500, 1_000, 4_000])
    async def test_large_sizes(self, harness_config: HarnessConfig, nsize: int) -> None:
        """Test payload size changes footprint, not correctness."""
        result = await BenchmarkRunner(harness_config).run_scenario(LargeScenario(nsize, nusers=20))

        assert result.label == f"large/N={nsize}"
        assert result.db_size > 20 * nsize

    @pytest.mark.asyncio
    @pytest.mark.parametrize("nreaders", [2, 4, 8])
    async def test_concurrent(self, harness_config: HarnessConfig, nreaders: int) -> None:
        result = await BenchmarkRunner(harness_config).run_scenario(
            ConcurrentScenario(nreaders, nusers=300)
        )

        assert result.label == f"concurrent/N={nreaders}"
        assert result.insert_millis is None

    @pytest.mark.asyncio
    async def test_rerun_is_idempotent(self, harness_config: HarnessConfig) -> None:
        """Test a fresh reset makes repeated runs identical in outcome."""
        runner = BenchmarkRunner(harness_config)
        first = await runner.run_scenario(ComplexScenario(3, 2, 2))
        second = await runner.run_scenario(ComplexScenario(3, 2, 2))

        assert first.label == second.label
        assert first.db_size == second.db_size

    @pytest.mark.asyncio
    async def test_full_suite(self, harness_config: HarnessConfig) -> None:
        """Test every enabled scenario runs and reports two lines."""
        results = await run_benchmarks(harness_config)

        # simple, complex, 2 many, 2 large, 2 concurrent
        assert len(results) == 8
        lines = harness_config.stream.getvalue().splitlines()
        assert len(lines) == 1 + 2 * len(results)
        assert all(line.startswith("sqlbench-test    - ") for line in lines)


class TestFanOutReads:
    """Test cases for the concurrent read harness."""

    @pytest.fixture
    def seeded(self, make_db, dbfile: str) -> str:
        db = make_db(dbfile)
        try:
            init_schema(db)
            db.insert_users(INSERT_USER_SQL, generate_concurrent_users(200))
        finally:
            db.close()
        return dbfile

    @pytest.mark.asyncio
    async def test_every_reader_sees_all_rows(self, make_db, seeded: str) -> None:
        seen: list[int] = []

        def validate(users):
            validate_users(users, 200, "user")
            seen.append(len(users))

        millis, counts = await fan_out_reads(make_db, seeded, 4, SELECT_USERS_SQL, validate)

        assert counts == [200, 200, 200, 200]
        assert seen == [200] * 4
        assert millis >= 0

    @pytest.mark.asyncio
    async def test_reader_failure_propagates(self, make_db, seeded: str) -> None:
        """Test a validation failure in one reader aborts the fan-out."""
        with pytest.raises(BenchmarkAssertionError, match="user count"):
            await fan_out_reads(
                make_db,
                seeded,
                3,
                SELECT_USERS_SQL,
                lambda users: validate_users(users, 201, "user"),
            )

    @pytest.mark.asyncio
    async def test_rejects_zero_readers(self, make_db, seeded: str) -> None:
        with pytest.raises(ValueError):
            await fan_out_reads(make_db, seeded, 0, SELECT_USERS_SQL, lambda users: None)
