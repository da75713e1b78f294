"""
Benchmark Runner.

Executes benchmark scenarios against one backend and reports their timings.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence, TextIO

import structlog

from sqlbench.benchmark.report import Reporter, ScenarioResult
from sqlbench.config.settings import BenchSettings
from sqlbench.observability.logging import LogContext
from sqlbench.storage.base import Db, DbFactory, init_schema
from sqlbench.storage.files import remove_db_files

logger = structlog.get_logger(__name__)


@dataclass
class HarnessConfig:
    """Everything a benchmark run needs, built once at startup."""

    dbfile: str
    make_db: DbFactory
    settings: BenchSettings = field(default_factory=BenchSettings)
    program: str = "sqlbench"
    stream: TextIO | None = None

    @property
    def busy_timeout_ms(self) -> int:
        return self.settings.busy_timeout_ms


def millis_since(t0: float) -> int:
    """Whole milliseconds elapsed since a ``time.perf_counter()`` reading."""
    return int((time.perf_counter() - t0) * 1000)


class BenchmarkScenario(ABC):
    """
    Base class for benchmark scenarios.

    ``setup`` gives every scenario a fresh storage file with the schema
    applied, ``teardown`` releases whatever connection is still open.
    """

    name: str = "scenario"
    description: str = ""

    def __init__(self) -> None:
        self.config: HarnessConfig | None = None
        self.db: Db | None = None

    @property
    def label(self) -> str:
        return self.name

    async def setup(self, config: HarnessConfig) -> None:
        """Reset storage, open a connection and apply the schema."""
        self.config = config
        remove_db_files(config.dbfile)
        self.db = config.make_db(config.dbfile)
        init_schema(self.db, config.busy_timeout_ms)

    @abstractmethod
    async def execute(self) -> ScenarioResult:
        """
        Generate data, time the insert and query phases and validate.

        Returns:
            Scenario timings and resulting storage size
        """
        pass

    async def teardown(self) -> None:
        """Close the scenario's connection if it is still open."""
        if self.db is not None:
            self.db.close()
            self.db = None


class BenchmarkRunner:
    """
    Runs benchmark scenarios in order and reports each result.

    There are no retries and no partial results: any exception raised by a
    scenario propagates after its connection is closed.
    """

    def __init__(self, config: HarnessConfig, reporter: Reporter | None = None):
        self.config = config
        self.reporter = reporter or Reporter(config.program, config.stream)
        self._results: list[ScenarioResult] = []

    async def run_scenario(self, scenario: BenchmarkScenario) -> ScenarioResult:
        """
        Run one scenario through setup, execute and teardown.

        Args:
            scenario: The scenario to run

        Returns:
            The reported scenario result
        """
        with LogContext(scenario=scenario.label):
            logger.info("Starting benchmark", description=scenario.description)
            try:
                await scenario.setup(self.config)
                result = await scenario.execute()
            finally:
                await scenario.teardown()
            logger.info(
                "Benchmark completed",
                insert_ms=result.insert_millis,
                query_ms=result.query_millis,
                db_size=result.db_size,
            )

        self._results.append(result)
        self.reporter.report(result)
        return result

    async def run_all(self, scenarios: Sequence[BenchmarkScenario]) -> list[ScenarioResult]:
        """Run scenarios sequentially, stopping at the first failure."""
        self.reporter.start()
        return [await self.run_scenario(scenario) for scenario in scenarios]

    def get_results(self) -> list[ScenarioResult]:
        """Get all results reported so far."""
        return list(self._results)
