"""
Benchmark Suite.

Expands settings into the ordered list of scenario runs and executes them.
"""

from sqlbench.benchmark.report import ScenarioResult
from sqlbench.benchmark.runner import BenchmarkRunner, BenchmarkScenario, HarnessConfig
from sqlbench.benchmark.scenarios import (
    ComplexScenario,
    ConcurrentScenario,
    LargeScenario,
    ManyScenario,
    SimpleScenario,
)
from sqlbench.config.settings import SCENARIO_NAMES, BenchSettings


def build_scenarios(settings: BenchSettings) -> list[BenchmarkScenario]:
    """
    Build the enabled scenarios in their fixed order.

    The order is always simple, complex, many, large, concurrent, no matter
    how the enabled set was listed.
    """
    enabled = set(settings.scenarios)
    scenarios: list[BenchmarkScenario] = []
    for name in SCENARIO_NAMES:
        if name not in enabled:
            continue
        if name == "simple":
            scenarios.append(SimpleScenario(settings.simple_users))
        elif name == "complex":
            scenarios.append(
                ComplexScenario(
                    settings.complex_users,
                    settings.complex_articles_per_user,
                    settings.complex_comments_per_article,
                )
            )
        elif name == "many":
            scenarios.extend(
                ManyScenario(nusers, settings.many_query_repeats) for nusers in settings.many_users
            )
        elif name == "large":
            scenarios.extend(
                LargeScenario(nsize, settings.large_users) for nsize in settings.large_sizes
            )
        elif name == "concurrent":
            scenarios.extend(
                ConcurrentScenario(nreaders, settings.concurrent_users)
                for nreaders in settings.concurrent_readers
            )
    return scenarios


async def run_benchmarks(config: HarnessConfig) -> list[ScenarioResult]:
    """Run every enabled scenario against the configured backend."""
    runner = BenchmarkRunner(config)
    return await runner.run_all(build_scenarios(config.settings))
