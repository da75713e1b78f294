"""
Benchmark Framework.

Provides the scenario engine for:
- Bulk insert and ordered full-table query
- Three-level join query
- Repeated small reads
- Large-row reads
- Concurrent reads from independent connections
"""

from sqlbench.benchmark.report import Reporter, ScenarioResult
from sqlbench.benchmark.runner import (
    BenchmarkRunner,
    BenchmarkScenario,
    HarnessConfig,
)
from sqlbench.benchmark.scenarios import (
    ComplexScenario,
    ConcurrentScenario,
    LargeScenario,
    ManyScenario,
    SimpleScenario,
)
from sqlbench.benchmark.suite import build_scenarios, run_benchmarks

__all__ = [
    "BenchmarkRunner",
    "BenchmarkScenario",
    "HarnessConfig",
    "Reporter",
    "ScenarioResult",
    "SimpleScenario",
    "ComplexScenario",
    "ManyScenario",
    "LargeScenario",
    "ConcurrentScenario",
    "build_scenarios",
    "run_benchmarks",
]
