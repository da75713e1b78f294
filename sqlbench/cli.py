"""
Command line entry point.

Usage: ``sqlbench [--backend NAME] [--scenario NAME ...] [--verbose] DBFILE``
"""

import argparse
import asyncio
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

from sqlbench.benchmark.runner import HarnessConfig
from sqlbench.benchmark.suite import run_benchmarks
from sqlbench.config.settings import SCENARIO_NAMES, BenchSettings, get_settings
from sqlbench.errors import BenchmarkAssertionError, BenchmarkError, ConfigurationError
from sqlbench.observability.logging import configure_logging
from sqlbench.storage.registry import BACKENDS, get_backend

logger = structlog.get_logger("sqlbench.cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sqlbench",
        description="Benchmark a relational storage backend on a fixed set of workloads",
    )
    parser.add_argument("dbfile", help="Storage file the benchmarks create and delete")
    parser.add_argument(
        "--backend",
        choices=sorted(BACKENDS),
        default=None,
        help="Storage backend (default: SQLBENCH_BACKEND or sqlite3)",
    )
    parser.add_argument(
        "--scenario",
        action="append",
        choices=SCENARIO_NAMES,
        dest="scenarios",
        help="Run only this scenario; repeat to select several (default: all)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-phase timings and connection events",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: SQLBENCH_LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace, settings: BenchSettings, program: str) -> HarnessConfig:
    """Merge command line arguments over settings into the run configuration."""
    if not args.dbfile:
        raise ConfigurationError("dbfile empty, cannot bench")

    overrides = {}
    if args.backend:
        overrides["backend"] = args.backend
    if args.scenarios:
        overrides["scenarios"] = args.scenarios
    if args.log_level:
        overrides["log_level"] = args.log_level
    elif args.verbose:
        overrides["log_level"] = "DEBUG"
    if overrides:
        settings = settings.model_copy(update=overrides)

    return HarnessConfig(
        dbfile=args.dbfile,
        make_db=get_backend(settings.backend),
        settings=settings,
        program=program,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    program = Path(sys.argv[0]).name or "sqlbench"
    if program == "__main__.py":
        program = "sqlbench"

    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging(program=program)
        logger.error("Invalid settings", error=str(e))
        return 1

    configure_logging(
        level=args.log_level or ("DEBUG" if args.verbose else settings.log_level),
        format=settings.log_format,
        program=program,
    )

    try:
        config = build_config(args, settings, program)
        logger.debug("Benchmark target", dbfile=config.dbfile, backend=config.settings.backend)
        asyncio.run(run_benchmarks(config))
    except BenchmarkAssertionError as e:
        logger.error("Validation failed", error=str(e), expected=e.expected, actual=e.actual)
        return 1
    except BenchmarkError as e:
        logger.error("Benchmark aborted", error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
