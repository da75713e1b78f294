"""
Integration Tests for the command line entry point.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from sqlbench.cli import build_config, main, parse_args
from sqlbench.config.settings import BenchSettings, get_settings
from sqlbench.errors import BenchmarkAssertionError, ConfigurationError
from sqlbench.storage.registry import BACKENDS

SMALL_ENV = {
    "SQLBENCH_SIMPLE_USERS": "200",
    "SQLBENCH_COMPLEX_USERS": "2",
    "SQLBENCH_COMPLEX_ARTICLES_PER_USER": "3",
    "SQLBENCH_COMPLEX_COMMENTS_PER_ARTICLE": "2",
    "SQLBENCH_MANY_USERS": "[10]",
    "SQLBENCH_MANY_QUERY_REPEATS": "5",
    "SQLBENCH_LARGE_SIZES": "[100]",
    "SQLBENCH_LARGE_USERS": "10",
    "SQLBENCH_CONCURRENT_READERS": "[2]",
    "SQLBENCH_CONCURRENT_USERS": "100",
}


@pytest.fixture
def small_env():
    with patch.dict("os.environ", SMALL_ENV):
        get_settings.cache_clear()
        yield
    get_settings.cache_clear()


class TestBuildConfig:
    """Test cases for argument handling."""

    def test_empty_dbfile_is_fatal(self) -> None:
        with pytest.raises(ConfigurationError, match="dbfile empty"):
            build_config(parse_args([""]), BenchSettings(), "sqlbench")

    def test_overrides(self) -> None:
        args = parse_args(["x.db", "--backend", "sqlalchemy", "--scenario", "many", "--verbose"])
        config = build_config(args, BenchSettings(), "prog")

        assert config.make_db is BACKENDS["sqlalchemy"]
        assert config.settings.scenarios == ["many"]
        assert config.settings.log_level == "DEBUG"
        assert config.program == "prog"

    def test_missing_dbfile_exits(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])


class TestMain:
    """Test cases for the full process entry."""

    def test_empty_dbfile_exit_code(self) -> None:
        assert main([""]) == 1

    @pytest.mark.parametrize("backend", sorted(BACKENDS))
    def test_full_run(self, small_env, tmp_path: Path, capsys, backend: str) -> None:
        """Test a complete small run exits zero and prints every scenario."""
        code = main([str(tmp_path / "cli.db"), "--backend", backend])

        assert code == 0
        out = capsys.readouterr().out
        for label in ("simple", "complex/2/3/2", "many/N=10", "large/N=100", "concurrent/N=2"):
            assert label in out

    def test_validation_failure_exit_code(self, small_env, tmp_path: Path) -> None:
        """Test a correctness failure aborts with a non-zero exit."""
        with patch(
            "sqlbench.benchmark.scenarios.validate_users",
            side_effect=BenchmarkAssertionError("forced", expected=1, actual=0),
        ):
            code = main([str(tmp_path / "cli.db"), "--scenario", "simple"])

        assert code == 1
