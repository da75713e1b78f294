"""
Benchmark Settings - Pydantic Settings for configuration management.

Supports environment variables (``SQLBENCH_`` prefix) and .env file loading.
The defaults reproduce the reference workload sizes.
"""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import BeforeValidator, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

SCENARIO_NAMES = ("simple", "complex", "many", "large", "concurrent")


def normalize_to_lowercase(v: str) -> str:
    """Normalize string to lowercase."""
    if isinstance(v, str):
        return v.lower()
    return v


class BenchSettings(BaseSettings):
    """Benchmark harness settings."""

    model_config = SettingsConfigDict(
        env_prefix="SQLBENCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend and output
    backend: Annotated[str, BeforeValidator(normalize_to_lowercase)] = Field(
        default="sqlite3", description="Storage backend name"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING", description="Logging level"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", description="Log format"
    )
    busy_timeout_ms: int = Field(default=5000, gt=0, description="Lock wait ceiling in milliseconds")

    # Which scenarios run, in fixed order
    scenarios: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(SCENARIO_NAMES),
        description="Enabled scenarios",
    )

    # simple
    simple_users: int = Field(default=1_000_000, gt=0, description="Users inserted by the simple scenario")

    # complex
    complex_users: int = Field(default=200, gt=0, description="Users in the complex hierarchy")
    complex_articles_per_user: int = Field(default=100, gt=0, description="Articles per user")
    complex_comments_per_article: int = Field(default=20, gt=0, description="Comments per article")

    # many
    many_users: list[int] = Field(default=[10, 100, 1_000], description="User counts for repeated reads")
    many_query_repeats: int = Field(default=1_000, gt=0, description="Query repetitions per many run")

    # large
    large_sizes: list[int] = Field(
        default=[50_000, 100_000, 200_000], description="Row payload sizes in bytes"
    )
    large_users: int = Field(default=10_000, gt=0, description="Rows inserted by the large scenario")

    # concurrent
    concurrent_readers: list[int] = Field(default=[2, 4, 8], description="Reader counts")
    concurrent_users: int = Field(default=1_000_000, gt=0, description="Rows read by each reader")

    @field_validator("scenarios", mode="before")
    @classmethod
    def split_scenarios(cls, v):
        if isinstance(v, str):
            v = [item.strip() for item in v.split(",") if item.strip()]
        return [normalize_to_lowercase(item) for item in v]

    @field_validator("scenarios")
    @classmethod
    def known_scenarios(cls, v: list[str]) -> list[str]:
        unknown = [item for item in v if item not in SCENARIO_NAMES]
        if unknown:
            raise ValueError(f"unknown scenarios: {', '.join(unknown)}")
        return v

    @field_validator("many_users", "large_sizes", "concurrent_readers")
    @classmethod
    def positive_sizes(cls, v: list[int]) -> list[int]:
        if not v or any(item <= 0 for item in v):
            raise ValueError("sizes must be a non-empty list of positive integers")
        return v


@lru_cache
def get_settings() -> BenchSettings:
    """Get cached settings instance."""
    return BenchSettings()
