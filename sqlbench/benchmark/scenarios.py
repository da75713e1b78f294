"""
Benchmark Scenarios.

The five fixed workloads:
- simple: bulk insert of many users, one ordered query
- complex: three-level hierarchy, one big join query
- many: small user sets queried repeatedly
- large: few rows with very large payloads
- concurrent: one seeded table read by N parallel connections
"""

import time
from datetime import timedelta
from functools import partial

import structlog

from sqlbench.benchmark.concurrency import fan_out_reads
from sqlbench.benchmark.generator import (
    complex_created_years,
    created_years,
    generate_complex,
    generate_concurrent_users,
    generate_large_users,
    generate_many_users,
    generate_simple_users,
)
from sqlbench.benchmark.report import ScenarioResult
from sqlbench.benchmark.runner import BenchmarkScenario, millis_since
from sqlbench.benchmark.validation import must_be_equal, validate_complex, validate_users
from sqlbench.storage.files import db_size
from sqlbench.storage.schema import (
    INSERT_ARTICLE_SQL,
    INSERT_COMMENT_SQL,
    INSERT_USER_SQL,
    SELECT_USERS_ARTICLES_COMMENTS_SQL,
    SELECT_USERS_SQL,
)

logger = structlog.get_logger(__name__)


class SimpleScenario(BenchmarkScenario):
    """
    Insert users in one transaction, then query all of them once.

    Users are one minute apart, so the default million of them span into
    2025.
    """

    name = "simple"
    description = "Bulk insert users, query all users once"

    def __init__(self, nusers: int = 1_000_000):
        super().__init__()
        self.nusers = nusers

    async def execute(self) -> ScenarioResult:
        users = generate_simple_users(self.nusers)

        t0 = time.perf_counter()
        self.db.insert_users(INSERT_USER_SQL, users)
        insert_millis = millis_since(t0)
        logger.debug("Insert finished", millis=insert_millis, rows=len(users))

        t0 = time.perf_counter()
        users = self.db.find_users(SELECT_USERS_SQL)
        must_be_equal(self.nusers, len(users), "user count")
        query_millis = millis_since(t0)
        logger.debug("Query finished", millis=query_millis, rows=len(users))

        min_year, max_year = created_years(self.nusers, timedelta(minutes=1))
        validate_users(users, self.nusers, "user0", min_year=min_year, max_year=max_year)

        return ScenarioResult(
            label=self.label,
            insert_millis=insert_millis,
            query_millis=query_millis,
            db_size=db_size(self.config.dbfile),
        )


class ComplexScenario(BenchmarkScenario):
    """
    Insert a user -> article -> comment hierarchy and read it back in one join.

    The three batch inserts are timed together. The join returns one row per
    comment and is flattened back into three sequences by the backend.
    """

    name = "complex"
    description = "Insert users, articles and comments, query them in one join"

    def __init__(
        self,
        nusers: int = 200,
        narticles_per_user: int = 100,
        ncomments_per_article: int = 20,
    ):
        super().__init__()
        self.nusers = nusers
        self.narticles_per_user = narticles_per_user
        self.ncomments_per_article = ncomments_per_article

    @property
    def label(self) -> str:
        return f"complex/{self.nusers}/{self.narticles_per_user}/{self.ncomments_per_article}"

    async def execute(self) -> ScenarioResult:
        dataset = generate_complex(
            self.nusers,
            self.narticles_per_user,
            self.ncomments_per_article,
        )

        t0 = time.perf_counter()
        self.db.insert_users(INSERT_USER_SQL, dataset.users)
        self.db.insert_articles(INSERT_ARTICLE_SQL, dataset.articles)
        self.db.insert_comments(INSERT_COMMENT_SQL, dataset.comments)
        insert_millis = millis_since(t0)
        logger.debug(
            "Insert finished",
            millis=insert_millis,
            users=len(dataset.users),
            articles=len(dataset.articles),
            comments=len(dataset.comments),
        )

        t0 = time.perf_counter()
        users, articles, comments = self.db.find_users_articles_comments(
            SELECT_USERS_ARTICLES_COMMENTS_SQL
        )
        query_millis = millis_since(t0)
        logger.debug("Query finished", millis=query_millis, rows=len(comments))

        min_year, max_year = complex_created_years(
            self.nusers,
            self.narticles_per_user,
            self.ncomments_per_article,
        )
        validate_complex(
            users,
            articles,
            comments,
            self.nusers,
            self.narticles_per_user,
            self.ncomments_per_article,
            min_year=min_year,
            max_year=max_year,
        )

        return ScenarioResult(
            label=self.label,
            insert_millis=insert_millis,
            query_millis=query_millis,
            db_size=db_size(self.config.dbfile),
        )


class ManyScenario(BenchmarkScenario):
    """
    Insert a small user set, then query all users many times.

    Stresses read throughput rather than volume. Only the query phase is
    reported.
    """

    name = "many"
    description = "Query a small users table repeatedly"

    def __init__(self, nusers: int, repeats: int = 1_000):
        super().__init__()
        self.nusers = nusers
        self.repeats = repeats

    @property
    def label(self) -> str:
        return f"many/N={self.nusers}"

    async def execute(self) -> ScenarioResult:
        users = generate_many_users(self.nusers)

        t0 = time.perf_counter()
        self.db.insert_users(INSERT_USER_SQL, users)
        logger.debug("Insert finished", millis=millis_since(t0), rows=len(users))

        t0 = time.perf_counter()
        for _ in range(self.repeats):
            users = self.db.find_users(SELECT_USERS_SQL)
            must_be_equal(self.nusers, len(users), "user count")
        query_millis = millis_since(t0)
        logger.debug("Query finished", millis=query_millis, repeats=self.repeats)

        min_year, max_year = created_years(self.nusers, timedelta(minutes=1))
        validate_users(users, self.nusers, "user0", min_year=min_year, max_year=max_year)

        return ScenarioResult(
            label=self.label,
            query_millis=query_millis,
            db_size=db_size(self.config.dbfile),
        )


class LargeScenario(BenchmarkScenario):
    """
    Insert users whose email holds ``nsize`` filler bytes, then query them.

    Stresses large-row and page I/O. The insert is not timed.
    """

    name = "large"
    description = "Query rows with large payloads"

    def __init__(self, nsize: int, nusers: int = 10_000):
        super().__init__()
        self.nsize = nsize
        self.nusers = nusers

    @property
    def label(self) -> str:
        return f"large/N={self.nsize}"

    async def execute(self) -> ScenarioResult:
        users = generate_large_users(self.nsize, self.nusers)
        self.db.insert_users(INSERT_USER_SQL, users)

        t0 = time.perf_counter()
        users = self.db.find_users(SELECT_USERS_SQL)
        must_be_equal(self.nusers, len(users), "user count")
        query_millis = millis_since(t0)
        logger.debug("Query finished", millis=query_millis, rows=len(users))

        min_year, max_year = created_years(self.nusers, timedelta(seconds=1))
        validate_users(users, self.nusers, "a", min_year=min_year, max_year=max_year)
        for user in users:
            must_be_equal(self.nsize, len(user.email), "email size")

        return ScenarioResult(
            label=self.label,
            query_millis=query_millis,
            db_size=db_size(self.config.dbfile),
        )


class ConcurrentScenario(BenchmarkScenario):
    """
    Seed one users table, then read it from N connections at once.

    The seed connection is closed before any reader opens its own, so reads
    never overlap the write phase.
    """

    name = "concurrent"
    description = "Read one users table from parallel connections"

    def __init__(self, nreaders: int, nusers: int = 1_000_000):
        super().__init__()
        self.nreaders = nreaders
        self.nusers = nusers

    @property
    def label(self) -> str:
        return f"concurrent/N={self.nreaders}"

    async def execute(self) -> ScenarioResult:
        users = generate_concurrent_users(self.nusers)
        self.db.insert_users(INSERT_USER_SQL, users)
        del users
        # Seed phase ends here
        self.db.close()
        self.db = None

        min_year, max_year = created_years(self.nusers, timedelta(seconds=1))
        query_millis, counts = await fan_out_reads(
            self.config.make_db,
            self.config.dbfile,
            self.nreaders,
            SELECT_USERS_SQL,
            partial(
                validate_users,
                expected_count=self.nusers,
                email_prefix="user",
                min_year=min_year,
                max_year=max_year,
            ),
            self.config.busy_timeout_ms,
        )
        must_be_equal(self.nreaders, len(counts), "reader count")
        logger.debug("Readers finished", millis=query_millis, rows=counts)

        return ScenarioResult(
            label=self.label,
            query_millis=query_millis,
            db_size=db_size(self.config.dbfile),
        )
