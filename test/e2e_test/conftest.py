"""Test configuration for PostgreSQL e2e tests.

Tests run against ``DATABASE__URL`` when it is set, otherwise against a
Testcontainers PostgreSQL started once per session. All e2e tests are skipped
unless ``DATABASE__ENABLE_POSTGRES_TESTS`` is true.
"""

from __future__ import annotations

from typing import Generator, Iterator

import pytest
from sqlalchemy import Connection, Engine

from pg_comment_probe.core.database import connect, create_engine


@pytest.fixture(scope="session")
def database_url(test_config) -> Iterator[str]:
    """Get the PostgreSQL URL, starting a container when none is configured."""
    database = test_config.database
    if not database.enable_postgres_tests:
        pytest.skip("PostgreSQL tests disabled (set DATABASE__ENABLE_POSTGRES_TESTS=true)")

    if database.url:
        yield database.url
        return

    from testcontainers.postgres import PostgresContainer

    container = PostgresContainer(database.postgres_image)
    container.start()
    try:
        yield container.get_connection_url()
    finally:
        container.stop()


@pytest.fixture(scope="session")
def postgres_engine(database_url: str) -> Generator[Engine, None, None]:
    """Create PostgreSQL engine for testing."""
    engine = create_engine(database_url)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def autocommit_connection(postgres_engine: Engine) -> Generator[Connection, None, None]:
    """Autocommit connection, as used by the demonstration driver by default."""
    with connect(postgres_engine) as conn:
        yield conn
