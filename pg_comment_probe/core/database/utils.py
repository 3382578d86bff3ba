"""
Database utility functions for engine and connection management.

The probe is fully synchronous: every helper here works with a plain
SQLAlchemy ``Engine`` backed by the psycopg 3 driver.

Functions:
- normalize_url: Rewrites Postgres URLs to the psycopg driver
- create_engine: Creates a SQLAlchemy engine from a normalized URL
- connect: Opens a connection in autocommit mode or inside one transaction
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Connection, Engine
from sqlalchemy import create_engine as sa_create_engine

from pg_comment_probe.core.logging_config import get_logger

logger = get_logger(__name__)

DRIVER_PREFIX = "postgresql+psycopg://"

_POSTGRES_URL_PREFIX = re.compile(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://")


def normalize_url(db_url: str) -> str:
    """Rewrite ``postgres://``, ``postgresql://`` and ``postgresql+<driver>://`` to psycopg.

    URLs for other backends are returned unchanged.
    """
    return _POSTGRES_URL_PREFIX.sub(DRIVER_PREFIX, db_url, count=1)


def create_engine(db_url: str, echo: bool = False) -> Engine:
    """Create a synchronous SQLAlchemy engine.

    Args:
        db_url: Database connection URL
        echo: Log every emitted statement through ``sqlalchemy.engine``

    Returns:
        Configured Engine instance
    """
    url = normalize_url(db_url)
    return sa_create_engine(url, echo=echo, pool_pre_ping=True)


@contextmanager
def connect(engine: Engine, use_transaction: bool = False) -> Iterator[Connection]:
    """Open a connection for a sequence of statements.

    With ``use_transaction`` the whole block runs in a single transaction that is
    committed on success and rolled back on error. Otherwise the connection uses
    ``AUTOCOMMIT`` isolation and each statement commits on its own.
    """
    if use_transaction:
        logger.debug("Opening connection inside a single transaction")
        with engine.begin() as conn:
            yield conn
    else:
        logger.debug("Opening autocommit connection")
        with engine.connect() as conn:
            yield conn.execution_options(isolation_level="AUTOCOMMIT")
