"""
Demonstration driver.

Creates a throwaway schema with one commented and one uncommented table, then
prints the comment lookup result for each. Statements run in autocommit mode
unless ``PG_COMMENT_PROBE_USE_TRANSACTION`` is set, in which case the whole
sequence shares one transaction.
"""

from __future__ import annotations

import sys
from typing import Callable, List, Optional, Union

from sqlalchemy import Connection, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pg_comment_probe.catalog import QualifiedName, get_table_comment
from pg_comment_probe.core import config
from pg_comment_probe.core.config import Settings
from pg_comment_probe.core.database import connect, create_engine
from pg_comment_probe.core.logging_config import get_logger, setup_logging
from pg_comment_probe.errors import ProbeError

logger = get_logger(__name__)

DEMO_SCHEMA = "test_schema"

SETUP_STATEMENTS = (
    f"CREATE SCHEMA {DEMO_SCHEMA}",
    f"CREATE TABLE {DEMO_SCHEMA}.table_1 (id SERIAL PRIMARY KEY, text_col VARCHAR, not_null TEXT NOT NULL)",
    f"COMMENT ON TABLE {DEMO_SCHEMA}.table_1 IS 'table comment'",
    f"CREATE TABLE {DEMO_SCHEMA}.table_2 (array_col VARCHAR[] NOT NULL)",
)

DROP_SCHEMA_STATEMENT = f"DROP SCHEMA {DEMO_SCHEMA} CASCADE"

DEMO_TABLES = (
    QualifiedName.new("table_1", DEMO_SCHEMA),
    QualifiedName.new("table_2", DEMO_SCHEMA),
)


def _print_result(comment: Optional[str]) -> None:
    print(repr(comment))


def run_demo(
    connection: Union[Connection, Session],
    drop_schema: bool = False,
    report: Callable[[Optional[str]], None] = _print_result,
) -> List[Optional[str]]:
    """
    Create the demonstration schema and look up both table comments.

    Any failing statement aborts the remaining sequence.

    Args:
        connection: Open connection; its transaction mode is left to the caller
        drop_schema: Drop the demonstration schema after the lookups
        report: Called with each lookup result as soon as it is available

    Returns:
        The lookup results in table order
    """
    for statement in SETUP_STATEMENTS:
        logger.info(f"Executing: {statement}")
        connection.execute(text(statement))

    results = []
    for table in DEMO_TABLES:
        comment = get_table_comment(connection, table)
        report(comment)
        results.append(comment)

    if drop_schema:
        logger.info(f"Executing: {DROP_SCHEMA_STATEMENT}")
        connection.execute(text(DROP_SCHEMA_STATEMENT))

    return results


def main(settings: Optional[Settings] = None) -> int:
    """Run the demonstration and return a process exit code."""
    settings = settings or config.settings
    setup_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        enable_file=settings.enable_file_logging,
        log_file_dir=settings.log_file_dir,
    )

    try:
        engine = create_engine(settings.require_database_url())
        try:
            with connect(engine, use_transaction=settings.use_transaction) as conn:
                run_demo(conn, drop_schema=settings.drop_schema)
        finally:
            engine.dispose()
    except (ProbeError, SQLAlchemyError) as exc:
        logger.error(f"Comment probe failed: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0
