"""
Table comment lookup.

Builds ``SELECT obj_description(<name>::regclass, 'pg_class')`` for a
``QualifiedName`` and runs it as a single-row scalar query. Nothing is cached
and nothing is retried; every call sends exactly one read statement.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from sqlalchemy import Connection, Select, select
from sqlalchemy.dialects.postgresql import psycopg
from sqlalchemy.orm import Session

from pg_comment_probe.core.logging_config import get_logger

from .expressions import PG_CLASS_CATALOG, obj_description, regclass
from .names import QualifiedName

logger = get_logger(__name__)


def build_comment_query(table: QualifiedName) -> Select:
    """Build the query selecting the catalog comment of ``table``.

    Args:
        table: Table whose ``pg_class`` comment is wanted

    Returns:
        A ``Select`` with a single nullable text column labelled ``comment``
    """
    return select(obj_description(regclass(table), PG_CLASS_CATALOG).label("comment"))


def render_comment_query(table: QualifiedName, literal_binds: bool = False) -> str:
    """Compile the lookup query for the psycopg driver and return its SQL text."""
    compiled = build_comment_query(table).compile(
        dialect=psycopg.dialect(),
        compile_kwargs={"literal_binds": literal_binds},
    )
    return str(compiled)


def get_table_comment(connection: Union[Connection, Session], table: QualifiedName) -> Optional[str]:
    """
    Return the descriptive comment attached to a table.

    Args:
        connection: Open SQLAlchemy connection or session
        table: Table to look up

    Returns:
        The comment text, or None when the table has no comment

    Raises:
        sqlalchemy.exc.ProgrammingError: If the table does not exist
        sqlalchemy.exc.DBAPIError: On any other database or connection failure
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Looking up comment for {table}: {render_comment_query(table)}")
    comment = connection.execute(build_comment_query(table)).scalar_one()
    logger.debug(f"Comment for {table}: {comment!r}")
    return comment
