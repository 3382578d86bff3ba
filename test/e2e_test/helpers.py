"""Shared helpers for PostgreSQL e2e tests."""

from __future__ import annotations

from sqlalchemy import Engine, text

from pg_comment_probe.core.database import connect


def drop_schema(engine: Engine, schema: str) -> None:
    with connect(engine) as conn:
        conn.execute(text(f"DROP SCHEMA IF EXISTS {schema} CASCADE"))
