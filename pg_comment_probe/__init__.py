"""pg-comment-probe.

A small diagnostic harness that reads a PostgreSQL table's catalog comment
through SQLAlchemy Core.

How the lookup is built
-----------------------

The query is assembled from two extension points of the query builder:

- ``Regclass``: a custom postfix operator. It appends ``::regclass`` to a text
  expression and types the result as ``OID``.
- ``obj_description``: a ``GenericFunction`` binding for the catalog function
  ``obj_description(oid, text) -> text``.

Applied to a ``QualifiedName`` this yields::

    SELECT obj_description('"test_schema"."table_1"'::regclass, 'pg_class')

Typical workflow
----------------

1. Build a ``QualifiedName`` with ``QualifiedName.new(name, schema)`` or
   ``QualifiedName.from_name(name)``.
2. Open a connection with ``pg_comment_probe.core.database.create_engine``.
3. Call ``get_table_comment(connection, name)``; it returns the comment text or
   ``None``, and lets database errors propagate.

``python -m pg_comment_probe`` runs the demonstration in
``pg_comment_probe.demo`` against ``PG_DATABASE_URL`` (or ``DATABASE_URL``).
"""

from pg_comment_probe.catalog import QualifiedName, get_table_comment

__all__ = ["QualifiedName", "get_table_comment"]
