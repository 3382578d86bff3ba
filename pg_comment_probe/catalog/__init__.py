"""
PostgreSQL catalog helpers.

- names.py: ``QualifiedName`` identifiers and their quoted form
- expressions.py: ``::regclass`` postfix operator and ``obj_description`` binding
- comments.py: table comment lookup
"""

from .comments import build_comment_query, get_table_comment, render_comment_query
from .expressions import PG_CLASS_CATALOG, PostfixOperator, Regclass, obj_description, regclass
from .names import QualifiedName

__all__ = [
    "PG_CLASS_CATALOG",
    "PostfixOperator",
    "QualifiedName",
    "Regclass",
    "build_comment_query",
    "get_table_comment",
    "obj_description",
    "regclass",
    "render_comment_query",
]
