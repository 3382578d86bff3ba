"""
Custom SQL constructs used by the comment lookup.

SQLAlchemy has no built-in way to append an arbitrary operator token after an
expression, so ``PostfixOperator`` provides one through the ``compiles``
extension. ``obj_description`` is a typed ``GenericFunction`` binding for the
PostgreSQL catalog function of the same name.
"""

from __future__ import annotations

from typing import Any, Type, Union

from sqlalchemy import Text, literal
from sqlalchemy.dialects.postgresql import OID
from sqlalchemy.exc import ArgumentError, CompileError
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import ColumnElement
from sqlalchemy.sql.functions import GenericFunction
from sqlalchemy.sql.type_api import TypeEngine
from sqlalchemy.sql.visitors import InternalTraversal
from sqlalchemy.types import NullType

from .names import QualifiedName

PG_CLASS_CATALOG = "pg_class"


class PostfixOperator(ColumnElement):
    """An expression rendered as ``<operand><opstring>``.

    Subclasses set ``opstring`` and ``return_type``. The operand takes part in
    the statement cache key, so its bound values are extracted per execution.
    """

    inherit_cache = True
    _traverse_internals = [("operand", InternalTraversal.dp_clauseelement)]

    opstring: str = ""
    return_type: Type[TypeEngine] = NullType

    def __init__(self, operand: ColumnElement) -> None:
        self.operand = operand.self_group()
        self.type = self.return_type()


class Regclass(PostfixOperator):
    """``<text>::regclass``, resolving a relation name to its OID."""

    inherit_cache = True
    opstring = "::regclass"
    return_type = OID


@compiles(PostfixOperator)
def _compile_postfix_default(element: PostfixOperator, compiler, **kw: Any) -> str:
    raise CompileError(
        f"{type(element).__name__} ({element.opstring}) is only supported on PostgreSQL, "
        f"not {compiler.dialect.name}"
    )


@compiles(PostfixOperator, "postgresql")
def _compile_postfix_postgresql(element: PostfixOperator, compiler, **kw: Any) -> str:
    return f"{compiler.process(element.operand, **kw)}{element.opstring}"


def regclass(table: QualifiedName) -> Regclass:
    """Cast the quoted name of ``table`` to ``regclass``.

    The quoted name is sent as a bound text value; PostgreSQL parses it as an
    identifier during the cast.
    """
    return Regclass(literal(table.quoted(), type_=Text))


class obj_description(GenericFunction):
    """``obj_description(oid, catalog) -> text``, NULL when no comment is set."""

    type = Text()
    inherit_cache = True

    def __init__(self, oid: ColumnElement, catalog: Union[str, ColumnElement] = PG_CLASS_CATALOG, **kwargs: Any):
        if not isinstance(getattr(oid, "type", None), OID):
            raise ArgumentError(f"obj_description() expects an OID expression, got {getattr(oid, 'type', oid)!r}")
        if isinstance(catalog, str):
            catalog = literal(catalog, type_=Text)
        super().__init__(oid, catalog, **kwargs)
