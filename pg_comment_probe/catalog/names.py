"""Schema-qualified table identifiers.

``QualifiedName`` is the value a caller builds once per table reference and
hands to the comment lookup. It renders itself as the double-quoted text that
PostgreSQL's ``regclass`` input function resolves to a relation.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional


@total_ordering
@dataclass(frozen=True)
class QualifiedName:
    """A table name, optionally prefixed by the schema that contains it.

    Attributes:
        logical_name: Identifier as known to the caller.
        storage_name: Identifier as stored in the catalog. Equal to
            ``logical_name`` when built through ``from_name`` or ``new``.
        schema: Containing schema, or ``None`` to resolve through ``search_path``.
    """

    logical_name: str
    storage_name: str
    schema: Optional[str] = None

    @classmethod
    def from_name(cls, name: str) -> QualifiedName:
        """Build an unqualified name."""
        return cls(logical_name=name, storage_name=name, schema=None)

    @classmethod
    def new(cls, name: str, schema: str) -> QualifiedName:
        """Build a name qualified by ``schema``."""
        return cls(logical_name=name, storage_name=name, schema=schema)

    def quoted(self) -> str:
        """Render as ``"schema"."name"`` or ``"name"``.

        Each segment is quoted on its own. Double quotes inside a segment are
        passed through unescaped.
        """
        if self.schema is not None:
            return f'"{self.schema}"."{self.storage_name}"'
        return f'"{self.storage_name}"'

    def _sort_key(self) -> tuple:
        # an absent schema sorts before any present one
        return (self.storage_name, self.logical_name, self.schema is not None, self.schema or "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, QualifiedName):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return self.quoted()
