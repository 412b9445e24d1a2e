"""
Schema models — table columns as the scaffolder sees them.
"""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel

# <token>_id, where token is anything but "id" itself
_FOREIGN_KEY_RE = re.compile(r"^(?P<token>\w+?)_id$")


class ColumnRole(StrEnum):
    """Semantic role inferred from a column's name."""

    PLAIN_FIELD = "plain_field"
    FOREIGN_KEY = "foreign_key"


class ColumnInfo(BaseModel):
    """A raw column as reported by a schema provider."""

    name: str
    nullable: bool = False


class ColumnDescriptor(BaseModel):
    """A column with its inferred role.

    Foreign-key role is assigned when the name matches ``<token>_id``
    and the token is not ``id``.
    """

    name: str
    nullable: bool = False
    role: ColumnRole = ColumnRole.PLAIN_FIELD

    @classmethod
    def from_column(cls, column: ColumnInfo) -> ColumnDescriptor:
        role = (
            ColumnRole.FOREIGN_KEY
            if foreign_key_token(column.name) is not None
            else ColumnRole.PLAIN_FIELD
        )
        return cls(name=column.name, nullable=column.nullable, role=role)

    @property
    def is_foreign_key(self) -> bool:
        return self.role == ColumnRole.FOREIGN_KEY

    @property
    def token(self) -> str | None:
        """The ``<token>`` part of a foreign key column, else None."""
        return foreign_key_token(self.name)


def foreign_key_token(column_name: str) -> str | None:
    """Return the referenced token of a ``<token>_id`` column, or None.

    >>> foreign_key_token("user_id")
    'user'
    >>> foreign_key_token("id_id") is None
    True
    """
    match = _FOREIGN_KEY_RE.match(column_name)
    if not match:
        return None
    token = match.group("token")
    if token == "id":
        return None
    return token
