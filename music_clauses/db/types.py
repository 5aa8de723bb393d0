"""Column types for multi-value text columns."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from music_clauses.sql.multivalue import encode, split_and_trim


class MultiValueType(TypeDecorator):
    """Store an ordered list of strings in one ``TEXT`` column.

    Lists are written in the ``¤a¤¤b¤`` form and read back as plain lists.
    ``None`` stays NULL; NULL and ``""`` both load as an empty list.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Sequence[str] | None, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            # Already in stored form, e.g. a LIKE pattern or raw column text.
            return value
        return encode(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> list[str]:
        if not value:
            return []
        return split_and_trim(value)
