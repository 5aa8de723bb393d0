"""Textual SQL clause builders for untrusted value lists.

The builders escape single quotes by doubling them and never bind
parameters. Column names are trusted and inserted verbatim. The output is
meant to be concatenated into a larger ``WHERE`` clause by the storage
layer, which is also responsible for short-circuiting vacuous clauses
(see :func:`is_vacuous_clause`).

Textual escaping is not a complete defence against SQL injection. Prefer
the clause AST in :mod:`music_clauses.sql.compiler` for new code.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# Matches "<column> IN ()" with any whitespace inside the parentheses.
_EMPTY_IN_RE = re.compile(r"\bIN\s*\(\s*\)\s*$")


def escape_quotes(value: str) -> str:
    """Double every single quote so *value* can sit inside a SQL literal."""
    return value.replace("'", "''")


def _quote(value: str | None) -> str:
    return "'" + escape_quotes(value or "") + "'"


def create_in_clause(column_name: str, items: Iterable[str | None]) -> str:
    """Build ``<column_name> IN ('a','b',...)``.

    An empty *items* list yields ``<column_name> IN ()``, which matches no
    rows. Callers should treat that as "no match" rather than embed it.

    Example:
        >>> create_in_clause("Genre", ["Rock", "Jazz"])
        "Genre IN ('Rock','Jazz')"
    """
    comma_separated_items = ",".join(_quote(item) for item in items)
    return f"{column_name} IN ({comma_separated_items})"


def _null_or_empty(column_name: str) -> str:
    return f"({column_name} IS NULL OR {column_name}='')"


def _lower_like(column_name: str, pattern: str) -> str:
    return f"(LOWER({column_name}) LIKE '%{pattern}%')"


def create_or_like_clause(
    column_name1: str,
    column_name2: str | None,
    items: Iterable[str | None],
    delimiter: str = "",
) -> str:
    """Build a parenthesized disjunction of case-insensitive LIKE matches.

    For every item one disjunct is produced:

    - an empty item matches rows where *column_name1* is NULL or empty
      (ANDed with the same test on *column_name2* when given);
    - any other item matches rows where ``LOWER(column_name1)`` contains
      ``delimiter + item.lower() + delimiter`` (ORed with the same test on
      *column_name2* when given).

    Passing the multi-value trim delimiter as *delimiter* restricts matches
    to whole packed items instead of arbitrary substrings.

    An empty *items* list produces an empty disjunction ``(\\n\\n)\\n``,
    which is not valid boolean SQL. Guard against it with
    :func:`is_vacuous_clause` before embedding.
    """
    or_clauses: list[str] = []

    for item in items:
        if not item:
            column2_clause = ""
            if column_name2:
                column2_clause = f" AND {_null_or_empty(column_name2)}"
            or_clauses.append(f"{_null_or_empty(column_name1)}{column2_clause}")
            continue

        pattern = f"{delimiter}{escape_quotes(item).lower()}{delimiter}"
        column2_clause = ""
        if column_name2:
            column2_clause = f" OR {_lower_like(column_name2, pattern)}"
        or_clauses.append(f"{_lower_like(column_name1, pattern)}{column2_clause}")

    return "(\n" + " OR ".join(or_clauses) + "\n)\n"


def is_vacuous_clause(clause: str) -> bool:
    """Return True for the empty forms produced by the builders.

    Both ``<column> IN ()`` and an empty parenthesized disjunction match
    no rows (the latter is not even valid SQL).
    """
    stripped = clause.strip()
    if not stripped:
        return True
    if stripped.startswith("(") and stripped.endswith(")") and not stripped[1:-1].strip():
        return True
    return _EMPTY_IN_RE.search(stripped) is not None
