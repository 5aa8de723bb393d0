"""AST data classes for filter clauses.

A clause tree is rendered into parameterized SQL by
:mod:`music_clauses.sql.compiler`, so values never need manual escaping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Equals:
    """Case-insensitive equality of a column with a value."""

    column: str
    value: str


@dataclass(frozen=True)
class In:
    """Exact membership of a column value in a list.

    An empty list matches nothing.
    """

    column: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class IsEmpty:
    """Column is NULL or the empty string."""

    column: str


@dataclass(frozen=True)
class LikeAny:
    """Case-insensitive substring match of any term against any column.

    Each term becomes one disjunct:

    - an empty term matches rows where every column is NULL or empty;
    - any other term matches rows where at least one column contains
      ``delimiter + term + delimiter``, ignoring case.

    An empty term list matches nothing.
    """

    columns: tuple[str, ...]
    terms: tuple[str, ...] = ()
    delimiter: str = ""


@dataclass(frozen=True)
class And:
    """All clauses match. An empty group matches everything."""

    clauses: tuple[Clause, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Or:
    """Any clause matches. An empty group matches nothing."""

    clauses: tuple[Clause, ...] = field(default_factory=tuple)


Clause = Union[Equals, In, IsEmpty, LikeAny, And, Or]
