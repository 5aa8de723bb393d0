"""Compile clause ASTs into parameterized SQL.

Every value from a clause tree ends up as a bound parameter. Empty
groups and empty value lists render as constant ``false``/``true``
expressions instead of malformed SQL.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import and_, column, false, func, literal, or_, true
from sqlalchemy.dialects import sqlite
from sqlalchemy.engine import Dialect
from sqlalchemy.sql.elements import ColumnElement

from music_clauses.exceptions import ClauseCompileError
from music_clauses.sql.ast_nodes import And, Clause, Equals, In, IsEmpty, LikeAny, Or

log = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"

ColumnResolver = Callable[[str], ColumnElement[Any]]


@dataclass(frozen=True)
class CompiledClause:
    """Parameterized SQL text and its positional parameters."""

    sql: str
    params: list[Any] = field(default_factory=list)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so *value* matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def _default_resolver(name: str) -> ColumnElement[Any]:
    return column(name)


def _is_empty(col: ColumnElement[Any]) -> ColumnElement[bool]:
    return or_(col.is_(None), col == "")


def _like_any(node: LikeAny, resolve: ColumnResolver) -> ColumnElement[bool]:
    columns = [resolve(name) for name in node.columns]
    disjuncts = []
    for term in node.terms:
        if not term:
            disjuncts.append(and_(*(_is_empty(col) for col in columns)))
            continue
        pattern = "%" + escape_like(f"{node.delimiter}{term.lower()}{node.delimiter}") + "%"
        disjuncts.append(
            or_(*(func.lower(col).like(literal(pattern), escape=LIKE_ESCAPE) for col in columns))
        )
    if not disjuncts:
        log.debug("Empty LikeAny on %s compiled to false", ", ".join(node.columns))
        return false()
    return or_(*disjuncts)


def to_expression(
    node: Clause, resolve_column: ColumnResolver | None = None
) -> ColumnElement[bool]:
    """Render a clause tree as a SQLAlchemy boolean expression.

    Args:
        node: Root of the clause tree.
        resolve_column: Maps a column name to a column expression. Defaults
            to a lightweight ``sqlalchemy.column()``; pass ``table.c.__getitem__``
            to bind against a real table.

    Raises:
        ClauseCompileError: If the tree contains an unknown node type or a
            LikeAny without columns.
    """
    resolve = resolve_column or _default_resolver

    if isinstance(node, Equals):
        return func.lower(resolve(node.column)) == literal(node.value.lower())

    if isinstance(node, In):
        if not node.values:
            log.debug("Empty IN on %s compiled to false", node.column)
            return false()
        return resolve(node.column).in_([literal(value) for value in node.values])

    if isinstance(node, IsEmpty):
        return _is_empty(resolve(node.column))

    if isinstance(node, LikeAny):
        if not node.columns:
            raise ClauseCompileError("LikeAny requires at least one column")
        return _like_any(node, resolve)

    if isinstance(node, And):
        parts = [to_expression(child, resolve) for child in node.clauses]
        return and_(*parts) if parts else true()

    if isinstance(node, Or):
        parts = [to_expression(child, resolve) for child in node.clauses]
        return or_(*parts) if parts else false()

    raise ClauseCompileError(f"Unsupported clause node: {type(node).__name__}")


def compile_clause(
    node: Clause,
    dialect: Dialect | None = None,
    resolve_column: ColumnResolver | None = None,
) -> CompiledClause:
    """Compile a clause tree to SQL text with positional parameters.

    Args:
        node: Root of the clause tree.
        dialect: Target dialect. Must use a positional paramstyle; defaults
            to SQLite (``?`` placeholders).
        resolve_column: See :func:`to_expression`.

    Returns:
        CompiledClause whose ``params`` line up with the placeholders.
    """
    expression = to_expression(node, resolve_column)
    compiled = expression.compile(dialect=dialect or sqlite.dialect())
    if not compiled.positional:
        raise ClauseCompileError(
            f"Dialect {compiled.dialect.name} does not use positional parameters"
        )
    params = [compiled.params[name] for name in compiled.positiontup or ()]
    return CompiledClause(sql=str(compiled), params=params)
