"""SQL clause construction and multi-value column encoding."""

from music_clauses.sql.ast_nodes import And, Equals, In, IsEmpty, LikeAny, Or
from music_clauses.sql.clauses import (
    create_in_clause,
    create_or_like_clause,
    escape_quotes,
    is_vacuous_clause,
)
from music_clauses.sql.compiler import CompiledClause, compile_clause, to_expression
from music_clauses.sql.filters import combine_filters, in_filter, multi_value_filter
from music_clauses.sql.multivalue import (
    TRIM_DELIMITER,
    VALUE_DELIMITER,
    MultiValue,
    encode,
    split,
    split_and_trim,
    to_display_string,
    trim,
)

__all__ = [
    "And",
    "CompiledClause",
    "Equals",
    "In",
    "IsEmpty",
    "LikeAny",
    "MultiValue",
    "Or",
    "TRIM_DELIMITER",
    "VALUE_DELIMITER",
    "combine_filters",
    "compile_clause",
    "create_in_clause",
    "create_or_like_clause",
    "encode",
    "escape_quotes",
    "in_filter",
    "is_vacuous_clause",
    "multi_value_filter",
    "split",
    "split_and_trim",
    "to_display_string",
    "to_expression",
    "trim",
]
