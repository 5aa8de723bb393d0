"""Exception hierarchy for music-clauses.

The clause builders and the multi-value codec never raise; these errors
come from configuration, the database layer and the clause compiler.
"""

from pathlib import Path


class MusicClausesError(Exception):
    """Base exception for all music-clauses errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all music-clauses errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(MusicClausesError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Database Errors
class DatabaseError(MusicClausesError):
    """Database-related errors."""

    pass


class DatabaseNotFoundError(DatabaseError):
    """Database file doesn't exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Database not found: {path}")


class DatabaseConnectionError(DatabaseError):
    """Failed to connect to database."""

    pass


# Clause Errors
class ClauseCompileError(MusicClausesError):
    """A clause tree cannot be compiled to SQL."""

    pass
