"""music-clauses: SQL clause builders and multi-value column encoding for music libraries."""

__version__ = "0.1.0"
