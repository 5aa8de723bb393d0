"""Track library storage built on the clause builders."""

from music_clauses.db.models import Base, Track
from music_clauses.db.queries import add_track, find_tracks, search_tracks
from music_clauses.db.session import get_engine, get_session
from music_clauses.db.types import MultiValueType

__all__ = [
    # Models
    "Base",
    "MultiValueType",
    "Track",
    # Session
    "get_engine",
    "get_session",
    # Queries
    "add_track",
    "find_tracks",
    "search_tracks",
]
