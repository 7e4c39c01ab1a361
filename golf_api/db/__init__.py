from .client import build_client, get_database, probe_connection
from .collection_names import COURSES, DATABASE_NAME, HOLES, PLAYERS
from .repository import DocumentRepository

__all__ = [
    "COURSES",
    "DATABASE_NAME",
    "HOLES",
    "PLAYERS",
    "DocumentRepository",
    "build_client",
    "get_database",
    "probe_connection",
]
