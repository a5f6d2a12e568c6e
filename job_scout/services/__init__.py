"""Service exports."""

from .agent_service import call_agent
from .favorites_store import FavoritesStore
from .filter_service import (
    filter_jobs,
    matches_date,
    matches_keyword,
    matches_location,
)
from .storage_service import JsonFileStorage, KeyValueStorage, MemoryStorage

__all__ = [
    "call_agent",
    "FavoritesStore",
    "filter_jobs",
    "matches_date",
    "matches_keyword",
    "matches_location",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
]
