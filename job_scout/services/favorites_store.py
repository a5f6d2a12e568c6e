"""Favorites store: starred job links, hydrated on start and saved on every change."""

import json
import threading
from typing import FrozenSet, Set

from job_scout.config import FAVORITES_STORAGE_KEY
from job_scout.services.storage_service import KeyValueStorage
from job_scout.utils.logger import get_logger

logger = get_logger(__name__)


class FavoritesStore:
    """
    Set of favorite job links backed by a KeyValueStorage.
    Stored as a JSON array of strings under a single key. Safe to share
    between Streamlit sessions, which run on separate threads.
    """

    def __init__(self, storage: KeyValueStorage, key: str = FAVORITES_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._lock = threading.Lock()
        self._links: Set[str] = self._load()

    def _load(self) -> Set[str]:
        """Read the persisted set. Missing or malformed data yields an empty set."""
        try:
            saved = self._storage.get(self._key)
        except OSError as e:
            logger.warning("Could not read favorites from storage: %s", e)
            return set()
        if not saved:
            return set()
        try:
            data = json.loads(saved)
        except json.JSONDecodeError:
            logger.warning("Stored favorites are not valid JSON; starting empty")
            return set()
        if not isinstance(data, list):
            logger.warning("Stored favorites are not a list; starting empty")
            return set()
        links = {item for item in data if isinstance(item, str)}
        logger.info("Loaded %s favorites", len(links))
        return links

    def _save(self, links: Set[str]) -> None:
        self._storage.set(self._key, json.dumps(sorted(links)))

    def is_favorite(self, link: str) -> bool:
        return link in self._links

    def toggle(self, link: str) -> bool:
        """
        Add link if absent, remove if present; persist; return new membership.
        If the write fails the change is undone and the error propagates.
        """
        with self._lock:
            added = link not in self._links
            if added:
                self._links.add(link)
            else:
                self._links.discard(link)
            try:
                self._save(self._links)
            except Exception:
                # Undo the unsaved change
                if added:
                    self._links.discard(link)
                else:
                    self._links.add(link)
                raise
            return added

    @property
    def links(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._links)

    def __contains__(self, link: object) -> bool:
        return link in self._links

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)
