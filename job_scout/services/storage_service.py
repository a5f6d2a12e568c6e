"""Durable key/value storage: the local counterpart of a browser's localStorage."""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from job_scout.utils.logger import get_logger

logger = get_logger(__name__)


class KeyValueStorage(ABC):
    """Abstract string key/value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Stored value for key, or None if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...


class MemoryStorage(KeyValueStorage):
    """In-process storage; contents are lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage(KeyValueStorage):
    """
    Storage persisted as one JSON object of string values on disk.
    A missing or unreadable file reads as empty; writes replace the file atomically.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Storage file %s unreadable, treating as empty: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object, treating as empty", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".storage-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
