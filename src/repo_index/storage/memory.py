"""In-memory storage backend."""

import threading
from typing import Iterator

from repo_index.core import get_logger

from .key import Key

logger = get_logger(__name__)


class InMemoryStorage:
    """Storage backend keeping objects in a process-local dictionary."""

    def __init__(self):
        self._data: dict[Key, bytes] = {}
        self._lock = threading.Lock()
        self.name = "in-memory"

    def save(self, key: Key, content: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(content)
        logger.debug("Object saved", key=key.string(), size=len(content))

    def exists(self, key: Key) -> bool:
        with self._lock:
            return key in self._data

    def list(self, prefix: Key) -> Iterator[Key]:
        with self._lock:
            snapshot = list(self._data)
        for key in snapshot:
            if key.starts_with(prefix):
                yield key
