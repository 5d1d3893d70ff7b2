"""Local filesystem storage backend."""

from pathlib import Path
from typing import Iterator

from repo_index.core import get_logger

from .key import Key

logger = get_logger(__name__)


class FileSystemStorage:
    """Storage backend mapping keys to files under a base directory."""

    def __init__(self, base_path: str):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)
        self.name = f"local filesystem ({self.base_path.absolute()})"
        logger.info("Filesystem storage initialized", base_path=str(self.base_path))

    def _resolve(self, key: Key) -> Path:
        """Resolve a key to a full path."""
        return self.base_path.joinpath(*key.segments)

    def save(self, key: Key, content: bytes) -> None:
        """Save content to a file."""
        path = self._resolve(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    def exists(self, key: Key) -> bool:
        """Check if a file exists."""
        return self._resolve(key).is_file()

    def list(self, prefix: Key) -> Iterator[Key]:
        """List all files under the prefix directory."""
        search_path = self._resolve(prefix)

        if search_path.is_file():
            yield prefix
            return

        if not search_path.is_dir():
            return

        for path in search_path.rglob("*"):
            if path.is_file():
                yield Key(path.relative_to(self.base_path).parts)
