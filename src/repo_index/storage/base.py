"""Storage backend protocol definition."""

from typing import Iterator, Protocol

from .key import Key


class Storage(Protocol):
    """Protocol for key-value object storage backends."""

    name: str

    def save(self, key: Key, content: bytes) -> None:
        """Save content to storage at the given key."""
        ...

    def exists(self, key: Key) -> bool:
        """Check if a key exists in storage."""
        ...

    def list(self, prefix: Key) -> Iterator[Key]:
        """List all stored keys under the given prefix."""
        ...
