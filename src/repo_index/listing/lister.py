"""Key listing against the storage backend."""

from repo_index.core import get_logger
from repo_index.core.exceptions import StorageReadError
from repo_index.storage import Key, Storage

logger = get_logger(__name__)


class KeyLister:
    """Enumerates every stored key under a prefix."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def list(self, prefix: Key) -> frozenset[Key]:
        """List all keys whose segments start with ``prefix``.

        The prefix itself need not exist as a key. An empty result is not an
        error: an empty store and a missing branch both yield an empty set.

        Args:
            prefix: Listing prefix (``Key.ROOT`` lists the whole store)

        Returns:
            Immutable snapshot of matching keys

        Raises:
            StorageReadError: If the storage backend cannot enumerate keys
        """
        logger.debug("Listing keys", prefix=prefix.string(), storage=self.storage.name)

        try:
            keys = frozenset(self.storage.list(prefix))
        except StorageReadError:
            raise
        except Exception as e:
            error_msg = f"Failed to list keys under '{prefix.string()}': {e}"
            logger.error(error_msg, error=str(e))
            raise StorageReadError(error_msg) from e

        logger.info("Keys listed", prefix=prefix.string(), key_count=len(keys))
        return keys
