"""Exception hierarchy for repo-index."""


class RepoIndexError(Exception):
    """Base exception for all repo-index errors."""

    pass


class ValidationError(RepoIndexError):
    """Raised when validation fails."""

    pass


class StorageReadError(RepoIndexError):
    """Raised when the storage backend cannot enumerate keys."""

    pass
