"""Core utilities and shared components for repo-index."""

from .config import settings
from .exceptions import RepoIndexError, StorageReadError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "RepoIndexError",
    "StorageReadError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
