"""Browsable index pages over a flat key-value object store.

Stored keys are grouped into one level of hierarchy below a requested path,
like an object store's "list with delimiter" call, and rendered as an HTML
directory listing (for example a package repository's simple index).

Usage:
    >>> from repo_index import InMemoryStorage, Key, SliceIndex
    >>> storage = InMemoryStorage()
    >>> storage.save(Key.of("abc", "abc-0.1.tar.gz"), b"")
    >>> response = SliceIndex(storage).response("GET / HTTP/1.1")
    >>> response.header("Content-Type")
    'text/html'
"""

__version__ = "0.1.0"

from .core.exceptions import RepoIndexError, StorageReadError, ValidationError
from .http import RequestLine, Response, SliceIndex, html_response
from .listing import Entry, KeyLister, immediate_children, render_index
from .storage import (
    FileSystemStorage,
    InMemoryStorage,
    Key,
    S3ClientConfig,
    S3Storage,
    Storage,
    create_storage,
)

__all__ = [
    # Errors
    "RepoIndexError",
    "StorageReadError",
    "ValidationError",
    # Storage
    "FileSystemStorage",
    "InMemoryStorage",
    "Key",
    "S3ClientConfig",
    "S3Storage",
    "Storage",
    "create_storage",
    # Listing
    "Entry",
    "KeyLister",
    "immediate_children",
    "render_index",
    # HTTP
    "RequestLine",
    "Response",
    "SliceIndex",
    "html_response",
]
