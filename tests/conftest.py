"""Test configuration and fixtures for repo-index."""

import pytest

from repo_index.storage import FileSystemStorage, InMemoryStorage, Key


def html(*items: str) -> bytes:
    """Expected index body for the given labels, in the given order."""
    anchors = "".join(f'<a href="/{item}">{item}</a><br/>' for item in items)
    return f"<!DOCTYPE html>\n<html>\n  </body>\n{anchors}\n</body>\n</html>".encode()


@pytest.fixture
def storage():
    """Create an empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def mixed_storage(storage):
    """In-memory storage holding leaves and nested groups under 'abc'."""
    storage.save(Key.of("abc", "file.txt"), b"")
    storage.save(Key.of("abc", "folder_two", "file.txt"), b"")
    storage.save(Key.of("abc", "folder_one", "abc", "file.txt"), b"")
    storage.save(Key.of("def", "ghi", "hij-0.3.whl"), b"")
    return storage


@pytest.fixture
def fs_storage(tmp_path):
    """Create a filesystem storage rooted in a temporary directory."""
    return FileSystemStorage(str(tmp_path / "repo"))
