"""Tests for storage keys."""

import pytest

from repo_index.core.exceptions import ValidationError
from repo_index.storage import Key


class TestKey:
    """Test key construction and comparison."""

    def test_from_path_drops_empty_segments(self):
        assert Key.from_path("/def/").segments == ("def",)
        assert Key.from_path("a//b").segments == ("a", "b")

    def test_root_paths(self):
        assert Key.from_path("/") == Key.ROOT
        assert Key.from_path("") == Key.ROOT
        assert Key.ROOT.string() == ""

    def test_of_splits_parts(self):
        assert Key.of("abc", "folder/file.txt") == Key(("abc", "folder", "file.txt"))

    def test_string(self):
        assert Key.of("abc", "abc-0.1.whl").string() == "abc/abc-0.1.whl"
        assert str(Key.of("abc")) == "abc"

    def test_invalid_segments(self):
        with pytest.raises(ValidationError):
            Key(("abc", ""))
        with pytest.raises(ValidationError):
            Key(("a/b",))

    @pytest.mark.parametrize("path", ["..", "/abc/../..", "./abc", "abc/./def"])
    def test_relative_segments_rejected(self, path):
        with pytest.raises(ValidationError):
            Key.from_path(path)

    def test_starts_with_compares_segments(self):
        key = Key.of("abc", "file.txt")
        assert key.starts_with(Key.ROOT)
        assert key.starts_with(Key.of("abc"))
        assert key.starts_with(key)
        assert not key.starts_with(Key.of("ab"))
        assert not Key.of("abc").starts_with(key)

    def test_tail(self):
        key = Key.of("abc", "folder_one", "file.txt")
        assert key.tail(Key.of("abc")) == ("folder_one", "file.txt")
        assert key.tail(Key.ROOT) == key.segments

    def test_tail_outside_prefix(self):
        with pytest.raises(ValidationError, match="not under prefix"):
            Key.of("def", "file.txt").tail(Key.of("abc"))

    def test_keys_are_hashable(self):
        keys = {Key.of("a", "b"), Key(("a", "b")), Key.from_path("/a/b")}
        assert len(keys) == 1
