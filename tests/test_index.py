"""Tests for index rendering."""

import random

from repo_index.listing import Entry, immediate_children, render_index
from repo_index.storage import Key

from conftest import html

EMPTY = b"<!DOCTYPE html>\n<html>\n  </body>\n\n</body>\n</html>"


class TestImmediateChildren:
    """Test grouping of keys into one level of entries."""

    def test_leaves(self):
        keys = {Key.of("def", "def-0.1.tar.gz"), Key.of("def", "def-0.2.whl")}

        entries = immediate_children(Key.of("def"), keys)

        assert entries == [
            Entry("def-0.1.tar.gz", "leaf"),
            Entry("def-0.2.whl", "leaf"),
        ]

    def test_groups_collapse(self):
        keys = {Key.of("abc", "abc-0.1.tar.gz"), Key.of("abc", "abc-0.1.whl")}

        entries = immediate_children(Key.ROOT, keys)

        assert entries == [Entry("abc", "group")]

    def test_mixed_items(self):
        keys = {
            Key.of("abc", "file.txt"),
            Key.of("abc", "folder_two", "file.txt"),
            Key.of("abc", "folder_one", "abc", "file.txt"),
        }

        entries = immediate_children(Key.of("abc"), keys)

        assert [entry.label for entry in entries] == [
            "file.txt",
            "folder_one",
            "folder_two",
        ]
        assert [entry.kind for entry in entries] == ["leaf", "group", "group"]

    def test_keys_outside_prefix_are_skipped(self):
        keys = {Key.of("abc", "file.txt"), Key.of("ghi", "jkl", "hij-0.3.whl")}

        entries = immediate_children(Key.of("abc"), keys)

        assert entries == [Entry("file.txt", "leaf")]

    def test_prefix_key_itself_is_skipped(self):
        keys = {Key.of("abc"), Key.of("abc", "file.txt")}

        assert immediate_children(Key.of("abc"), keys) == [Entry("file.txt", "leaf")]

    def test_group_wins_label_collision(self):
        keys = [Key.of("abc", "name"), Key.of("abc", "name", "file.txt")]

        assert immediate_children(Key.of("abc"), keys) == [Entry("name", "group")]
        assert immediate_children(Key.of("abc"), reversed(keys)) == [
            Entry("name", "group")
        ]

    def test_empty(self):
        assert immediate_children(Key.of("abc"), set()) == []


class TestRenderIndex:
    """Test the rendered index body."""

    def test_root_listing(self):
        keys = {Key.of("abc", "abc-0.1.tar.gz"), Key.of("abc", "abc-0.1.whl")}

        assert render_index(Key.ROOT, keys) == html("abc")

    def test_mixed_listing(self):
        keys = {
            Key.of("abc", "file.txt"),
            Key.of("abc", "folder_two", "file.txt"),
            Key.of("abc", "folder_one", "abc", "file.txt"),
        }

        assert render_index(Key.of("abc"), keys) == html(
            "file.txt", "folder_one", "folder_two"
        )

    def test_empty_listing_keeps_skeleton(self):
        assert render_index(Key.of("def"), set()) == EMPTY
        assert render_index(Key.ROOT, set()) == EMPTY

    def test_order_insensitive(self):
        keys = [Key.of("pkg", f"pkg-0.{i}.whl") for i in range(20)]
        keys += [Key.of("pkg", f"sub{i}", "file.txt") for i in range(5)]
        expected = render_index(Key.of("pkg"), keys)

        shuffled = list(keys)
        random.Random(7).shuffle(shuffled)

        assert render_index(Key.of("pkg"), shuffled) == expected

    def test_one_anchor_per_child(self):
        keys = {
            Key.of("a", "b", "c"),
            Key.of("a", "b", "d"),
            Key.of("a", "e"),
            Key.of("a", "f", "g", "h"),
        }

        body = render_index(Key.of("a"), keys).decode()

        assert body.count("<a href=") == 3
        assert body.count('<a href="/b">b</a>') == 1
