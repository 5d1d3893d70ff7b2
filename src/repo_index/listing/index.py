"""Index rendering: one level of hierarchy below a prefix.

Given the keys under a prefix, every key contributes exactly one entry:

- a *leaf* when a single segment remains after the prefix
  (``abc/file.txt`` under ``abc`` gives ``file.txt``)
- a *group* when more segments remain, labelled by the first of them
  (``abc/folder_one/abc/file.txt`` under ``abc`` gives ``folder_one``)

Entries are deduplicated by label. When a leaf and a group share a label the
group is kept, since the label then addresses a branch with more content.
"""

from dataclasses import dataclass
from typing import Iterable, Literal

from repo_index.core import get_logger
from repo_index.storage import Key

logger = get_logger(__name__)

HEADER = "<!DOCTYPE html>\n<html>\n  </body>\n"
FOOTER = "\n</body>\n</html>"
ANCHOR = '<a href="/{path}">{label}</a><br/>'


@dataclass(frozen=True)
class Entry:
    """A single listing item under a prefix."""

    label: str
    kind: Literal["leaf", "group"]

    @property
    def path(self) -> str:
        """Relative path used as link target."""
        return self.label


def immediate_children(prefix: Key, keys: Iterable[Key]) -> list[Entry]:
    """Reduce keys to the distinct entries directly under ``prefix``.

    Args:
        prefix: Requested listing prefix
        keys: Stored keys, expected to lie under ``prefix``

    Returns:
        Entries sorted by label
    """
    entries: dict[str, Entry] = {}

    for key in keys:
        if not key.starts_with(prefix):
            logger.debug(
                "Skipping key outside prefix", key=key.string(), prefix=prefix.string()
            )
            continue

        tail = key.tail(prefix)
        if not tail:
            continue

        if len(tail) == 1:
            entry = Entry(label=tail[0], kind="leaf")
        else:
            entry = Entry(label=tail[0], kind="group")

        current = entries.get(entry.label)
        if current is None or current.kind == "leaf":
            entries[entry.label] = entry

    return [entries[label] for label in sorted(entries)]


def render_index(prefix: Key, keys: Iterable[Key]) -> bytes:
    """Render the HTML index page for the keys under ``prefix``.

    The page skeleton is fixed, including the stray ``</body>`` before the
    anchors, which existing consumers rely on byte for byte.
    """
    entries = immediate_children(prefix, keys)
    anchors = "".join(
        ANCHOR.format(path=entry.path, label=entry.label) for entry in entries
    )
    logger.debug("Index rendered", prefix=prefix.string(), entry_count=len(entries))
    return f"{HEADER}{anchors}{FOOTER}".encode("utf-8")
