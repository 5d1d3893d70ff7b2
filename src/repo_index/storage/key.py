"""Storage keys: slash-delimited object identifiers."""

from dataclasses import dataclass
from typing import ClassVar

from repo_index.core.exceptions import ValidationError

DELIMITER = "/"


@dataclass(frozen=True)
class Key:
    """Immutable sequence of non-empty path segments identifying an object.

    Keys compare by their exact segment sequence, so ``Key.of("abc/file.txt")``
    equals ``Key(("abc", "file.txt"))``. The empty key is the storage root.

    Example:
        >>> Key.from_path("/def/def-0.1.tar.gz").segments
        ('def', 'def-0.1.tar.gz')
        >>> Key.of("abc", "folder/file.txt").string()
        'abc/folder/file.txt'
    """

    segments: tuple[str, ...] = ()

    ROOT: ClassVar["Key"]

    def __post_init__(self) -> None:
        for segment in self.segments:
            if not segment or DELIMITER in segment or segment in (".", ".."):
                raise ValidationError(
                    f"Invalid key segment {segment!r} in {self.segments!r}"
                )

    @classmethod
    def from_path(cls, path: str) -> "Key":
        """Build a key from a slash-delimited path, ignoring empty segments."""
        return cls(tuple(part for part in path.split(DELIMITER) if part))

    @classmethod
    def of(cls, *parts: str) -> "Key":
        """Build a key from parts which may themselves contain delimiters."""
        return cls.from_path(DELIMITER.join(parts))

    def string(self) -> str:
        """Render the key as a slash-delimited string (root renders empty)."""
        return DELIMITER.join(self.segments)

    def starts_with(self, prefix: "Key") -> bool:
        """Check whether this key lies under ``prefix`` segment by segment."""
        size = len(prefix.segments)
        return self.segments[:size] == prefix.segments

    def tail(self, prefix: "Key") -> tuple[str, ...]:
        """Segments remaining after ``prefix``."""
        if not self.starts_with(prefix):
            raise ValidationError(
                f"Key '{self.string()}' is not under prefix '{prefix.string()}'"
            )
        return self.segments[len(prefix.segments):]

    def __str__(self) -> str:
        return self.string()


Key.ROOT = Key()
