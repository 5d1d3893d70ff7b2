"""HTTP request line parsing."""

from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from repo_index.core.exceptions import ValidationError
from repo_index.storage import Key


@dataclass(frozen=True)
class RequestLine:
    """Parsed HTTP request line, e.g. ``GET /simple/abc HTTP/1.1``."""

    method: str
    uri: str
    version: str = "HTTP/1.1"

    @classmethod
    def parse(cls, line: str) -> "RequestLine":
        """Parse a raw request line.

        Raises:
            ValidationError: If the line does not have three parts
        """
        parts = line.strip().split(" ")
        if len(parts) != 3 or not all(parts):
            raise ValidationError(f"Invalid request line: {line!r}")
        method, uri, version = parts
        return cls(method=method.upper(), uri=uri, version=version)

    @property
    def path(self) -> str:
        """Decoded URI path without query string or fragment."""
        return unquote(urlsplit(self.uri).path)

    def key(self) -> Key:
        """Listing prefix addressed by this request (``/`` is the root)."""
        return Key.from_path(self.path)

    def __str__(self) -> str:
        return f"{self.method} {self.uri} {self.version}\r\n"
