"""HTTP response envelope."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Response:
    """Status, headers and body of an HTTP response."""

    status: int
    reason: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def status_line(self) -> str:
        return f"{self.status} {self.reason}"

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None


def html_response(body: bytes) -> Response:
    """Successful HTML response with exact ``Content-Length``."""
    return Response(
        status=200,
        reason="OK",
        headers={
            "Content-Type": "text/html",
            "Content-Length": str(len(body)),
        },
        body=body,
    )


def error_response(status: int, reason: str, message: str) -> Response:
    """Plain-text error response for the dispatch layer."""
    body = message.encode("utf-8")
    return Response(
        status=status,
        reason=reason,
        headers={
            "Content-Type": "text/plain",
            "Content-Length": str(len(body)),
        },
        body=body,
    )
