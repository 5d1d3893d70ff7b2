"""FastAPI dispatch layer serving the index over HTTP."""

import re
from urllib.parse import quote

from fastapi import FastAPI, Request
from fastapi.responses import Response as HTTPResponse

from repo_index import __version__
from repo_index.core import get_logger
from repo_index.core.exceptions import StorageReadError, ValidationError
from repo_index.storage import Key, Storage

from .response import Response, error_response
from .slice import SliceIndex

logger = get_logger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def validate_path(path: str) -> None:
    """Reject request paths that must never reach the index handler.

    Relative segments are refused by ``Key`` itself.

    Raises:
        ValidationError: On control characters or relative segments
    """
    if _CONTROL_CHARS.search(path):
        raise ValidationError(f"Control characters in path: {path!r}")
    Key.from_path(path)


def _to_http(response: Response) -> HTTPResponse:
    return HTTPResponse(
        content=response.body,
        status_code=response.status,
        headers=response.headers,
    )


def create_app(storage: Storage) -> FastAPI:
    """Create the application serving index pages for ``storage``."""
    app = FastAPI(title="repo-index", version=__version__)
    index = SliceIndex(storage)

    @app.get("/{path:path}")
    def serve_index(path: str, request: Request) -> HTTPResponse:
        # Route value is already decoded; re-encode so "?" and "#" stay in the path
        decoded = f"/{path}"
        uri = quote(decoded, safe="/")

        try:
            validate_path(decoded)
            response = index.response(
                f"GET {uri} HTTP/1.1", request.headers.items()
            )
        except ValidationError as e:
            logger.warning("Rejected request", path=decoded, error=str(e))
            response = error_response(400, "Bad Request", str(e))
        except StorageReadError as e:
            logger.error("Index failed", path=decoded, error=str(e))
            response = error_response(
                500, "Internal Server Error", "Storage listing failed"
            )

        return _to_http(response)

    logger.info("Application created", storage=storage.name)
    return app
