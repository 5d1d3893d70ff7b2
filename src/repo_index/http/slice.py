"""Index page handler."""

from typing import Iterable, Mapping, Optional, Tuple, Union

from repo_index.core import get_logger, get_tracer
from repo_index.core.exceptions import ValidationError
from repo_index.listing import KeyLister, render_index
from repo_index.storage import Storage

from .request import RequestLine
from .response import Response, html_response

logger = get_logger(__name__)
tracer = get_tracer(__name__)

Headers = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class SliceIndex:
    """Serves an HTML index of the keys one level below the request path.

    Every request lists the storage afresh; nothing is cached between
    requests, so concurrent listings may observe different store states.
    """

    def __init__(self, storage: Storage):
        self.lister = KeyLister(storage)

    def response(
        self,
        line: str,
        headers: Optional[Headers] = None,
        body: bytes = b"",
    ) -> Response:
        """Handle a request and build the index response.

        Args:
            line: Raw request line, e.g. ``GET /abc HTTP/1.1``
            headers: Request headers (unused)
            body: Request body (unused)

        Returns:
            ``200 OK`` response with the rendered index

        Raises:
            ValidationError: If the request line is malformed or not a GET
            StorageReadError: If the storage cannot be listed
        """
        request = RequestLine.parse(line)
        if request.method != "GET":
            raise ValidationError(f"Method not allowed: {request.method}")
        prefix = request.key()

        with tracer.start_as_current_span("slice_index.response") as span:
            span.set_attribute("repo_index.prefix", prefix.string())
            keys = self.lister.list(prefix)
            content = render_index(prefix, keys)

        logger.info(
            "Index served", path=request.path, key_count=len(keys), size=len(content)
        )
        return html_response(content)
