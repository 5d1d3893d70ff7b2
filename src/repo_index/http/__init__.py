"""HTTP handling for the index: request lines, responses, dispatch."""

from .request import RequestLine
from .response import Response, error_response, html_response
from .slice import SliceIndex

__all__ = [
    "RequestLine",
    "Response",
    "SliceIndex",
    "error_response",
    "html_response",
]
