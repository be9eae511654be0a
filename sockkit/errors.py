"""HTTP parser errors and the canned responses sent for them."""

from __future__ import annotations

from enum import IntEnum


class HttpError(IntEnum):
    """Errors the HTTP parser can report."""

    HTTP_VERSION_NOT_SUPPORTED = 1
    REQUEST_HEADER_FIELDS_TOO_LARGE = 2
    BAD_REQUEST = 3
    FILE_NOT_FOUND = 4


_RESPONSES = {
    HttpError.HTTP_VERSION_NOT_SUPPORTED: (
        b"HTTP/1.1 505 HTTP Version Not Supported\r\n\r\n"
        b"<h1>HTTP Version Not Supported</h1>"
        b"<p>This server does not support HTTP/1.0.</p><hr><i>uWebSockets/20 Server</i>"
    ),
    HttpError.REQUEST_HEADER_FIELDS_TOO_LARGE: (
        b"HTTP/1.1 431 Request Header Fields Too Large\r\n\r\n"
        b"<h1>Request Header Fields Too Large</h1><hr><i>uWebSockets/20 Server</i>"
    ),
    HttpError.BAD_REQUEST: (
        b"HTTP/1.1 400 Bad Request\r\n\r\n"
        b"<h1>Bad Request</h1><hr><i>uWebSockets/20 Server</i>"
    ),
    HttpError.FILE_NOT_FOUND: (
        b"HTTP/1.1 404 File Not Found\r\n\r\n"
        b"<h1>File Not Found</h1><hr><i>uWebSockets/20 Server</i>"
    ),
}


def error_response(error: HttpError | int) -> bytes:
    """Return the raw HTTP response for a parser error.

    Raises ValueError for a value that is not a known error.
    """
    return _RESPONSES[HttpError(error)]