"""Path normalisation and content types for a simple static file server."""

from __future__ import annotations

_CONTENT_TYPES = {
    ".css": "text/css",
    ".js": "text/javascript",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".png": "image/png",
    ".ico": "image/vnd.microsoft.icon",
}


def has_ext(file: str, ext: str) -> bool:
    """True if ``file`` ends with ``ext``."""
    return len(ext) <= len(file) and file.endswith(ext)


def _extension(path: str) -> str:
    dot = path.rfind(".")
    return path[dot:] if dot != -1 else ""


def resolve_request_path(url: str) -> str:
    """Normalise a request URL to a path under the web root.

    The result always starts with '/', and a directory maps to its
    index.html. Raises ValueError for an empty URL.
    """
    if not url:
        raise ValueError("empty request path")
    path = url if url.startswith("/") else "/" + url
    if path.endswith("/"):
        path += "index.html"
    return path


def content_type_for(path: str) -> str:
    """Content-Type for a requested URL; directories are served as HTML.

    Raises ValueError for an empty URL.
    """
    if not path:
        raise ValueError("empty request path")
    if path.endswith("/"):
        return "text/html"
    return _CONTENT_TYPES.get(_extension(path), "text/plain")