"""Split a byte string into chunks whose sizes are encoded in the data."""

from __future__ import annotations

from collections.abc import Iterator


def make_chunked(data: bytes | bytearray | memoryview) -> Iterator[bytes]:
    """Yield chunks of ``data``.

    Each chunk is preceded by a size byte: 0 means all that remains,
    1-255 a chunk of at most that many bytes.
    """
    raw = bytes(data)
    i = 0
    while i < len(raw):
        size = raw[i]
        i += 1
        remaining = len(raw) - i
        size = remaining if size == 0 else min(size, remaining)
        yield raw[i : i + size]
        i += size