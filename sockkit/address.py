"""Text form of raw IPv4 and IPv6 socket addresses."""

from __future__ import annotations

_IPV4_LENGTH = 4
_IPV6_LENGTH = 16


def address_as_text(binary: bytes | bytearray | memoryview) -> str:
    """Render a raw network address as text.

    Four bytes give dotted decimal, sixteen bytes give eight colon-separated
    groups of four lower-case hex digits, without zero compression. An
    empty address gives an empty string. Raises ValueError for any other
    length.
    """
    raw = bytes(binary)
    if not raw:
        return ""
    if len(raw) == _IPV4_LENGTH:
        return ".".join(str(octet) for octet in raw)
    if len(raw) == _IPV6_LENGTH:
        return ":".join(raw[i : i + 2].hex() for i in range(0, _IPV6_LENGTH, 2))
    raise ValueError(
        f"address must be {_IPV4_LENGTH} or {_IPV6_LENGTH} bytes, got {len(raw)}"
    )