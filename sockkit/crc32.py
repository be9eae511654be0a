"""Bitwise CRC-32 as used by the echo-checksum POST handler."""

from __future__ import annotations

from collections.abc import Iterable

_POLY = 0xEDB88320
_INIT = 0xFFFFFFFF


def crc32(data: bytes | bytearray | memoryview, crc: int = _INIT) -> int:
    """Feed ``data`` into a running, non-finalised CRC-32 register."""
    for byte in bytes(data):
        for _ in range(8):
            low = (byte ^ crc) & 1
            crc >>= 1
            if low:
                crc ^= _POLY
            byte >>= 1
    return crc


def checksum_hex(chunks: Iterable[bytes | str]) -> str:
    """Finalised CRC-32 of all chunks, as lower-case hex and a newline."""
    crc = _INIT
    for chunk in chunks:
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        if chunk:
            crc = crc32(chunk, crc)
    return f"{~crc & 0xFFFFFFFF:x}\n"