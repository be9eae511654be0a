"""A small 256-bit bloom filter tuned for HTTP request header names."""

from __future__ import annotations

_HASH_MULTIPLIER = 1843993368
_MASK32 = 0xFFFFFFFF


def _as_bytes(key: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


def _positions(key: bytes) -> tuple[int, int, int, int]:
    features = bytes((key[0], key[-1], key[-2], key[len(key) >> 1]))
    scrambled = (int.from_bytes(features, "little") * _HASH_MULTIPLIER) & _MASK32
    a, b, c, d = scrambled.to_bytes(4, "little")
    return a, b, c, d


class BloomFilter:
    """Set-membership filter: no false negatives, possible false positives.

    Keys shorter than two bytes cannot be hashed and are always reported
    as possibly present.
    """

    def __init__(self) -> None:
        self._bits = 0

    def might_have(self, key: str | bytes) -> bool:
        """Return False only if ``key`` was certainly never added."""
        raw = _as_bytes(key)
        if len(raw) < 2:
            return True
        return all(self._bits >> bit & 1 for bit in _positions(raw))

    def add(self, key: str | bytes) -> None:
        """Record ``key``; keys shorter than two bytes are ignored."""
        raw = _as_bytes(key)
        if len(raw) >= 2:
            for bit in _positions(raw):
                self._bits |= 1 << bit

    def reset(self) -> None:
        """Forget every key."""
        self._bits = 0