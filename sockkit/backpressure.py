"""Per-socket output buffer with lazy removal from the front."""

from __future__ import annotations


class BackPressure:
    """Bytes waiting to be written to a socket.

    Bytes removed from the front are only marked as pending removal; the
    buffer is compacted once the pending part exceeds 1/32 of its size.
    """

    def __init__(self, initial: bytes = b"") -> None:
        self.buffer = bytearray(initial)
        self.pending_removal = 0
        self.capacity = len(self.buffer)

    def append(self, data: bytes | bytearray | memoryview) -> None:
        """Add ``data`` to the end of the buffer."""
        self.buffer += data
        self.capacity = max(self.capacity, len(self.buffer))

    def erase(self, length: int) -> None:
        """Drop ``length`` bytes from the front."""
        self.pending_removal += length
        if self.pending_removal > (len(self.buffer) >> 5):
            del self.buffer[: self.pending_removal]
            self.pending_removal = 0

    def clear(self) -> None:
        """Drop everything, including pending removals."""
        self.pending_removal = 0
        self.buffer.clear()

    def reserve(self, length: int) -> None:
        """Note that room for ``length`` live bytes is expected."""
        self.capacity = max(self.capacity, length + self.pending_removal)

    def resize(self, length: int) -> None:
        """Set the live length to ``length``, zero-filling or truncating."""
        total = length + self.pending_removal
        if total < len(self.buffer):
            del self.buffer[total:]
        else:
            self.buffer.extend(bytes(total - len(self.buffer)))
        self.capacity = max(self.capacity, len(self.buffer))

    @property
    def data(self) -> bytes:
        """The live bytes, without those pending removal."""
        return bytes(self.buffer[self.pending_removal :])

    @property
    def total_length(self) -> int:
        """Length including bytes pending removal."""
        return len(self.buffer)

    def __len__(self) -> int:
        return len(self.buffer) - self.pending_removal