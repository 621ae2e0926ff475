"""Splitting responses into chunks and reassembling streamed chunks."""

from __future__ import annotations


class StreamAccumulator:
    """Collects streamed chunks and keeps their concatenation."""

    def __init__(self) -> None:
        self.chunks: list[bytes] = []
        self._buffer = bytearray()

    def __repr__(self) -> str:
        return f"StreamAccumulator(chunks={self.chunks!r})"

    def add_chunk(self, chunk: bytes) -> None:
        """Record a chunk and extend the accumulated data with it."""
        data = bytes(chunk)
        self.chunks.append(data)
        self._buffer += data

    def is_complete(self, expected_len: int) -> bool:
        """Return whether at least ``expected_len`` bytes have arrived."""
        return len(self._buffer) >= expected_len

    @property
    def accumulated(self) -> bytes:
        """All data received so far."""
        return bytes(self._buffer)


def chunk_response(full: bytes, chunk_size: int) -> list[bytes]:
    """Split ``full`` into chunks of ``chunk_size``; the last may be shorter.

    A chunk size of zero yields no chunks.
    """
    if chunk_size <= 0:
        return []
    data = bytes(full)
    return [data[start:start + chunk_size] for start in range(0, len(data), chunk_size)]