"""Accumulator for bytes received from the printer."""

from __future__ import annotations


class InputBuffer:
    """Append-only record of inbound bytes since the last :meth:`clear`."""

    def __init__(self) -> None:
        self._data = bytearray()

    def append(self, chunk: bytes) -> None:
        self._data.extend(chunk)

    def clear(self) -> None:
        self._data.clear()

    @property
    def last(self) -> int | None:
        """Most recently received byte, or ``None`` when empty."""
        return self._data[-1] if self._data else None

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)
