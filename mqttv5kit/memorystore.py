"""Session state stores and an in-memory implementation."""

from __future__ import annotations

import io
import itertools
import threading
from typing import BinaryIO, Protocol, Union, runtime_checkable


@runtime_checkable
class _WriterTo(Protocol):
    def write_to(self, stream: BinaryIO) -> object: ...


PacketData = Union[bytes, bytearray, memoryview, _WriterTo]


def _to_bytes(data: PacketData) -> bytes:
    """Return the serialised form of ``data``."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    buffer = io.BytesIO()
    data.write_to(buffer)
    return buffer.getvalue()


class NotInStoreError(LookupError):
    """Raised when the requested packet identifier is not in the store."""


@runtime_checkable
class Store(Protocol):
    """What a session state store must provide."""

    def put(self, packet_id: int, packet_type: int, data: PacketData) -> None:
        """Store the packet under ``packet_id``."""

    def get(self, packet_id: int) -> BinaryIO:
        """Return a readable stream holding the packet; the caller closes it."""

    def delete(self, packet_id: int) -> None:
        """Remove the packet with ``packet_id``."""

    def list(self) -> list[int]:
        """Return the packet identifiers in the order they were put."""

    def reset(self) -> None:
        """Remove every packet."""


class MemoryStore:
    """A store that keeps packets in memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[int, tuple[int, bytes]] = {}
        self._sequence = itertools.count()

    def put(self, packet_id: int, packet_type: int, data: PacketData) -> None:
        """Store the packet; putting an existing identifier replaces it and moves it last."""
        payload = _to_bytes(data)
        with self._lock:
            self._data[packet_id] = (next(self._sequence), payload)

    def get(self, packet_id: int) -> BinaryIO:
        """Return a stream over the stored packet or raise NotInStoreError."""
        with self._lock:
            try:
                _, payload = self._data[packet_id]
            except KeyError:
                raise NotInStoreError(
                    "the requested ID was not found in the store"
                ) from None
        return io.BytesIO(payload)

    def delete(self, packet_id: int) -> None:
        """Remove the packet or raise NotInStoreError if it is absent."""
        with self._lock:
            if self._data.pop(packet_id, None) is None:
                raise NotInStoreError(
                    f"request to delete packet {packet_id}; packet not found"
                )

    def list(self) -> list[int]:
        """Return the packet identifiers in the order they were put."""
        with self._lock:
            ordered = sorted(self._data.items(), key=lambda item: item[1][0])
        return [packet_id for packet_id, _ in ordered]

    def reset(self) -> None:
        """Remove every packet."""
        with self._lock:
            self._data.clear()