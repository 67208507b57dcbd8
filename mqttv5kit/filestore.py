"""A session state store that keeps each packet in its own file."""

from __future__ import annotations

import fnmatch
import os
import threading
import time
from typing import BinaryIO

from .memorystore import NotInStoreError, PacketData

_FILE_PERMISSIONS = 0o666
_TMP_EXTENSION = ".tmp"


class FileStore:
    """Stores packets as files named ``<prefix><id><extension>`` in a folder.

    Order is kept via file modification times. The folder must already exist;
    a test file is written, read and removed on creation to check it is usable.
    """

    def __init__(self, path: str | os.PathLike[str], prefix: str = "", extension: str = "") -> None:
        if extension and not extension.startswith("."):
            extension = "." + extension
        self._path = os.fspath(path)
        self._prefix = prefix
        self._extension = extension
        self._lock = threading.Lock()
        self._last_mtime_ns = 0

        os.stat(self._path)
        probe = os.path.join(self._path, f"{prefix}TEST{extension}")
        with open(probe, "wb") as handle:
            handle.write(b"test")
        with open(probe, "rb") as handle:
            handle.read()
        os.remove(probe)

    def put(self, packet_id: int, packet_type: int, data: PacketData) -> None:
        """Store the packet, writing a temporary file first and renaming it."""
        with self._lock:
            tmp = self._tmp_path_for(packet_id)
            fd = os.open(tmp, os.O_RDWR | os.O_CREAT | os.O_TRUNC, _FILE_PERMISSIONS)
            with os.fdopen(fd, "wb") as handle:
                if isinstance(data, (bytes, bytearray, memoryview)):
                    handle.write(data)
                else:
                    data.write_to(handle)
            # Keep modification times strictly increasing so ordering survives
            # coarse file-system clocks.
            mtime = max(time.time_ns(), self._last_mtime_ns + 1)
            self._last_mtime_ns = mtime
            os.utime(tmp, ns=(mtime, mtime))
            os.replace(tmp, self._path_for(packet_id))

    def get(self, packet_id: int) -> BinaryIO:
        """Open the stored packet for reading; the caller must close it."""
        with self._lock:
            try:
                return open(self._path_for(packet_id), "rb")
            except FileNotFoundError as exc:
                raise NotInStoreError(f"packet {packet_id} not in store") from exc

    def delete(self, packet_id: int) -> None:
        """Remove the stored packet."""
        with self._lock:
            self._delete(packet_id)

    def list(self) -> list[int]:
        """Return the packet identifiers in the order they were put."""
        with self._lock:
            return self._list()

    def reset(self) -> None:
        """Delete every stored packet; re-raise the last failure, if any."""
        with self._lock:
            failure: Exception | None = None
            for packet_id in self._list():
                try:
                    self._delete(packet_id)
                except NotInStoreError as exc:
                    failure = exc
            if failure is not None:
                raise failure

    def __str__(self) -> str:
        return f"store path: {self._path}, prefix: {self._prefix}, extension: {self._extension}"

    def _list(self) -> list[int]:
        pattern = f"{self._prefix}*{self._extension}"
        found: list[tuple[int, int]] = []
        with os.scandir(self._path) as entries:
            for entry in entries:
                if entry.is_dir() or not fnmatch.fnmatchcase(entry.name, pattern):
                    continue
                name = entry.name
                id_text = name[len(self._prefix):len(name) - len(self._extension)]
                try:
                    packet_id = int(id_text, 10)
                except ValueError:
                    raise ValueError(f"invalid id in filename {name}") from None
                found.append((entry.stat().st_mtime_ns, packet_id & 0xFFFF))
        found.sort(key=lambda item: item[0])
        return [packet_id for _, packet_id in found]

    def _delete(self, packet_id: int) -> None:
        try:
            os.remove(self._path_for(packet_id))
        except FileNotFoundError as exc:
            raise NotInStoreError(f"failed to remove packet file for {packet_id}") from exc

    def _path_for(self, packet_id: int) -> str:
        return os.path.join(self._path, f"{self._prefix}{packet_id}{self._extension}")

    def _tmp_path_for(self, packet_id: int) -> str:
        return os.path.join(self._path, f"{self._prefix}{packet_id}{_TMP_EXTENSION}")