"""Loggers used for debug and error output."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol, runtime_checkable


def _render(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


def _timestamp() -> str:
    return datetime.now().astimezone().isoformat(timespec="microseconds")


@runtime_checkable
class Logger(Protocol):
    """Anything that accepts debug or error lines."""

    def println(self, *args: Any) -> None:
        """Log the arguments separated by spaces."""

    def printf(self, fmt: str, *args: Any) -> None:
        """Log ``fmt`` formatted with ``args`` (printf-style)."""


class NoopLogger:
    """A logger that discards everything it is given, counting what it dropped."""

    def __init__(self) -> None:
        self.discarded = 0

    def println(self, *args: Any) -> None:
        """Discard the arguments."""
        self.discarded += 1

    def printf(self, fmt: str, *args: Any) -> None:
        """Discard the message."""
        self.discarded += 1


class TestLog:
    """Logger that forwards timestamped, prefixed lines to a callable.

    Handy in test suites, where ``target`` can collect the lines so they are
    only shown when something fails. A ``None`` target discards everything.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, target: Callable[[str], object] | None, prefix: str = "") -> None:
        self._target = target
        self._prefix = prefix
        self._lock = threading.Lock()

    def println(self, *args: Any) -> None:
        """Emit the timestamp, prefix and arguments separated by spaces."""
        with self._lock:
            if self._target is None:
                return
            parts = [_timestamp(), self._prefix, *args]
            self._target(" ".join(str(part) for part in parts))

    def printf(self, fmt: str, *args: Any) -> None:
        """Emit the timestamp followed by the prefix and the formatted message."""
        with self._lock:
            if self._target is None:
                return
            self._target(f"{_timestamp()} {self._prefix}{_render(fmt, args)}")