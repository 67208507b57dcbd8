"""Dispatching of received PUBLISH messages to handlers by topic."""

from __future__ import annotations

import threading
from collections.abc import Callable

from .logs import Logger, NoopLogger
from .publish import Publish

MessageHandler = Callable[[Publish], object]


def _route_split(route: str) -> list[str]:
    if not route:
        return []
    parts = route.split("/")
    return parts[2:] if route.startswith("$share") else parts


def _topic_split(topic: str) -> list[str]:
    return topic.split("/") if topic else []


def _match_deep(route: list[str], topic: list[str]) -> bool:
    for pos, level in enumerate(route):
        if level == "#":
            return True
        if pos >= len(topic):
            return False
        if level != "+" and level != topic[pos]:
            return False
    return len(route) == len(topic)


def match(route: str, topic: str) -> bool:
    """Return True if a message on ``topic`` matches the subscription ``route``."""
    return route == topic or _match_deep(_route_split(route), _topic_split(topic))


class Router:
    """Routes messages to every handler whose topic filter matches.

    Multiple handlers may be registered per filter; the default handler is
    called only when no other handler was.
    """

    def __init__(self, default_handler: MessageHandler | None = None) -> None:
        self._lock = threading.Lock()
        self._subscriptions: dict[str, list[MessageHandler]] = {}
        self._aliases: dict[int, str] = {}
        self._default_handler = default_handler
        self._debug: Logger = NoopLogger()

    def register_handler(self, topic: str, handler: MessageHandler) -> None:
        """Add ``handler`` for messages matching ``topic``."""
        self._debug.println("registering handler for:", topic)
        with self._lock:
            self._subscriptions.setdefault(topic, []).append(handler)

    def unregister_handler(self, topic: str) -> None:
        """Remove every handler registered for ``topic``."""
        self._debug.println("unregistering handler for:", topic)
        with self._lock:
            self._subscriptions.pop(topic, None)

    def route(self, publish: Publish) -> None:
        """Call the handlers whose filters match the message's topic."""
        self._debug.println("routing message for:", publish.topic)
        alias = publish.properties.topic_alias if publish.properties is not None else None
        with self._lock:
            if alias is not None:
                self._debug.println("message is using topic aliasing")
                if publish.topic:
                    self._debug.printf(
                        "registering new topic alias '%d' for topic '%s'", alias, publish.topic
                    )
                    self._aliases[alias] = publish.topic
                topic = self._aliases.get(alias, "")
                if alias in self._aliases:
                    self._debug.printf("aliased topic '%d' translates to '%s'", alias, topic)
            else:
                topic = publish.topic
            matched = [
                (route, list(handlers))
                for route, handlers in self._subscriptions.items()
                if match(route, topic)
            ]
            default = self._default_handler

        handler_called = False
        for route, handlers in matched:
            self._debug.println("found handler for:", route)
            for handler in handlers:
                handler(publish)
                handler_called = True

        if not handler_called and default is not None:
            default(publish)

    def set_debug_logger(self, logger: Logger) -> None:
        """Use ``logger`` for debug output."""
        self._debug = logger

    def set_default_handler(self, handler: MessageHandler | None) -> None:
        """Set the handler for messages no other handler takes; ``None`` unsets it."""
        self._debug.println("registering default handler")
        with self._lock:
            self._default_handler = handler