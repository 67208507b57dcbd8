"""Automatic assignment of topic aliases for outgoing PUBLISH messages."""

from __future__ import annotations

import threading

from .publish import Publish, PublishProperties


class TopicAliasHandler:
    """Tracks topic aliases (1..maximum) and substitutes them on publish."""

    def __init__(self, maximum: int) -> None:
        self._lock = threading.Lock()
        self._aliases = [""] * (maximum + 1)

    def get_topic(self, alias: int) -> str:
        """Return the topic for ``alias``, or an empty string if unknown."""
        with self._lock:
            if alias < 0 or alias >= len(self._aliases):
                return ""
            return self._aliases[alias]

    def get_alias(self, topic: str) -> int:
        """Return the alias for ``topic``, or 0 if it has none."""
        with self._lock:
            return next((i for i, name in enumerate(self._aliases) if name == topic), 0)

    def set_alias(self, topic: str) -> int:
        """Assign the first free alias to ``topic``; return 0 if none is free."""
        with self._lock:
            for alias in range(1, len(self._aliases)):
                if not self._aliases[alias]:
                    self._aliases[alias] = topic
                    return alias
        return 0

    def reset_alias(self, topic: str, alias: int) -> None:
        """Bind ``alias`` to ``topic``, replacing any previous binding."""
        with self._lock:
            self._aliases[alias] = topic

    def publish_hook(self, publish: Publish) -> None:
        """Replace the publish's topic with an alias where possible."""
        props = publish.properties
        if props is not None and props.topic_alias is not None:
            self.reset_alias(publish.topic, props.topic_alias)
            return

        alias = self.get_alias(publish.topic) or self.set_alias(publish.topic)
        if alias:
            if publish.properties is None:
                publish.properties = PublishProperties()
            publish.properties.topic_alias = alias
            publish.topic = ""