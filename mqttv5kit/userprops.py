"""User properties carried in the properties section of MQTT v5 packets."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


class UserProperty(NamedTuple):
    """A single user supplied key/value pair."""

    key: str
    value: str


class UserProperties(list[UserProperty]):
    """An ordered list of user properties; keys may repeat."""

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        super().__init__(UserProperty(*item) for item in items)

    def add(self, key: str, value: str) -> UserProperties:
        """Append a property and return self so calls can be chained."""
        self.append(UserProperty(key, value))
        return self

    def get(self, key: str) -> str:
        """Return the value of the first entry with ``key``, or an empty string."""
        return next((prop.value for prop in self if prop.key == key), "")

    def get_all(self, key: str) -> list[str]:
        """Return the values of every entry with ``key``, in order."""
        return [prop.value for prop in self if prop.key == key]