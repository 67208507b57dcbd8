"""SUBSCRIBE, SUBACK, UNSUBSCRIBE and UNSUBACK messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from .userprops import UserProperties


@dataclass
class SubscribeOptions:
    """The options for a single subscription within a SUBSCRIBE."""

    topic: str = ""
    qos: int = 0
    retain_handling: int = 0
    no_local: bool = False
    retain_as_published: bool = False


@dataclass
class SubscribeProperties:
    """Properties that can be set on a SUBSCRIBE packet."""

    subscription_identifier: int | None = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Subscribe:
    """An MQTT SUBSCRIBE request."""

    subscriptions: list[SubscribeOptions] = field(default_factory=list)
    properties: SubscribeProperties | None = None


@dataclass
class SubackProperties:
    """Properties that can be set on a SUBACK packet."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Suback:
    """An MQTT SUBACK response; one reason code per requested subscription."""

    reasons: bytes = b""
    properties: SubackProperties | None = None


@dataclass
class UnsubscribeProperties:
    """Properties that can be set on an UNSUBSCRIBE packet."""

    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Unsubscribe:
    """An MQTT UNSUBSCRIBE request."""

    topics: list[str] = field(default_factory=list)
    properties: UnsubscribeProperties | None = None


@dataclass
class UnsubackProperties:
    """Properties that can be set on an UNSUBACK packet."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Unsuback:
    """An MQTT UNSUBACK response; one reason code per requested topic."""

    reasons: bytes = b""
    properties: UnsubackProperties | None = None