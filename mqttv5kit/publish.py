"""PUBLISH messages and the responses to QoS 1 and QoS 2 publishes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .userprops import UserProperties


@dataclass
class PublishProperties:
    """Properties that can be set on a PUBLISH packet."""

    correlation_data: bytes | None = None
    content_type: str = ""
    response_topic: str = ""
    payload_format: int | None = None
    message_expiry: int | None = None
    subscription_identifier: int | None = None
    topic_alias: int | None = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Publish:
    """An MQTT PUBLISH message."""

    topic: str = ""
    qos: int = 0
    retain: bool = False
    payload: bytes = b""
    packet_id: int = 0
    properties: PublishProperties | None = None

    def __str__(self) -> str:
        retain = str(bool(self.retain)).lower()
        lines = [f"topic: {self.topic}  qos: {self.qos}  retain: {retain}\n"]
        props = self.properties
        if props is not None:
            if props.payload_format is not None:
                lines.append(f"PayloadFormat: {props.payload_format}\n")
            if props.message_expiry is not None:
                lines.append(f"MessageExpiry: {props.message_expiry}\n")
            if props.content_type:
                lines.append(f"ContentType: {props.content_type}\n")
            if props.response_topic:
                lines.append(f"ResponseTopic: {props.response_topic}\n")
            if props.correlation_data is not None:
                rendered = " ".join(str(b) for b in props.correlation_data)
                lines.append(f"CorrelationData: [{rendered}]\n")
            if props.topic_alias is not None:
                lines.append(f"TopicAlias: {props.topic_alias}\n")
            if props.subscription_identifier is not None:
                lines.append(f"SubscriptionIdentifier: {props.subscription_identifier}\n")
            lines.extend(f"User: {prop.key} : {prop.value}\n" for prop in props.user)
        lines.append(self.payload.decode("utf-8", errors="replace"))
        return "".join(lines)


@dataclass
class PublishResponseProperties:
    """Properties carried by a PUBACK, PUBREC or PUBCOMP."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class PublishResponse:
    """The response to a QoS 1 or QoS 2 publish."""

    reason_code: int = 0
    properties: PublishResponseProperties | None = None