"""CONNECT, CONNACK, AUTH and DISCONNECT messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from .userprops import UserProperties


@dataclass
class ConnectProperties:
    """Properties that can be set on a CONNECT packet."""

    auth_data: bytes | None = None
    auth_method: str = ""
    session_expiry_interval: int | None = None
    will_delay_interval: int | None = None
    receive_maximum: int | None = None
    topic_alias_maximum: int | None = None
    maximum_qos: int | None = None
    maximum_packet_size: int | None = None
    user: UserProperties = field(default_factory=UserProperties)
    request_problem_info: bool = True
    request_response_info: bool = False


@dataclass
class WillMessage:
    """The last will and testament message sent with a CONNECT."""

    retain: bool = False
    qos: int = 0
    topic: str = ""
    payload: bytes = b""


@dataclass
class WillProperties:
    """Properties that can be set on the will carried by a CONNECT."""

    will_delay_interval: int | None = None
    payload_format: int | None = None
    message_expiry: int | None = None
    content_type: str = ""
    response_topic: str = ""
    correlation_data: bytes | None = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Connect:
    """An MQTT CONNECT request."""

    client_id: str = ""
    keep_alive: int = 0
    clean_start: bool = False
    username: str = ""
    password: bytes = b""
    username_flag: bool = False
    password_flag: bool = False
    properties: ConnectProperties | None = None
    will_message: WillMessage | None = None
    will_properties: WillProperties | None = None


@dataclass
class ConnackProperties:
    """Properties that can be set on a CONNACK packet."""

    session_expiry_interval: int | None = None
    auth_data: bytes | None = None
    auth_method: str = ""
    response_info: str = ""
    server_reference: str = ""
    reason_string: str = ""
    assigned_client_id: str = ""
    maximum_packet_size: int | None = None
    receive_maximum: int | None = None
    topic_alias_maximum: int | None = None
    server_keep_alive: int | None = None
    maximum_qos: int | None = None
    user: UserProperties = field(default_factory=UserProperties)
    wildcard_sub_available: bool = True
    sub_id_available: bool = True
    shared_sub_available: bool = True
    retain_available: bool = True

    def __str__(self) -> str:
        lines: list[str] = []
        if self.session_expiry_interval is not None:
            lines.append(f"\tSessionExpiryInterval:{self.session_expiry_interval}\n")
        if self.assigned_client_id:
            lines.append(f"\tAssignedClientID:{self.assigned_client_id}\n")
        if self.server_keep_alive is not None:
            lines.append(f"\tServerKeepAlive:{self.server_keep_alive}\n")
        if self.auth_method:
            lines.append(f"\tAuthMethod:{self.auth_method}\n")
        if self.auth_data:
            lines.append(f"\tAuthData:{self.auth_data.hex().upper()}\n")
        if self.server_reference:
            lines.append(f"\tServerReference:{self.server_reference}\n")
        if self.reason_string:
            lines.append(f"\tReasonString:{self.reason_string}\n")
        if self.receive_maximum is not None:
            lines.append(f"\tReceiveMaximum:{self.receive_maximum}\n")
        if self.topic_alias_maximum is not None:
            lines.append(f"\tTopicAliasMaximum:{self.topic_alias_maximum}\n")
        lines.append(f"\tRetainAvailable:{str(bool(self.retain_available)).lower()}\n")
        if self.maximum_packet_size is not None:
            lines.append(f"\tMaximumPacketSize:{self.maximum_packet_size}\n")
        lines.append(
            f"\tWildcardSubAvailable:{str(bool(self.wildcard_sub_available)).lower()}\n"
        )
        lines.append(f"\tSubIDAvailable:{str(bool(self.sub_id_available)).lower()}\n")
        lines.append(
            f"\tSharedSubAvailable:{str(bool(self.shared_sub_available)).lower()}\n"
        )
        if self.user:
            lines.append("\tUser Properties:\n")
            lines.extend(f"\t\t{prop.key}:{prop.value}\n" for prop in self.user)
        return "".join(lines)


@dataclass
class Connack:
    """An MQTT CONNACK response."""

    reason_code: int = 0
    session_present: bool = False
    properties: ConnackProperties | None = None

    def __str__(self) -> str:
        props = "<nil>" if self.properties is None else str(self.properties)
        present = str(bool(self.session_present)).lower()
        return (
            f"CONNACK: ReasonCode:{self.reason_code} "
            f"SessionPresent:{present}\nProperties:\n{props}"
        )


@dataclass
class AuthProperties:
    """Properties that can be set on an AUTH packet."""

    auth_data: bytes | None = None
    auth_method: str = ""
    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Auth:
    """An MQTT AUTH packet."""

    reason_code: int = 0
    properties: AuthProperties | None = None


@dataclass
class AuthResponse:
    """The outcome of an authentication exchange."""

    reason_code: int = 0
    success: bool = False
    properties: AuthProperties | None = None


@dataclass
class DisconnectProperties:
    """Properties that can be set on a DISCONNECT packet."""

    server_reference: str = ""
    reason_string: str = ""
    session_expiry_interval: int | None = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Disconnect:
    """An MQTT DISCONNECT packet."""

    reason_code: int = 0
    properties: DisconnectProperties | None = None