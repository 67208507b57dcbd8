from mqttv5kit.connection import (
    Auth,
    AuthProperties,
    AuthResponse,
    Connack,
    ConnackProperties,
    Connect,
    ConnectProperties,
    Disconnect,
    DisconnectProperties,
    WillMessage,
    WillProperties,
)
from mqttv5kit.userprops import UserProperties


def test_connect_properties_defaults_request_problem_info():
    props = ConnectProperties()
    assert props.request_problem_info is True
    assert props.request_response_info is False
    assert props.session_expiry_interval is None


def test_connect_user_properties_are_independent():
    first = ConnectProperties()
    second = ConnectProperties()
    first.user.add("a", "b")
    assert second.user == []
    assert first.user.get("a") == "b"


def test_connect_carries_will():
    will = WillMessage(retain=True, qos=1, topic="last/will", payload=b"bye")
    connect = Connect(
        client_id="client1",
        keep_alive=30,
        clean_start=True,
        will_message=will,
        will_properties=WillProperties(content_type="text/plain"),
    )
    assert connect.will_message.topic == "last/will"
    assert connect.will_message.payload == b"bye"
    assert connect.will_properties.content_type == "text/plain"
    assert connect.properties is None


def test_connack_properties_default_availability():
    props = ConnackProperties()
    assert props.wildcard_sub_available
    assert props.sub_id_available
    assert props.shared_sub_available
    assert props.retain_available


def test_connack_properties_str_defaults():
    text = str(ConnackProperties())
    assert text == (
        "\tRetainAvailable:true\n"
        "\tWildcardSubAvailable:true\n"
        "\tSubIDAvailable:true\n"
        "\tSharedSubAvailable:true\n"
    )


def test_connack_properties_str_optional_fields():
    props = ConnackProperties(
        session_expiry_interval=60,
        assigned_client_id="assigned",
        server_keep_alive=15,
        receive_maximum=20,
        retain_available=False,
    )
    text = str(props)
    assert "\tSessionExpiryInterval:60\n" in text
    assert "\tAssignedClientID:assigned\n" in text
    assert "\tServerKeepAlive:15\n" in text
    assert "\tReceiveMaximum:20\n" in text
    assert "\tRetainAvailable:false\n" in text
    assert "MaximumPacketSize" not in text
    assert text.index("SessionExpiryInterval") < text.index("AssignedClientID")


def test_connack_properties_str_auth_data_uppercase_hex():
    text = str(ConnackProperties(auth_data=b"\x01\xab"))
    assert "\tAuthData:01AB\n" in text


def test_connack_properties_str_user_properties():
    props = ConnackProperties(user=UserProperties([("k1", "v1"), ("k2", "v2")]))
    text = str(props)
    assert text.endswith("\tUser Properties:\n\t\tk1:v1\n\t\tk2:v2\n")


def test_connack_str_includes_properties():
    props = ConnackProperties(reason_string="ok")
    connack = Connack(reason_code=0, session_present=True, properties=props)
    text = str(connack)
    assert text.startswith("CONNACK: ReasonCode:0 SessionPresent:true\nProperties:\n")
    assert text.endswith(str(props))


def test_auth_and_response():
    auth = Auth(reason_code=0x18, properties=AuthProperties(auth_method="SCRAM"))
    assert auth.properties.auth_method == "SCRAM"
    response = AuthResponse(reason_code=0, success=True, properties=AuthProperties())
    assert response.success is True
    assert response.properties.user == []


def test_disconnect_properties():
    disconnect = Disconnect(
        reason_code=4,
        properties=DisconnectProperties(session_expiry_interval=10, reason_string="bye"),
    )
    assert disconnect.reason_code == 4
    assert disconnect.properties.session_expiry_interval == 10
    assert Disconnect() == Disconnect(reason_code=0, properties=None)