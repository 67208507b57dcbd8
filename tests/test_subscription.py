from mqttv5kit.subscription import (
    Suback,
    SubackProperties,
    Subscribe,
    SubscribeOptions,
    SubscribeProperties,
    Unsuback,
    UnsubackProperties,
    Unsubscribe,
    UnsubscribeProperties,
)
from mqttv5kit.userprops import UserProperty


def test_subscribe_options_defaults():
    opts = SubscribeOptions(topic="a/b")
    assert opts == SubscribeOptions(
        topic="a/b", qos=0, retain_handling=0, no_local=False, retain_as_published=False
    )


def test_subscribe_lists_are_independent():
    first = Subscribe()
    second = Subscribe()
    first.subscriptions.append(SubscribeOptions(topic="x", qos=1))
    assert second.subscriptions == []
    assert first.subscriptions[0].topic == "x"
    assert first.properties is None


def test_subscribe_properties_user_chaining():
    props = SubscribeProperties(subscription_identifier=7)
    props.user.add("k", "v").add("k", "w")
    assert props.user.get_all("k") == ["v", "w"]
    assert props.user[0] == UserProperty("k", "v")
    assert props.subscription_identifier == 7


def test_suback_keeps_reasons():
    suback = Suback(reasons=bytes([0, 1, 0x80]), properties=SubackProperties(reason_string="ok"))
    assert list(suback.reasons) == [0, 1, 0x80]
    assert suback.properties.reason_string == "ok"
    assert suback.properties.user == []


def test_unsubscribe_topics_and_properties():
    props = UnsubscribeProperties()
    props.user.add("a", "b")
    unsub = Unsubscribe(topics=["t/1", "t/2"], properties=props)
    assert unsub.topics == ["t/1", "t/2"]
    assert unsub.properties.user.get("a") == "b"
    assert Unsubscribe().topics == []


def test_unsuback_equality():
    left = Unsuback(reasons=b"\x00\x11", properties=UnsubackProperties(reason_string="r"))
    right = Unsuback(reasons=b"\x00\x11", properties=UnsubackProperties(reason_string="r"))
    assert left == right
    right.properties.user.add("x", "y")
    assert left != right