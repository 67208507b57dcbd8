import pytest

from mqttv5kit.publish import Publish, PublishProperties
from mqttv5kit.topicaliases import TopicAliasHandler


def _handler(maximum, aliases):
    h = TopicAliasHandler(maximum)
    for index, topic in enumerate(aliases):
        if topic:
            h.reset_alias(topic, index)
    return h


def _aliases(h, count):
    return [h.get_topic(i) for i in range(count)]


@pytest.mark.parametrize(
    "maximum,aliases,publish,expected,expected_aliases",
    [
        (
            4,
            ["", "", "", "test", ""],
            Publish(topic="test"),
            Publish(properties=PublishProperties(topic_alias=3)),
            ["", "", "", "test", ""],
        ),
        (
            4,
            ["", "", "", "test", ""],
            Publish(topic="test2", properties=PublishProperties(topic_alias=3)),
            Publish(topic="test2", properties=PublishProperties(topic_alias=3)),
            ["", "", "", "test2", ""],
        ),
        (
            4,
            ["", "", "", "", ""],
            Publish(topic="test"),
            Publish(properties=PublishProperties(topic_alias=1)),
            ["", "test", "", "", ""],
        ),
        (
            4,
            ["", "", "", "", ""],
            Publish(topic="test", properties=PublishProperties()),
            Publish(properties=PublishProperties(topic_alias=1)),
            ["", "test", "", "", ""],
        ),
        (
            1,
            ["", "full"],
            Publish(topic="test"),
            Publish(topic="test"),
            ["", "full"],
        ),
    ],
    ids=["has alias", "reset alias", "no alias", "properties no alias", "no alias free"],
)
def test_publish_hook(maximum, aliases, publish, expected, expected_aliases):
    h = _handler(maximum, aliases)
    h.publish_hook(publish)
    assert publish == expected
    assert _aliases(h, len(expected_aliases)) == expected_aliases


def test_set_alias_fills_in_order_then_exhausts():
    h = TopicAliasHandler(2)
    assert h.set_alias("a") == 1
    assert h.set_alias("b") == 2
    assert h.set_alias("c") == 0
    assert h.get_alias("b") == 2
    assert h.get_alias("missing") == 0


def test_get_topic_out_of_range_is_empty():
    h = TopicAliasHandler(2)
    h.set_alias("a")
    assert h.get_topic(1) == "a"
    assert h.get_topic(50) == ""


def test_reset_alias_out_of_range_raises():
    h = TopicAliasHandler(2)
    with pytest.raises(IndexError):
        h.reset_alias("x", 10)