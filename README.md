# mqttv5kit

Pure-Python building blocks for MQTT v5 clients. You can use them to assemble a
client or to test one. The package has no third-party dependencies.

## What's inside

- `mqttv5kit.userprops`: `UserProperty`, a named key/value pair, and
  `UserProperties`, an ordered list of them in which a key may repeat.
  `add(key, value)` appends and returns the list so calls can be chained.
  `get(key)` returns the first value, or `""` if the key is absent.
  `get_all(key)` returns every value for the key.
- `mqttv5kit.publish`: the dataclasses `Publish`, `PublishProperties`,
  `PublishResponse` and `PublishResponseProperties`. `str(publish)` gives a
  readable dump of the topic, QoS, retain flag, the properties that are set and
  the payload.
- `mqttv5kit.connection`: the dataclasses `Connect`, `ConnectProperties`,
  `WillMessage`, `WillProperties`, `Connack`, `ConnackProperties`, `Auth`,
  `AuthProperties`, `AuthResponse`, `Disconnect` and `DisconnectProperties`.
  `str()` of a `Connack` or `ConnackProperties` lists the fields that are set.
- `mqttv5kit.subscription`: the dataclasses `Subscribe`, `SubscribeOptions`,
  `SubscribeProperties`, `Suback`, `SubackProperties`, `Unsubscribe`,
  `UnsubscribeProperties`, `Unsuback` and `UnsubackProperties`.
- `mqttv5kit.router`: `Router` dispatches received `Publish` messages to every
  handler whose topic filter matches. Filters may use `+`, `#` and
  `$share/<group>/...`. You can register several handlers per filter. The
  default handler runs only when no other handler was called. When a message
  carries a topic alias, the router remembers alias-to-topic bindings from
  messages that carry both. `match(route, topic)` exposes the filter matching.
- `mqttv5kit.topicaliases`: `TopicAliasHandler(maximum)` hands out aliases
  `1..maximum`. Its `publish_hook(publish)` replaces the topic of an outgoing
  `Publish` with an alias where one is known or free. If the message already
  carries an alias, the hook rebinds that alias to the message's topic instead.
- `mqttv5kit.sendquota`: `SendQuota` bounds how many QoS 1/2 publishes are in
  flight, and serves waiters in order.
  - `acquire(timeout, cancel)` takes a free slot straight away even when
    `cancel` is already set. Otherwise it waits, and raises
    `QuotaCancelledError` if the `threading.Event` `cancel` is set or if
    `timeout` runs out first.
  - `release()` hands the slot to the next waiter. It raises
    `UnexpectedReleaseError` if the quota is already at its initial value.
  - `retransmit()` takes a slot without ever blocking.
  - The `quota` and `waiting` properties report the current state.
- `mqttv5kit.memorystore`: the `Store` protocol (`put`, `get`, `delete`,
  `list`, `reset`), `MemoryStore` and `NotInStoreError`. Packet data may be
  bytes-like, or any object with a `write_to(stream)` method. `get` returns a
  binary stream. `list` returns identifiers in the order they were put, and
  putting an existing identifier again moves it last. A missing identifier in
  `get` or `delete` raises `NotInStoreError`.
- `mqttv5kit.filestore`: `FileStore(path, prefix, extension)` keeps each packet
  in a file named `<prefix><id><extension>`. A leading `.` is added to the
  extension if it is missing.
  - The folder must already exist. On creation the store writes, reads and
    removes a test file to check that the folder is usable.
  - Writes go through a temporary file that is then renamed.
  - Order is kept through file modification times.
  - `get` or `delete` of a missing packet raises `NotInStoreError`.
- `mqttv5kit.logs`: the `Logger` protocol (`println`, `printf` with
  `%`-style formatting) and two loggers:
  - `NoopLogger` discards messages and counts them in `discarded`.
  - `TestLog(target, prefix)` passes timestamped, prefixed lines to a callable.
    A `None` target discards them.

## Examples

Routing messages:

```python
from mqttv5kit.publish import Publish
from mqttv5kit.router import Router

router = Router(default_handler=lambda p: print("unmatched", p.topic))
router.register_handler("sensors/+/temp", lambda p: print("temp", p.payload))
router.route(Publish(topic="sensors/kitchen/temp", payload=b"21.5"))
```

Assigning topic aliases:

```python
from mqttv5kit.publish import Publish
from mqttv5kit.topicaliases import TopicAliasHandler

aliases = TopicAliasHandler(10)
msg = Publish(topic="sensors/kitchen/temp")
aliases.publish_hook(msg)
print(msg.topic, msg.properties.topic_alias)  # "" 1
```

Limiting messages in flight:

```python
from mqttv5kit.sendquota import SendQuota

quota = SendQuota(20)
quota.acquire(timeout=1.0, cancel=None)
# ... send the message, then once it is acknowledged:
quota.release()
```

Storing session packets:

```python
from mqttv5kit.memorystore import MemoryStore

store = MemoryStore()
store.put(1, 3, b"\x32\x00")
print(store.list())  # [1]
with store.get(1) as stream:
    print(stream.read())
```

## What it does not do

This package does not open network connections. It has no MQTT client. It
does not encode or decode packets on the wire. It does not manage keep-alive
pings. It provides no session state manager that drives the stores and the
send quota, and it has no command-line programs. Stores treat packet data as
opaque bytes.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```