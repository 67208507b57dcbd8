"""Building blocks for MQTT v5 clients: message models, topic routing, topic aliases, send quota and session stores."""

__version__ = "0.1.0"

__all__ = [
    "connection",
    "filestore",
    "logs",
    "memorystore",
    "publish",
    "router",
    "sendquota",
    "subscription",
    "topicaliases",
    "userprops",
]