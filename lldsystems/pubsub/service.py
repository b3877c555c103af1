"""The publish/subscribe service: registries of topics and subscribers."""

from __future__ import annotations

import random
import string
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType

from lldsystems.pubsub.message import Message
from lldsystems.pubsub.subscribers import Subscriber, create_subscriber
from lldsystems.pubsub.topic import Topic

__all__ = [
    "PubSubService",
    "TopicNotFoundError",
    "SubscriberNotFoundError",
    "get_instance",
]

_ID_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
_ID_LENGTH = 10
_TOPIC_PREFIX = "TOP:"
_SUBSCRIBER_PREFIX = "SUB:"


class TopicNotFoundError(KeyError):
    """No topic is registered under the given id."""


class SubscriberNotFoundError(KeyError):
    """No subscriber is registered under the given id."""


def _random_string(length: int) -> str:
    return "".join(random.choices(_ID_ALPHABET, k=length))


def _fresh_id(prefix: str, taken: Mapping[str, object]) -> str:
    while True:
        candidate = prefix + _random_string(_ID_LENGTH)
        if candidate not in taken:
            return candidate


class PubSubService:
    """Creates topics and subscribers, wires them together and publishes."""

    def __init__(self) -> None:
        self._topics: dict[str, Topic] = {}
        self._subscribers: dict[str, Subscriber] = {}

    @property
    def topics(self) -> Mapping[str, Topic]:
        """Read-only view of registered topics by id."""
        return MappingProxyType(self._topics)

    @property
    def subscribers(self) -> Mapping[str, Subscriber]:
        """Read-only view of registered subscribers by id."""
        return MappingProxyType(self._subscribers)

    def create_topic(self, name: str) -> str:
        """Register a new topic and return its id."""
        topic_id = _fresh_id(_TOPIC_PREFIX, self._topics)
        self._topics[topic_id] = Topic(topic_id, name)
        return topic_id

    def remove_topic(self, topic_id: str) -> None:
        """Drop a topic; unknown ids are ignored."""
        self._topics.pop(topic_id, None)

    def create_subscriber(self, kind: str, name: str) -> str:
        """Register a new subscriber of the given kind and return its id."""
        subscriber_id = _fresh_id(_SUBSCRIBER_PREFIX, self._subscribers)
        self._subscribers[subscriber_id] = create_subscriber(kind, subscriber_id, name)
        return subscriber_id

    def remove_subscriber(self, subscriber_id: str) -> None:
        """Drop a subscriber and detach it from every topic; unknown ids are ignored."""
        subscriber = self._subscribers.pop(subscriber_id, None)
        if subscriber is None:
            return
        for topic in self._topics.values():
            topic.remove_subscriber(subscriber)

    def subscribe(self, subscriber_id: str, topic_id: str) -> None:
        """Attach a subscriber to a topic."""
        topic = self._find_topic(topic_id)
        topic.add_subscriber(self._find_subscriber(subscriber_id))

    def unsubscribe(self, subscriber_id: str, topic_id: str) -> None:
        """Detach a subscriber from a topic."""
        topic = self._find_topic(topic_id)
        topic.remove_subscriber(self._find_subscriber(subscriber_id))

    def publish(self, topic_id: str, message: Message) -> None:
        """Broadcast a message to all subscribers of a topic."""
        self._find_topic(topic_id).broadcast(message)

    def _find_topic(self, topic_id: str) -> Topic:
        try:
            return self._topics[topic_id]
        except KeyError:
            raise TopicNotFoundError(topic_id) from None

    def _find_subscriber(self, subscriber_id: str) -> Subscriber:
        try:
            return self._subscribers[subscriber_id]
        except KeyError:
            raise SubscriberNotFoundError(subscriber_id) from None


@lru_cache(maxsize=None)
def get_instance() -> PubSubService:
    """Return the process-wide shared service."""
    return PubSubService()