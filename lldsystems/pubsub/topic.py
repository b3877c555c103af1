"""Topics hold a set of subscribers and fan messages out to them."""

from __future__ import annotations

from lldsystems.pubsub.message import Message
from lldsystems.pubsub.subscribers import Subscriber

__all__ = ["Topic"]


class Topic:
    """A named channel that broadcasts messages to its subscribers."""

    def __init__(self, topic_id: str, name: str) -> None:
        self.id = topic_id
        self.name = name
        # dict keys keep insertion order and reject duplicates
        self._subscribers: dict[Subscriber, None] = {}

    def __repr__(self) -> str:
        return f"Topic(id={self.id!r}, name={self.name!r})"

    @property
    def subscribers(self) -> list[Subscriber]:
        """The current subscribers, as a fresh list."""
        return list(self._subscribers)

    def add_subscriber(self, subscriber: Subscriber) -> None:
        """Add a subscriber; adding one twice has no further effect."""
        self._subscribers[subscriber] = None

    def remove_subscriber(self, subscriber: Subscriber) -> None:
        """Remove a subscriber if it is present."""
        self._subscribers.pop(subscriber, None)

    def broadcast(self, message: Message) -> None:
        """Deliver a message to every subscriber."""
        for subscriber in list(self._subscribers):
            subscriber.on_message(message)