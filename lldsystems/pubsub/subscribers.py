"""Subscribers that receive messages from topics, and a factory for them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from lldsystems.pubsub.message import Message

__all__ = ["Subscriber", "NewsSubscriber", "AlertSubscriber", "create_subscriber"]


class Subscriber(ABC):
    """Something that can be subscribed to topics and told of new messages."""

    def __init__(self, subscriber_id: str, name: str) -> None:
        self.id = subscriber_id
        self.name = name
        self.received: list[Message] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r})"

    @abstractmethod
    def on_message(self, message: Message) -> None:
        """Handle a message published to a subscribed topic."""


class NewsSubscriber(Subscriber):
    """Subscriber for news items."""

    kind = "news"

    def on_message(self, message: Message) -> None:
        self.received.append(message)


class AlertSubscriber(Subscriber):
    """Subscriber for alerts."""

    kind = "alert"

    def on_message(self, message: Message) -> None:
        self.received.append(message)


_KINDS: dict[str, type[Subscriber]] = {
    NewsSubscriber.kind: NewsSubscriber,
    AlertSubscriber.kind: AlertSubscriber,
}


def create_subscriber(kind: str, subscriber_id: str, name: str) -> Subscriber:
    """Build a subscriber of the given kind ("news" or "alert")."""
    try:
        cls = _KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown subscriber kind: {kind!r}") from None
    return cls(subscriber_id, name)