import pytest

from lldsystems.pubsub.message import Message
from lldsystems.pubsub.subscribers import (
    AlertSubscriber,
    NewsSubscriber,
    Subscriber,
    create_subscriber,
)


@pytest.mark.parametrize(
    "kind, cls",
    [("news", NewsSubscriber), ("alert", AlertSubscriber)],
)
def test_factory_builds_kind(kind, cls):
    subscriber = create_subscriber(kind, "SUB:1", "reader")
    assert type(subscriber) is cls
    assert subscriber.id == "SUB:1"
    assert subscriber.name == "reader"


@pytest.mark.parametrize("kind", ["", "sms", "News"])
def test_factory_rejects_unknown_kind(kind):
    with pytest.raises(ValueError):
        create_subscriber(kind, "SUB:1", "reader")


@pytest.mark.parametrize("cls", [NewsSubscriber, AlertSubscriber])
def test_on_message_records_in_order(cls):
    subscriber = cls("id", "name")
    first = Message("one", timestamp=1)
    second = Message("two", timestamp=2)
    subscriber.on_message(first)
    subscriber.on_message(second)
    assert subscriber.received == [first, second]


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Subscriber("id", "name")


def test_new_subscriber_has_no_messages():
    assert create_subscriber("news", "id", "name").received == []