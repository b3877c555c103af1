from lldsystems.pubsub.message import Message
from lldsystems.pubsub.subscribers import AlertSubscriber, NewsSubscriber
from lldsystems.pubsub.topic import Topic


def make_topic():
    return Topic("TOP:abc", "sports")


def test_identity_fields():
    topic = make_topic()
    assert topic.id == "TOP:abc"
    assert topic.name == "sports"


def test_starts_empty():
    assert make_topic().subscribers == []


def test_add_subscriber_once():
    topic = make_topic()
    news = NewsSubscriber("s1", "n")
    topic.add_subscriber(news)
    topic.add_subscriber(news)
    assert topic.subscribers == [news]


def test_remove_subscriber():
    topic = make_topic()
    news = NewsSubscriber("s1", "n")
    alert = AlertSubscriber("s2", "a")
    topic.add_subscriber(news)
    topic.add_subscriber(alert)
    topic.remove_subscriber(news)
    assert topic.subscribers == [alert]


def test_remove_absent_subscriber_is_harmless():
    topic = make_topic()
    alert = AlertSubscriber("s2", "a")
    topic.add_subscriber(alert)
    topic.remove_subscriber(NewsSubscriber("s1", "n"))
    assert topic.subscribers == [alert]


def test_subscribers_list_is_a_copy():
    topic = make_topic()
    topic.add_subscriber(NewsSubscriber("s1", "n"))
    topic.subscribers.clear()
    assert len(topic.subscribers) == 1


def test_broadcast_reaches_every_subscriber():
    topic = make_topic()
    news = NewsSubscriber("s1", "n")
    alert = AlertSubscriber("s2", "a")
    topic.add_subscriber(news)
    topic.add_subscriber(alert)
    message = Message("goal", timestamp=5)
    topic.broadcast(message)
    assert news.received == [message]
    assert alert.received == [message]


def test_removed_subscriber_misses_broadcast():
    topic = make_topic()
    news = NewsSubscriber("s1", "n")
    topic.add_subscriber(news)
    topic.remove_subscriber(news)
    topic.broadcast(Message("goal"))
    assert news.received == []