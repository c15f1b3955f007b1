import pytest

from patternkit.messaging import (
    Message,
    Queue,
    ReceiveTimeoutError,
    Session,
    Subscription,
    Topic,
    TopicClosedError,
    User,
)

TOPIC = "seeking passengers"


def make_topic():
    return Topic(name=TOPIC, user_queue_size=5)


def test_subscribers_receive_published_messages():
    topic = make_topic()
    tom = topic.subscribe(123, TOPIC)
    lily = topic.subscribe(456, TOPIC)
    texts = [
        "i am looking for 1 passenger",
        "i am looking for 2 passenger",
        "i am looking for passenger as many as i can",
    ]
    for name, text in zip(["lily", "lucy", "rose"], texts):
        topic.publish(Message(text=text, sender=Session(User(123, name))))
    assert [tom.receive().text for _ in texts] == texts
    assert [lily.receive().text for _ in texts] == texts
    assert len(topic.message_history) == 3
    assert topic.message_history[1].sender.user.name == "lucy"


def test_receive_times_out_when_empty():
    topic = make_topic()
    sub = topic.subscribe(1, TOPIC)
    with pytest.raises(ReceiveTimeoutError):
        sub.receive()


def test_cancelled_subscription_raises():
    sub = Subscription(1, TOPIC, 2)
    sub.cancel()
    assert sub.cancelled
    with pytest.raises(TopicClosedError):
        sub.receive()
    with pytest.raises(TopicClosedError):
        sub.publish(Message(text="hi"))


def test_subscription_publish_goes_to_outbox():
    sub = Subscription(7, TOPIC, 2)
    sub.publish(Message(seq=1, text="hello"))
    assert sub.outbox.get_nowait().text == "hello"
    assert sub.id == 7


def test_subscribe_wrong_topic_returns_none():
    topic = make_topic()
    assert topic.subscribe(1, "other") is None
    assert topic.subscribers == {}


def test_subscribe_twice_returns_same_subscription():
    topic = make_topic()
    first = topic.subscribe(1, TOPIC)
    assert topic.subscribe(1, TOPIC) is first
    assert len(topic.subscribers) == 1


def test_unsubscribe_removes_subscriber():
    topic = make_topic()
    sub = topic.subscribe(1, TOPIC)
    topic.subscribe(2, TOPIC)
    topic.unsubscribe(sub)
    assert list(topic.subscribers) == [2]


def test_delete_clears_topic():
    topic = make_topic()
    topic.subscribe(1, TOPIC)
    topic.publish(Message(text="x"))
    topic.delete()
    assert topic.name == ""
    assert topic.subscribers == {}
    assert topic.message_history == []


def test_queue_add_topic_is_idempotent():
    q = Queue()
    first = q.add_topic("news", 3)
    second = q.add_topic("news", 9)
    assert first is second
    assert second.user_queue_size == 3
    assert list(q.topics) == ["news"]