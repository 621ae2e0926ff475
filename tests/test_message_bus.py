from agentcore.multiagent.agent_model import (
    Broadcast,
    Direct,
    Envelope,
    Message,
    MessageKind,
    Topic,
)
from agentcore.multiagent.message_bus import MessageBus


def make_envelope(sender, recipient, content_id):
    return Envelope(
        sender=sender,
        recipient=recipient,
        message=Message(MessageKind.TASK, content_id),
        sequence_num=0,
    )


def test_send_assigns_sequence_numbers():
    bus = MessageBus()
    bus.send(make_envelope(1, Direct(2), 100))
    bus.send(make_envelope(1, Direct(3), 101))
    assert len(bus.queue) == 2
    assert bus.queue[0].sequence_num == 0
    assert bus.queue[1].sequence_num == 1
    assert bus.next_seq == 2


def test_deliver_moves_to_delivered():
    bus = MessageBus()
    bus.send(make_envelope(1, Direct(2), 100))
    bus.send(make_envelope(1, Direct(3), 101))
    bus.send(make_envelope(1, Broadcast(), 102))
    delivered = bus.deliver(2)
    assert [env.message.content_id for env in delivered] == [100, 102]
    assert len(bus.queue) == 1
    assert len(bus.delivered) == 2


def test_deliver_skips_topic_envelopes():
    bus = MessageBus()
    bus.send(make_envelope(1, Topic(5), 100))
    assert bus.deliver(5) == []
    assert bus.pending_count() == 1


def test_deliver_next_fifo():
    bus = MessageBus()
    bus.send(make_envelope(1, Direct(2), 100))
    bus.send(make_envelope(1, Direct(3), 101))
    first = bus.deliver_next()
    assert first.message.content_id == 100
    assert len(bus.queue) == 1
    assert len(bus.delivered) == 1
    second = bus.deliver_next()
    assert second.message.content_id == 101
    assert bus.deliver_next() is None


def test_bus_empty():
    bus = MessageBus()
    assert bus.is_empty()
    assert bus.pending_count() == 0
    assert bus.delivered_count() == 0


def test_counts_after_delivery():
    bus = MessageBus()
    bus.send(make_envelope(1, Direct(2), 100))
    bus.send(make_envelope(1, Direct(3), 101))
    bus.deliver(3)
    assert bus.pending_count() == 1
    assert bus.delivered_count() == 1
    assert not bus.is_empty()