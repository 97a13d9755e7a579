"""Tests for EffectBus."""

import pytest

from typeahead.domain.events import EffectBus
from typeahead.domain.events.types import (
    BlurAcknowledged,
    Effect,
    FocusAcknowledged,
    ItemAdded,
    ItemRemoved,
)


@pytest.fixture
def bus():
    return EffectBus()


def test_publish_reaches_subscribers_of_the_type(bus):
    received = []
    bus.subscribe(ItemAdded, received.append)

    bus.publish(ItemAdded("apple"))
    bus.publish(ItemRemoved("apple"))

    assert received == [ItemAdded("apple")]


def test_base_type_subscription_receives_everything(bus):
    received = []
    bus.subscribe(Effect, received.append)

    bus.publish_all([FocusAcknowledged(), ItemAdded("a"), BlurAcknowledged()])

    assert received == [FocusAcknowledged(), ItemAdded("a"), BlurAcknowledged()]
    assert bus.has_subscribers(ItemRemoved)


def test_specific_handlers_run_before_base_handlers(bus):
    order = []
    bus.subscribe(Effect, lambda effect: order.append("base"))
    bus.subscribe(ItemAdded, lambda effect: order.append("specific"))

    bus.publish(ItemAdded("a"))

    assert order == ["specific", "base"]


def test_duplicate_subscription_is_ignored(bus):
    received = []
    bus.subscribe(ItemAdded, received.append)
    bus.subscribe(ItemAdded, received.append)

    bus.publish(ItemAdded("a"))

    assert len(received) == 1


def test_async_handler_rejected(bus):
    async def handler(effect):
        pass

    with pytest.raises(TypeError, match="must be synchronous"):
        bus.subscribe(ItemAdded, handler)


def test_failing_handler_does_not_stop_others(bus):
    received = []

    def broken(effect):
        raise RuntimeError("boom")

    bus.subscribe(ItemAdded, broken)
    bus.subscribe(ItemAdded, received.append)

    bus.publish(ItemAdded("a"))

    assert received == [ItemAdded("a")]


def test_unsubscribe_and_clear(bus):
    received = []
    bus.subscribe(ItemAdded, received.append)
    bus.unsubscribe(ItemAdded, received.append)
    bus.unsubscribe(ItemRemoved, received.append)

    bus.publish(ItemAdded("a"))
    assert received == []

    bus.subscribe(ItemRemoved, received.append)
    bus.clear()
    assert not bus.has_subscribers(ItemRemoved)
