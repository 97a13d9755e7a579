"""Tests for TypeaheadController."""

import pytest

from typeahead.application import TypeaheadController
from typeahead.core import SelectConfig, Variant
from typeahead.domain.events import EffectBus
from typeahead.domain.events.types import (
    BlurAcknowledged,
    Effect,
    FocusAcknowledged,
    ItemAdded,
    ItemRemoved,
)
from typeahead.domain.types import Item, KeyCode, Mode

POOL = [
    Item("apple", primary_text="Apple"),
    Item("banana", primary_text="Banana"),
    Item("cherry", primary_text="Cherry"),
]


@pytest.fixture
def received():
    return []


@pytest.fixture
def controller(received):
    bus = EffectBus()
    bus.subscribe(Effect, received.append)
    config = SelectConfig.create(max_items=2, box_length=5)
    return TypeaheadController(config, POOL, bus=bus)


def test_starts_blurred(controller):
    assert controller.mode is Mode.BLURRED
    assert controller.selected_ids == []
    assert controller.highlight is None
    assert [item.id for item in controller.boxed] == ["apple", "banana", "cherry"]


def test_commit_publishes_effects(controller, received):
    controller.focus()
    controller.text_changed("ch")
    controller.key_pressed("down")
    effects = controller.key_pressed(KeyCode.ENTER)

    assert effects == (ItemAdded("cherry"),)
    assert received == [FocusAcknowledged(), ItemAdded("cherry")]
    assert controller.selected_ids == ["cherry"]
    assert controller.mode is Mode.CLEARED
    assert controller.query == ""


def test_backspace_publishes_removal(controller, received):
    controller.focus()
    controller.item_picked("banana")
    effects = controller.key_pressed(KeyCode.BACKSPACE)

    assert effects == (ItemRemoved("banana"),)
    assert received[-1] == ItemRemoved("banana")
    assert [item.id for item in controller.selected] == []


def test_blur_publishes_acknowledgement(controller, received):
    controller.focus()
    controller.text_changed("a")
    controller.blur()

    assert received == [FocusAcknowledged(), BlurAcknowledged()]
    assert controller.mode is Mode.BLURRED


def test_replace_available(controller):
    controller.focus()
    date = Item("date", primary_text="Date")
    controller.replace_available([date, POOL[0]])

    assert [item.id for item in controller.boxed] == ["date", "apple"]

    controller.key_pressed(KeyCode.ARROW_DOWN)
    effects = controller.key_pressed(KeyCode.ENTER)
    assert effects == (ItemAdded("date"),)

    controller.text_changed("ap")
    assert [item.id for item in controller.boxed] == ["apple"]


def test_initial_selection_and_variant():
    config = SelectConfig.for_variant(Variant.SINGLE, max_items=2, box_length=5)
    controller = TypeaheadController(config, POOL, ["apple"])

    assert controller.selected_ids == ["apple"]
    assert controller.highlight == 0
    assert controller.config is config

    controller.focus()
    controller.key_pressed("enter")
    assert controller.selected_ids == ["apple", "banana"]
