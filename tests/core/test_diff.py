from typeahead.core.diff import default_box, diff, index_by_id
from typeahead.domain.types import Item


def make_items(*names: str) -> list[Item]:
    return [Item(name) for name in names]


def test_diff_preserves_order_of_first_sequence() -> None:
    a = make_items("d", "a", "c", "b")
    b = make_items("c", "x")
    assert [item.id for item in diff(a, b)] == ["d", "a", "b"]


def test_diff_uses_id_identity() -> None:
    a = [Item("a", primary_text="One")]
    b = [Item("a", primary_text="Other text")]
    assert diff(a, b) == []


def test_default_box_skips_selected_and_caps() -> None:
    available = make_items("a", "b", "c", "d")
    selected = make_items("b")
    assert [item.id for item in default_box(available, selected, 2)] == ["a", "c"]


def test_default_box_collapses_repeated_ids() -> None:
    available = make_items("a", "a", "b")
    assert [item.id for item in default_box(available, [], 5)] == ["a", "b"]


def test_index_by_id_keeps_first_occurrence() -> None:
    first = Item("a", primary_text="first")
    index = index_by_id([first, Item("a", primary_text="second")])
    assert index["a"].primary_text == "first"
