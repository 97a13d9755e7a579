from typeahead.core.ranking import DEFAULT_THRESHOLD, rank, rank_with_scores, score_item
from typeahead.domain.types import Item


def make_pool() -> list[Item]:
    return [
        Item("apple", primary_text="Apple"),
        Item("banana", primary_text="Banana"),
        Item("cherry", primary_text="Cherry"),
    ]


def ids(items: list[Item]) -> list[str]:
    return [item.id for item in items]


def test_exact_match_ranks_first() -> None:
    pool = [Item("unrelated-zzz"), Item("exact")]
    result = rank("exact", pool, 5)
    assert result[0].id == "exact"


def test_unrelated_query_is_dropped() -> None:
    assert rank("zzzzzqqqqq", [Item("apple", primary_text="Apple")], 5) == []


def test_prefix_query_keeps_only_related_items() -> None:
    assert ids(rank("ap", make_pool(), 5)) == ["apple"]


def test_minor_typos_survive_threshold() -> None:
    assert ids(rank("aple", make_pool(), 5)) == ["apple"]
    assert ids(rank("cherri", make_pool(), 5)) == ["cherry"]


def test_threshold_is_configurable() -> None:
    assert rank("cherri", make_pool(), 5, threshold=0.3) == []


def test_ranking_is_deterministic() -> None:
    pool = make_pool() + [Item("apricot", primary_text="Apricot"), Item("grape", primary_text="Grape")]
    assert rank("ap", pool, 5) == rank("ap", pool, 5)
    assert ids(rank("ap", pool, 5)) == ids(rank("ap", list(pool), 5))


def test_ties_keep_pool_order() -> None:
    first = Item("red-1", primary_text="Red")
    second = Item("red-2", primary_text="Red")

    assert ids(rank("red", [first, second], 5)) == ["red-1", "red-2"]
    assert ids(rank("red", [second, first], 5)) == ["red-2", "red-1"]


def test_results_are_sorted_by_score() -> None:
    pool = [
        Item("a", primary_text="Pineapple"),
        Item("b", primary_text="Apple"),
        Item("c", primary_text="Apple pie"),
    ]
    scored = rank_with_scores("apple", pool, 5)
    assert [item.id for item, _ in scored][0] == "b"
    assert [score for _, score in scored] == sorted(score for _, score in scored)


def test_limit_truncates() -> None:
    pool = [Item(f"item-{n}", primary_text="Berry") for n in range(10)]
    assert len(rank("berry", pool, 3)) == 3
    assert rank("berry", pool, 0) == []


def test_empty_inputs_return_nothing() -> None:
    assert rank("ap", [], 5) == []
    assert rank("", make_pool(), 5) == []
    assert rank("   ", make_pool(), 5) == []


def test_secondary_text_and_search_tokens_are_matched() -> None:
    granny = Item("g1", primary_text="Granny Smith", secondary_text="Green cooking variety", search_tokens=["apple"])
    plum = Item("p1", primary_text="Victoria", secondary_text="plum")

    assert score_item("apple", granny) == 0.0
    assert score_item("plum", plum) == 0.0
    assert ids(rank("cooking", [plum, granny], 5)) == ["g1"]


def test_id_is_matched_without_word_boundaries() -> None:
    item = Item("sku-4411", primary_text="Widget")
    assert ids(rank("sku-4411", [item], 5)) == ["sku-4411"]
    assert score_item("4411", item) <= DEFAULT_THRESHOLD


def test_query_is_case_insensitive() -> None:
    assert ids(rank("APPLE", make_pool(), 5)) == ["apple"]
