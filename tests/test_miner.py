import pytest

from tsmine.chords.miner import MarginDCIClosedIntersection, MinDurVerticalClosedItemset
from tsmine.chords.sequence import IntervalSequence


def _sequence():
    return IntervalSequence(
        [frozenset({"a"}), frozenset({"a", "b"}), frozenset({"b"})],
        [0, 2, 5],
        [1, 4, 6],
    )


def _sequence_with_common():
    return IntervalSequence(
        [frozenset({"a", "c"}), frozenset({"a", "b", "c"}), frozenset({"b", "c"})],
        [0, 2, 5],
        [1, 4, 6],
    )


def _prepared(**kwargs):
    miner = MarginDCIClosedIntersection(**kwargs)
    miner.preprocess(_sequence())
    return miner


def test_preprocess_builds_item_bits():
    miner = _prepared()
    assert set(miner.item) == {"a", "b"}
    assert len(miner.supp) == 3
    assert miner.item["a"] == (True, True, False)
    assert miner.item["b"] == (False, True, True)


def test_transaction_support_bounds():
    miner = _prepared()
    assert miner.transaction_support((True, True, True)) == sum(miner.supp)
    assert miner.transaction_support((False, False, False)) == 0


def test_cover_of_nothing_is_everything():
    miner = _prepared()
    assert miner.cover([]) == tuple(True for _ in miner.supp)


def test_cover_is_intersection():
    miner = _prepared()
    both = miner.cover(["a", "b"])
    assert miner.cover(["a"]) == miner.item["a"]
    assert miner.is_subset(both, miner.item["a"])
    assert miner.is_subset(both, miner.item["b"])
    assert sum(both) < sum(miner.item["a"])


def test_is_subset():
    assert MinDurVerticalClosedItemset.is_subset((True, False), (True, True)) is True
    assert MinDurVerticalClosedItemset.is_subset((True, True), (True, False)) is False


def test_is_margin():
    miner = MinDurVerticalClosedItemset(alpha=0.2)
    assert miner.is_margin(1, 2) is True
    assert miner.is_margin(9, 10) is False


def test_item_support_bounded_by_occurrences():
    miner = _prepared()
    for symbol, bits in miner.item.items():
        assert 0 <= miner.item_support(symbol) <= miner.transaction_support(bits)


def test_item_support_vanishes_with_large_min_duration():
    miner = _prepared(min_duration=100)
    assert miner.item_support("a") == 0
    assert miner.itemset_support(["a"]) == 0


def test_itemset_support_of_empty_set_is_total():
    miner = _prepared()
    assert miner.itemset_support([]) == sum(miner.supp)


def test_remove_infrequent_drops_everything_for_huge_support():
    miner = _prepared(min_support=10_000)
    assert miner.item == {}


def test_sort_by_supports_orders_by_cardinality():
    miner = MarginDCIClosedIntersection()
    miner.preprocess(_sequence_with_common())
    ordered = miner.sort_by_supports(set(miner.item))
    assert set(ordered) == set(miner.item)
    counts = [sum(miner.item[s]) for s in ordered]
    assert counts == sorted(counts)
    assert ordered[-1] == "c"


def test_add_result_keeps_first():
    miner = MinDurVerticalClosedItemset()
    miner.add_result({"x"}, (True, False))
    miner.add_result({"x"}, (False, True))
    assert miner.result == {frozenset({"x"}): (True, False)}


def test_bottom_closure_and_duplicate():
    miner = MarginDCIClosedIntersection()
    miner.preprocess(_sequence_with_common())
    assert miner.bottom_closure() == ["c"]
    assert miner.is_duplicate(miner.item["b"], ["a"]) is False
    assert miner.is_duplicate(miner.cover(["a", "b"]), ["a"]) is True


def test_run_finds_all_closed_sets():
    miner = MarginDCIClosedIntersection()
    result = miner.run(_sequence())
    assert list(result) == [
        frozenset(),
        frozenset({"a"}),
        frozenset({"a", "b"}),
        frozenset({"b"}),
    ]
    for key, bits in result.items():
        assert miner.cover(key) == bits


def test_run_results_are_closed():
    miner = MarginDCIClosedIntersection()
    result = miner.run(_sequence_with_common())
    assert result
    for key, bits in result.items():
        assert "c" in key
        for symbol, item_bits in miner.item.items():
            if symbol not in key:
                assert not miner.is_subset(bits, item_bits)


def test_support_map_matches_transactions():
    miner = MarginDCIClosedIntersection()
    miner.run(_sequence())
    supports = miner.support_map()
    assert set(supports) == set(miner.result)
    for key, value in supports.items():
        assert value == miner.transaction_support(miner.result[key])


def test_run_respects_min_support():
    miner = MarginDCIClosedIntersection(min_support=3)
    result = miner.run(_sequence())
    assert frozenset() in result
    assert all(miner.transaction_support(bits) >= 3 for bits in result.values())


def test_run_with_nothing_frequent_keeps_bottom():
    miner = MarginDCIClosedIntersection(min_support=6)
    result = miner.run(_sequence())
    assert list(result) == [frozenset()]
    assert result[frozenset()] == (True, True, True)


@pytest.mark.parametrize("alpha", [0.0, 0.3, 0.6])
def test_margin_results_subset_of_closed(alpha):
    closed = MarginDCIClosedIntersection().run(_sequence())
    margin = MarginDCIClosedIntersection(alpha=alpha).run(_sequence())
    assert set(margin) <= set(closed)
    for key, bits in margin.items():
        assert closed[key] == bits