from tsmine.chords.interval import Interval


def test_equality_uses_all_fields():
    assert Interval(1, 4, "a") == Interval(1, 4, "a")
    assert not Interval(1, 4, "a") == Interval(1, 4, "b")
    assert not Interval(1, 4, "a") == Interval(1, 5, "a")


def test_less_than_requires_earlier_bounds_and_other_symbol():
    assert Interval(1, 4, "a") < Interval(2, 5, "b")
    assert Interval(1, 4, "a") < Interval(1, 4, "b")
    assert not Interval(1, 4, "a") < Interval(2, 5, "a")
    assert not Interval(3, 4, "a") < Interval(2, 5, "b")
    assert not Interval(1, 6, "a") < Interval(2, 5, "b")


def test_hashable_and_deduplicated_in_sets():
    intervals = {Interval(1, 4, "a"), Interval(1, 4, "a"), Interval(0, 2, "b")}
    assert len(intervals) == 2


def test_format():
    text = Interval(1, 4, "a").format()
    assert text == (
        "------------------ Interval ------------------\n(a [1,4])\n"
    )