import pytest

from xtkit.joins import cross_join, cross_join_by, unzip, unzip_by
from xtkit.types import Tuple2, Tuple3


LIST_ONE = ["a", "b", "c"]
LIST_TWO = [1, 2, 3]
MIXED = [9.6, 4, "foobar"]


def test_unzip_pairs():
    r1, r2 = unzip([Tuple2("a", 1), Tuple2("b", 2)], 2)
    assert r1 == ["a", "b"]
    assert r2 == [1, 2]


def test_unzip_triples():
    r1, r2, r3 = unzip([Tuple3("a", 1, True), Tuple3("b", 2, False)], 3)
    assert (r1, r2, r3) == (["a", "b"], [1, 2], [True, False])


def test_unzip_empty_gives_arity_empty_lists():
    assert unzip([], 4) == ([], [], [], [])


def test_unzip_wrong_tuple_size_raises():
    with pytest.raises(ValueError):
        unzip([Tuple3("a", 1, 2)], 2)


@pytest.mark.parametrize("arity", [0, 1, 10])
def test_unzip_bad_arity_raises(arity):
    with pytest.raises(ValueError):
        unzip([], arity)


def test_unzip_by():
    r1, r2 = unzip_by(
        [Tuple2("a", 1), Tuple2("b", 2)],
        lambda t: (t.a + t.a, t.b + t.b),
        2,
    )
    assert r1 == ["aa", "bb"]
    assert r2 == [2, 4]


def test_unzip_by_wrong_result_size_raises():
    with pytest.raises(ValueError):
        unzip_by([1, 2], lambda x: (x, x, x), 2)


def test_cross_join_empty_inputs():
    assert cross_join([], LIST_TWO) == []
    assert cross_join(LIST_ONE, []) == []
    assert cross_join([], []) == []


def test_cross_join_single_first():
    assert cross_join(["a"], LIST_TWO) == [
        Tuple2("a", 1),
        Tuple2("a", 2),
        Tuple2("a", 3),
    ]


def test_cross_join_single_second():
    assert cross_join(LIST_ONE, [1]) == [
        Tuple2("a", 1),
        Tuple2("b", 1),
        Tuple2("c", 1),
    ]


def test_cross_join_full():
    assert cross_join(LIST_ONE, LIST_TWO) == [
        Tuple2("a", 1), Tuple2("a", 2), Tuple2("a", 3),
        Tuple2("b", 1), Tuple2("b", 2), Tuple2("b", 3),
        Tuple2("c", 1), Tuple2("c", 2), Tuple2("c", 3),
    ]


def test_cross_join_mixed():
    assert cross_join(LIST_ONE, MIXED) == [
        Tuple2("a", 9.6), Tuple2("a", 4), Tuple2("a", "foobar"),
        Tuple2("b", 9.6), Tuple2("b", 4), Tuple2("b", "foobar"),
        Tuple2("c", 9.6), Tuple2("c", 4), Tuple2("c", "foobar"),
    ]


def test_cross_join_three_lists_size_and_order():
    result = cross_join([1, 2], ["x", "y"], [True, False])
    assert len(result) == 8
    assert result[0] == Tuple3(1, "x", True)
    assert result[1] == Tuple3(1, "x", False)
    assert result[-1] == Tuple3(2, "y", False)


def test_cross_join_bad_arity_raises():
    with pytest.raises(ValueError):
        cross_join([1])


def test_cross_join_by_empty_inputs():
    assert cross_join_by(Tuple2, [], LIST_TWO) == []
    assert cross_join_by(Tuple2, LIST_ONE, []) == []
    assert cross_join_by(Tuple2, [], []) == []


def test_cross_join_by_tuples():
    assert cross_join_by(Tuple2, ["a"], LIST_TWO) == [
        Tuple2("a", 1),
        Tuple2("a", 2),
        Tuple2("a", 3),
    ]
    assert cross_join_by(Tuple2, LIST_ONE, [1]) == [
        Tuple2("a", 1),
        Tuple2("b", 1),
        Tuple2("c", 1),
    ]
    assert cross_join_by(Tuple2, LIST_ONE, LIST_TWO) == [
        Tuple2("a", 1), Tuple2("a", 2), Tuple2("a", 3),
        Tuple2("b", 1), Tuple2("b", 2), Tuple2("b", 3),
        Tuple2("c", 1), Tuple2("c", 2), Tuple2("c", 3),
    ]
    assert cross_join_by(Tuple2, LIST_ONE, MIXED) == [
        Tuple2("a", 9.6), Tuple2("a", 4), Tuple2("a", "foobar"),
        Tuple2("b", 9.6), Tuple2("b", 4), Tuple2("b", "foobar"),
        Tuple2("c", 9.6), Tuple2("c", 4), Tuple2("c", "foobar"),
    ]


def test_cross_join_by_custom_projection():
    assert cross_join_by(lambda s, n: f"{s}{n}", ["a", "b"], [1, 2]) == [
        "a1",
        "a2",
        "b1",
        "b2",
    ]


def test_cross_join_by_bad_arity_raises():
    with pytest.raises(ValueError):
        cross_join_by(Tuple2, *([[1]] * 10))