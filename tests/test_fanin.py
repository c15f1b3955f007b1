import pytest

from patternkit.fanin import generate_numbers, merge, square_numbers

DATA_1 = [13, 44, 56, 99, 9, 45, 67, 90, 78, 23]
DATA_2 = [2, 4, 6, 9, 1, 1, 2, 3, 7, 8]
SQUARES_1 = [169, 1936, 3136, 9801, 81, 2025, 4489, 8100, 6084, 529]
SQUARES_2 = [4, 16, 36, 81, 1, 1, 4, 9, 49, 64]


def _broken_source():
    yield 1
    raise ValueError("broken source")


def test_fan_in_numbers_seq():
    c1 = square_numbers(generate_numbers(DATA_1))
    c2 = square_numbers(generate_numbers(DATA_2))
    merged = list(merge(c1, c2))
    assert sorted(merged) == sorted(SQUARES_1 + SQUARES_2)
    assert sum(merged) == 36615


def test_fan_in_out_numbers_seq():
    c1 = square_numbers(generate_numbers(DATA_1))
    c2 = square_numbers(generate_numbers(DATA_1))
    merged = list(merge(c1, c2))
    assert sum(merged) == 72700
    assert len(merged) == 20


def test_merge_keeps_order_within_source():
    merged = list(merge(["a1", "a2", "a3"], ["b1", "b2", "b3"]))
    assert [x for x in merged if x.startswith("a")] == ["a1", "a2", "a3"]
    assert [x for x in merged if x.startswith("b")] == ["b1", "b2", "b3"]


def test_square_numbers():
    assert list(square_numbers(generate_numbers([1, 2, 3]))) == [1, 4, 9]


def test_merge_no_sources():
    assert list(merge()) == []


def test_merge_propagates_source_error():
    with pytest.raises(ValueError, match="broken source"):
        list(merge(_broken_source()))