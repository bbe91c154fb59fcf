import pytest

from dsakit.searching import (
    find_positions,
    has_pair_with_sum,
    is_subset_sum,
    ternary_search,
)


def test_pair_sum_source_example():
    assert has_pair_with_sum([0, -1, 2, -3, 1], -2) is True


def test_pair_sum_absent():
    assert has_pair_with_sum([0, -1, 2, -3, 1], 100) is False


def test_pair_sum_needs_two_elements():
    assert has_pair_with_sum([5], 10) is False
    assert has_pair_with_sum([5, 5], 10) is True


def test_find_positions_duplicates():
    assert find_positions([1.0, 2.0, 1.0], 1.0) == [1, 3]


def test_find_positions_missing():
    assert find_positions([1.5, 2.5], 3.0) == []


def test_find_positions_empty_raises():
    with pytest.raises(ValueError):
        find_positions([], 1.0)


def test_ternary_search_finds_every_element():
    values = list(range(0, 100, 3))
    for value in values:
        index = ternary_search(values, value)
        assert values[index] == value


def test_ternary_search_absent_returns_none():
    values = list(range(0, 100, 3))
    assert ternary_search(values, 1) is None
    assert ternary_search(values, -5) is None
    assert ternary_search(values, 1000) is None
    assert ternary_search([], 7) is None


def test_subset_sum_source_example():
    assert is_subset_sum([3, 34, 4, 12, 5, 2], 9) is True


def test_subset_sum_impossible():
    values = [3, 34, 4, 12, 5, 2]
    assert is_subset_sum(values, sum(values) + 1) is False


def test_subset_sum_whole_set_and_empty_target():
    values = [3, 34, 4, 12, 5, 2]
    assert is_subset_sum(values, sum(values)) is True
    assert is_subset_sum(values, 0) is True