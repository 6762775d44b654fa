import pytest

from dsakit.searching import binary_search, find_index, is_sorted, linear_search


@pytest.mark.parametrize(
    "items, key, expected",
    [
        ([5, 6, 7, 8, 9, 10, 11], 4, False),
        ([2, 3, 5, 8, 10, 11], 10, True),
        ([2, 3, 5, 8, 10, 11], 0, False),
        ([2, 3, 5, 8, 10, 11], -100, False),
    ],
)
def test_binary_search_source_cases(items, key, expected):
    assert binary_search(items, key) is expected


def test_binary_search_finds_every_element():
    items = [2, 3, 5, 8, 10, 11]
    assert all(binary_search(items, value) for value in items)


def test_binary_search_empty():
    assert binary_search([], 1) is False


@pytest.mark.parametrize(
    "key, expected",
    [(1, True), (0, False), (3, True), (-2, False), (9, False)],
)
def test_linear_search_source_cases(key, expected):
    assert linear_search([1, 5, 4, 2, 3], key) is expected


def test_linear_search_empty():
    assert linear_search([], 4) is False


@pytest.mark.parametrize(
    "items, expected",
    [
        ([2, 3, 5, 11, 19], True),
        ([2, 6, 4, 7, 8, 9], False),
        ([1, 2, 5, 10, 11, 9], False),
        ([], True),
        ([7], True),
    ],
)
def test_is_sorted(items, expected):
    assert is_sorted(items) is expected


def test_find_index_first_occurrence():
    assert find_index([1, 2, 3, 4, 5, 1], 1) == 0


def test_find_index_missing():
    assert find_index([1, 2, 3, 4, 5, 1], 42) == -1


def test_find_index_points_at_value():
    items = [4, 9, 9, 2, 9]
    index = find_index(items, 9)
    assert items[index] == 9
    assert 9 not in items[:index]