import array
import collections

import pytest

from featurekit.algorithms import (
    count_if,
    find_min_max,
    sort_container,
    transform_to_list,
)


class Keyed:
    def __init__(self, key, label):
        self.key = key
        self.label = label

    def __lt__(self, other):
        return self.key < other.key


def _is_sorted(items):
    values = list(items)
    return all(a <= b for a, b in zip(values, values[1:]))


def test_sort_container_documented_example():
    numbers = [3, 1, 4, 1, 5, 9]
    assert sort_container(numbers) is None
    assert numbers == [1, 1, 3, 4, 5, 9]


@pytest.mark.parametrize(
    "container",
    [
        [42, 17, 89, 3, 56, 23, 78, 12, 95, 34],
        collections.deque([8, 7, 6, 5, 4]),
        bytearray(b"dcba"),
        array.array("i", [9, 2, 6, 5, 3]),
        [],
        [42],
    ],
)
def test_sort_container_sorts_in_place_and_keeps_elements(container):
    before = collections.Counter(container)
    kind = type(container)
    sort_container(container)
    assert type(container) is kind
    assert _is_sorted(container)
    assert collections.Counter(container) == before


def test_sort_container_strings():
    words = ["cherry", "banana", "elderberry", "date", "apple"]
    sort_container(words)
    assert words[0] == "apple"
    assert _is_sorted(words)


@pytest.mark.parametrize("container", [(3, 1, 2), "dcba", {3, 1, 2}, {"b": 1}])
def test_sort_container_rejects_non_mutable_sequences(container):
    with pytest.raises(TypeError):
        sort_container(container)


def test_count_if_documented_example():
    assert count_if([1, 2, 3, 4, 5, 6], lambda n: n % 2 == 0) == 3


def test_count_if_bounds_and_generators():
    numbers = [42, 17, 89, 3, 56, 23, 78, 12, 95, 34]
    assert count_if(numbers, lambda n: True) == len(numbers)
    assert count_if(numbers, lambda n: False) == 0
    evens = count_if(numbers, lambda n: n % 2 == 0)
    odds = count_if(iter(numbers), lambda n: n % 2 == 1)
    assert evens + odds == len(numbers)


def test_count_if_empty():
    assert count_if([], lambda n: True) == 0


def test_transform_to_list_documented_example():
    assert transform_to_list([1, 2, 3, 4, 5], lambda n: n * n) == [1, 4, 9, 16, 25]


def test_transform_to_list_keeps_order_and_length():
    words = ("cherry", "banana", "date")
    result = transform_to_list(words, str.upper)
    assert result == ["CHERRY", "BANANA", "DATE"]
    assert transform_to_list(result, str.lower) == list(words)


def test_transform_to_list_empty():
    assert transform_to_list([], lambda n: n) == []


def test_find_min_max_documented_example():
    assert find_min_max([3, 1, 4, 1, 5, 9, 2, 6]) == (1, 9)


def test_find_min_max_strings_and_generators():
    words = ["cherry", "banana", "elderberry", "date", "apple"]
    assert find_min_max(words) == (min(words), max(words))
    assert find_min_max(iter(words)) == find_min_max(words)


def test_find_min_max_single_element():
    assert find_min_max([7]) == (7, 7)


def test_find_min_max_tie_breaking():
    items = [Keyed(1, "a"), Keyed(5, "b"), Keyed(1, "c"), Keyed(5, "d")]
    smallest, largest = find_min_max(items)
    assert smallest is items[0]
    assert largest is items[3]


def test_find_min_max_empty_raises():
    with pytest.raises(ValueError):
        find_min_max([])