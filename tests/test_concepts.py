import array
import collections
import dataclasses
import threading
import types

import pytest

from featurekit.concepts import (
    is_addable_type,
    is_arithmetic_type,
    is_comparable_type,
    is_copyable_type,
    is_default_constructible_type,
    is_iterable_container,
    is_numeric_type,
    is_printable_type,
    is_range_container,
    is_sortable_container,
    is_string_like_type,
    is_subtractable_type,
)


class Plain:
    pass


class NonDefaultConstructible:
    def __init__(self, value):
        self.value = value


class NonCopyable:
    def __copy__(self):
        raise TypeError("instances cannot be copied")


class WithText:
    def __str__(self):
        return "text"


@dataclasses.dataclass
class Record:
    name: str = ""


class MyText(str):
    pass


@pytest.mark.parametrize("tp", [int, float, bool])
def test_arithmetic_valid(tp):
    assert is_arithmetic_type(tp) is True


@pytest.mark.parametrize("tp", [str, list, list[int], object, type(None), complex])
def test_arithmetic_invalid(tp):
    assert is_arithmetic_type(tp) is False


@pytest.mark.parametrize("tp", [int, float, str])
def test_addable_valid(tp):
    assert is_addable_type(tp) is True


@pytest.mark.parametrize("tp", [bool, object, type(None), dict, Plain])
def test_addable_invalid(tp):
    assert is_addable_type(tp) is False


def test_list_concatenation_counts_as_addition():
    assert is_addable_type(list) is True


@pytest.mark.parametrize("tp", [int, float, set])
def test_subtractable_valid(tp):
    assert is_subtractable_type(tp) is True


@pytest.mark.parametrize("tp", [str, bool, list, object])
def test_subtractable_invalid(tp):
    assert is_subtractable_type(tp) is False


@pytest.mark.parametrize("tp", [int, float])
def test_numeric_valid(tp):
    assert is_numeric_type(tp) is True


@pytest.mark.parametrize("tp", [str, list, bool, set])
def test_numeric_invalid(tp):
    assert is_numeric_type(tp) is False


@pytest.mark.parametrize(
    "tp", [list, tuple, collections.deque, set, dict, dict[int, str], str, range]
)
def test_iterable_container_valid(tp):
    assert is_iterable_container(tp) is True


@pytest.mark.parametrize("tp", [int, float, object, type(None), types.GeneratorType])
def test_iterable_container_invalid(tp):
    assert is_iterable_container(tp) is False


@pytest.mark.parametrize(
    "tp", [list, tuple, collections.deque, set, dict, str, frozenset, types.GeneratorType]
)
def test_range_container_valid(tp):
    assert is_range_container(tp) is True


@pytest.mark.parametrize("tp", [int, float, object, type(None)])
def test_range_container_invalid(tp):
    assert is_range_container(tp) is False


@pytest.mark.parametrize(
    "tp", [list, list[int], collections.deque, bytearray, array.array]
)
def test_sortable_container_valid(tp):
    assert is_sortable_container(tp) is True


@pytest.mark.parametrize(
    "tp", [tuple, set, dict, str, int, float, object, list[complex], list[Plain]]
)
def test_sortable_container_invalid(tp):
    assert is_sortable_container(tp) is False


@pytest.mark.parametrize("tp", [str, MyText])
def test_string_like_valid(tp):
    assert is_string_like_type(tp) is True


@pytest.mark.parametrize("tp", [int, float, object, bytes, list, bytearray])
def test_string_like_invalid(tp):
    assert is_string_like_type(tp) is False


@pytest.mark.parametrize("tp", [int, float, bool, str, Record, WithText])
def test_printable_valid(tp):
    assert is_printable_type(tp) is True


@pytest.mark.parametrize("tp", [Plain, NonDefaultConstructible])
def test_printable_invalid(tp):
    assert is_printable_type(tp) is False


@pytest.mark.parametrize("tp", [int, float, str, list, tuple, list[int]])
def test_comparable_valid(tp):
    assert is_comparable_type(tp) is True


@pytest.mark.parametrize("tp", [Plain, list[Plain], complex, dict])
def test_comparable_invalid(tp):
    assert is_comparable_type(tp) is False


@pytest.mark.parametrize("tp", [int, str, list, list[int], dict, Plain])
def test_default_constructible_valid(tp):
    assert is_default_constructible_type(tp) is True


@pytest.mark.parametrize("tp", [int, str, list, dict, Plain])
def test_copyable_valid(tp):
    assert is_copyable_type(tp) is True


@pytest.mark.parametrize("tp", [NonCopyable, NonDefaultConstructible])
def test_copyable_invalid(tp):
    assert is_copyable_type(tp) is False


@pytest.mark.parametrize(
    "check",
    [
        is_arithmetic_type,
        is_addable_type,
        is_numeric_type,
        is_iterable_container,
        is_range_container,
        is_sortable_container,
        is_string_like_type,
        is_printable_type,
        is_comparable_type,
        is_default_constructible_type,
        is_copyable_type,
    ],
)
def test_values_that_are_not_types_are_rejected(check):
    assert check(5) is False
    assert check("hello") is False