"""Small helpers over iterables: in-place sorting, counting, mapping, min/max."""

from __future__ import annotations

from .concepts import is_sortable_container


def sort_container(container):
    """Sort a mutable sequence in place in ascending order.

    Raises TypeError for anything that is not a mutable sequence.
    """
    if not is_sortable_container(type(container)):
        raise TypeError(f"cannot sort a {type(container).__name__} in place")
    if isinstance(container, list):
        container.sort()
        return
    for position, item in enumerate(sorted(container)):
        container[position] = item


def count_if(iterable, predicate):
    """Return how many items of ``iterable`` satisfy ``predicate``."""
    return sum(1 for item in iterable if predicate(item))


def transform_to_list(iterable, transform):
    """Apply ``transform`` to every item and collect the results in a list."""
    return [transform(item) for item in iterable]


def find_min_max(iterable):
    """Return ``(smallest, largest)`` found in a single pass.

    Of equal smallest items the first is returned, of equal largest the last.
    Raises ValueError when the iterable is empty.
    """
    iterator = iter(iterable)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("find_min_max() arg is an empty iterable") from None
    for item in iterator:
        if item < smallest:
            smallest = item
        if not item < largest:
            largest = item
    return smallest, largest