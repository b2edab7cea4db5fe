"""In-place bubble sort driven by a swap predicate."""

from collections.abc import Callable, MutableSequence
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(items: MutableSequence[T], key: Callable[[T, T], bool]) -> None:
    """Sort ``items`` in place by bubbling elements towards the front.

    ``key(element, other)`` is called with an element and the item directly
    in front of it; the two are swapped when it returns true. Each pass
    starts one position closer to the front and stops moving an element as
    soon as ``key`` declines a swap. The front element is never the starting
    point of a pass.
    """
    for end in range(len(items) - 1, 0, -1):
        position = end
        while position > 0:
            element, other = items[position], items[position - 1]
            if not key(element, other):
                break
            items[position - 1], items[position] = element, other
            position -= 1