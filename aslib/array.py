"""Element-wise view over caller-owned contiguous memory."""

from collections.abc import Iterator
from enum import Enum


class ShiftDirection(Enum):
    """Direction for ``Array.shift``."""

    LEFT = 0
    RIGHT = 1


class Array:
    """Array of fixed-size elements over a writable buffer.

    The buffer belongs to the caller. The array tracks a tail: the highest
    index written through it. ``len()`` is the number of elements up to and
    including the tail; shifting left and popping lower it.
    """

    def __init__(self, data, element_size: int) -> None:
        if element_size <= 0:
            raise ValueError(f"element size must be positive, got {element_size}")
        view = memoryview(data).cast("B")
        if view.readonly:
            raise TypeError("array memory must be writable")
        self.data = data
        self.element_size = element_size
        self._view = view
        self._length = 0

    @property
    def capacity(self) -> int:
        """Number of whole elements the memory can hold."""
        return len(self._view) // self.element_size

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[bytes]:
        for index in range(self._length):
            yield bytes(self.at(index))

    def _span(self, index: int, count: int) -> slice:
        if index < 0 or count < 0 or index + count > self.capacity:
            raise IndexError(
                f"elements {index}..{index + count} outside capacity {self.capacity}"
            )
        return slice(index * self.element_size, (index + count) * self.element_size)

    def _count(self, src) -> tuple[bytes, int]:
        payload = bytes(memoryview(src).cast("B"))
        count, remainder = divmod(len(payload), self.element_size)
        if remainder:
            raise ValueError(
                f"source length {len(payload)} is not a multiple of {self.element_size}"
            )
        return payload, count

    def _move(self, source: int, target: int, count: int) -> None:
        self._view[self._span(target, count)] = bytes(self._view[self._span(source, count)])

    def at(self, index: int) -> memoryview:
        """Return a writable view of the element at ``index``."""
        return self._view[self._span(index, 1)]

    def set(self, index: int, src) -> None:
        """Write the elements in ``src`` starting at ``index``."""
        payload, count = self._count(src)
        self._view[self._span(index, count)] = payload
        self._length = max(self._length, index + count)

    def shift(self, direction: ShiftDirection, elements: int) -> None:
        """Shift the elements left or right by ``elements`` positions."""
        direction = ShiftDirection(direction)
        if elements < 0:
            raise ValueError(f"shift must not be negative, got {elements}")
        if direction is ShiftDirection.LEFT:
            if elements > self._length:
                raise IndexError(f"cannot shift {self._length} elements left by {elements}")
            self._move(elements, 0, self._length - elements)
            self._length -= elements
        else:
            if self._length + elements > self.capacity:
                raise IndexError(f"shift right by {elements} exceeds capacity {self.capacity}")
            self._move(0, elements, self._length)
            self._length += elements

    def insert(self, index: int, src) -> None:
        """Insert the elements in ``src`` at ``index``, moving later ones up."""
        payload, count = self._count(src)
        if index < 0 or index > self._length:
            raise IndexError(f"insert index {index} outside 0..{self._length}")
        if self._length + count > self.capacity:
            raise IndexError(f"insert of {count} elements exceeds capacity {self.capacity}")
        self._move(index, index + count, self._length - index)
        self._view[self._span(index, count)] = payload
        self._length += count

    def pop(self, index: int, length: int) -> bytes:
        """Remove ``length`` elements at ``index`` and return their bytes."""
        if index < 0 or length < 0 or index + length > self._length:
            raise IndexError(f"cannot pop {length} elements at {index} from {self._length}")
        removed = bytes(self._view[self._span(index, length)])
        self._move(index + length, index, self._length - index - length)
        self._length -= length
        return removed