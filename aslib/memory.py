"""A bounded heap allocator over a byte buffer, plus raw buffer helpers."""

from dataclasses import dataclass

MAP_ENTRY_SIZE = 16
"""Bytes charged to the heap for each entry in its allocation map."""


@dataclass
class _Block:
    location: int
    size: int


def _view(buffer) -> memoryview:
    return memoryview(buffer).cast("B")


def _check_size(size: int, *views: memoryview) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    for view in views:
        if size > len(view):
            raise ValueError(f"size {size} exceeds buffer length {len(view)}")


class Heap:
    """Fixed-size heap whose map grows from the start and data from the end.

    Each allocation costs its size plus ``MAP_ENTRY_SIZE`` bytes for its map
    entry. When the data region would run into the map, the heap is
    defragmented, which may move existing blocks towards the end.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"heap size must be positive, got {size}")
        self.memory = bytearray(size)
        self.size_total = size
        self.size_remaining = size
        self.tail = size
        self._slots: list[_Block | None] = []

    @property
    def head(self) -> int:
        """Offset of the end of the allocation map."""
        return len(self._slots) * MAP_ENTRY_SIZE

    @property
    def allocations(self) -> dict[int, int]:
        """Live allocations as a mapping from location to size."""
        return {slot.location: slot.size for slot in self._slots if slot is not None}

    def allocate(self, size: int) -> int:
        """Reserve ``size`` bytes and return their location in ``memory``.

        Raises MemoryError when the heap cannot hold the request.
        """
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        cost = size + MAP_ENTRY_SIZE
        if cost > self.size_remaining:
            raise MemoryError(
                f"cannot allocate {size} bytes: {self.size_remaining} bytes remaining"
            )

        free_slot = next(
            (index for index, slot in enumerate(self._slots) if slot is None), None
        )
        map_growth = MAP_ENTRY_SIZE if free_slot is None else 0
        if self.tail - size < self.head + map_growth:
            self.defragment()
            free_slot = None

        self.size_remaining -= cost
        self.tail -= size
        block = _Block(self.tail, size)
        if free_slot is None:
            self._slots.append(block)
        else:
            self._slots[free_slot] = block
        return block.location

    def deallocate(self, location: int) -> None:
        """Release the allocation starting at ``location``."""
        for index, slot in enumerate(self._slots):
            if slot is not None and slot.location == location:
                self._slots[index] = None
                self.size_remaining += slot.size + MAP_ENTRY_SIZE
                break
        else:
            raise ValueError(f"no allocation at location {location}")
        while self._slots and self._slots[-1] is None:
            self._slots.pop()

    def defragment(self) -> dict[int, int]:
        """Pack the map and push all blocks against the end of the heap.

        Blocks keep their order by proximity to the end. Returns a mapping
        from each moved block's old location to its new one.
        """
        live = sorted(
            (slot for slot in self._slots if slot is not None),
            key=lambda slot: slot.location,
            reverse=True,
        )
        moved: dict[int, int] = {}
        tail = self.size_total
        for block in live:
            tail -= block.size
            if tail != block.location:
                self.memory[tail : tail + block.size] = self.memory[
                    block.location : block.location + block.size
                ]
                moved[block.location] = tail
                block.location = tail
        self._slots = list(live)
        self.tail = tail
        return moved

    def block(self, location: int) -> memoryview:
        """Return a writable view of the allocation starting at ``location``."""
        for slot in self._slots:
            if slot is not None and slot.location == location:
                return memoryview(self.memory)[location : location + slot.size]
        raise ValueError(f"no allocation at location {location}")


def copy(dst, src, size: int) -> None:
    """Copy the first ``size`` bytes of ``src`` into ``dst``."""
    dst_view, src_view = _view(dst), _view(src)
    _check_size(size, dst_view, src_view)
    dst_view[:size] = src_view[:size]


def copy_safe(dst, src, size: int) -> None:
    """Copy like ``copy`` but snapshot the source first, so overlap is safe."""
    dst_view, src_view = _view(dst), _view(src)
    _check_size(size, dst_view, src_view)
    dst_view[:size] = bytes(src_view[:size])


def swap(a, b, size: int) -> None:
    """Exchange the first ``size`` bytes of ``a`` and ``b``."""
    a_view, b_view = _view(a), _view(b)
    _check_size(size, a_view, b_view)
    held = bytes(a_view[:size])
    a_view[:size] = bytes(b_view[:size])
    b_view[:size] = held


def fill(dst, value: int, size: int) -> None:
    """Write the byte ``value`` into the first ``size`` bytes of ``dst``."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value must fit in a byte, got {value}")
    dst_view = _view(dst)
    _check_size(size, dst_view)
    dst_view[:size] = bytes([value]) * size


def compare(a, b, size: int) -> bool:
    """Return whether the first ``size`` bytes of ``a`` and ``b`` match."""
    a_view, b_view = _view(a), _view(b)
    _check_size(size, a_view, b_view)
    return bytes(a_view[:size]) == bytes(b_view[:size])