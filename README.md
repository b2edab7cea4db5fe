# aslib

A few small building blocks in plain Python, with no dependencies:

- `aslib.sort`: `bubble_sort`, a bubble sort driven by a swap predicate.
- `aslib.memory`: a fixed-size `Heap` that hands out blocks of a byte buffer,
  frees them and can be defragmented, plus the byte helpers `copy`,
  `copy_safe`, `swap`, `fill` and `compare`.
- `aslib.array`: `Array`, a view of fixed-size elements over a writable buffer
  that keeps track of a tail, with `at`, `set`, `shift`, `insert` and `pop`.
- `aslib.memory_io`: byte-level and block-level reads and writes on any
  storage `Medium` that only knows how to read and write whole blocks.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Sorting

`bubble_sort(items, key)` sorts a mutable sequence in place. `key(element, other)`
is called with an element and the item directly in front of it; the two are
swapped when it returns true.

```python
from aslib.sort import bubble_sort

values = [0, 2, 5, 3, 7]
bubble_sort(values, lambda a, b: a > b)
assert values == [7, 5, 3, 2, 0]
```

## Heap

A `Heap(size)` owns a `bytearray` of `size` bytes (`heap.memory`). Its
allocation map grows from the start and data blocks grow from the end. Each
allocation costs its own size plus `MAP_ENTRY_SIZE` (16) bytes for its map
entry.

```python
from aslib.memory import Heap

heap = Heap(256)
location = heap.allocate(11)          # offset into heap.memory
heap.block(location)[:4] = b"\x00\x01\x02\x03"
print(heap.allocations)               # {location: size, ...}
heap.deallocate(location)
moved = heap.defragment()             # {old_location: new_location, ...}
```

- `allocate` raises `MemoryError` when the request does not fit, and
  `ValueError` for a negative size. When the data would run into the map it
  defragments first, which can move existing blocks.
- `deallocate` and `block` raise `ValueError` for a location that is not a live
  allocation.
- `defragment` pushes all blocks against the end of the heap, keeping their
  order, and returns which blocks moved where.
- `size_total`, `size_remaining`, `head` and `tail` describe the current layout.

The byte helpers work on any buffer (`bytes`, `bytearray`, `memoryview`, ...)
and raise `ValueError` if `size` is negative or longer than a buffer:

```python
from aslib.memory import compare, copy, fill, swap

a, b = bytearray(b"abcd"), bytearray(4)
copy(b, a, 4)
assert compare(a, b, 4)
fill(a, 0, 2)                         # a == b"\x00\x00cd"
swap(a, b, 4)
```

`copy_safe` snapshots the source first, so overlapping buffers are copied
correctly.

## Array

```python
from aslib.array import Array, ShiftDirection

buffer = bytearray(16)
array = Array(buffer, 2)              # 8 elements of 2 bytes
array.set(0, b"aabbcc")               # len(array) == 3
array.insert(1, b"zz")                # aa zz bb cc
removed = array.pop(0, 1)             # b"aa"; zz bb cc
array.shift(ShiftDirection.RIGHT, 1)  # length 4, old elements moved up one
print(list(array))                    # each element as bytes
```

`len(array)` counts elements up to and including the tail; `capacity` is how
many whole elements the buffer can hold. `at(index)` returns a writable view
of one element. Sources must be a whole number of elements long
(`ValueError` otherwise); going outside the capacity or the tail raises
`IndexError`.

## Memory I/O

A `Medium` gives a `block_size`, a `block_increment` (the step between the
addresses of neighbouring blocks) and two callables: `read_block(address)`
returning `block_size` bytes, and `write_block(address, data)`. Any exception
they raise, or a read of the wrong length, becomes a `MemoryIOError`.

```python
from aslib.memory_io import Medium, read_bytes, write_bytes

storage = bytearray(1024)

def read_block(address):
    return bytes(storage[address * 4:address * 4 + 4])

def write_block(address, data):
    storage[address * 4:address * 4 + 4] = data

medium = Medium(
    block_size=4, block_increment=1, write_block=write_block, read_block=read_block
)
write_bytes(medium, 67, b"this is a 25 byte string\x00")
assert read_bytes(medium, 67, 25) == b"this is a 25 byte string\x00"
```

`write_bytes` reads blocks that are only partly covered first, so the bytes
around the written range are kept. `write_blocks(medium, address, data)` and
`read_blocks(medium, address, count)` work on whole blocks addressed by block
number. `Medium.block_address` and `Medium.byte_address` convert between the
two kinds of address.

## What it does not do

This is a library only: it has no command-line program, and the media in
`aslib.memory_io` are whatever callables you supply; no device or file
backends are included.