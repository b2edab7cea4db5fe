import pytest

from aslib.memory_io import (
    Medium,
    MemoryIOError,
    read_blocks,
    read_bytes,
    write_blocks,
    write_bytes,
)


class FakeStorage:
    """Byte array storage addressed in blocks."""

    def __init__(self, block_size, increment, size=1024):
        self.memory = bytearray(size)
        self.block_size = block_size
        self.increment = increment
        self.reads = []
        self.writes = []

    def _offset(self, address):
        return (address // self.increment) * self.block_size

    def write(self, address, data):
        self.writes.append(address)
        start = self._offset(address)
        self.memory[start : start + self.block_size] = data

    def read(self, address):
        self.reads.append(address)
        start = self._offset(address)
        return bytes(self.memory[start : start + self.block_size])

    def medium(self):
        return Medium(self.block_size, self.increment, self.write, self.read)


@pytest.fixture
def storage0():
    return FakeStorage(block_size=1, increment=1)


@pytest.fixture
def storage1():
    return FakeStorage(block_size=4, increment=1)


def test_medium_0_block_set(storage0):
    text = b"hello world\x00"
    medium = storage0.medium()
    write_blocks(medium, 0, text)
    assert bytes(storage0.memory[0 : len(text)]) == text
    assert read_blocks(medium, 0, len(text)) == text
    write_blocks(medium, 50, text)
    assert bytes(storage0.memory[50 : 50 + len(text)]) == text
    assert read_blocks(medium, 50, len(text)) == text


def test_medium_0_block_get(storage0):
    text = b"hello world\x00"
    storage0.memory[40:52] = text
    assert read_blocks(storage0.medium(), 40, 12) == text


def test_medium_1_byte_get(storage1):
    text = b"this is a 21B string\x00"
    assert len(text) == 21
    medium = storage1.medium()
    storage1.memory[64 : 64 + len(text)] = text
    assert read_bytes(medium, 64, len(text)) == text
    storage1.memory[67 : 67 + len(text)] = text
    assert read_bytes(medium, 67, len(text)) == text


def test_medium_1_byte_set(storage1):
    text = b"this is a 25 byte string\x00"
    medium = storage1.medium()
    write_bytes(medium, 64, text)
    assert bytes(storage1.memory[64 : 64 + len(text)]) == text
    assert read_bytes(medium, 64, len(text)) == text
    write_bytes(medium, 67, text)
    assert bytes(storage1.memory[67 : 67 + len(text)]) == text
    assert read_bytes(medium, 67, len(text)) == text
    assert read_bytes(medium, 64, 3) == b"thi"


def test_partial_write_preserves_neighbours(storage1):
    storage1.memory[0:8] = b"abcdefgh"
    write_bytes(storage1.medium(), 3, b"XY")
    assert bytes(storage1.memory[0:8]) == b"abcXYfgh"


def test_aligned_full_blocks_are_not_read(storage1):
    write_bytes(storage1.medium(), 8, b"12345678")
    assert storage1.reads == []
    assert storage1.writes == [2, 3]


def test_round_trip_with_larger_increment():
    storage = FakeStorage(block_size=4, increment=8)
    medium = storage.medium()
    write_bytes(medium, 5, b"round trip data")
    assert read_bytes(medium, 5, 15) == b"round trip data"
    assert storage.writes == [8, 16, 24, 32]


def test_blocks_with_larger_increment():
    storage = FakeStorage(block_size=2, increment=4)
    medium = storage.medium()
    write_blocks(medium, 4, b"abcdef")
    assert storage.writes == [4, 8, 12]
    assert bytes(storage.memory[2:8]) == b"abcdef"
    assert read_blocks(medium, 4, 3) == b"abcdef"


def test_zero_length_operations(storage1):
    medium = storage1.medium()
    assert read_bytes(medium, 10, 0) == b""
    assert read_blocks(medium, 10, 0) == b""
    write_bytes(medium, 10, b"")
    assert storage1.writes == []


def test_address_conversion():
    medium = Medium(4, 8, lambda address, data: None, lambda address: bytes(4))
    assert medium.block_address(13) == 24
    assert medium.byte_address(24) == 12


def test_write_blocks_rejects_partial_block(storage1):
    with pytest.raises(ValueError):
        write_blocks(storage1.medium(), 0, b"abc")


def test_negative_address_rejected(storage1):
    with pytest.raises(ValueError):
        read_bytes(storage1.medium(), -1, 4)


def test_invalid_medium_rejected(storage1):
    with pytest.raises(ValueError):
        Medium(0, 1, storage1.write, storage1.read)


def test_failing_read_raises():
    def read(address):
        raise OSError("device gone")

    medium = Medium(4, 1, lambda address, data: None, read)
    with pytest.raises(MemoryIOError):
        read_bytes(medium, 0, 4)


def test_failing_write_raises(storage1):
    def write(address, data):
        raise OSError("device gone")

    medium = Medium(4, 1, write, storage1.read)
    with pytest.raises(MemoryIOError):
        write_blocks(medium, 0, b"abcd")


def test_short_read_raises():
    medium = Medium(4, 1, lambda address, data: None, lambda address: b"ab")
    with pytest.raises(MemoryIOError):
        read_blocks(medium, 0, 1)