"""Byte- and block-level access to block-oriented storage media."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass

WriteBlock = Callable[[int, bytes], object]
ReadBlock = Callable[[int], bytes]


class MemoryIOError(Exception):
    """Raised when a medium fails to read or write a block."""


@dataclass(frozen=True)
class Medium:
    """A storage medium accessed one block at a time.

    ``block_size`` is the number of bytes in a block and ``block_increment``
    the step between the addresses of consecutive blocks. ``write_block`` is
    called with a block address and exactly ``block_size`` bytes;
    ``read_block`` is called with a block address and must return
    ``block_size`` bytes. Either may raise to signal a failure.
    """

    block_size: int
    block_increment: int
    write_block: WriteBlock
    read_block: ReadBlock

    def __post_init__(self) -> None:
        if self.block_size <= 0:
            raise ValueError(f"block size must be positive, got {self.block_size}")
        if self.block_increment <= 0:
            raise ValueError(
                f"block increment must be positive, got {self.block_increment}"
            )

    def block_address(self, byte_address: int) -> int:
        """Return the address of the block holding ``byte_address``."""
        return (byte_address // self.block_size) * self.block_increment

    def byte_address(self, block_address: int) -> int:
        """Return the byte address at which the block ``block_address`` starts."""
        return (block_address // self.block_increment) * self.block_size

    def _read(self, block_address: int) -> bytes:
        try:
            data = bytes(self.read_block(block_address))
        except MemoryIOError:
            raise
        except Exception as error:
            raise MemoryIOError(f"failed to read block {block_address}") from error
        if len(data) != self.block_size:
            raise MemoryIOError(
                f"block {block_address} read returned {len(data)} bytes, "
                f"expected {self.block_size}"
            )
        return data

    def _write(self, block_address: int, data: bytes) -> None:
        try:
            self.write_block(block_address, data)
        except MemoryIOError:
            raise
        except Exception as error:
            raise MemoryIOError(f"failed to write block {block_address}") from error


def _check_address(address: int) -> None:
    if address < 0:
        raise ValueError(f"address must not be negative, got {address}")


def _spans(medium: Medium, address: int, length: int) -> Iterator[tuple[int, int, int]]:
    """Yield (block address, offset in block, byte count) covering a byte range."""
    index, offset = divmod(address, medium.block_size)
    while length > 0:
        count = min(medium.block_size - offset, length)
        yield index * medium.block_increment, offset, count
        length -= count
        index += 1
        offset = 0


def write_bytes(medium: Medium, address: int, data) -> None:
    """Write ``data`` to the medium starting at byte ``address``.

    Blocks that are only partly covered are read first so that the bytes
    around the written range are preserved.
    """
    _check_address(address)
    payload = bytes(memoryview(data).cast("B"))
    position = 0
    for block_address, offset, count in _spans(medium, address, len(payload)):
        chunk = payload[position : position + count]
        if count == medium.block_size:
            medium._write(block_address, chunk)
        else:
            scratch = bytearray(medium._read(block_address))
            scratch[offset : offset + count] = chunk
            medium._write(block_address, bytes(scratch))
        position += count


def read_bytes(medium: Medium, address: int, length: int) -> bytes:
    """Read ``length`` bytes from the medium starting at byte ``address``."""
    _check_address(address)
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return b"".join(
        medium._read(block_address)[offset : offset + count]
        for block_address, offset, count in _spans(medium, address, length)
    )


def write_blocks(medium: Medium, address: int, data) -> None:
    """Write whole blocks from ``data`` starting at block ``address``."""
    _check_address(address)
    payload = bytes(memoryview(data).cast("B"))
    count, remainder = divmod(len(payload), medium.block_size)
    if remainder:
        raise ValueError(
            f"data length {len(payload)} is not a multiple of block size "
            f"{medium.block_size}"
        )
    for number in range(count):
        start = number * medium.block_size
        medium._write(
            address + number * medium.block_increment,
            payload[start : start + medium.block_size],
        )


def read_blocks(medium: Medium, address: int, count: int) -> bytes:
    """Read ``count`` whole blocks starting at block ``address``."""
    _check_address(address)
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return b"".join(
        medium._read(address + number * medium.block_increment)
        for number in range(count)
    )