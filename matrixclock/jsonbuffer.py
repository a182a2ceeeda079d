"""A growing memory pool for JSON documents.

Memory is handed out from a chain of blocks.  When the newest block is full,
a new one twice as large as the last is added.  ``clear`` frees every block
at once and restarts from the capacity of the first block.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_INITIAL_SIZE = 256
DEFAULT_ALIGNMENT = 8


@dataclass(eq=False)
class _Block:
    capacity: int
    data: bytearray
    size: int = 0


@dataclass(frozen=True)
class Allocation:
    """A region of ``size`` bytes at ``offset`` inside a block of the pool."""

    block: _Block = field(repr=False)
    offset: int
    size: int

    @property
    def view(self) -> memoryview:
        """Writable view of the region."""
        return memoryview(self.block.data)[self.offset : self.offset + self.size]

    def __bytes__(self) -> bytes:
        return bytes(self.view)


class DynamicJsonBuffer:
    """Pool of memory that grows by doubling its blocks."""

    def __init__(self, initial_size: int = DEFAULT_INITIAL_SIZE,
                 alignment: int = DEFAULT_ALIGNMENT) -> None:
        if initial_size < 0:
            raise ValueError("initial size must not be negative")
        if alignment < 1:
            raise ValueError("alignment must be positive")
        self._blocks: list[_Block] = []
        self._next_block_capacity = initial_size
        self._alignment = alignment

    @property
    def _head(self) -> _Block | None:
        return self._blocks[-1] if self._blocks else None

    def size(self) -> int:
        """Number of bytes in use across all blocks."""
        return sum(block.size for block in self._blocks)

    def alloc(self, nbytes: int) -> Allocation:
        """Reserve ``nbytes`` bytes, aligned to the pool's alignment."""
        if nbytes < 0:
            raise ValueError("cannot allocate a negative number of bytes")
        self._align_next_alloc()
        if self._can_alloc_in_head(nbytes):
            return self._alloc_in_head(nbytes)
        return self._alloc_in_new_block(nbytes)

    def clear(self) -> None:
        """Release every block; all earlier allocations become invalid."""
        if self._blocks:
            self._next_block_capacity = self._blocks[0].capacity
        self._blocks.clear()

    def start_string(self) -> BufferString:
        """Begin a string built one character at a time inside the pool."""
        return BufferString(self)

    def _align_next_alloc(self) -> None:
        head = self._head
        if head is not None:
            step = self._alignment
            head.size = (head.size + step - 1) // step * step

    def _can_alloc_in_head(self, nbytes: int) -> bool:
        head = self._head
        return head is not None and head.size + nbytes <= head.capacity

    def _alloc_in_head(self, nbytes: int) -> Allocation:
        head = self._head
        assert head is not None
        allocation = Allocation(head, head.size, nbytes)
        head.size += nbytes
        return allocation

    def _alloc_in_new_block(self, nbytes: int) -> Allocation:
        capacity = max(self._next_block_capacity, nbytes)
        self._blocks.append(_Block(capacity, bytearray(capacity)))
        self._next_block_capacity *= 2
        return self._alloc_in_head(nbytes)


class BufferString:
    """A string stored in a pool, grown in place while room allows."""

    def __init__(self, parent: DynamicJsonBuffer) -> None:
        self._parent = parent
        self._block: _Block | None = None
        self._start = 0
        self._length = 0

    def _append_byte(self, value: int) -> None:
        parent = self._parent
        if parent._can_alloc_in_head(1):
            end = parent._alloc_in_head(1)
            end.view[0] = value
            if self._length == 0:
                self._block, self._start = end.block, end.offset
        else:
            fresh = parent._alloc_in_new_block(self._length + 1)
            if self._block is not None:
                old = self._block.data[self._start : self._start + self._length]
                fresh.view[: self._length] = old
            fresh.view[self._length] = value
            self._block, self._start = fresh.block, fresh.offset
        self._length += 1

    def append(self, char: str) -> None:
        """Add one character, stored as its UTF-8 bytes."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        for value in char.encode("utf-8"):
            self._append_byte(value)

    def finish(self) -> str:
        """Terminate the string in the pool and return its text."""
        self._append_byte(0)
        assert self._block is not None
        end = self._start + self._length - 1
        return self._block.data[self._start : end].decode("utf-8")