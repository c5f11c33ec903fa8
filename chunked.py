"""
Fixed-capacity paginated containers for large breadth-first searches.

Only the newest chunk ever receives new items. The queue discards its oldest
chunk once drained; the set keeps every chunk, so total memory still grows
with the number of items, only the size of each allocation is bounded.
"""

from collections import deque

DEFAULT_CHUNK_CAPACITY = 1 << 16


def check_capacity(capacity):
    if capacity < 1:
        raise ValueError(f"Chunk capacity must be at least 1, got {capacity}")


class ChunkedQueue:
    """FIFO queue stored as a sequence of chunks of at most `capacity` items."""

    def __init__(self, capacity=DEFAULT_CHUNK_CAPACITY):
        check_capacity(capacity)
        self.capacity = capacity
        self._chunks = deque()
        self._head = 0  # read offset into the oldest chunk
        self._size = 0

    def append(self, item):
        if not self._chunks or len(self._chunks[-1]) >= self.capacity:
            self._chunks.append([])
        self._chunks[-1].append(item)
        self._size += 1

    def popleft(self):
        if not self._size:
            raise IndexError("pop from an empty ChunkedQueue")
        oldest = self._chunks[0]
        item = oldest[self._head]
        self._head += 1
        self._size -= 1
        if self._head == len(oldest):
            # a drained chunk is only dropped once it can no longer grow
            if len(self._chunks) > 1 or len(oldest) >= self.capacity:
                self._chunks.popleft()
                self._head = 0
        return item

    @property
    def chunk_count(self):
        return len(self._chunks)

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0


class ChunkedSet:
    """Insert-only membership set stored as chunks of at most `capacity` items."""

    def __init__(self, capacity=DEFAULT_CHUNK_CAPACITY):
        check_capacity(capacity)
        self.capacity = capacity
        self._chunks = []

    def add(self, item):
        if item in self:
            return
        if not self._chunks or len(self._chunks[-1]) >= self.capacity:
            self._chunks.append(set())
        self._chunks[-1].add(item)

    def __contains__(self, item):
        # newest first, recently discovered states are the likeliest hits
        return any(item in chunk for chunk in reversed(self._chunks))

    @property
    def chunk_count(self):
        return len(self._chunks)

    def __len__(self):
        return sum(len(chunk) for chunk in self._chunks)
