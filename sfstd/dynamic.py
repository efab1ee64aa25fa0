"""Dynamic containers: a string-keyed hash map, a growable vector and a byte buffer."""

from enum import Enum

from .errors import SfError

FNV_PRIME = 0x01000193
FNV_SEED = 0x811C9DC5
MAP_DEFAULT_BUCKETS = 8
VEC_INITIAL_SIZE = 4

_MASK32 = 0xFFFFFFFF


def fnv1a(data, seed=FNV_SEED):
    """Return the 32-bit FNV-1a hash of ``data`` (bytes or str), starting from ``seed``."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    hash_ = seed & _MASK32
    for byte in data:
        hash_ = ((byte ^ hash_) * FNV_PRIME) & _MASK32
    return hash_


def _is_power_of_two(value):
    return value > 0 and value & (value - 1) == 0


class StrMap:
    """A hash map indexed by strings, using separate chaining with FNV-1a hashing.

    The map starts with no buckets; the first insertion allocates the default
    number. The bucket count only changes through :meth:`rehash` or :meth:`clear`.
    """

    def __init__(self):
        self._buckets = []
        self._count = 0

    def _slot(self, key):
        return fnv1a(key) & (len(self._buckets) - 1)

    def _chain(self, key):
        if not self._buckets:
            return None
        return self._buckets[self._slot(key)]

    def __setitem__(self, key, value):
        if not self._buckets:
            self._buckets = [[] for _ in range(MAP_DEFAULT_BUCKETS)]
        if key in self:
            del self[key]
        # New pairs go to the front of their chain.
        self._buckets[self._slot(key)].insert(0, (key, value))
        self._count += 1

    def __getitem__(self, key):
        chain = self._chain(key)
        if chain:
            for stored_key, value in chain:
                if stored_key == key:
                    return value
        raise KeyError(key)

    def __delitem__(self, key):
        chain = self._chain(key)
        if chain:
            for position, (stored_key, _) in enumerate(chain):
                if stored_key == key:
                    del chain[position]
                    self._count -= 1
                    return
        raise KeyError(key)

    def __contains__(self, key):
        chain = self._chain(key)
        return bool(chain) and any(stored_key == key for stored_key, _ in chain)

    def _pairs(self):
        for chain in self._buckets:
            yield from chain

    def __iter__(self):
        for key, _ in self._pairs():
            yield key

    def __len__(self):
        return self._count

    def clear(self):
        """Remove every pair and shrink the bucket array back to the default size."""
        for chain in self._buckets:
            chain.clear()
        if len(self._buckets) > MAP_DEFAULT_BUCKETS:
            self._buckets = self._buckets[:MAP_DEFAULT_BUCKETS]
        self._count = 0

    def load(self, bucket_count):
        """Return the load factor the map would have with ``bucket_count`` buckets."""
        if bucket_count <= 0:
            raise ValueError("bucket count must be positive")
        return self._count / bucket_count

    def rehash(self, new_bucket_count):
        """Redistribute all pairs over ``new_bucket_count`` buckets (a power of two)."""
        if not _is_power_of_two(new_bucket_count):
            raise ValueError("bucket count must be a positive power of two")
        pairs = list(self._pairs())
        self._buckets = [[] for _ in range(new_bucket_count)]
        for key, value in reversed(pairs):
            self._buckets[self._slot(key)].insert(0, (key, value))

    def foreach(self, func):
        """Call ``func(key, value)`` for every pair, bucket by bucket."""
        for key, value in list(self._pairs()):
            func(key, value)

    @property
    def bucket_count(self):
        """The number of buckets currently allocated."""
        return len(self._buckets)


class Vec:
    """A growable sequence that tracks its slot capacity the way a dynamic array does."""

    def __init__(self, items=()):
        self._items = []
        self._slots = 0
        self.extend(items)

    def _index(self, index):
        count = len(self._items)
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError("Index out of bounds of vec.")
        return index

    def _shrink(self):
        if self._slots > VEC_INITIAL_SIZE and len(self._items) <= self._slots // 2:
            self._slots //= 2

    def __getitem__(self, index):
        return self._items[self._index(index)]

    def __setitem__(self, index, value):
        self._items[self._index(index)] = value

    def __delitem__(self, index):
        del self._items[self._index(index)]
        self._shrink()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other):
        if isinstance(other, Vec):
            return self._items == other._items
        return NotImplemented

    def __repr__(self):
        return f"Vec({self._items!r})"

    def insert(self, index, value):
        """Insert ``value`` before ``index``; ``index`` may equal the length."""
        count = len(self._items)
        if not 0 <= index <= count:
            raise IndexError("Index out of bounds of vec.")
        if index == count:
            self.push(value)
            return
        if count == self._slots:
            self._slots *= 2
        self._items.insert(index, value)

    def push(self, value):
        """Append ``value`` at the end."""
        if not self._items or not self._slots:
            self._slots = VEC_INITIAL_SIZE
        if len(self._items) == self._slots:
            self._slots *= 2
        self._items.append(value)

    def extend(self, values):
        """Append every element of ``values``."""
        values = list(values)
        if not values:
            return
        new_size = (len(self._items) + len(values) + 7) & ~7
        if new_size > self._slots:
            self._slots = new_size
        self._items.extend(values)

    def pop(self):
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("Vec is empty.")
        value = self._items.pop()
        self._shrink()
        return value

    @property
    def slots(self):
        """The number of slots currently reserved."""
        return self._slots


class BufferHandle(Enum):
    """Reference points for :meth:`Buffer.seek`."""

    START = 0
    END = 1


class Buffer:
    """A byte buffer with a read/write head, either fixed in size or growing on demand."""

    def __init__(self, size=0, growable=False):
        if size < 0:
            raise ValueError("size must not be negative")
        self._data = bytearray(size)
        self._head = 0
        self._growable = growable
        self._empty = growable and size == 0

    @classmethod
    def fixed(cls, size):
        """Create a zero-filled buffer of ``size`` bytes that never grows."""
        return cls(size)

    @classmethod
    def growable(cls):
        """Create an empty buffer that grows as bytes are written."""
        return cls(0, growable=True)

    def write(self, data):
        """Write ``data`` at the head and advance it.

        Raises :class:`SfError` if the buffer is fixed and lacks room.
        """
        data = bytes(data)
        space = len(self._data) - self._head
        if space < len(data):
            if self._empty:
                self._data = bytearray(len(data))
                self._head = 0
                self._empty = False
            elif self._growable:
                self._data.extend(bytes(len(data) - space))
            else:
                raise SfError("Buffer is fixed size and head doesn't have space to write.")
        self._data[self._head:self._head + len(data)] = data
        self._head += len(data)

    def read(self, size):
        """Return ``size`` bytes from the head and advance it."""
        if size < 0 or len(self._data) - self._head < size:
            raise SfError("Out of bounds read at buffer write head.")
        chunk = bytes(self._data[self._head:self._head + size])
        self._head += size
        return chunk

    def seek(self, handle, offset):
        """Move the head ``offset`` bytes from the start or back from the end, clamped."""
        size = len(self._data)
        if offset < 0 or offset > size:
            offset = size
        if handle is BufferHandle.START:
            self._head = offset
        elif handle is BufferHandle.END:
            self._head = size - offset
        else:
            raise ValueError(f"unknown buffer handle: {handle!r}")

    def clear(self):
        """Drop all content and return the buffer to an empty state."""
        self._data = bytearray()
        self._head = 0
        self._empty = True

    @property
    def size(self):
        """The number of bytes the buffer holds."""
        return len(self._data)

    @property
    def position(self):
        """The current offset of the head from the start."""
        return self._head

    def getvalue(self):
        """Return the whole content of the buffer."""
        return bytes(self._data)