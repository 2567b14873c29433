"""
freqtab/freqhash.py

A hash table specially designed for counting sequence frequency.

Layout:
    FrequencyMap
        buckets: [Bucket | None] * length     # length is a power of 2, >= 16
        Bucket
            pairs: [Pair, ...]                # keys unique within a bucket
            capacity: int                     # grown by resize_p()/next_size()
        Pair
            key: str
            value: float                      # accumulated weight

Buckets are created lazily on first insert. The whole map is rebuilt at
double size just before an insert would make count * 100 > length * 75.

Typical usage:
    fmap = FrequencyMap()
    fmap.increment("th", 0.25)
    fmap.increment("th", 0.25)
    fmap.get("th")            # 0.5
    fmap.export_sorted()      # [Pair("th", 0.5), ...]
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from freqtab.errors import AllocationFailure
from freqtab.paths import DEFAULT_CAPACITY

RESIZE_MIN = 16
LOAD_FACTOR_PCT = 75
NOT_FOUND = -1

_HASH_SEED = 5381
_HASH_MASK = (1 << 64) - 1  # size_t arithmetic


# ----------------------------
# Hashing and growth policy
# ----------------------------

def hash_function(key: str) -> int:
    x = _HASH_SEED
    for b in key.encode("latin-1", errors="replace"):
        x = (33 * x + b) & _HASH_MASK
    return x


def next_power_of_2(x: int) -> int:
    """
    Returns the smallest power of 2 strictly greater than x. If x is already
    a power of 2 this is x << 1, so a full array always doubles. 0 returns 1.
    """
    # 0b0111 -> 0b1000, 0b1000 -> 0b10000
    return 1 << x.bit_length()


def next_size(x: int) -> int:
    return RESIZE_MIN if x < RESIZE_MIN else next_power_of_2(x)


def resize_p(x: int) -> bool:
    """
    True when an array holding x filled slots must grow before the next
    append: x is a power of 2 and at least RESIZE_MIN.
    """
    return x >= RESIZE_MIN and not (x & (x - 1))


# ----------------------------
# Storage
# ----------------------------

class Pair:
    __slots__ = ("key", "value")

    def __init__(self, key: str, value: float):
        self.key = key
        self.value = value

    def __iter__(self):
        # allows `key, value = pair`
        yield self.key
        yield self.value

    def __eq__(self, other):
        if not isinstance(other, Pair):
            return NotImplemented
        return self.key == other.key and self.value == other.value

    def __repr__(self):
        return f"Pair({self.key!r}, {self.value!r})"


class Bucket:
    """
    Entries whose key hashes to the same slot. Owns its own capacity,
    separate from the map's bucket array.
    """
    __slots__ = ("pairs", "capacity")

    def __init__(self):
        self.pairs: List[Pair] = []
        self.capacity = next_size(1)

    def find(self, key: str) -> Optional[Pair]:
        for p in self.pairs:
            if p.key == key:
                return p
        return None

    def append(self, key: str, value: float) -> None:
        n = len(self.pairs)
        if resize_p(n):
            self.capacity = next_size(n + 1)
        self.pairs.append(Pair(key, value))

    def __len__(self):
        return len(self.pairs)


def _allocate_buckets(n: int) -> List[Optional[Bucket]]:
    try:
        return [None] * n
    except (MemoryError, OverflowError) as e:
        raise AllocationFailure(f"cannot allocate {n} buckets") from e


# ----------------------------
# Frequency map
# ----------------------------

class FrequencyMap:
    """
    String -> weight accumulating hash table.

    Not safe for concurrent mutation; resize() and merge() need exclusive
    access to the map.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self.buckets: List[Optional[Bucket]] = []
        self.length = 0
        self.count = 0
        self.init(capacity)

    def init(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """(Re)allocate an empty map with next_size(capacity) buckets."""
        size = next_size(capacity)
        self.buckets = _allocate_buckets(size)
        self.length = size
        self.count = 0

    def clear(self) -> None:
        """Drop all storage. Call init() before using the map again."""
        self.buckets = []
        self.length = 0
        self.count = 0

    # --- lookup ---

    def _slot(self, key: str) -> int:
        if not self.length:
            raise RuntimeError("FrequencyMap used after clear(); call init() first")
        return hash_function(key) % self.length

    def _find(self, key: str) -> Optional[Pair]:
        bucket = self.buckets[self._slot(key)]
        if bucket is None:
            return None
        return bucket.find(key)

    def exists(self, key: str) -> bool:
        return self._find(key) is not None

    def get(self, key: str) -> float:
        """Accumulated weight of key, or NOT_FOUND (-1) when absent."""
        p = self._find(key)
        return NOT_FOUND if p is None else p.value

    # --- mutation ---

    def _upsert(self, key: str, value: float, accumulate: bool) -> None:
        p = self._find(key)
        if p is not None:
            if accumulate:
                p.value += value
            else:
                p.value = value
            return

        # Grow before inserting: if the resize fails the new key is not in the map.
        if (self.count + 1) * 100 > self.length * LOAD_FACTOR_PCT:
            self.resize()

        i = self._slot(key)
        bucket = self.buckets[i]
        if bucket is None:
            bucket = Bucket()
            self.buckets[i] = bucket

        try:
            bucket.append(key, value)
        except MemoryError as e:
            raise AllocationFailure(f"cannot grow bucket {i} for key {key!r}") from e
        self.count += 1

    def put(self, key: str, value: float) -> None:
        """Set key to value, replacing any previous weight."""
        self._upsert(key, value, accumulate=False)

    def increment(self, key: str, value: float) -> None:
        """Add value to key's weight, creating the key at value if absent."""
        self._upsert(key, value, accumulate=True)

    def merge(self, src: "FrequencyMap") -> None:
        """Add every (key, weight) of src into this map. src is unchanged."""
        for key, value in src.items():
            self.increment(key, value)

    def resize(self) -> None:
        """
        Rebuild at double the bucket count. Entries are copied with put(), so
        weights carry over unchanged. The old buckets stay in place if the
        new map cannot be built.
        """
        res = FrequencyMap(next_size(self.length))
        for key, value in self.items():
            res.put(key, value)
        self.buckets, self.length, self.count = res.buckets, res.length, res.count

    # --- traversal / export ---

    def items(self) -> Iterator[Pair]:
        """Pairs in bucket-then-slot order."""
        for bucket in self.buckets:
            if bucket is not None:
                yield from bucket.pairs

    def __iter__(self):
        return self.items()

    def __len__(self):
        return self.count

    def __contains__(self, key):
        return self.exists(key)

    def for_each(self, f: Callable[[str, float], object]):
        """
        Call f(key, value) for each pair. If f returns a truthy value,
        stop and return it; otherwise return 0.
        """
        for p in self.items():
            ret = f(p.key, p.value)
            if ret:
                return ret
        return 0

    def export_sorted(self, tiebreak: bool = False) -> List[Pair]:
        """
        All pairs sorted by weight, descending. Equal weights keep no
        particular order unless tiebreak=True, which orders them by key.
        """
        pairs = list(self.items())
        if tiebreak:
            pairs.sort(key=lambda p: (-p.value, p.key))
        else:
            pairs.sort(key=lambda p: p.value, reverse=True)
        return pairs

    def dump(self, file=None) -> None:
        """Debug print: `key => value, ` for every pair on one line."""
        print("".join(f"{k} => {v:.8f}, " for k, v in self.items()), file=file)

    def __repr__(self):
        return f"FrequencyMap(count={self.count}, length={self.length})"


def merge(dest: FrequencyMap, src: FrequencyMap) -> None:
    dest.merge(src)
