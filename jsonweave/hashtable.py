"""Insertion-ordered hash table keyed by strings, with a seeded hash."""

from __future__ import annotations

import hashlib
from collections.abc import Iterator, MutableMapping

from jsonweave.seed import current_seed, object_seed

INITIAL_HASHTABLE_ORDER = 3


class _Pair:
    """A key/value entry linked into the table's insertion order."""

    __slots__ = ("hash", "key", "value", "prev", "next", "linked")

    def __init__(self, hash_value, key, value):
        self.hash = hash_value
        self.key = key
        self.value = value
        self.prev = self
        self.next = self
        self.linked = False


class HashTable(MutableMapping):
    """A mapping from strings to values that keeps insertion order.

    The number of buckets is a power of two, starting at eight and doubling
    whenever an insertion finds the table holding as many entries as it has
    buckets. Iteration follows insertion order and tolerates the removal of
    the entry most recently yielded, or of any other entry.
    """

    def __init__(self, seed=None):
        if seed is None:
            object_seed(0)
            seed = current_seed()
        self._seed_key = (int(seed) & 0xFFFFFFFF).to_bytes(4, "little")
        self._order = INITIAL_HASHTABLE_ORDER
        self._buckets = [[] for _ in range(1 << self._order)]
        self._size = 0
        self._head = _Pair(0, None, None)
        self._head.linked = True

    def _hash(self, key):
        if not isinstance(key, str):
            raise TypeError(f"hash table keys must be str, not {type(key).__name__}")
        data = key.encode("utf-8", "surrogatepass")
        digest = hashlib.blake2b(data, digest_size=8, key=self._seed_key).digest()
        return int.from_bytes(digest, "little")

    def _bucket(self, hash_value):
        return self._buckets[hash_value & (len(self._buckets) - 1)]

    def _find(self, key):
        hash_value = self._hash(key)
        bucket = self._bucket(hash_value)
        for pair in bucket:
            if pair.hash == hash_value and pair.key == key:
                return pair, bucket
        return None, bucket

    def _rehash(self):
        self._order += 1
        self._buckets = [[] for _ in range(1 << self._order)]
        for pair in self._pairs_from(self._head.next):
            self._bucket(pair.hash).append(pair)

    def _link_last(self, pair):
        tail = self._head.prev
        pair.prev = tail
        pair.next = self._head
        tail.next = pair
        self._head.prev = pair
        pair.linked = True

    @staticmethod
    def _unlink(pair):
        pair.prev.next = pair.next
        pair.next.prev = pair.prev
        pair.linked = False

    def _pairs_from(self, node):
        head = self._head
        while node is not head:
            following = node.next
            yield node
            node = node.next if node.linked else following
            while node is not head and not node.linked:
                node = node.next

    def __getitem__(self, key):
        pair, _ = self._find(key)
        if pair is None:
            raise KeyError(key)
        return pair.value

    def __setitem__(self, key, value):
        if self._size >= len(self._buckets):
            self._rehash()
        pair, bucket = self._find(key)
        if pair is not None:
            pair.value = value
            return
        pair = _Pair(self._hash(key), key, value)
        bucket.insert(0, pair)
        self._link_last(pair)
        self._size += 1

    def __delitem__(self, key):
        pair, bucket = self._find(key)
        if pair is None:
            raise KeyError(key)
        bucket.remove(pair)
        self._unlink(pair)
        self._size -= 1

    def __iter__(self) -> Iterator[str]:
        for pair in self._pairs_from(self._head.next):
            yield pair.key

    def __len__(self):
        return self._size

    def __repr__(self):
        inner = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{inner}}})"

    def clear(self):
        """Remove every entry; the number of buckets is kept."""
        for pair in list(self._pairs_from(self._head.next)):
            pair.linked = False
        self._buckets = [[] for _ in range(len(self._buckets))]
        self._head.next = self._head
        self._head.prev = self._head
        self._size = 0

    def iter_from(self, key):
        """Iterate over keys in insertion order, starting at ``key``.

        Raises :class:`KeyError` if ``key`` is not in the table.
        """
        pair, _ = self._find(key)
        if pair is None:
            raise KeyError(key)
        return (entry.key for entry in self._pairs_from(pair))

    def bucket_count(self):
        """Return the current number of buckets."""
        return len(self._buckets)