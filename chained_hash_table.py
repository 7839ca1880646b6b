import logging
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Final, Generic, Hashable, Iterator, Optional, TypeVar

from tabulation_hash import TabulationHash, default_hash

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(slots=True)
class Pair(Generic[K, V]):
    """
    A pair is a simple key-value pair stored in a bucket
    """

    key: K
    value: V

    def key_matches(self, candidate_key: K) -> bool:
        """
        Match some candidate key with the key belonging to self

        Referential equality is checked first since keys may be complex objects
        whose comparisons are expensive. Keys whose hashes collide but which are not
        equal never match.
        """
        return candidate_key is self.key or candidate_key == self.key


Bucket = list[Pair[K, V]]


class HashTable(MutableMapping, Generic[K, V]):
    """
    A dictionary which resolves collisions using separate chaining

    Notes
    -----
        * ``self._buckets`` is a tuple of exactly ``NUM_BUCKETS`` buckets, it is never resized.

        * Each bucket is a list of ``Pair`` objects in insertion order. Re-inserting a key
          removes its old pair and appends the new one to the end of the bucket.

        * No two pairs in a bucket share an equal key.

        * The bucket of a key is ``digest(key) % NUM_BUCKETS`` where the digest is a 64-bit
          tabulation hash shared by the whole process.

        * ``insert``, ``get`` and ``remove`` return ``None`` to signal an absent key. The
          mapping protocol (``[]``, ``del``) raises ``KeyError`` instead.

        * The table is not synchronized, callers sharing it across threads must lock around
          ``insert`` and ``remove``.
    """

    # the number of buckets, fixed for the lifetime of every table
    NUM_BUCKETS: Final[int] = 16

    __slots__ = ("_buckets", "_hash")

    def __init__(self):
        self._hash: TabulationHash = default_hash()
        self._buckets: tuple[Bucket, ...] = tuple(
            [] for _ in range(HashTable.NUM_BUCKETS)
        )
        logger.debug("created hash table with %d buckets", HashTable.NUM_BUCKETS)

    def _bucket_index(self, key: K) -> int:
        return self._hash(key) % HashTable.NUM_BUCKETS

    @staticmethod
    def _find_in_bucket(bucket: Bucket, key: K) -> Optional[int]:
        """
        Linearly scan ``bucket`` for a pair matching ``key``

        Returns
        -------
        int
            The position of the matching pair in the bucket
        None
            If no pair matches
        """
        for item_index, pair in enumerate(bucket):
            if pair.key_matches(key):
                return item_index
        return None

    def _get_pair(self, key: K) -> Optional[Pair[K, V]]:
        bucket = self._buckets[self._bucket_index(key)]
        if (item_index := self._find_in_bucket(bucket, key)) is None:
            return None
        return bucket[item_index]

    def _pop_pair(self, key: K) -> Optional[Pair[K, V]]:
        bucket_index = self._bucket_index(key)
        bucket = self._buckets[bucket_index]
        if (item_index := self._find_in_bucket(bucket, key)) is None:
            return None
        logger.debug("removing %r from bucket %d", key, bucket_index)
        return bucket.pop(item_index)

    def insert(self, key: K, value: V) -> Optional[V]:
        """
        Insert the pair (key, value) into the table

        Parameters
        ----------
        key : K
            A hashable key
        value : V
            The value to associate with ``key``

        Returns
        -------
        V
            The previous value of ``key`` if it was present. Its old pair is removed and
            the new pair is appended to the end of the bucket.
        None
            If ``key`` was absent

        Raises
        ------
        TypeError
            If ``key`` is not hashable
        """
        bucket_index = self._bucket_index(key)
        bucket = self._buckets[bucket_index]

        if (item_index := self._find_in_bucket(bucket, key)) is not None:
            old_pair = bucket.pop(item_index)
            bucket.append(Pair(key, value))
            logger.debug("replaced value of %r in bucket %d", key, bucket_index)
            return old_pair.value

        if bucket:
            logger.debug(
                "collision in bucket %d: %r joins a chain of length %d",
                bucket_index,
                key,
                len(bucket),
            )
        bucket.append(Pair(key, value))
        return None

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value stored for ``key``, or ``default`` (None) if it is absent."""
        if (pair := self._get_pair(key)) is None:
            return default
        return pair.value

    def remove(self, key: K) -> Optional[V]:
        """
        Detach the pair for ``key`` and return its value, or None if it is absent

        The remaining pairs of the bucket keep their order.
        """
        if (pair := self._pop_pair(key)) is None:
            return None
        return pair.value

    def __contains__(self, key: K) -> bool:
        return self._get_pair(key) is not None

    def __getitem__(self, key: K) -> V:
        if (pair := self._get_pair(key)) is None:
            raise KeyError(f"{key} not found")
        return pair.value

    def __setitem__(self, key: K, value: V):
        self.insert(key, value)

    def __delitem__(self, key: K):
        if self._pop_pair(key) is None:
            raise KeyError(f"{key} not found")

    def _enumerate_pairs(self) -> Iterator[tuple[int, Pair[K, V]]]:
        for bucket_index, bucket in enumerate(self._buckets):
            for pair in bucket:
                yield bucket_index, pair

    def __iter__(self) -> Iterator[K]:
        yield from (pair.key for _, pair in self._enumerate_pairs())

    def __len__(self) -> int:
        # the table keeps no count, so this walks every bucket
        return sum(map(len, self._buckets))

    def bucket_sizes(self) -> tuple[int, ...]:
        return tuple(len(bucket) for bucket in self._buckets)

    def __repr__(self):
        if not len(self):
            return "{}"
        return "\n".join(
            f"{bucket_index:<10} {pair.key!r:<15} | {pair.value!r}"
            for bucket_index, pair in self._enumerate_pairs()
        )
