"""A separate-chaining hash map with a caller-supplied hash function."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from itertools import combinations
from typing import Any, TextIO

from .errors import SmashMapError, SmashMapErrorCode

MAX_ELEM_STR_SIZE = 256

HashFunc = Callable[[Any], int]
ToStr = Callable[[Any], str]


def _clip(text: str) -> str:
    # Rendered elements are bounded like a fixed-size, NUL-terminated buffer.
    return text[: MAX_ELEM_STR_SIZE - 1]


class SmashMap:
    """Fixed number of buckets; each bucket keeps its newest entry first."""

    def __init__(
        self,
        size: int,
        hash_func: HashFunc | None = hash,
        key_to_str: ToStr = str,
        val_to_str: ToStr = str,
        name: str = "smash_map",
    ) -> None:
        if not isinstance(size, int) or size <= 0:
            raise SmashMapError(
                SmashMapErrorCode.BUCKETS_SIZE_IS_ZERO, f"invalid bucket count {size!r}"
            )
        if hash_func is None:
            raise SmashMapError(SmashMapErrorCode.HASH_FUNC_IS_NULL)
        if not callable(hash_func):
            raise SmashMapError(SmashMapErrorCode.HASH_FUNC_IS_INVALID)

        self.name = name
        self._size = size
        self._hash_func = hash_func
        self.key_to_str = key_to_str
        self.val_to_str = val_to_str
        self._buckets: list[list[list[Any]]] = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        """Number of buckets."""
        return self._size

    def _bucket_for(self, key: Any) -> list[list[Any]]:
        return self._buckets[self._hash_func(key) % self._size]

    @staticmethod
    def _find(bucket: list[list[Any]], key: Any) -> list[Any] | None:
        return next((entry for entry in bucket if entry[0] == key), None)

    def insert(self, key: Any, val: Any) -> None:
        """Add a key, or replace the value of a key already present."""
        bucket = self._bucket_for(key)
        entry = self._find(bucket, key)
        if entry is None:
            bucket.insert(0, [key, val])
        else:
            entry[1] = val

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value stored for key, or default when it is absent."""
        entry = self._find(self._bucket_for(key), key)
        return default if entry is None else entry[1]

    def __contains__(self, key: Any) -> bool:
        return self._find(self._bucket_for(key), key) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs bucket by bucket, newest first within a bucket."""
        for bucket in self._buckets:
            for key, val in bucket:
                yield key, val

    def buckets(self) -> list[list[tuple[Any, Any]]]:
        """Return a snapshot of every bucket's (key, value) pairs."""
        return [[(key, val) for key, val in bucket] for bucket in self._buckets]

    def verify(self) -> None:
        """Check the map's invariants, raising SmashMapError on the first violation."""
        if self._hash_func is None:
            raise SmashMapError(SmashMapErrorCode.HASH_FUNC_IS_NULL)
        if not callable(self._hash_func):
            raise SmashMapError(SmashMapErrorCode.HASH_FUNC_IS_INVALID)
        if self._size == 0:
            raise SmashMapError(SmashMapErrorCode.BUCKETS_SIZE_IS_ZERO)
        if len(self._buckets) != self._size:
            raise SmashMapError(
                SmashMapErrorCode.BUCKETS_IS_INVALID,
                f"{len(self._buckets)} buckets for size {self._size}",
            )

        keys = list(self)
        if all(isinstance(key, Hashable) for key in keys):
            seen: set[Any] = set()
            for key in keys:
                if key in seen:
                    raise SmashMapError(SmashMapErrorCode.FOUND_DUPLICATE, f"key {key!r}")
                seen.add(key)
        else:
            for first, second in combinations(keys, 2):
                if first == second:
                    raise SmashMapError(SmashMapErrorCode.FOUND_DUPLICATE, f"key {first!r}")

    def print_to(self, file: TextIO) -> None:
        """Write one 'key: value' line per entry, in iteration order."""
        for key, val in self.items():
            file.write(f"{_clip(self.key_to_str(key))}: {_clip(self.val_to_str(val))}\n")

    def __repr__(self) -> str:
        return f"SmashMap(name={self.name!r}, size={self._size}, entries={len(self)})"