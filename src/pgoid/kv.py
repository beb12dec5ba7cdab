"""Immutable key-value store backing the OID indices."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Generic, Iterable, Iterator, TypeVar

K = TypeVar('K')
V = TypeVar('V')


class KV(Mapping, Generic[K, V]):
    """Read-only mapping with a right-biased ``merge``.

    Usage::

        kv = KV.from_pairs([(23, 'int4'), (25, 'text')])
        kv[23]                 # 'int4', KeyError when missing
        kv.get(99)             # None
        kv.merge(KV.from_pairs([(25, 'varchar')]))[25]   # 'varchar'

    Instances are never modified after construction; ``merge`` returns a
    new store.
    """

    __slots__ = ('_data',)

    def __init__(self, data: dict[K, V] | None = None) -> None:
        self._data: dict[K, V] = dict(data) if data else {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[K, V]]) -> KV[K, V]:
        """Build a store from ``(key, value)`` pairs; later pairs win."""
        return cls(dict(pairs))

    def pairs(self) -> list[tuple[K, V]]:
        """Return all ``(key, value)`` pairs."""
        return list(self._data.items())

    def merge(self, other: Mapping[K, V]) -> KV[K, V]:
        """Return a new store with ``other``'s entries layered on top."""
        merged = dict(self._data)
        merged.update(other)
        return KV(merged)

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"KV({self._data!r})"
