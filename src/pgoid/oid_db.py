"""OID <-> type mappings (forward and reverse).

An :class:`OidDb` indexes :class:`TypeInfo` descriptors two ways:

- ``by_oid``  : oid -> TypeInfo, used when decoding wire data
- ``by_name`` : (name, is_array) -> oid, used when encoding values

Both are immutable. :meth:`OidDb.update` returns a new database, so a
snapshot handed to a reader stays valid after the owner swaps in a newer one.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable

from .codecs import CodecEntry
from .exc import UnknownTypeError
from .kv import KV


@dataclasses.dataclass(frozen=True, slots=True)
class TypeInfo:
    """One (type, array-ness) pairing as known to the server.

    Parameters
    ----------
    oid : int
        Server OID of this exact type; unique within an OidDb.
    name : str
        ``pg_type.typname``, shared by the scalar and its array type.
    is_array : bool
        True for the ``name[]`` variant.
    array_element_oid : int | None
        OID of the element (scalar) type; ``None`` for scalars.
    codec, codec_state : Any
        Opaque codec reference and its configuration.
    """
    oid: int
    name: str
    is_array: bool
    array_element_oid: int | None = None
    codec: Any = None
    codec_state: Any = None

    def to_codec_entry(self) -> CodecEntry:
        """Project to the ``(name, codec, state)`` shape used for dispatch."""
        return CodecEntry(name=self.name, codec=self.codec, state=self.codec_state)

    def to_oid_info(self) -> tuple[int, str, bool]:
        """Project to ``(oid, name, is_array)``."""
        return (self.oid, self.name, self.is_array)


@dataclasses.dataclass(frozen=True, slots=True)
class OidDb:
    """Dual-indexed, immutable registry of TypeInfo descriptors.

    Usage::

        db = OidDb.from_list(join_codecs_oids(entries, codecs))
        db.find_by_oid(23)               # TypeInfo or None
        db.find_by_name('int4', False)   # TypeInfo, UnknownTypeError if absent
        db = db.update(more_types)       # new OidDb, old one untouched
    """
    by_oid: KV[int, TypeInfo]
    by_name: KV[tuple[str, bool], int]

    @classmethod
    def empty(cls) -> OidDb:
        return cls(by_oid=KV(), by_name=KV())

    @classmethod
    def from_list(cls, types: Iterable[TypeInfo]) -> OidDb:
        """Build a database from descriptors.

        Duplicate oids or ``(name, is_array)`` keys are not rejected; the
        last descriptor for a key wins.
        """
        types = list(types)
        return cls(
            by_oid=KV.from_pairs((t.oid, t) for t in types),
            by_name=KV.from_pairs(((t.name, t.is_array), t.oid) for t in types),
        )

    def to_list(self) -> list[TypeInfo]:
        """Return every descriptor in the database."""
        return [t for _oid, t in self.by_oid.pairs()]

    def update(self, types: Iterable[TypeInfo]) -> OidDb:
        """Return a new database with ``types`` merged over this one.

        Entries from ``types`` win on key collision; nothing is removed.
        """
        new = OidDb.from_list(types)
        return OidDb(
            by_oid=self.by_oid.merge(new.by_oid),
            by_name=self.by_name.merge(new.by_name),
        )

    def find_by_oid(self, oid: int) -> TypeInfo | None:
        """Look up a descriptor by OID, returning ``None`` if unknown."""
        return self.by_oid.get(oid)

    def find_by_name(self, name: str, is_array: bool) -> TypeInfo:
        """Look up a descriptor by type name and array-ness."""
        return self.by_oid[self.oid_by_name(name, is_array)]

    def oid_by_name(self, name: str, is_array: bool) -> int:
        """Return the OID registered for ``(name, is_array)``."""
        try:
            return self.by_name[(name, is_array)]
        except KeyError:
            raise UnknownTypeError(name, is_array) from None

    def __contains__(self, oid: object) -> bool:
        return oid in self.by_oid

    def __len__(self) -> int:
        return len(self.by_oid)

    def __repr__(self) -> str:
        return f"OidDb({len(self.by_oid)} types)"
