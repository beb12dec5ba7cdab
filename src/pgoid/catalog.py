"""pg_type catalog data preparation: query text, row parsing, codec join.

Typical flow::

    sql = build_query(registry.names)
    rows = execute(sql)                         # external I/O
    types = join_codecs_oids(parse_rows(rows), registry.entries())
    db = OidDb.from_list(types)
"""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import Iterable, Sequence

from .codecs import CodecEntry, default_registry
from .constants import CATALOG_ORDER, CATALOG_ROW_WIDTH, CATALOG_SELECT, KNOWN_TYPE_NAMES
from .exc import CatalogError, InvalidTypeError
from .oid_db import TypeInfo

log = logging.getLogger("pgoid")

# Decimal text as printed by PostgreSQL for int4; no blanks or underscores
_OID_RE = re.compile(r'-?[0-9]+')


@dataclasses.dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One parsed pg_type row: a type name with its scalar and array OIDs."""
    name: str
    oid: int
    array_oid: int


def _to_str(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode('utf-8')
    if not isinstance(value, str):
        raise TypeError(f"expected str or bytes, got {type(value).__name__}")
    return value


def _parse_oid(value: str | bytes) -> int:
    text = _to_str(value)
    if not _OID_RE.fullmatch(text):
        raise ValueError(f"invalid OID text {text!r}")
    return int(text)


def build_query(type_names: Iterable[str | bytes]) -> str:
    """Build the query fetching OIDs for ``type_names`` from pg_type.

    The result is ordered by ``typname``, which :func:`join_codecs_oids`
    relies on.

    Type names are NOT escaped. They must come from a trusted set (the
    codec registry), never from user input.
    """
    types = ','.join(f"'{_to_str(name)}'" for name in type_names)
    return f"{CATALOG_SELECT} WHERE typname IN ({types}) {CATALOG_ORDER}"


def parse_rows(
    rows: Iterable[Sequence[str | bytes]],
    known: Iterable[str] | None = None,
) -> list[CatalogEntry]:
    """Parse the text rows returned by :func:`build_query`'s query.

    Parameters
    ----------
    rows : iterable of (typname, oid, typarray)
        Text (or UTF-8 bytes) fields as returned by a simple query.
    known : iterable of str, optional
        Type names the client understands. Defaults to the built-in names
        plus everything in the default codec registry.

    Raises
    ------
    InvalidTypeError
        A row names a type outside the known set.
    CatalogError
        A row has the wrong width or a non-integer OID.
    """
    if known is None:
        known_names = KNOWN_TYPE_NAMES | set(default_registry().names)
    else:
        known_names = frozenset(known)

    entries: list[CatalogEntry] = []
    for i, row in enumerate(rows):
        if len(row) != CATALOG_ROW_WIDTH:
            raise CatalogError(
                f"Row {i} has {len(row)} fields, expected {CATALOG_ROW_WIDTH}: {row!r}"
            )
        name_raw, oid_raw, array_raw = row
        try:
            name = _to_str(name_raw)
        except (TypeError, UnicodeDecodeError) as exc:
            raise CatalogError(f"Malformed type name in row {i}: {exc}") from exc
        if name not in known_names:
            raise InvalidTypeError(name)
        try:
            oid = _parse_oid(oid_raw)
            array_oid = _parse_oid(array_raw)
        except (ValueError, TypeError, UnicodeDecodeError) as exc:
            raise CatalogError(f"Malformed OID in row {i} ({name!r}): {exc}") from exc
        entries.append(CatalogEntry(name=name, oid=oid, array_oid=array_oid))
    return entries


def join_codecs_oids(
    oids: Sequence[CatalogEntry],
    codecs: Sequence[CodecEntry],
) -> list[TypeInfo]:
    """Merge catalog entries and codec entries by type name.

    Both sequences MUST already be sorted ascending by name (pg_type rows
    are, via ``ORDER BY typname``; :meth:`CodecRegistry.entries` are too).
    Unsorted input is not detected and yields an incomplete result.

    Each name present in both inputs produces two descriptors, the scalar
    followed by its array type. Names present on only one side are skipped:
    a codec the server lacks is fine, as is a server type with no codec.
    """
    types: list[TypeInfo] = []
    i = j = 0
    while i < len(oids) and j < len(codecs):
        entry = oids[i]
        codec = codecs[j]
        if entry.name == codec.name:
            types.append(TypeInfo(
                oid=entry.oid, name=entry.name, is_array=False,
                codec=codec.codec, codec_state=codec.state,
            ))
            types.append(TypeInfo(
                oid=entry.array_oid, name=entry.name, is_array=True,
                array_element_oid=entry.oid,
                codec=codec.codec, codec_state=codec.state,
            ))
            i += 1
            j += 1
        elif entry.name > codec.name:
            log.debug("No server type for codec %r, skipped", codec.name)
            j += 1
        else:
            log.debug("No codec for server type %r, skipped", entry.name)
            i += 1
    return types
