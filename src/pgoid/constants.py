"""Catalog constants for PostgreSQL type discovery."""

from __future__ import annotations

# ── pg_type catalog query ──────────────────────────────────────────
# Reference: https://www.postgresql.org/docs/current/catalog-pg-type.html
CATALOG_SELECT = "SELECT typname, oid::int4, typarray::int4 FROM pg_type"
CATALOG_ORDER = "ORDER BY typname"

# Number of fields in a catalog response row: typname, oid, typarray
CATALOG_ROW_WIDTH = 3

# ── Known type names ───────────────────────────────────────────────
# Names the client can understand in a catalog response. Rows naming
# anything outside this set (or the registered codec names) are rejected.

NUMERIC_TYPES = frozenset({
    'int2', 'int4', 'int8',
    'float4', 'float8',
    'numeric',
    'oid',
})

TEXT_TYPES = frozenset({
    'bpchar', 'char', 'name', 'text', 'varchar', 'citext',
    'bytea',
    'json', 'jsonb',
    'xml',
})

TEMPORAL_TYPES = frozenset({
    'date', 'time', 'timetz',
    'timestamp', 'timestamptz',
    'interval',
})

NETWORK_TYPES = frozenset({
    'inet', 'cidr', 'macaddr', 'macaddr8',
})

RANGE_TYPES = frozenset({
    'int4range', 'int8range', 'numrange',
    'daterange', 'tsrange', 'tstzrange',
})

MISC_TYPES = frozenset({
    'bool', 'uuid', 'bit', 'varbit',
    'point', 'geometry',
    'hstore',
    'tsvector', 'tsquery',
    'record',
})

KNOWN_TYPE_NAMES: frozenset[str] = (
    NUMERIC_TYPES | TEXT_TYPES | TEMPORAL_TYPES
    | NETWORK_TYPES | RANGE_TYPES | MISC_TYPES
)
