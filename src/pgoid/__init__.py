"""pgoid: PostgreSQL type OID registry for wire-protocol clients.

Usage::

    from pgoid import CodecRegistry, TypeCache

    codecs = CodecRegistry()
    codecs.register(IntCodec, ['int2', 'int4', 'int8'])
    codecs.register(TextCodec, ['text', 'varchar'])

    cache = TypeCache(registry=codecs)
    cache.fetch(conn.simple_query)

    info = cache.db.find_by_oid(23)          # TypeInfo(oid=23, name='int4', ...)
    oid = cache.db.oid_by_name('text', True)  # OID of text[]
"""

from .kv import KV
from .codecs import (
    CodecEntry, CodecRegistry,
    default_registry, register_codec, codec_entries,
)
from .catalog import CatalogEntry, build_query, parse_rows, join_codecs_oids
from .oid_db import OidDb, TypeInfo
from .cache import TypeCache
from .config import load_config, cache_from_config
from .constants import KNOWN_TYPE_NAMES
from .exc import (
    PgoidError, InvalidTypeError, UnknownTypeError,
    CatalogError, ConfigError,
)

__version__ = "0.1.0"

__all__ = [
    # Registry
    'OidDb', 'TypeInfo', 'KV',
    # Catalog
    'CatalogEntry', 'build_query', 'parse_rows', 'join_codecs_oids',
    'KNOWN_TYPE_NAMES',
    # Codecs
    'CodecEntry', 'CodecRegistry',
    'default_registry', 'register_codec', 'codec_entries',
    # Cache / config
    'TypeCache', 'load_config', 'cache_from_config',
    # Exceptions
    'PgoidError', 'InvalidTypeError', 'UnknownTypeError',
    'CatalogError', 'ConfigError',
]
