"""TypeCache: the current OidDb snapshot for one connection."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Iterable, Sequence

from .catalog import build_query, join_codecs_oids, parse_rows
from .codecs import CodecRegistry, default_registry
from .constants import KNOWN_TYPE_NAMES
from .oid_db import OidDb, TypeInfo

log = logging.getLogger("pgoid.cache")

# Runs catalog query text against the server and returns its text rows.
Executor = Callable[[str], Iterable[Sequence[Any]]]


class TypeCache:
    """Holds "the current" :class:`OidDb` and grows it from pg_type.

    The snapshot returned by :attr:`db` is immutable. Refreshes build a new
    OidDb and swap it in under a lock, so readers holding an older snapshot
    keep a consistent view.

    Usage::

        cache = TypeCache(prefetch=['int4', 'text', 'uuid'])
        cache.fetch(conn.simple_query)        # on connect
        ...
        cache.fetch(conn.simple_query, ['hstore'])   # later, on demand
        cache.db.find_by_oid(oid)
    """

    def __init__(
        self,
        registry: CodecRegistry | None = None,
        prefetch: Iterable[str] | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._prefetch = list(prefetch) if prefetch is not None else None
        self._db = OidDb.empty()
        self._lock = threading.Lock()

    @property
    def db(self) -> OidDb:
        """The current snapshot."""
        return self._db

    @property
    def registry(self) -> CodecRegistry:
        return self._registry

    @property
    def prefetch(self) -> list[str]:
        """Type names fetched by default: the configured list or every codec."""
        if self._prefetch is not None:
            return list(self._prefetch)
        return self._registry.names

    def missing(self, names: Iterable[str]) -> list[str]:
        """Return the names (sorted, deduplicated) without a scalar entry yet."""
        db = self._db
        return sorted({n for n in names if (n, False) not in db.by_name})

    def load(self, rows: Iterable[Sequence[Any]]) -> list[TypeInfo]:
        """Merge pg_type rows into the cache; return the new descriptors.

        Rows may come in any order.
        """
        known = KNOWN_TYPE_NAMES | set(self._registry.names)
        entries = parse_rows(rows, known=known)
        entries.sort(key=lambda e: e.name)
        types = join_codecs_oids(entries, self._registry.entries())
        with self._lock:
            self._db = self._db.update(types)
            total = len(self._db)
        log.debug("Registered %d types (%d total)", len(types), total)
        return types

    def fetch(
        self,
        execute: Executor,
        names: Iterable[str | bytes] | None = None,
    ) -> list[TypeInfo]:
        """Query the server for missing type names and merge the result.

        Names without a registered codec are skipped. No query is issued
        when every requested name is already cached.
        """
        if names is None:
            wanted = self.prefetch
        else:
            wanted = [n.decode('utf-8') if isinstance(n, bytes) else n for n in names]
        unsupported = [n for n in wanted if n not in self._registry]
        if unsupported:
            log.debug("No codec registered for %s, not fetching", ', '.join(unsupported))
        todo = self.missing(n for n in wanted if n in self._registry)
        if not todo:
            return []
        sql = build_query(todo)
        log.info("Fetching OIDs for %d types", len(todo))
        log.debug("Catalog query: %s", sql)
        return self.load(execute(sql))

    def __repr__(self) -> str:
        return f"TypeCache({len(self._db)} types, {len(self._registry)} codecs)"
