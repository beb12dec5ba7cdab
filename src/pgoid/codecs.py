"""Static codec registration: CodecEntry and CodecRegistry."""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable


@dataclasses.dataclass(frozen=True, slots=True)
class CodecEntry:
    """A statically registered codec for one PostgreSQL type name.

    Parameters
    ----------
    name : str
        The ``pg_type.typname`` the codec handles (e.g. "int4", "hstore").
    codec : Any
        Reference to the encode/decode implementation. Never inspected.
    state : Any
        Codec-specific configuration passed back to the codec. Never inspected.
    """
    name: str
    codec: Any
    state: Any = None


class CodecRegistry:
    """Named collection of codecs, one entry per type name.

    Usage::

        codecs = CodecRegistry()
        codecs.register(IntCodec, ['int2', 'int4', 'int8'])
        codecs.register(HstoreCodec, ['hstore'], state={'nulls': None})

        codecs.entries()   # sorted by name, ready for join_codecs_oids()

    Registering a name twice replaces the earlier entry.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CodecEntry] = {}

    def register(self, codec: Any, names: Iterable[str], state: Any = None) -> None:
        """Register ``codec`` for each of ``names`` with a shared ``state``."""
        for name in names:
            self._entries[name] = CodecEntry(name=name, codec=codec, state=state)

    def unregister(self, name: str) -> None:
        """Remove the codec registered for ``name``, if any."""
        self._entries.pop(name, None)

    def get(self, name: str) -> CodecEntry | None:
        """Look up the codec entry for a type name."""
        return self._entries.get(name)

    def entries(self) -> list[CodecEntry]:
        """Return all entries sorted ascending by name."""
        return [self._entries[name] for name in sorted(self._entries)]

    @property
    def names(self) -> list[str]:
        """Return all registered type names, sorted."""
        return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CodecRegistry([{', '.join(self.names)}])"


# ── Default registry ──────────────────────────────────────────────
_DEFAULT_REGISTRY = CodecRegistry()


def default_registry() -> CodecRegistry:
    """Return the process-wide codec registry."""
    return _DEFAULT_REGISTRY


def register_codec(codec: Any, names: Iterable[str], state: Any = None) -> Any:
    """Register a codec in the default registry and return it.

    Returning the codec allows use as a class decorator-style helper::

        IntCodec = register_codec(IntCodec, ['int2', 'int4', 'int8'])
    """
    _DEFAULT_REGISTRY.register(codec, names, state)
    return codec


def codec_entries() -> list[CodecEntry]:
    """Return the default registry's entries sorted by name."""
    return _DEFAULT_REGISTRY.entries()
