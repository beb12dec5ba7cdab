"""Shared fixtures: dummy codecs, a codec registry and pg_type rows."""

from __future__ import annotations

import pytest

from pgoid.codecs import CodecRegistry


class IntCodec:
    """Stand-in codec reference; pgoid never calls it."""


class TextCodec:
    """Stand-in codec reference; pgoid never calls it."""


class HstoreCodec:
    """Stand-in codec reference; pgoid never calls it."""


# Real OIDs from a PostgreSQL 16 pg_type, ordered by typname
PG_TYPE_ROWS = [
    ('bool', '16', '1000'),
    ('int2', '21', '1005'),
    ('int4', '23', '1007'),
    ('int8', '20', '1016'),
    ('text', '25', '1009'),
    ('uuid', '2950', '2951'),
]


@pytest.fixture
def codecs():
    """Registry with int, text and hstore codecs (no bool, no uuid)."""
    reg = CodecRegistry()
    reg.register(IntCodec, ['int2', 'int4', 'int8'])
    reg.register(TextCodec, ['text'], state={'encoding': 'utf-8'})
    reg.register(HstoreCodec, ['hstore'])
    return reg


@pytest.fixture
def pg_type_rows():
    return list(PG_TYPE_ROWS)
