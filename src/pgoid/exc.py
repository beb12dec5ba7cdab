"""Exception hierarchy for pgoid."""


class PgoidError(Exception):
    """Base exception for all pgoid errors."""


class InvalidTypeError(PgoidError):
    """A pg_type row names a type the client has no static knowledge of."""

    def __init__(self, name: str) -> None:
        self.type_name = name
        super().__init__(f"Invalid type name {name!r}: not a known type")


class UnknownTypeError(PgoidError, KeyError):
    """No type registered for a ``(name, is_array)`` pair."""

    def __init__(self, name: str, is_array: bool) -> None:
        self.type_name = name
        self.is_array = is_array
        suffix = '[]' if is_array else ''
        super().__init__(f"Unknown type {name}{suffix}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class CatalogError(PgoidError):
    """Malformed row in a pg_type catalog response."""


class ConfigError(PgoidError):
    """Invalid pgoid configuration content."""
