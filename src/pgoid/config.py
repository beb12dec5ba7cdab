"""Load type cache settings from YAML, TOML, or JSON files.

A config file lists the type names to prefetch when a connection opens::

    # pgoid.toml
    prefetch = ["int4", "int8", "text", "uuid", "hstore"]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from .cache import TypeCache
from .codecs import CodecRegistry, default_registry
from .constants import KNOWN_TYPE_NAMES
from .exc import ConfigError


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a config file into a dict, choosing the parser by extension.

    Supported extensions: ``.json``, ``.toml``, ``.yaml`` / ``.yml``.
    An empty YAML file reads as ``{}``.

    Raises
    ------
    FileNotFoundError
        The file does not exist.
    ValueError
        The extension is not supported.
    ConfigError
        The file does not parse, or its top level is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ValueError(
            f"Unsupported config file extension {path.suffix.lower()!r}. "
            f"Use one of: {', '.join(sorted(_PARSERS))}."
        )

    data = parser(path.read_text(encoding='utf-8'), path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"{path.name}: expected a mapping at top level, got {type(data).__name__}"
        )
    return data


def prefetch_from_config(
    data: dict[str, Any],
    registry: CodecRegistry | None = None,
) -> list[str] | None:
    """Validate and return the ``prefetch`` list of a loaded config.

    Returns ``None`` when the key is absent (prefetch every codec).
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at top level, got {type(data).__name__}")
    names = data.get('prefetch')
    if names is None:
        return None
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise ConfigError("'prefetch' must be a list of type names")

    registry = registry if registry is not None else default_registry()
    unknown = sorted(set(names) - KNOWN_TYPE_NAMES - set(registry.names))
    if unknown:
        raise ConfigError(f"Unknown type names in 'prefetch': {', '.join(unknown)}")
    return names


def cache_from_config(
    path: str | Path,
    registry: CodecRegistry | None = None,
) -> TypeCache:
    """Create a :class:`TypeCache` from a config file."""
    data = load_config(path)
    prefetch = prefetch_from_config(data, registry)
    return TypeCache(registry=registry, prefetch=prefetch)


# ── Parsers: text -> raw document ───────────────────────────────

def _parse_json(text: str, path: Path) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path.name}: invalid JSON: {exc}") from exc


def _parse_toml(text: str, path: Path) -> Any:
    """Parse with ``tomllib`` (3.11+) or the ``tomli`` backport."""
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            raise ImportError(
                "TOML config needs Python 3.11+ or the 'tomli' package. "
                "Install with: pip install pgoid[toml]"
            )
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path.name}: invalid TOML: {exc}") from exc


def _parse_yaml(text: str, path: Path) -> Any:
    """Parse with ``pyyaml``'s safe loader."""
    try:
        import yaml
    except ModuleNotFoundError:
        raise ImportError(
            "YAML config needs the 'pyyaml' package. "
            "Install with: pip install pgoid[yaml]"
        )
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path.name}: invalid YAML: {exc}") from exc


_PARSERS: dict[str, Callable[[str, Path], Any]] = {
    '.json': _parse_json,
    '.toml': _parse_toml,
    '.yaml': _parse_yaml,
    '.yml': _parse_yaml,
}
