"""
Namespace registry view and prefix resolver.

The validators only ever *read* a registry. Anything exposing
``get_uri(prefix)`` that raises PrefixNotRegistered for unknown prefixes can
be used, as can a plain ``{prefix: uri}`` mapping.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

import yaml

from jcr_lexicon.errors import NamespaceFileError, PrefixNotRegistered
from jcr_lexicon.lex_logging import get_logger

logger = get_logger(__name__)

BUILTIN_NAMESPACES: Mapping[str, str] = MappingProxyType({
    "jcr": "http://www.jcp.org/jcr/1.0",
    "nt": "http://www.jcp.org/jcr/nt/1.0",
    "mix": "http://www.jcp.org/jcr/mix/1.0",
    "xml": "http://www.w3.org/XML/1998/namespace",
    "sv": "http://www.jcp.org/jcr/sv/1.0",
})


class NamespaceRegistry:
    """Immutable prefix -> URI table."""

    def __init__(self, mapping: Mapping[str, str] = None):
        self._by_prefix: Mapping[str, str] = MappingProxyType(dict(mapping or {}))

    @classmethod
    def builtin(cls) -> "NamespaceRegistry":
        return cls(BUILTIN_NAMESPACES)

    def get_uri(self, prefix: str) -> str:
        try:
            return self._by_prefix[prefix]
        except KeyError:
            raise PrefixNotRegistered(prefix) from None

    def get_prefix(self, uri: str) -> str:
        for prefix, candidate in self._by_prefix.items():
            if candidate == uri:
                return prefix
        raise KeyError(uri)

    def prefixes(self) -> Tuple[str, ...]:
        return tuple(self._by_prefix)

    def uris(self) -> Tuple[str, ...]:
        return tuple(self._by_prefix.values())

    def merged(self, other: Mapping[str, str]) -> "NamespaceRegistry":
        """Return a new registry with ``other`` layered on top of this one."""
        combined = dict(self._by_prefix)
        combined.update(other)
        return NamespaceRegistry(combined)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._by_prefix)

    def __contains__(self, prefix) -> bool:
        return prefix in self._by_prefix

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_prefix)

    def __len__(self) -> int:
        return len(self._by_prefix)

    def __repr__(self) -> str:
        return f"NamespaceRegistry({dict(self._by_prefix)!r})"


class NamespaceResolver:
    """
    Adapter that turns registry lookups into ``URI | None``.

    Every call goes to the registry; nothing is cached, so a registry that
    changes between calls is observed as-is. Only "not registered" outcomes
    are folded into None; any other collaborator error propagates.
    """

    def __init__(self, registry):
        if isinstance(registry, NamespaceResolver):
            registry = registry.registry
        self.registry = registry

    def resolve(self, prefix: str) -> Optional[str]:
        if hasattr(self.registry, "get_uri"):
            try:
                uri = self.registry.get_uri(prefix)
            except PrefixNotRegistered:
                uri = None
        else:
            uri = self.registry.get(prefix)
        if uri is None:
            logger.debug(f"[PREFIX] '{prefix}' is not registered")
        else:
            logger.debug(f"[PREFIX] '{prefix}' -> {uri}")
        return uri

    def is_registered(self, prefix: str) -> bool:
        return self.resolve(prefix) is not None


# ------------------------------------------------------------------------------
# Loading registries from files

def load_namespace_mapping(path) -> Dict[str, str]:
    """
    Read ``{prefix: uri}`` from a namespace declaration file.

    ``.cnd`` files are parsed with the namespace grammar; ``.yaml``/``.yml``
    files must hold a top-level ``namespaces`` mapping.

    Raises:
        NamespaceFileError: missing file, unsupported suffix or malformed YAML
        textx.TextXSyntaxError / TextXSemanticError: malformed CND declarations
    """
    path = Path(path)
    if not path.exists():
        raise NamespaceFileError(f"Namespace file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".cnd":
        from jcr_lexicon.language import build_model

        model = build_model(str(path))
        mapping = {decl.prefix: decl.uri for decl in model.declarations}
    elif suffix in (".yaml", ".yml"):
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise NamespaceFileError(f"{path}: {e}") from e
        mapping = data.get("namespaces") if isinstance(data, dict) else None
        if not isinstance(mapping, dict):
            raise NamespaceFileError(f"{path}: expected a top-level 'namespaces' mapping.")
        mapping = {str(k): str(v) for k, v in mapping.items()}
    else:
        raise NamespaceFileError(f"Unsupported namespace file format: {suffix}")

    logger.info(f"[NAMESPACES] loaded {len(mapping)} declaration(s) from {path}")
    return mapping


def load_registry(path=None, include_builtins: bool = True) -> NamespaceRegistry:
    """Build a registry from the builtin namespaces and/or a declaration file."""
    registry = NamespaceRegistry.builtin() if include_builtins else NamespaceRegistry()
    if path is not None:
        registry = registry.merged(load_namespace_mapping(path))
    return registry


def load_registry_from_settings(settings) -> NamespaceRegistry:
    return load_registry(settings.NAMESPACES_FILE, settings.INCLUDE_BUILTIN_NAMESPACES)
