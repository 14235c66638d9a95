"""Registry of catalog entries and the lookup/filter queries over it.

A registry is assembled once from provider tables by :func:`build_registry`
(or :func:`load_default_registry` for the bundled data) and is read-only
afterwards, so one instance can be shared freely between threads.  Every
query is total: "not found" is ``None`` or an empty list, never an error.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Callable

from llm_zoo.config import RegistryConfig
from llm_zoo.errors import DuplicateModelError, RegistryError
from llm_zoo.providers import ALL_TABLES
from llm_zoo.types.capabilities import Capabilities
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider
from llm_zoo.validation import validate_or_raise

logger = logging.getLogger(__name__)


class Registry(Mapping[str, CatalogEntry]):
    """Immutable mapping from short key to :class:`CatalogEntry`.

    Iteration follows construction order (table order, then entry order
    within each table).
    """

    def __init__(self, entries: Mapping[str, CatalogEntry] | None = None) -> None:
        self._entries: Mapping[str, CatalogEntry] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, name: str) -> CatalogEntry:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Registry({len(self)} models)"

    def names(self) -> list[str]:
        """All short keys, in registry order."""
        return list(self._entries)

    # --- lookup ----------------------------------------------------------------

    def lookup(self, name: str) -> CatalogEntry | None:
        """Return the entry registered under short key *name*."""
        return self._entries.get(name)

    def resolve(self, full_name: str) -> CatalogEntry | None:
        """Return the first entry whose API identifier is *full_name*.

        Several keys may share one ``full_name`` (a thinking variant and its
        base model, for instance).  The result is then the first match by
        construction order; use :meth:`lookup` to pick a specific variant.
        """
        for entry in self._entries.values():
            if entry.full_name == full_name:
                return entry
        return None

    def exists(self, name: str) -> bool:
        return name in self._entries

    # --- filtering -------------------------------------------------------------

    def from_provider(self, provider: Provider | str) -> list[CatalogEntry]:
        """All entries from *provider*, in registry order."""
        return [e for e in self._entries.values() if e.provider == provider]

    def where(self, predicate: Callable[[Capabilities], bool]) -> list[CatalogEntry]:
        """Entries whose capabilities satisfy *predicate*.

        Example::

            registry.where(lambda c: c.supports_vision and c.cache_discount_factor <= 0.1)
        """
        return [e for e in self._entries.values() if predicate(e.capabilities)]

    def supporting(self, capability: str) -> list[CatalogEntry]:
        """Entries supporting the capability field named *capability*.

        Boolean flags match when true.  ``cache_discount_factor`` and
        ``reasoning_effort`` match when they differ from the default
        template.  Unknown names match nothing.
        """
        if capability in Capabilities.flag_names():
            return [e for e in self._entries.values() if getattr(e.capabilities, capability)]
        if capability in Capabilities.field_names():
            return [
                e for e in self._entries.values() if not e.capabilities.is_default(capability)
            ]
        return []

    def with_context(self, min_tokens: int) -> list[CatalogEntry]:
        """Entries whose context window holds at least *min_tokens*."""
        return [e for e in self._entries.values() if e.context_window >= min_tokens]

    def direct_access(self) -> list[CatalogEntry]:
        """Entries served by their provider's own API."""
        return [e for e in self._entries.values() if not e.openrouter_only]

    def openrouter_only(self) -> list[CatalogEntry]:
        """Entries only reachable through OpenRouter."""
        return [e for e in self._entries.values() if e.openrouter_only]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def build_registry(
    tables: Iterable[Mapping[str, CatalogEntry]],
    config: RegistryConfig | None = None,
) -> Registry:
    """Union provider *tables*, in order, into a :class:`Registry`.

    Raises :class:`DuplicateModelError` when two tables share a key and
    :class:`RegistryError` when a key differs from its entry's ``name``.
    With ``config.validate`` set, every entry must also pass
    :func:`llm_zoo.validation.validate_or_raise`.
    """
    config = config or RegistryConfig()
    merged: dict[str, CatalogEntry] = {}
    seen: set[str] = set()
    table_count = 0
    for table in tables:
        table_count += 1
        for key, entry in table.items():
            if key != entry.name:
                raise RegistryError(
                    f"Table key '{key}' does not match entry name '{entry.name}'"
                )
            if key in seen:
                raise DuplicateModelError(key)
            seen.add(key)
            if entry.deprecated and not config.include_deprecated:
                logger.debug("Skipping deprecated model %s", key)
                continue
            if config.validate:
                validate_or_raise(entry)
            merged[key] = entry
    logger.debug("Registry built: %d models from %d tables", len(merged), table_count)
    return Registry(merged)


def load_default_registry(config: RegistryConfig | None = None) -> Registry:
    """Build a registry from the bundled provider tables.

    The caller owns the result; nothing is cached at module level.
    """
    return build_registry(ALL_TABLES, config=config)
