"""Helper for declaring provider tables."""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from llm_zoo.errors import DuplicateModelError
from llm_zoo.types.entry import CatalogEntry


def make_table(*entries: CatalogEntry) -> Mapping[str, CatalogEntry]:
    """Key *entries* by short name in declaration order, read-only."""
    table: dict[str, CatalogEntry] = {}
    for entry in entries:
        if entry.name in table:
            raise DuplicateModelError(entry.name)
        table[entry.name] = entry
    return MappingProxyType(table)
