"""Record model: enums, capability flags, catalog entries and usage."""
from __future__ import annotations

from llm_zoo.types.capabilities import (
    DEFAULT_CAPABILITIES,
    Capabilities,
    build_capabilities,
)
from llm_zoo.types.entry import DEFAULT_CONTEXT_WINDOW, CatalogEntry
from llm_zoo.types.enums import Provider, RankMetric, ReasoningEffort, SortOrder
from llm_zoo.types.usage import TokenUsage

__all__ = [
    "Capabilities",
    "CatalogEntry",
    "DEFAULT_CAPABILITIES",
    "DEFAULT_CONTEXT_WINDOW",
    "Provider",
    "RankMetric",
    "ReasoningEffort",
    "SortOrder",
    "TokenUsage",
    "build_capabilities",
]
