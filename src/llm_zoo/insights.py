"""Summary statistics over a whole registry."""
from __future__ import annotations

from dataclasses import dataclass, field

from llm_zoo.registry import Registry
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider

WATCHED_CAPABILITIES = (
    "supports_function_calling",
    "supports_reasoning",
    "supports_vision",
    "supports_native_code_execution",
    "supports_native_web_search",
    "supports_prompt_caching",
    "supports_native_pdf",
    "supports_native_audio",
)


def capability_label(flag: str) -> str:
    """Short label for a capability flag: ``supports_native_pdf`` -> ``pdf``."""
    return flag.removeprefix("supports_").removeprefix("native_")


@dataclass(frozen=True)
class RegistryInsights:
    """Counts and extremes of a registry.

    Extremes are ``None`` for an empty registry; ties go to the entry found
    first in registry order.
    """

    total_models: int
    providers: dict[Provider, int] = field(default_factory=dict)
    capabilities: dict[str, int] = field(default_factory=dict)
    cheapest: CatalogEntry | None = None
    most_expensive: CatalogEntry | None = None
    smallest_context: CatalogEntry | None = None
    largest_context: CatalogEntry | None = None


def insights(registry: Registry) -> RegistryInsights:
    """Count entries per provider and watched capability, and find extremes."""
    entries = list(registry.values())

    providers = {p: 0 for p in Provider}
    for entry in entries:
        providers[Provider(entry.provider)] += 1

    capabilities = {
        capability_label(flag): sum(1 for e in entries if getattr(e.capabilities, flag))
        for flag in WATCHED_CAPABILITIES
    }

    if not entries:
        return RegistryInsights(
            total_models=0, providers=providers, capabilities=capabilities
        )

    return RegistryInsights(
        total_models=len(entries),
        providers=providers,
        capabilities=capabilities,
        cheapest=min(entries, key=lambda e: e.combined_price),
        most_expensive=max(entries, key=lambda e: e.combined_price),
        smallest_context=min(entries, key=lambda e: e.context_window),
        largest_context=max(entries, key=lambda e: e.context_window),
    )
