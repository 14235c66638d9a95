"""Legacy names kept for backwards compatibility.

Each function warns with ``DeprecationWarning`` and forwards to its
replacement.  New code should use the :class:`Registry` methods and the
``cost``/``selection``/``insights`` functions directly.
"""
from __future__ import annotations

import functools
import warnings
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from llm_zoo.cost import cost, max_cost
from llm_zoo.insights import RegistryInsights, insights
from llm_zoo.registry import Registry
from llm_zoo.selection import cheapest, ranked
from llm_zoo.types.capabilities import Capabilities
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider, RankMetric, SortOrder
from llm_zoo.types.usage import TokenUsage

F = TypeVar("F", bound=Callable[..., Any])


def _deprecated(replacement: str) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            warnings.warn(
                f"{func.__name__}() is deprecated, use {replacement} instead",
                DeprecationWarning,
                stacklevel=2,
            )
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


@_deprecated("Registry.lookup()")
def get_model(registry: Registry, name: str) -> CatalogEntry | None:
    return registry.lookup(name)


@_deprecated("Registry.resolve()")
def get_model_by_full_name(registry: Registry, full_name: str) -> CatalogEntry | None:
    return registry.resolve(full_name)


@_deprecated("Registry.exists()")
def has_model(registry: Registry, name: str) -> bool:
    return registry.exists(name)


@_deprecated("Registry.from_provider()")
def get_models_by_provider(registry: Registry, provider: Provider | str) -> list[CatalogEntry]:
    return registry.from_provider(provider)


@_deprecated("Registry.where()")
def filter_by_capability(
    registry: Registry, predicate: Callable[[Capabilities], bool]
) -> list[CatalogEntry]:
    return registry.where(predicate)


@_deprecated("Registry.supporting()")
def get_models_with_capability(registry: Registry, capability: str) -> list[CatalogEntry]:
    return registry.supporting(capability)


@_deprecated("cost()")
def calculate_cost(
    registry: Registry,
    model: CatalogEntry | str,
    input_tokens: int,
    output_tokens: int,
    cached_input_tokens: int = 0,
) -> float:
    usage = TokenUsage(
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        cached_tokens=cached_input_tokens,
    )
    return cost(model, usage, registry)


@_deprecated("max_cost()")
def estimate_max_cost(
    registry: Registry, model: CatalogEntry | str, input_tokens: int
) -> float:
    return max_cost(model, input_tokens, registry)


@_deprecated("ranked()")
def sort_models_by_metric(
    registry: Registry, metric: RankMetric | str, ascending: bool = True
) -> list[CatalogEntry]:
    return ranked(
        registry, metric, SortOrder.ASC if ascending else SortOrder.DESC
    )


@_deprecated("cheapest()")
def find_cheapest_model(
    registry: Registry,
    requirements: Mapping[str, Any],
    min_context_window: int | None = None,
) -> CatalogEntry | None:
    return cheapest(registry, requirements, min_context=min_context_window)


@_deprecated("insights()")
def get_registry_stats(registry: Registry) -> RegistryInsights:
    return insights(registry)
