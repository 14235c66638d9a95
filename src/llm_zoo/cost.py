"""Cost estimation for a token usage against catalog prices.

Every function accepts either a :class:`CatalogEntry` or a short key.  A key
is looked up in the given registry; a key that does not resolve (or a key
given without a registry) raises :class:`UnknownModelError`.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from llm_zoo.errors import UnknownModelError
from llm_zoo.registry import Registry
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.usage import TokenUsage

ModelRef = Union[CatalogEntry, str]
UsageLike = Union[TokenUsage, Mapping[str, Any]]

_PER_MILLION = 1_000_000


@dataclass(frozen=True)
class CostComparison:
    """One row of :func:`compare_costs`."""

    entry: CatalogEntry
    cost: float


def _entry_for(model: ModelRef, registry: Registry | None) -> CatalogEntry:
    if isinstance(model, CatalogEntry):
        return model
    entry = registry.lookup(model) if registry is not None else None
    if entry is None:
        raise UnknownModelError(model)
    return entry


def cost(
    model: ModelRef, usage: UsageLike, registry: Registry | None = None
) -> float:
    """USD cost of *usage* on *model*.

    Cache hits (``cached_tokens``) are billed at the input price times the
    model's ``cache_discount_factor``; the remaining input at the full input
    price.

    Example::

        cost("sonnet45", {"input": 10_000, "output": 5_000, "cached": 8_000}, registry)
    """
    entry = _entry_for(model, registry)
    tokens = TokenUsage.of(usage)
    discount = entry.capabilities.cache_discount_factor

    input_cost = (tokens.uncached_tokens / _PER_MILLION) * entry.input_price
    cache_cost = (tokens.cached_tokens / _PER_MILLION) * entry.input_price * discount
    output_cost = (tokens.output_tokens / _PER_MILLION) * entry.output_price
    return input_cost + cache_cost + output_cost


def max_cost(
    model: ModelRef, input_tokens: int, registry: Registry | None = None
) -> float:
    """Worst-case cost: the model emits its full ``max_output_tokens``, no cache hits."""
    entry = _entry_for(model, registry)
    return cost(
        entry,
        TokenUsage(input_tokens=input_tokens, output_tokens=entry.max_output_tokens),
    )


def compare_costs(
    models: Iterable[ModelRef],
    usage: UsageLike,
    registry: Registry | None = None,
) -> list[CostComparison]:
    """Cost of the same *usage* on each of *models*, cheapest first.

    Ties keep the input order.
    """
    tokens = TokenUsage.of(usage)
    rows = [
        CostComparison(entry=entry, cost=cost(entry, tokens))
        for entry in (_entry_for(m, registry) for m in models)
    ]
    return sorted(rows, key=lambda row: row.cost)
