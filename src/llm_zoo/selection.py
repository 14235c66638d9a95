"""Pick or rank catalog entries under capability, context and price constraints.

Capability requirements are mappings from a :class:`Capabilities` field name
to the value it must equal, e.g. ``{"supports_vision": True}``.  A name that
is not a capability field never matches.  Empty candidate sets give ``None``
(or an empty list for :func:`ranked`).
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from llm_zoo.registry import Registry
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider, RankMetric, SortOrder

_MISSING = object()


def _matches(entry: CatalogEntry, required: Mapping[str, Any] | None) -> bool:
    if not required:
        return True
    caps = entry.capabilities
    return all(getattr(caps, key, _MISSING) == value for key, value in required.items())


def cheapest(
    registry: Registry,
    required: Mapping[str, Any] | None = None,
    *,
    min_context: int | None = None,
    provider: Provider | str | None = None,
) -> CatalogEntry | None:
    """Lowest combined price among entries meeting every requirement.

    Ties go to the entry found first in registry order.

    Example::

        cheapest(registry, {"supports_reasoning": True}, min_context=100_000)
    """
    candidates = [
        e
        for e in registry.values()
        if (min_context is None or e.context_window >= min_context)
        and (provider is None or e.provider == provider)
        and _matches(e, required)
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda e: e.combined_price)


def smartpick(
    registry: Registry,
    max_combined_price: float,
    required: Mapping[str, Any] | None = None,
) -> CatalogEntry | None:
    """Most expensive entry whose combined price fits *max_combined_price*.

    Within a budget a higher price is taken as a proxy for a more capable
    model, so this returns the best affordable entry rather than the
    cheapest one.  Ties go to the entry found first in registry order.
    """
    candidates = [
        e
        for e in registry.values()
        if e.combined_price <= max_combined_price and _matches(e, required)
    ]
    if not candidates:
        return None
    return max(candidates, key=lambda e: e.combined_price)


def _metric_value(entry: CatalogEntry, by: RankMetric) -> float:
    if by is RankMetric.PRICE:
        return entry.combined_price
    if by is RankMetric.CONTEXT:
        return entry.context_window
    if by is RankMetric.OUTPUT:
        return entry.max_output_tokens
    raise ValueError(f"Unhandled rank metric: {by!r}")


def ranked(
    registry: Registry,
    by: RankMetric | str = RankMetric.PRICE,
    order: SortOrder | str = SortOrder.ASC,
) -> list[CatalogEntry]:
    """All entries sorted by combined price, context window or max output.

    The sort is stable in both directions: ties keep registry order.
    Raises ``ValueError`` for an unknown metric or order.
    """
    metric = RankMetric(by)
    direction = SortOrder(order)
    return sorted(
        registry.values(),
        key=lambda e: _metric_value(e, metric),
        reverse=direction is SortOrder.DESC,
    )
