"""Tests for cost estimation."""
from __future__ import annotations

import pytest

from llm_zoo import (
    CatalogEntry,
    CostComparison,
    InvalidUsageError,
    Registry,
    TokenUsage,
    UnknownModelError,
    build_registry,
    compare_costs,
    cost,
    max_cost,
)


@pytest.fixture
def registry_ab(entry_a: CatalogEntry, entry_b: CatalogEntry) -> Registry:
    return build_registry([{"a": entry_a, "b": entry_b}])


# ---------------------------------------------------------------------------
# cost
# ---------------------------------------------------------------------------


class TestCost:
    def test_uncached(self, entry_a: CatalogEntry) -> None:
        # (10000/1e6)*3 + (5000/1e6)*15
        assert cost(entry_a, {"input": 10_000, "output": 5_000}) == pytest.approx(0.105)

    def test_with_cache_hits(self, entry_a: CatalogEntry) -> None:
        # (2000/1e6)*3 + (8000/1e6)*3*0.1 + (5000/1e6)*15
        usage = {"input": 10_000, "output": 5_000, "cached": 8_000}
        assert cost(entry_a, usage) == pytest.approx(0.0834)

    def test_token_usage_instance(self, entry_a: CatalogEntry) -> None:
        usage = TokenUsage(input_tokens=10_000, output_tokens=5_000, cached_tokens=8_000)
        assert cost(entry_a, usage) == pytest.approx(0.0834)

    def test_by_key(self, entry_a: CatalogEntry, registry_ab: Registry) -> None:
        usage = {"input": 10_000, "output": 5_000}
        assert cost("a", usage, registry_ab) == pytest.approx(cost(entry_a, usage))

    def test_zero_usage(self, entry_a: CatalogEntry) -> None:
        assert cost(entry_a, TokenUsage()) == 0.0

    def test_free_model(self, make_entry) -> None:
        free = make_entry("free", input_price=0.0, output_price=0.0)
        assert cost(free, {"input": 1_000_000, "output": 1_000_000}) == 0.0

    def test_no_discount_factor_means_cache_costs_full_price(self, make_entry) -> None:
        entry = make_entry("full", input_price=2.0, output_price=8.0)
        cached = cost(entry, {"input": 1_000, "output": 0, "cached": 1_000})
        uncached = cost(entry, {"input": 1_000, "output": 0})
        assert cached == pytest.approx(uncached)

    @pytest.mark.parametrize("x,y", [(1_000, 500), (123_456, 7_890), (1, 0), (0, 1)])
    def test_linear_without_cache(self, entry_a: CatalogEntry, x: int, y: int) -> None:
        single = cost(entry_a, {"input": x, "output": y})
        double = cost(entry_a, {"input": 2 * x, "output": 2 * y})
        assert double == pytest.approx(2 * single)

    @pytest.mark.parametrize("factor", [0.0, 0.1, 0.25, 0.5, 1.0])
    def test_fully_cached_input_scales_by_factor(self, make_entry, factor: float) -> None:
        entry = make_entry(
            "c", input_price=3.0, supports_prompt_caching=True, cache_discount_factor=factor
        )
        n = 50_000
        cached = cost(entry, {"input": n, "output": 0, "cached": n})
        uncached = cost(entry, {"input": n, "output": 0, "cached": 0})
        assert cached == pytest.approx(factor * uncached)

    def test_cached_exceeding_input_rejected(self, entry_a: CatalogEntry) -> None:
        with pytest.raises(InvalidUsageError):
            cost(entry_a, {"input": 100, "output": 0, "cached": 200})


class TestCostUsageCoercion:
    def test_none_cached_means_no_cache_hits(self, entry_a: CatalogEntry) -> None:
        usage = {"input": 10_000, "output": 5_000, "cached": None}
        assert cost(entry_a, usage) == pytest.approx(0.105)

    def test_none_output_defaults_to_zero(self, entry_a: CatalogEntry) -> None:
        assert cost(entry_a, {"input": 1_000_000, "output": None}) == pytest.approx(3.0)

    @pytest.mark.parametrize("count", ["10", 1.5, True])
    def test_non_integer_count_names_field(self, entry_a: CatalogEntry, count) -> None:
        with pytest.raises(InvalidUsageError) as exc_info:
            cost(entry_a, {"input": 100, "output": 0, "cached": count})
        assert exc_info.value.field == "cached_tokens"

    def test_same_field_under_both_spellings(self, entry_a: CatalogEntry) -> None:
        with pytest.raises(InvalidUsageError) as exc_info:
            cost(entry_a, {"input": 10, "input_tokens": 20, "output": 0})
        assert exc_info.value.field == "input_tokens"

    def test_duplicate_rejected_even_when_one_is_none(self, entry_a: CatalogEntry) -> None:
        with pytest.raises(InvalidUsageError):
            cost(entry_a, {"cached": None, "cached_tokens": 0, "input": 1, "output": 1})


class TestCostUnknownModel:
    def test_unknown_key(self, registry_ab: Registry) -> None:
        with pytest.raises(UnknownModelError) as exc_info:
            cost("zzz", {"input": 1, "output": 1}, registry_ab)
        assert exc_info.value.name == "zzz"

    def test_key_without_registry(self) -> None:
        with pytest.raises(UnknownModelError) as exc_info:
            cost("a", {"input": 1, "output": 1})
        assert exc_info.value.name == "a"

    def test_full_name_is_not_a_key(self, registry_ab: Registry) -> None:
        with pytest.raises(UnknownModelError):
            cost("a-full", {"input": 1, "output": 1}, registry_ab)


# ---------------------------------------------------------------------------
# max_cost
# ---------------------------------------------------------------------------


class TestMaxCost:
    def test_uses_max_output_tokens(self, entry_a: CatalogEntry) -> None:
        expected = (50_000 / 1e6) * 3.0 + (64_000 / 1e6) * 15.0
        assert max_cost(entry_a, 50_000) == pytest.approx(expected)

    def test_by_key(self, registry_ab: Registry, entry_b: CatalogEntry) -> None:
        assert max_cost("b", 1_000, registry_ab) == pytest.approx(max_cost(entry_b, 1_000))

    def test_unknown_key(self, registry_ab: Registry) -> None:
        with pytest.raises(UnknownModelError):
            max_cost("zzz", 1_000, registry_ab)

    @pytest.mark.parametrize("k", [0, 1, 1_000, 32_000, 64_000])
    def test_dominates_any_output_within_limit(self, entry_a: CatalogEntry, k: int) -> None:
        n = 20_000
        assert max_cost(entry_a, n) >= cost(entry_a, {"input": n, "output": k})


# ---------------------------------------------------------------------------
# compare_costs
# ---------------------------------------------------------------------------


class TestCompareCosts:
    def test_sorted_ascending(self, entry_a: CatalogEntry, entry_b: CatalogEntry) -> None:
        rows = compare_costs([entry_a, entry_b], {"input": 1_000_000, "output": 0})
        assert [r.entry.name for r in rows] == ["b", "a"]
        assert rows[0].cost == pytest.approx(0.05)
        assert rows[1].cost == pytest.approx(3.0)

    def test_rows_are_cost_comparisons(self, entry_a: CatalogEntry) -> None:
        rows = compare_costs([entry_a], {"input": 1, "output": 1})
        assert isinstance(rows[0], CostComparison)

    def test_mixed_keys_and_entries(self, registry_ab: Registry, entry_a: CatalogEntry) -> None:
        rows = compare_costs([entry_a, "b"], {"input": 1_000_000, "output": 0}, registry_ab)
        assert [r.entry.name for r in rows] == ["b", "a"]

    def test_ties_keep_input_order(self, make_entry) -> None:
        first = make_entry("first", input_price=1.0, output_price=1.0)
        second = make_entry("second", input_price=1.0, output_price=1.0)
        rows = compare_costs([second, first], {"input": 500, "output": 500})
        assert [r.entry.name for r in rows] == ["second", "first"]

    def test_empty(self) -> None:
        assert compare_costs([], {"input": 1, "output": 1}) == []

    def test_unknown_key_fails_whole_call(self, registry_ab: Registry) -> None:
        with pytest.raises(UnknownModelError):
            compare_costs(["a", "zzz"], {"input": 1, "output": 1}, registry_ab)
