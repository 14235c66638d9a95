"""Tests for the record model: enums, capabilities, entries and usage."""
from __future__ import annotations

import dataclasses

import pytest

from llm_zoo import (
    DEFAULT_CAPABILITIES,
    DEFAULT_CONTEXT_WINDOW,
    Capabilities,
    CatalogEntry,
    InvalidUsageError,
    Provider,
    RankMetric,
    ReasoningEffort,
    SortOrder,
    TokenUsage,
    build_capabilities,
)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TestProvider:
    def test_has_9_members(self) -> None:
        assert len(Provider) == 9

    def test_all_values(self) -> None:
        assert {p.value for p in Provider} == {
            "anthropic",
            "openai",
            "google",
            "deepseek",
            "xai",
            "moonshot",
            "dashscope",
            "copilot",
            "others",
        }

    def test_is_str_subclass(self) -> None:
        assert isinstance(Provider.OPENAI, str)
        assert Provider.OPENAI == "openai"


class TestReasoningEffort:
    def test_values(self) -> None:
        assert [e.value for e in ReasoningEffort] == ["xhigh", "high", "medium", "low", "none"]

    def test_from_string(self) -> None:
        assert ReasoningEffort("low") is ReasoningEffort.LOW


class TestRankMetricAndOrder:
    def test_metric_values(self) -> None:
        assert {m.value for m in RankMetric} == {"price", "context", "output"}

    def test_order_values(self) -> None:
        assert SortOrder("asc") is SortOrder.ASC
        assert SortOrder("desc") is SortOrder.DESC

    def test_unknown_metric_rejected(self) -> None:
        with pytest.raises(ValueError):
            RankMetric("latency")


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------


class TestCapabilities:
    def test_defaults(self) -> None:
        caps = Capabilities()
        assert caps.supports_function_calling is True
        assert caps.supports_vision is True
        assert caps.supports_system_prompt is True
        assert caps.supports_reasoning is False
        assert caps.supports_prompt_caching is False
        assert caps.cache_discount_factor == 1.0
        assert caps.reasoning_effort is ReasoningEffort.NONE

    def test_default_template_equals_defaults(self) -> None:
        assert DEFAULT_CAPABILITIES == Capabilities()

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CAPABILITIES.supports_vision = False  # type: ignore[misc]

    def test_flag_names_are_boolean_fields(self) -> None:
        names = Capabilities.flag_names()
        assert len(names) == 18
        assert "supports_function_calling" in names
        assert "supports_dynamic_filtering_web_search" in names
        assert "cache_discount_factor" not in names
        assert "reasoning_effort" not in names

    def test_field_names_include_non_boolean(self) -> None:
        names = Capabilities.field_names()
        assert len(names) == 20
        assert "cache_discount_factor" in names

    def test_is_default(self) -> None:
        caps = build_capabilities(DEFAULT_CAPABILITIES, cache_discount_factor=0.1)
        assert caps.is_default("supports_vision")
        assert not caps.is_default("cache_discount_factor")

    def test_supports_any_caching(self) -> None:
        assert not DEFAULT_CAPABILITIES.supports_any_caching
        auto = build_capabilities(DEFAULT_CAPABILITIES, supports_auto_prompt_caching=True)
        assert auto.supports_any_caching


class TestBuildCapabilities:
    def test_returns_new_value(self) -> None:
        caps = build_capabilities(DEFAULT_CAPABILITIES, supports_reasoning=True)
        assert caps.supports_reasoning is True
        assert caps is not DEFAULT_CAPABILITIES

    def test_base_is_untouched(self) -> None:
        build_capabilities(DEFAULT_CAPABILITIES, supports_vision=False)
        assert DEFAULT_CAPABILITIES.supports_vision is True

    def test_chained_templates(self) -> None:
        provider = build_capabilities(DEFAULT_CAPABILITIES, supports_vision=False)
        model = build_capabilities(provider, supports_reasoning=True)
        assert model.supports_vision is False
        assert model.supports_reasoning is True

    def test_no_overrides_equal_copy(self) -> None:
        assert build_capabilities(DEFAULT_CAPABILITIES) == DEFAULT_CAPABILITIES

    def test_unknown_override_rejected(self) -> None:
        with pytest.raises(TypeError):
            build_capabilities(DEFAULT_CAPABILITIES, supports_telepathy=True)


# ---------------------------------------------------------------------------
# CatalogEntry
# ---------------------------------------------------------------------------


class TestCatalogEntry:
    def test_construction_defaults(self) -> None:
        entry = CatalogEntry(
            name="m", full_name="model-1", provider=Provider.OPENAI,
            input_price=1.0, output_price=2.0,
        )
        assert entry.context_window == DEFAULT_CONTEXT_WINDOW
        assert entry.capabilities == DEFAULT_CAPABILITIES
        assert entry.openrouter_only is False
        assert entry.openrouter_full_name is None
        assert entry.base_url is None
        assert entry.requires_responses_api is False
        assert entry.deprecated is False

    def test_combined_price(self) -> None:
        entry = CatalogEntry(
            name="m", full_name="model-1", provider=Provider.OPENAI,
            input_price=3.0, output_price=15.0,
        )
        assert entry.combined_price == 18.0

    def test_frozen(self) -> None:
        entry = CatalogEntry(
            name="m", full_name="model-1", provider=Provider.OPENAI,
            input_price=1.0, output_price=1.0,
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.input_price = 0.0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# TokenUsage
# ---------------------------------------------------------------------------


class TestTokenUsage:
    def test_defaults(self) -> None:
        usage = TokenUsage()
        assert usage.input_tokens == 0
        assert usage.output_tokens == 0
        assert usage.cached_tokens == 0

    def test_uncached_tokens(self) -> None:
        usage = TokenUsage(input_tokens=10_000, output_tokens=5_000, cached_tokens=8_000)
        assert usage.uncached_tokens == 2_000

    def test_cached_equal_to_input_allowed(self) -> None:
        usage = TokenUsage(input_tokens=100, cached_tokens=100)
        assert usage.uncached_tokens == 0

    def test_cached_exceeding_input_rejected(self) -> None:
        with pytest.raises(InvalidUsageError) as exc_info:
            TokenUsage(input_tokens=100, output_tokens=0, cached_tokens=101)
        assert exc_info.value.field == "cached_tokens"

    @pytest.mark.parametrize("field", ["input_tokens", "output_tokens", "cached_tokens"])
    def test_negative_rejected(self, field: str) -> None:
        with pytest.raises(InvalidUsageError) as exc_info:
            TokenUsage(**{field: -1})
        assert exc_info.value.field == field

    def test_of_short_keys(self) -> None:
        usage = TokenUsage.of({"input": 10, "output": 5, "cached": 2})
        assert usage == TokenUsage(input_tokens=10, output_tokens=5, cached_tokens=2)

    def test_of_field_names(self) -> None:
        usage = TokenUsage.of({"input_tokens": 10, "output_tokens": 5})
        assert usage == TokenUsage(input_tokens=10, output_tokens=5)

    def test_of_passes_instance_through(self) -> None:
        usage = TokenUsage(input_tokens=1)
        assert TokenUsage.of(usage) is usage

    def test_of_unknown_key_rejected(self) -> None:
        with pytest.raises(InvalidUsageError):
            TokenUsage.of({"input": 10, "reasoning": 5})
