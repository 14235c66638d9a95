"""Moonshot AI (Kimi) model table."""
from __future__ import annotations

from llm_zoo.providers._table import make_table
from llm_zoo.types.capabilities import DEFAULT_CAPABILITIES, build_capabilities
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider, ReasoningEffort

MOONSHOT_CAPABILITIES = build_capabilities(DEFAULT_CAPABILITIES, supports_vision=False)

_K2 = build_capabilities(
    MOONSHOT_CAPABILITIES,
    supports_auto_prompt_caching=True,
    cache_discount_factor=0.25,
)

_K2_THINKING = build_capabilities(
    _K2,
    supports_reasoning=True,
    supports_interleaved_thinking=True,
    reasoning_effort=ReasoningEffort.HIGH,
)

MOONSHOT_MODELS = make_table(
    CatalogEntry(
        name="kimi",
        full_name="moonshot-v1-128k",
        openrouter_full_name="moonshotai/moonshot-v1-128k",
        provider=Provider.MOONSHOT,
        input_price=0.28,
        output_price=1.12,
        context_window=128_000,
        max_output_tokens=64_000,
        capabilities=MOONSHOT_CAPABILITIES,
    ),
    CatalogEntry(
        name="kimiv",
        full_name="moonshot-v1-128k-vision",
        openrouter_full_name="moonshotai/moonshot-v1-128k-vision",
        provider=Provider.MOONSHOT,
        input_price=0.35,
        output_price=1.4,
        context_window=128_000,
        max_output_tokens=64_000,
        capabilities=build_capabilities(MOONSHOT_CAPABILITIES, supports_vision=True),
    ),
    CatalogEntry(
        name="kimit",
        full_name="kimi-thinking-preview",
        openrouter_full_name="moonshotai/kimi-thinking-preview",
        provider=Provider.MOONSHOT,
        input_price=0.42,
        output_price=1.68,
        context_window=128_000,
        max_output_tokens=64_000,
        capabilities=build_capabilities(
            MOONSHOT_CAPABILITIES, supports_vision=True, supports_reasoning=True
        ),
    ),
    CatalogEntry(
        name="kimi2",
        full_name="kimi-k2-0905-preview",
        openrouter_full_name="moonshotai/kimi-k2-0905",
        provider=Provider.MOONSHOT,
        input_price=0.6,
        output_price=2.5,
        context_window=262_144,
        max_output_tokens=64_000,
        capabilities=_K2,
    ),
    # Turbo variants bill at 4x the base rate.
    CatalogEntry(
        name="kimi2+",
        full_name="kimi-k2-turbo-preview",
        openrouter_full_name="moonshotai/kimi-k2-turbo",
        provider=Provider.MOONSHOT,
        input_price=2.24,
        output_price=8.88,
        context_window=262_144,
        max_output_tokens=64_000,
        capabilities=_K2,
    ),
    CatalogEntry(
        name="kimi2T",
        full_name="kimi-k2-thinking",
        openrouter_full_name="moonshotai/kimi-k2-thinking",
        provider=Provider.MOONSHOT,
        input_price=0.56,
        output_price=2.22,
        context_window=262_144,
        max_output_tokens=64_000,
        capabilities=_K2_THINKING,
    ),
    CatalogEntry(
        name="kimi2T+",
        full_name="kimi-k2-thinking-turbo",
        openrouter_full_name="moonshotai/kimi-k2-thinking-turbo",
        provider=Provider.MOONSHOT,
        input_price=2.24,
        output_price=8.88,
        context_window=262_144,
        max_output_tokens=64_000,
        capabilities=_K2_THINKING,
    ),
)
