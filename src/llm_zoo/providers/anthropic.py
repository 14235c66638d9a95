"""Anthropic (Claude) model table."""
from __future__ import annotations

from llm_zoo.providers._table import make_table
from llm_zoo.types.capabilities import DEFAULT_CAPABILITIES, build_capabilities
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider, ReasoningEffort

# Explicit cache markers; cache reads bill at 10% of the input price.
ANTHROPIC_CAPABILITIES = build_capabilities(
    DEFAULT_CAPABILITIES,
    supports_prompt_caching=True,
    cache_discount_factor=0.1,
    supports_native_pdf=True,
    supports_native_web_search=True,
    supports_native_code_execution=True,
    supports_native_mcp_server=True,
    supports_token_counting=True,
    supports_assistant_prefill=True,
)

# Thinking variants lose prefill: the assistant turn must start with a thinking block.
_THINKING = build_capabilities(
    ANTHROPIC_CAPABILITIES,
    supports_reasoning=True,
    supports_interleaved_thinking=True,
    supports_assistant_prefill=False,
    reasoning_effort=ReasoningEffort.MEDIUM,
)

ANTHROPIC_MODELS = make_table(
    CatalogEntry(
        name="opus45T",
        full_name="claude-opus-4-5",
        openrouter_full_name="anthropic/claude-opus-4.5",
        provider=Provider.ANTHROPIC,
        input_price=5.0,
        output_price=25.0,
        context_window=200_000,
        max_output_tokens=64_000,
        capabilities=build_capabilities(
            _THINKING,
            supports_reasoning_effort=True,
            supports_dynamic_filtering_web_search=True,
        ),
    ),
    CatalogEntry(
        name="opus45",
        full_name="claude-opus-4-5",
        openrouter_full_name="anthropic/claude-opus-4.5",
        provider=Provider.ANTHROPIC,
        input_price=5.0,
        output_price=25.0,
        context_window=200_000,
        max_output_tokens=64_000,
        capabilities=build_capabilities(
            ANTHROPIC_CAPABILITIES,
            supports_reasoning_effort=True,
            supports_dynamic_filtering_web_search=True,
        ),
    ),
    CatalogEntry(
        name="sonnet45T",
        full_name="claude-sonnet-4-5",
        openrouter_full_name="anthropic/claude-sonnet-4.5",
        provider=Provider.ANTHROPIC,
        input_price=3.0,
        output_price=15.0,
        context_window=200_000,
        max_output_tokens=64_000,
        capabilities=_THINKING,
    ),
    CatalogEntry(
        name="sonnet45",
        full_name="claude-sonnet-4-5",
        openrouter_full_name="anthropic/claude-sonnet-4.5",
        provider=Provider.ANTHROPIC,
        input_price=3.0,
        output_price=15.0,
        context_window=200_000,
        max_output_tokens=64_000,
        capabilities=ANTHROPIC_CAPABILITIES,
    ),
    CatalogEntry(
        name="haiku45T",
        full_name="claude-haiku-4-5",
        openrouter_full_name="anthropic/claude-haiku-4.5",
        provider=Provider.ANTHROPIC,
        input_price=1.0,
        output_price=5.0,
        context_window=200_000,
        max_output_tokens=64_000,
        capabilities=_THINKING,
    ),
    CatalogEntry(
        name="haiku45",
        full_name="claude-haiku-4-5",
        openrouter_full_name="anthropic/claude-haiku-4.5",
        provider=Provider.ANTHROPIC,
        input_price=1.0,
        output_price=5.0,
        context_window=200_000,
        max_output_tokens=64_000,
        capabilities=ANTHROPIC_CAPABILITIES,
    ),
    CatalogEntry(
        name="opus41",
        full_name="claude-opus-4-1",
        openrouter_full_name="anthropic/claude-opus-4.1",
        provider=Provider.ANTHROPIC,
        input_price=15.0,
        output_price=75.0,
        context_window=200_000,
        max_output_tokens=32_000,
        capabilities=ANTHROPIC_CAPABILITIES,
        deprecated=True,
    ),
    CatalogEntry(
        name="sonnet4",
        full_name="claude-sonnet-4-0",
        openrouter_full_name="anthropic/claude-sonnet-4",
        provider=Provider.ANTHROPIC,
        input_price=3.0,
        output_price=15.0,
        context_window=200_000,
        max_output_tokens=64_000,
        capabilities=ANTHROPIC_CAPABILITIES,
        deprecated=True,
    ),
    CatalogEntry(
        name="haiku35",
        full_name="claude-3-5-haiku-latest",
        openrouter_full_name="anthropic/claude-3.5-haiku",
        provider=Provider.ANTHROPIC,
        input_price=0.8,
        output_price=4.0,
        context_window=200_000,
        max_output_tokens=8192,
        capabilities=build_capabilities(
            ANTHROPIC_CAPABILITIES,
            supports_native_code_execution=False,
            supports_native_mcp_server=False,
        ),
        deprecated=True,
    ),
)
