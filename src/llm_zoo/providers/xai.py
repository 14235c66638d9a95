"""xAI (Grok) model table."""
from __future__ import annotations

from llm_zoo.providers._table import make_table
from llm_zoo.types.capabilities import DEFAULT_CAPABILITIES, build_capabilities
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider, ReasoningEffort

XAI_CAPABILITIES = build_capabilities(DEFAULT_CAPABILITIES, supports_vision=False)

XAI_MODELS = make_table(
    CatalogEntry(
        name="grok4",
        full_name="grok-4-0709",
        openrouter_full_name="x-ai/grok-4-0709",
        provider=Provider.XAI,
        input_price=3.0,
        output_price=15.0,
        context_window=256_000,
        max_output_tokens=128_000,
        capabilities=build_capabilities(XAI_CAPABILITIES, supports_reasoning=True),
    ),
    CatalogEntry(
        name="grok3",
        full_name="grok-3-beta",
        openrouter_full_name="x-ai/grok-3",
        provider=Provider.XAI,
        input_price=3.0,
        output_price=15.0,
        context_window=131_072,
        max_output_tokens=131_072,
        capabilities=XAI_CAPABILITIES,
    ),
    CatalogEntry(
        name="grok3-",
        full_name="grok-3-mini-beta",
        openrouter_full_name="x-ai/grok-3-mini-beta",
        provider=Provider.XAI,
        input_price=0.3,
        output_price=0.5,
        context_window=131_072,
        max_output_tokens=131_072,
        capabilities=build_capabilities(
            XAI_CAPABILITIES,
            supports_reasoning=True,
            supports_reasoning_effort=True,
            reasoning_effort=ReasoningEffort.LOW,
        ),
    ),
    CatalogEntry(
        name="grok2",
        full_name="grok-2-1212",
        openrouter_full_name="grok-ai/grok-2-1212",
        provider=Provider.XAI,
        input_price=2.0,
        output_price=10.0,
        context_window=131_072,
        max_output_tokens=131_072,
        capabilities=XAI_CAPABILITIES,
    ),
    CatalogEntry(
        name="grok2v",
        full_name="grok-2-1212-vision",
        openrouter_full_name="grok-ai/grok-2-1212-vision",
        provider=Provider.XAI,
        input_price=2.0,
        output_price=10.0,
        context_window=32_768,
        max_output_tokens=32_768,
        capabilities=build_capabilities(XAI_CAPABILITIES, supports_vision=True),
    ),
)
