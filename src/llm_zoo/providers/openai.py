"""OpenAI model tables: chat, reasoning and deep research."""
from __future__ import annotations

from llm_zoo.providers._table import make_table
from llm_zoo.types.capabilities import DEFAULT_CAPABILITIES, build_capabilities
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider, ReasoningEffort

# Prefixes of 1024+ tokens are cached automatically.
OPENAI_CAPABILITIES = build_capabilities(
    DEFAULT_CAPABILITIES,
    supports_auto_prompt_caching=True,
    cache_discount_factor=0.5,
    supports_native_pdf=True,
    supports_predictive_output=True,
)

OPENAI_REASONING_CAPABILITIES = build_capabilities(
    DEFAULT_CAPABILITIES,
    supports_auto_prompt_caching=True,
    cache_discount_factor=0.25,
    supports_reasoning=True,
    supports_reasoning_effort=True,
    reasoning_effort=ReasoningEffort.MEDIUM,
    supports_native_pdf=True,
    supports_interm_dev_msgs=True,
)

# Deep research models only take native tools (web_search, file_search, mcp,
# code_interpreter), so function calling is off.
OPENAI_DEEP_RESEARCH_CAPABILITIES = build_capabilities(
    DEFAULT_CAPABILITIES,
    supports_function_calling=False,
    supports_auto_prompt_caching=True,
    cache_discount_factor=0.25,
    supports_reasoning=True,
    supports_native_web_search=True,
    supports_native_mcp_server=True,
    supports_native_code_execution=True,
    supports_native_pdf=True,
)

OPENAI_DEEP_RESEARCH_MODELS = make_table(
    CatalogEntry(
        name="o3-deep-research",
        full_name="o3-deep-research",
        openrouter_full_name="openai/o3-deep-research",
        provider=Provider.OPENAI,
        input_price=10.0,
        output_price=40.0,
        context_window=200_000,
        max_output_tokens=100_000,
        capabilities=OPENAI_DEEP_RESEARCH_CAPABILITIES,
        requires_responses_api=True,
    ),
    CatalogEntry(
        name="o4-mini-deep-research",
        full_name="o4-mini-deep-research",
        openrouter_full_name="openai/o4-mini-deep-research",
        provider=Provider.OPENAI,
        input_price=2.0,
        output_price=8.0,
        context_window=200_000,
        max_output_tokens=100_000,
        capabilities=OPENAI_DEEP_RESEARCH_CAPABILITIES,
        requires_responses_api=True,
    ),
)

OPENAI_REASONING_MODELS = make_table(
    CatalogEntry(
        name="gpt51",
        full_name="gpt-5.1",
        openrouter_full_name="openai/gpt-5.1",
        provider=Provider.OPENAI,
        input_price=1.25,
        output_price=10.0,
        context_window=400_000,
        max_output_tokens=128_000,
        capabilities=build_capabilities(
            OPENAI_REASONING_CAPABILITIES,
            cache_discount_factor=0.1,
            reasoning_effort=ReasoningEffort.NONE,
        ),
    ),
    CatalogEntry(
        name="gpt5",
        full_name="gpt-5",
        openrouter_full_name="openai/gpt-5",
        provider=Provider.OPENAI,
        input_price=1.25,
        output_price=10.0,
        context_window=400_000,
        max_output_tokens=128_000,
        capabilities=build_capabilities(
            OPENAI_REASONING_CAPABILITIES, cache_discount_factor=0.1
        ),
    ),
    CatalogEntry(
        name="gpt5-",
        full_name="gpt-5-mini",
        openrouter_full_name="openai/gpt-5-mini",
        provider=Provider.OPENAI,
        input_price=0.25,
        output_price=2.0,
        context_window=400_000,
        max_output_tokens=128_000,
        capabilities=build_capabilities(
            OPENAI_REASONING_CAPABILITIES, cache_discount_factor=0.1
        ),
    ),
    CatalogEntry(
        name="gpt5--",
        full_name="gpt-5-nano",
        openrouter_full_name="openai/gpt-5-nano",
        provider=Provider.OPENAI,
        input_price=0.05,
        output_price=0.4,
        context_window=400_000,
        max_output_tokens=128_000,
        capabilities=build_capabilities(
            OPENAI_REASONING_CAPABILITIES, cache_discount_factor=0.1
        ),
    ),
    CatalogEntry(
        name="o3",
        full_name="o3",
        openrouter_full_name="openai/o3",
        provider=Provider.OPENAI,
        input_price=2.0,
        output_price=8.0,
        context_window=200_000,
        max_output_tokens=100_000,
        capabilities=OPENAI_REASONING_CAPABILITIES,
    ),
    CatalogEntry(
        name="o3pro",
        full_name="o3-pro",
        openrouter_full_name="openai/o3-pro",
        provider=Provider.OPENAI,
        input_price=20.0,
        output_price=80.0,
        context_window=200_000,
        max_output_tokens=100_000,
        capabilities=build_capabilities(
            OPENAI_REASONING_CAPABILITIES,
            supports_auto_prompt_caching=False,
            cache_discount_factor=1.0,
            reasoning_effort=ReasoningEffort.HIGH,
        ),
        requires_responses_api=True,
    ),
    CatalogEntry(
        name="o4-",
        full_name="o4-mini",
        openrouter_full_name="openai/o4-mini",
        provider=Provider.OPENAI,
        input_price=1.1,
        output_price=4.4,
        context_window=200_000,
        max_output_tokens=100_000,
        capabilities=OPENAI_REASONING_CAPABILITIES,
    ),
    CatalogEntry(
        name="o3-",
        full_name="o3-mini",
        openrouter_full_name="openai/o3-mini",
        provider=Provider.OPENAI,
        input_price=1.1,
        output_price=4.4,
        context_window=200_000,
        max_output_tokens=100_000,
        capabilities=build_capabilities(
            OPENAI_REASONING_CAPABILITIES,
            supports_vision=False,
            supports_native_pdf=False,
            cache_discount_factor=0.5,
        ),
        deprecated=True,
    ),
)

OPENAI_MODELS = make_table(
    CatalogEntry(
        name="gpt41",
        full_name="gpt-4.1",
        openrouter_full_name="openai/gpt-4.1",
        provider=Provider.OPENAI,
        input_price=2.0,
        output_price=8.0,
        context_window=1_047_576,
        max_output_tokens=32_768,
        capabilities=build_capabilities(OPENAI_CAPABILITIES, cache_discount_factor=0.25),
    ),
    CatalogEntry(
        name="gpt41-",
        full_name="gpt-4.1-mini",
        openrouter_full_name="openai/gpt-4.1-mini",
        provider=Provider.OPENAI,
        input_price=0.4,
        output_price=1.6,
        context_window=1_047_576,
        max_output_tokens=32_768,
        capabilities=build_capabilities(OPENAI_CAPABILITIES, cache_discount_factor=0.25),
    ),
    CatalogEntry(
        name="gpt41--",
        full_name="gpt-4.1-nano",
        openrouter_full_name="openai/gpt-4.1-nano",
        provider=Provider.OPENAI,
        input_price=0.1,
        output_price=0.4,
        context_window=1_047_576,
        max_output_tokens=32_768,
        capabilities=build_capabilities(OPENAI_CAPABILITIES, cache_discount_factor=0.25),
    ),
    CatalogEntry(
        name="gpt4o",
        full_name="gpt-4o-2024-11-20",
        openrouter_full_name="openai/gpt-4o-2024-11-20",
        provider=Provider.OPENAI,
        input_price=2.5,
        output_price=10.0,
        context_window=128_000,
        max_output_tokens=16_384,
        capabilities=OPENAI_CAPABILITIES,
    ),
    CatalogEntry(
        name="gpt4o-",
        full_name="gpt-4o-mini",
        openrouter_full_name="openai/gpt-4o-mini",
        provider=Provider.OPENAI,
        input_price=0.15,
        output_price=0.6,
        context_window=128_000,
        max_output_tokens=16_384,
        capabilities=OPENAI_CAPABILITIES,
    ),
    CatalogEntry(
        name="gpt4oa",
        full_name="gpt-4o-audio-preview",
        openrouter_full_name="openai/gpt-4o-audio-preview",
        provider=Provider.OPENAI,
        input_price=2.5,
        output_price=10.0,
        context_window=128_000,
        max_output_tokens=16_384,
        capabilities=build_capabilities(
            OPENAI_CAPABILITIES,
            supports_native_audio=True,
            supports_vision=False,
            supports_native_pdf=False,
            supports_auto_prompt_caching=False,
            cache_discount_factor=1.0,
            supports_predictive_output=False,
        ),
    ),
)
