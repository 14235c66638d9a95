"""Google (Gemini) model table."""
from __future__ import annotations

from llm_zoo.providers._table import make_table
from llm_zoo.types.capabilities import DEFAULT_CAPABILITIES, build_capabilities
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider, ReasoningEffort

# Implicit caching on 2.5+; cached reads bill at 25% (10% from Gemini 3).
GOOGLE_CAPABILITIES = build_capabilities(
    DEFAULT_CAPABILITIES,
    supports_auto_prompt_caching=True,
    cache_discount_factor=0.25,
    supports_native_pdf=True,
    supports_native_audio=True,
    supports_native_web_search=True,
    supports_native_code_execution=True,
    supports_token_counting=True,
)

_THINKING = build_capabilities(
    GOOGLE_CAPABILITIES,
    supports_reasoning=True,
    supports_reasoning_effort=True,
    reasoning_effort=ReasoningEffort.MEDIUM,
)

GOOGLE_MODELS = make_table(
    CatalogEntry(
        name="gemini3p",
        full_name="gemini-3-pro-preview",
        openrouter_full_name="google/gemini-3-pro-preview",
        provider=Provider.GOOGLE,
        input_price=2.0,
        output_price=12.0,
        context_window=1_048_576,
        max_output_tokens=65_536,
        capabilities=build_capabilities(
            _THINKING,
            cache_discount_factor=0.1,
            reasoning_effort=ReasoningEffort.HIGH,
        ),
    ),
    CatalogEntry(
        name="gemini25p",
        full_name="gemini-2.5-pro",
        openrouter_full_name="google/gemini-2.5-pro",
        provider=Provider.GOOGLE,
        input_price=1.25,
        output_price=10.0,
        context_window=1_048_576,
        max_output_tokens=65_536,
        capabilities=_THINKING,
    ),
    CatalogEntry(
        name="gemini25f",
        full_name="gemini-2.5-flash",
        openrouter_full_name="google/gemini-2.5-flash",
        provider=Provider.GOOGLE,
        input_price=0.3,
        output_price=2.5,
        context_window=1_048_576,
        max_output_tokens=65_536,
        capabilities=_THINKING,
    ),
    CatalogEntry(
        name="gemini25fl",
        full_name="gemini-2.5-flash-lite",
        openrouter_full_name="google/gemini-2.5-flash-lite",
        provider=Provider.GOOGLE,
        input_price=0.1,
        output_price=0.4,
        context_window=1_048_576,
        max_output_tokens=65_536,
        capabilities=build_capabilities(_THINKING, reasoning_effort=ReasoningEffort.LOW),
    ),
    CatalogEntry(
        name="gemini20f",
        full_name="gemini-2.0-flash",
        openrouter_full_name="google/gemini-2.0-flash-001",
        provider=Provider.GOOGLE,
        input_price=0.1,
        output_price=0.4,
        context_window=1_048_576,
        max_output_tokens=8192,
        capabilities=GOOGLE_CAPABILITIES,
        deprecated=True,
    ),
)
