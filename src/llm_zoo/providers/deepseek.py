"""DeepSeek model table.

``full_name`` is the identifier on DeepSeek's own API (``deepseek-chat`` or
``deepseek-reasoner``), so several keys share one; ``openrouter_full_name``
tells the underlying checkpoints apart.
"""
from __future__ import annotations

from llm_zoo.providers._table import make_table
from llm_zoo.types.capabilities import DEFAULT_CAPABILITIES, build_capabilities
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider

# Automatic prompt caching with 90% savings.
DEEPSEEK_CAPABILITIES = build_capabilities(
    DEFAULT_CAPABILITIES,
    supports_auto_prompt_caching=True,
    cache_discount_factor=0.1,
    supports_vision=False,
)

DEEPSEEK_MODELS = make_table(
    CatalogEntry(
        name="deepseek",
        full_name="deepseek-chat",
        openrouter_full_name="deepseek/deepseek-v3.2",
        provider=Provider.DEEPSEEK,
        input_price=0.28,
        output_price=0.42,
        context_window=128_000,
        max_output_tokens=8192,
        capabilities=build_capabilities(
            DEEPSEEK_CAPABILITIES, supports_assistant_prefill=True
        ),
    ),
    CatalogEntry(
        name="deepseekT",
        full_name="deepseek-reasoner",
        openrouter_full_name="deepseek/deepseek-v3.2",
        provider=Provider.DEEPSEEK,
        input_price=0.28,
        output_price=0.42,
        context_window=163_840,
        max_output_tokens=65_536,
        capabilities=build_capabilities(
            DEEPSEEK_CAPABILITIES,
            supports_reasoning=True,
            supports_assistant_prefill=True,
        ),
    ),
    CatalogEntry(
        name="deepseekT+",
        full_name="deepseek-reasoner",
        openrouter_full_name="deepseek/deepseek-v3.2-speciale",
        provider=Provider.DEEPSEEK,
        input_price=0.28,
        output_price=0.42,
        context_window=163_840,
        max_output_tokens=131_072,
        capabilities=build_capabilities(
            DEEPSEEK_CAPABILITIES,
            supports_reasoning=True,
            supports_function_calling=False,
        ),
        base_url="https://api.deepseek.com/v3.2_speciale_expires_on_20251215",
        deprecated=True,
    ),
    CatalogEntry(
        name="dsv3",
        full_name="deepseek-chat",
        openrouter_full_name="deepseek/deepseek-chat-v3-0324",
        provider=Provider.DEEPSEEK,
        input_price=0.14,
        output_price=0.28,
        context_window=128_000,
        max_output_tokens=64_000,
        capabilities=build_capabilities(
            DEEPSEEK_CAPABILITIES, supports_assistant_prefill=True
        ),
        deprecated=True,
    ),
    CatalogEntry(
        name="dsr1",
        full_name="deepseek-reasoner",
        openrouter_full_name="deepseek/deepseek-r1-0528",
        provider=Provider.DEEPSEEK,
        input_price=4.0,
        output_price=4.0,
        context_window=128_000,
        max_output_tokens=65_536,
        capabilities=build_capabilities(DEEPSEEK_CAPABILITIES, supports_reasoning=True),
        deprecated=True,
    ),
    CatalogEntry(
        name="dsv3o",
        full_name="deepseek-chat",
        openrouter_full_name="deepseek/deepseek-chat-v3-0324",
        provider=Provider.DEEPSEEK,
        input_price=0.27,
        output_price=1.1,
        context_window=64_000,
        max_output_tokens=8192,
        capabilities=build_capabilities(
            DEEPSEEK_CAPABILITIES, supports_assistant_prefill=True
        ),
        deprecated=True,
    ),
    CatalogEntry(
        name="dsr1o",
        full_name="deepseek-reasoner",
        openrouter_full_name="deepseek/deepseek-r1-0528",
        provider=Provider.DEEPSEEK,
        input_price=0.55,
        output_price=2.19,
        context_window=64_000,
        max_output_tokens=64_000,
        capabilities=build_capabilities(DEEPSEEK_CAPABILITIES, supports_reasoning=True),
        deprecated=True,
    ),
)
