"""Models only reachable through OpenRouter."""
from __future__ import annotations

from llm_zoo.providers._table import make_table
from llm_zoo.types.capabilities import DEFAULT_CAPABILITIES
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider

OTHER_CAPABILITIES = DEFAULT_CAPABILITIES

OTHER_MODELS = make_table(
    CatalogEntry(
        name="llama31",
        full_name="meta-llama/llama-3.1-405b-instruct",
        openrouter_full_name="meta-llama/llama-3.1-405b-instruct",
        provider=Provider.OTHERS,
        input_price=3.0,
        output_price=3.0,
        context_window=131_072,
        max_output_tokens=131_072,
        capabilities=OTHER_CAPABILITIES,
        openrouter_only=True,
    ),
    CatalogEntry(
        name="qvq-72b",
        full_name="qwen/qvq-72b-preview",
        openrouter_full_name="qwen/qvq-72b-preview",
        provider=Provider.OTHERS,
        input_price=0.25,
        output_price=0.5,
        context_window=128_000,
        max_output_tokens=4096,
        capabilities=OTHER_CAPABILITIES,
        openrouter_only=True,
    ),
)
