"""Alibaba DashScope (Qwen) model table."""
from __future__ import annotations

from llm_zoo.providers._table import make_table
from llm_zoo.types.capabilities import DEFAULT_CAPABILITIES, build_capabilities
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider

DASHSCOPE_CAPABILITIES = build_capabilities(DEFAULT_CAPABILITIES, supports_vision=False)

DASHSCOPE_MODELS = make_table(
    CatalogEntry(
        name="qwen3max",
        full_name="qwen3-max",
        openrouter_full_name="qwen/qwen-max",
        provider=Provider.DASHSCOPE,
        input_price=1.2,
        output_price=6.0,
        context_window=262_144,
        max_output_tokens=65_536,
        capabilities=DASHSCOPE_CAPABILITIES,
    ),
    CatalogEntry(
        name="qwenplus",
        full_name="qwen-plus",
        openrouter_full_name="qwen/qwen-plus",
        provider=Provider.DASHSCOPE,
        input_price=0.4,
        output_price=1.2,
        context_window=1_000_000,
        max_output_tokens=32_768,
        capabilities=build_capabilities(DASHSCOPE_CAPABILITIES, supports_reasoning=True),
    ),
    CatalogEntry(
        name="qwenturbo",
        full_name="qwen-turbo-latest",
        openrouter_full_name="qwen/qwen-turbo",
        provider=Provider.DASHSCOPE,
        input_price=0.05,
        output_price=0.5,
        context_window=131_072,
        max_output_tokens=8192,
        capabilities=build_capabilities(DASHSCOPE_CAPABILITIES, supports_reasoning=True),
    ),
)
